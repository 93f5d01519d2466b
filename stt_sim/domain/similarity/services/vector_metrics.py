"""
Domain Service: Vector Metrics

Similarity functions over two embedding vectors of equal length.
Pure numeric logic; the only side effect is a warning log when the
multi-metric batch degrades to zeros.
"""

from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from ....logging_utils import get_logger
from ..entities import (
    EnsembleWeights,
    MetricName,
    SimilarityOptions,
    round_metric,
)

logger = get_logger("stt_sim.vector_metrics")

NORMALIZATION_TOLERANCE = 1e-6


class DimensionMismatch(ValueError):
    """Raised when two vectors in a comparison differ in length."""
    pass


class WeightLengthMismatch(ValueError):
    """Raised when a per-dimension weight vector does not match the vector length."""
    pass


def _as_pair(vec1: Sequence[float], vec2: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    a = np.asarray(vec1, dtype=np.float64).ravel()
    b = np.asarray(vec2, dtype=np.float64).ravel()
    if a.shape != b.shape:
        raise DimensionMismatch(f"Vector lengths differ: {a.shape[0]} != {b.shape[0]}")
    return a, b


def _clamp_unit(value: float) -> float:
    """Clamp to [-1, 1]; non-finite values become 0."""
    if not np.isfinite(value):
        return 0.0
    return float(max(-1.0, min(1.0, value)))


def vector_magnitude(vec: Sequence[float]) -> float:
    return float(np.linalg.norm(np.asarray(vec, dtype=np.float64)))


def is_unit_normalized(vec: Sequence[float], tolerance: float = NORMALIZATION_TOLERANCE) -> bool:
    return abs(vector_magnitude(vec) - 1.0) < tolerance


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    cos(a, b) = (a · b) / (‖a‖ ‖b‖), clamped to [-1, 1].

    Returns 0 when either vector has zero magnitude.
    """
    a, b = _as_pair(vec1, vec2)
    magnitude1 = np.linalg.norm(a)
    magnitude2 = np.linalg.norm(b)
    if magnitude1 == 0 or magnitude2 == 0:
        return 0.0
    return _clamp_unit(np.dot(a, b) / (magnitude1 * magnitude2))


def fast_cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Dot product only. Callers must pass unit-normalized vectors."""
    a, b = _as_pair(vec1, vec2)
    return float(np.dot(a, b))


def euclidean_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """1 / (1 + ‖a - b‖₂), in (0, 1]."""
    a, b = _as_pair(vec1, vec2)
    distance = np.linalg.norm(a - b)
    return float(1.0 / (1.0 + distance))


def manhattan_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """1 / (1 + ‖a - b‖₁), in (0, 1]."""
    a, b = _as_pair(vec1, vec2)
    distance = np.abs(a - b).sum()
    return float(1.0 / (1.0 + distance))


def weighted_cosine_similarity(
    vec1: Sequence[float],
    vec2: Sequence[float],
    weights: Optional[Sequence[float]] = None,
) -> float:
    """
    Cosine similarity with a per-dimension weight w:

        Σ wᵢaᵢbᵢ / (√Σ wᵢaᵢ² · √Σ wᵢbᵢ²)

    Args:
        vec1: First vector
        vec2: Second vector
        weights: Per-dimension weights (all ones when None)

    Raises:
        DimensionMismatch: If the vectors differ in length
        WeightLengthMismatch: If weights do not match the vector length
    """
    a, b = _as_pair(vec1, vec2)
    if weights is None:
        w = np.ones_like(a)
    else:
        w = np.asarray(weights, dtype=np.float64).ravel()
        if w.shape != a.shape:
            raise WeightLengthMismatch(
                f"Weight length {w.shape[0]} does not match vector length {a.shape[0]}"
            )

    dot_product = np.sum(w * a * b)
    norm_a = np.sum(w * a * a)
    norm_b = np.sum(w * b * b)
    if norm_a <= 0 or norm_b <= 0:
        return 0.0
    return _clamp_unit(dot_product / (np.sqrt(norm_a) * np.sqrt(norm_b)))


def pearson_correlation(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    Pearson correlation coefficient.

    Returns 0 for empty vectors or when either vector has zero variance.
    """
    a, b = _as_pair(vec1, vec2)
    if a.size == 0:
        return 0.0

    diff1 = a - a.mean()
    diff2 = b - b.mean()
    denominator = np.sqrt(np.sum(diff1 * diff1)) * np.sqrt(np.sum(diff2 * diff2))
    if denominator == 0:
        return 0.0
    return _clamp_unit(np.sum(diff1 * diff2) / denominator)


def jaccard_similarity(vec1: Sequence[float], vec2: Sequence[float], threshold: float = 0.5) -> float:
    """
    Jaccard index of the vectors binarized at `threshold` (component > threshold → 1).

    Returns 0 when the union is empty.
    """
    a, b = _as_pair(vec1, vec2)
    bin1 = a > threshold
    bin2 = b > threshold
    union = np.count_nonzero(bin1 | bin2)
    if union == 0:
        return 0.0
    return float(np.count_nonzero(bin1 & bin2) / union)


def ensemble_similarity(
    vec1: Sequence[float],
    vec2: Sequence[float],
    weights: Optional[EnsembleWeights] = None,
) -> float:
    """Weighted sum of cosine, euclidean and manhattan similarity. Not clamped."""
    weights = weights or EnsembleWeights()
    return (
        weights.cosine * cosine_similarity(vec1, vec2)
        + weights.euclidean * euclidean_similarity(vec1, vec2)
        + weights.manhattan * manhattan_similarity(vec1, vec2)
    )


def _emitted_metrics(options: SimilarityOptions):
    names = [
        MetricName.COSINE,
        MetricName.EUCLIDEAN,
        MetricName.MANHATTAN,
        MetricName.PEARSON,
        MetricName.JACCARD,
    ]
    if options.weights is not None:
        names.append(MetricName.WEIGHTED_COSINE)
    names.append(MetricName.ENSEMBLE)
    return names


def calculate_all_similarities(
    vec1: Sequence[float],
    vec2: Sequence[float],
    options: Optional[SimilarityOptions] = None,
    normalization_tolerance: float = NORMALIZATION_TOLERANCE,
) -> Dict[str, float]:
    """
    Compute every vector metric for one pair, rounded to three decimals.

    Cosine takes the dot-product fast path when both vectors are unit length
    within `normalization_tolerance`. weighted_cosine is included only when
    `options.weights` is set.

    If any metric fails unexpectedly, every metric in the batch is reported
    as 0.0; callers must treat an all-zero map as an error signal.

    Raises:
        DimensionMismatch: If the vectors differ in length
        WeightLengthMismatch: If options.weights does not match the vector length
    """
    options = options or SimilarityOptions()
    a, b = _as_pair(vec1, vec2)
    if options.weights is not None and len(options.weights) != a.shape[0]:
        raise WeightLengthMismatch(
            f"Weight length {len(options.weights)} does not match vector length {a.shape[0]}"
        )

    names = _emitted_metrics(options)
    try:
        is_normalized = (
            is_unit_normalized(a, normalization_tolerance)
            and is_unit_normalized(b, normalization_tolerance)
        )
        similarities = {
            MetricName.COSINE.value: (
                fast_cosine_similarity(a, b) if is_normalized else cosine_similarity(a, b)
            ),
            MetricName.EUCLIDEAN.value: euclidean_similarity(a, b),
            MetricName.MANHATTAN.value: manhattan_similarity(a, b),
            MetricName.PEARSON.value: pearson_correlation(a, b),
            MetricName.JACCARD.value: jaccard_similarity(a, b, options.jaccard_threshold),
        }
        if options.weights is not None:
            similarities[MetricName.WEIGHTED_COSINE.value] = weighted_cosine_similarity(
                a, b, options.weights
            )
        similarities[MetricName.ENSEMBLE.value] = ensemble_similarity(
            a, b, options.ensemble_weights
        )

        # Fast path skips the clamp; keep cosine inside [-1, 1]
        similarities[MetricName.COSINE.value] = _clamp_unit(similarities[MetricName.COSINE.value])
        return {name: round_metric(value) for name, value in similarities.items()}

    except Exception as e:
        logger.warning(
            f"Vector similarity batch degraded to zeros: {type(e).__name__}: {e}"
        )
        return {name.value: 0.0 for name in names}
