"""
Domain Service: Ensemble Scorer

Fuses vector metrics with STT string metrics into one named-metric map and
a headline stt_ensemble score.
"""

from typing import Dict, Optional, Protocol, Sequence, Tuple

from ..entities import (
    EnhancedSTTResult,
    MetricName,
    SimilarityOptions,
    STTEnsembleWeights,
    round_metric,
)
from .error_pattern_corrector import ErrorPatternCorrector
from .phonetic_model import korean_phonetic_similarity
from .string_metrics import jaro_winkler_similarity, levenshtein_similarity
from .vector_metrics import NORMALIZATION_TOLERANCE, calculate_all_similarities


class IStringScorer(Protocol):
    """Interface for the string/phonetic subsystem."""

    def jaro_winkler(self, s1: str, s2: str) -> float:
        ...

    def levenshtein(self, s1: str, s2: str) -> float:
        ...

    def phonetic(self, s1: str, s2: str) -> float:
        ...


class StringMetricsScorer:
    """IStringScorer backed by the string_metrics and phonetic_model functions."""

    def jaro_winkler(self, s1: str, s2: str) -> float:
        return jaro_winkler_similarity(s1, s2)

    def levenshtein(self, s1: str, s2: str) -> float:
        return levenshtein_similarity(s1, s2)

    def phonetic(self, s1: str, s2: str) -> float:
        return korean_phonetic_similarity(s1, s2)


class NullStringScorer:
    """IStringScorer stand-in for when the string subsystem is unavailable."""

    def jaro_winkler(self, s1: str, s2: str) -> float:
        return 0.0

    def levenshtein(self, s1: str, s2: str) -> float:
        return 0.0

    def phonetic(self, s1: str, s2: str) -> float:
        return 0.0


class EnsembleScorer:
    """
    Domain service producing the full named-metric map for one candidate.

    stt_ensemble = semantic·cosine + jaro_winkler·JW + phonetic·P + levenshtein·L
    """

    def __init__(
        self,
        string_scorer: Optional[IStringScorer] = None,
        weights: Optional[STTEnsembleWeights] = None,
        corrector: Optional[ErrorPatternCorrector] = None,
        normalization_tolerance: float = NORMALIZATION_TOLERANCE,
    ):
        """
        Initialize scorer.

        Args:
            string_scorer: String subsystem; StringMetricsScorer when None.
                Pass NullStringScorer to run semantic-only.
            weights: Fusion weights for stt_ensemble
            corrector: When given, stt_corrected is added to the map
            normalization_tolerance: Unit-length tolerance for the cosine fast path
        """
        self.string_scorer = string_scorer if string_scorer is not None else StringMetricsScorer()
        self.weights = weights or STTEnsembleWeights()
        self.corrector = corrector
        self.normalization_tolerance = normalization_tolerance

    def score(
        self,
        vec1: Sequence[float],
        vec2: Sequence[float],
        text1: str,
        text2: str,
        options: Optional[SimilarityOptions] = None,
        keyword: Optional[str] = None,
    ) -> Dict[str, float]:
        """Score one pair and return only the metric map (see score_detailed)."""
        similarities, _ = self.score_detailed(vec1, vec2, text1, text2, options, keyword)
        return similarities

    def score_detailed(
        self,
        vec1: Sequence[float],
        vec2: Sequence[float],
        text1: str,
        text2: str,
        options: Optional[SimilarityOptions] = None,
        keyword: Optional[str] = None,
    ) -> Tuple[Dict[str, float], Optional[EnhancedSTTResult]]:
        """
        Score one expected/candidate pair.

        Args:
            vec1: Embedding of the expected text
            vec2: Embedding of the candidate text
            text1: Expected text
            text2: Candidate text
            options: Vector metric options
            keyword: Optional keyword filter for lexicon corrections

        Returns:
            Tuple of (metric map, enhanced STT result or None). The map holds
            every vector metric plus stt_jaro_winkler, stt_levenshtein,
            stt_phonetic, stt_ensemble (and stt_corrected with a corrector)

        Raises:
            DimensionMismatch: If the vectors differ in length
            WeightLengthMismatch: If options.weights does not match the vector length
        """
        similarities = calculate_all_similarities(
            vec1, vec2, options, self.normalization_tolerance
        )

        jaro_winkler = self.string_scorer.jaro_winkler(text1, text2)
        levenshtein = self.string_scorer.levenshtein(text1, text2)
        phonetic = self.string_scorer.phonetic(text1, text2)

        stt_score = (
            self.weights.semantic * similarities[MetricName.COSINE.value]
            + self.weights.jaro_winkler * jaro_winkler
            + self.weights.phonetic * phonetic
            + self.weights.levenshtein * levenshtein
        )

        similarities[MetricName.STT_JARO_WINKLER.value] = round_metric(jaro_winkler)
        similarities[MetricName.STT_LEVENSHTEIN.value] = round_metric(levenshtein)
        similarities[MetricName.STT_PHONETIC.value] = round_metric(phonetic)
        similarities[MetricName.STT_ENSEMBLE.value] = round_metric(stt_score)

        enhanced = None
        if self.corrector is not None:
            enhanced = self.corrector.enhanced_stt_similarity(text1, text2, keyword)
            similarities[MetricName.STT_CORRECTED.value] = round_metric(enhanced.score)

        return similarities, enhanced
