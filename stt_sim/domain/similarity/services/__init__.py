"""
Domain Services for Similarity Scoring

These services contain pure scoring logic with no infrastructure dependencies.
"""

from .vector_metrics import (
    DimensionMismatch,
    WeightLengthMismatch,
    vector_magnitude,
    is_unit_normalized,
    cosine_similarity,
    fast_cosine_similarity,
    euclidean_similarity,
    manhattan_similarity,
    weighted_cosine_similarity,
    pearson_correlation,
    jaccard_similarity,
    ensemble_similarity,
    calculate_all_similarities,
)
from .phonetic_model import (
    PHONETIC_CONFUSIONS,
    decompose_syllable,
    phonetic_char_score,
    korean_phonetic_similarity,
)
from .string_metrics import (
    jaro_winkler_similarity,
    levenshtein_distance,
    levenshtein_similarity,
    calculate_stt_similarity,
    analyze_stt_similarity,
)
from .error_pattern_corrector import ErrorPatternCorrector, KOREAN_STT_ERROR_PATTERNS
from .ensemble_scorer import (
    EnsembleScorer,
    IStringScorer,
    StringMetricsScorer,
    NullStringScorer,
)
from .sentence_quality_scorer import SentenceQualityScorer
from .analysis_aggregator import AnalysisAggregator

__all__ = [
    "DimensionMismatch",
    "WeightLengthMismatch",
    "vector_magnitude",
    "is_unit_normalized",
    "cosine_similarity",
    "fast_cosine_similarity",
    "euclidean_similarity",
    "manhattan_similarity",
    "weighted_cosine_similarity",
    "pearson_correlation",
    "jaccard_similarity",
    "ensemble_similarity",
    "calculate_all_similarities",
    "PHONETIC_CONFUSIONS",
    "decompose_syllable",
    "phonetic_char_score",
    "korean_phonetic_similarity",
    "jaro_winkler_similarity",
    "levenshtein_distance",
    "levenshtein_similarity",
    "calculate_stt_similarity",
    "analyze_stt_similarity",
    "ErrorPatternCorrector",
    "KOREAN_STT_ERROR_PATTERNS",
    "EnsembleScorer",
    "IStringScorer",
    "StringMetricsScorer",
    "NullStringScorer",
    "SentenceQualityScorer",
    "AnalysisAggregator",
]
