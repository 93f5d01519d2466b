"""
Domain Entities for Similarity Scoring

Pure value objects with no external dependencies.
"""

from .metric_map import (
    MetricCategory,
    MetricName,
    round_metric,
    metric_category,
    filter_metrics,
)
from .analysis_summary import MetricExtremum, AnalysisSummary
from .stt_breakdown import STTSimilarityResult
from .correction import (
    CorrectionRecord,
    CorrectionResult,
    CorrectionConfiguration,
    EnhancedSTTResult,
)
from .sentence_quality import (
    SentenceQualityComponents,
    SentenceQualityAnalysis,
    SentenceQualityResult,
    QualityGrade,
    SentenceDiagnosis,
)
from .similarity_tier import SimilarityTier
from .options import (
    EnsembleWeights,
    SimilarityOptions,
    STTWeights,
    STTEnsembleWeights,
    CorrectionPenalties,
    SentenceWeights,
    weights_from_config,
)

__all__ = [
    "MetricCategory",
    "MetricName",
    "round_metric",
    "metric_category",
    "filter_metrics",
    "MetricExtremum",
    "AnalysisSummary",
    "STTSimilarityResult",
    "CorrectionRecord",
    "CorrectionResult",
    "CorrectionConfiguration",
    "EnhancedSTTResult",
    "SentenceQualityComponents",
    "SentenceQualityAnalysis",
    "SentenceQualityResult",
    "QualityGrade",
    "SentenceDiagnosis",
    "SimilarityTier",
    "EnsembleWeights",
    "SimilarityOptions",
    "STTWeights",
    "STTEnsembleWeights",
    "CorrectionPenalties",
    "SentenceWeights",
    "weights_from_config",
]
