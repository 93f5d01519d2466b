"""
STT-Sim Core Package

Similarity scoring between expected sentences and speech-to-text transcripts.

Architecture:
- Vector metrics over sentence embeddings (cosine, euclidean, manhattan, ...)
- String metrics tuned to recognition errors (Jaro-Winkler, Levenshtein, Korean phonetic)
- Lexicon-based correction of known Korean recognition errors
- Sentence-level quality score around a required keyword
"""

__version__ = "0.1.0"

from .models import ComponentType, EventType, LogEntry
from .domain.similarity.entities import MetricName, MetricCategory, SimilarityOptions
from .domain.similarity.services import (
    calculate_all_similarities,
    calculate_stt_similarity,
    EnsembleScorer,
    ErrorPatternCorrector,
    SentenceQualityScorer,
    AnalysisAggregator,
)
