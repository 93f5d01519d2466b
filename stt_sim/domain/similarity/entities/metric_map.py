"""
Domain Entity: Named Metric Map

Metric names, their categories, and the rounding rule every emitted score
passes through.
"""

import math
from enum import Enum
from typing import Dict, Mapping


class MetricCategory(str, Enum):
    """Which subsystem produced a metric."""
    SEMANTIC = "SEMANTIC"
    STT = "STT"


class MetricName(str, Enum):
    """Every key the scoring engine can emit in a metric map."""
    COSINE = "cosine"
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    PEARSON = "pearson"
    JACCARD = "jaccard"
    WEIGHTED_COSINE = "weighted_cosine"
    ENSEMBLE = "ensemble"
    STT_JARO_WINKLER = "stt_jaro_winkler"
    STT_LEVENSHTEIN = "stt_levenshtein"
    STT_PHONETIC = "stt_phonetic"
    STT_ENSEMBLE = "stt_ensemble"
    STT_CORRECTED = "stt_corrected"

    @property
    def category(self) -> MetricCategory:
        return _CATEGORIES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_CATEGORIES = {
    MetricName.COSINE: MetricCategory.SEMANTIC,
    MetricName.EUCLIDEAN: MetricCategory.SEMANTIC,
    MetricName.MANHATTAN: MetricCategory.SEMANTIC,
    MetricName.PEARSON: MetricCategory.SEMANTIC,
    MetricName.JACCARD: MetricCategory.SEMANTIC,
    MetricName.WEIGHTED_COSINE: MetricCategory.SEMANTIC,
    MetricName.ENSEMBLE: MetricCategory.SEMANTIC,
    MetricName.STT_JARO_WINKLER: MetricCategory.STT,
    MetricName.STT_LEVENSHTEIN: MetricCategory.STT,
    MetricName.STT_PHONETIC: MetricCategory.STT,
    MetricName.STT_ENSEMBLE: MetricCategory.STT,
    MetricName.STT_CORRECTED: MetricCategory.STT,
}

_DISPLAY_NAMES = {
    MetricName.COSINE: "Cosine",
    MetricName.EUCLIDEAN: "Euclidean",
    MetricName.MANHATTAN: "Manhattan",
    MetricName.PEARSON: "Pearson",
    MetricName.JACCARD: "Jaccard",
    MetricName.WEIGHTED_COSINE: "Weighted Cosine",
    MetricName.ENSEMBLE: "Ensemble",
    MetricName.STT_JARO_WINKLER: "STT Jaro-Winkler",
    MetricName.STT_LEVENSHTEIN: "STT Levenshtein",
    MetricName.STT_PHONETIC: "STT Korean Phonetic",
    MetricName.STT_ENSEMBLE: "STT Ensemble",
    MetricName.STT_CORRECTED: "STT Corrected",
}


def round_metric(value: float) -> float:
    """
    Round a score to three decimals, halves rounding up.

    Non-finite values (NaN, inf) collapse to 0.0.
    """
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return math.floor(value * 1000 + 0.5) / 1000


def metric_category(name: str) -> MetricCategory:
    """
    Look up the category of a metric key.

    Raises:
        ValueError: If the key is not a known metric name
    """
    return MetricName(name).category


def filter_metrics(similarities: Mapping[str, float], category: MetricCategory) -> Dict[str, float]:
    """Return the sub-map of metrics belonging to one category."""
    return {
        name: value
        for name, value in similarities.items()
        if metric_category(name) == category
    }
