"""
Domain Entity: STT Similarity Breakdown
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class STTSimilarityResult:
    """Composite STT similarity with its per-metric scores."""
    jaro_winkler: float
    levenshtein: float
    phonetic: float
    weighted: float

    @property
    def breakdown(self) -> Dict[str, float]:
        return {
            "jaro_winkler": self.jaro_winkler,
            "levenshtein": self.levenshtein,
            "phonetic": self.phonetic,
        }

    def to_dict(self) -> Dict[str, object]:
        return {**self.breakdown, "weighted": self.weighted, "breakdown": self.breakdown}
