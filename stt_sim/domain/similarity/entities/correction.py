"""
Domain Entity: Error-Pattern Corrections

Transient records of lexicon substitutions made while probing alternate
readings of a transcript.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any

from .stt_breakdown import STTSimilarityResult


@dataclass(frozen=True)
class CorrectionRecord:
    """One substitution of a known mis-recognition by its canonical form."""
    original: str
    corrected: str
    position: int  # Index of `original` in the uncorrected text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "corrected": self.corrected,
            "position": self.position,
        }


@dataclass(frozen=True)
class CorrectionResult:
    """Corrected copy of a text and the substitutions that produced it."""
    text: str
    corrections: List[CorrectionRecord] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return len(self.corrections) > 0


class CorrectionConfiguration(str, Enum):
    """Which side(s) of a text pair were corrected before scoring."""
    RAW = "RAW"
    CANDIDATE_CORRECTED = "CANDIDATE_CORRECTED"
    EXPECTED_CORRECTED = "EXPECTED_CORRECTED"
    BOTH_CORRECTED = "BOTH_CORRECTED"


@dataclass(frozen=True)
class EnhancedSTTResult:
    """
    Best-of composite STT similarity across correction configurations.

    Attributes:
        score: Winning composite score, penalty already applied
        configuration: Which configuration won
        breakdown: Composite result of the winning pair (before penalty)
        corrections: Substitutions used by the winning configuration
    """
    score: float
    configuration: CorrectionConfiguration
    breakdown: STTSimilarityResult
    corrections: List[CorrectionRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "configuration": self.configuration.value,
            "breakdown": self.breakdown.to_dict(),
            "corrections": [c.to_dict() for c in self.corrections],
        }
