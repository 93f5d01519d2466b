"""
Domain Entity: Sentence Quality

Result of scoring one candidate sentence against one expected sentence.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any


@dataclass(frozen=True)
class SentenceQualityComponents:
    """The five sub-scores fused into the final sentence score."""
    base_similarity: float
    keyword_weighted: float
    stt_corrected: float
    completeness: float
    length_penalty: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "baseSimilarity": self.base_similarity,
            "keywordWeighted": self.keyword_weighted,
            "sttCorrected": self.stt_corrected,
            "completeness": self.completeness,
            "lengthPenalty": self.length_penalty,
        }


@dataclass(frozen=True)
class SentenceQualityAnalysis:
    """Text statistics reported alongside the score for explainability."""
    keyword_included: bool
    candidate_length: int
    expected_length: int
    length_ratio: float
    word_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywordIncluded": self.keyword_included,
            "candidateLength": self.candidate_length,
            "expectedLength": self.expected_length,
            "lengthRatio": self.length_ratio,
            "wordCount": self.word_count,
        }


@dataclass(frozen=True)
class SentenceQualityResult:
    final_score: float
    components: SentenceQualityComponents
    analysis: SentenceQualityAnalysis

    def __post_init__(self):
        """Validate invariants."""
        if self.final_score > 1.0:
            raise ValueError(f"final_score must not exceed 1.0, got {self.final_score}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "finalScore": self.final_score,
            "components": self.components.to_dict(),
            "analysis": self.analysis.to_dict(),
        }


class QualityGrade(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    VERY_LOW = "very_low"

    @classmethod
    def from_issue_count(cls, count: int) -> "QualityGrade":
        if count >= 3:
            return cls.VERY_LOW
        elif count == 2:
            return cls.LOW
        elif count == 1:
            return cls.MEDIUM
        return cls.HIGH


@dataclass(frozen=True)
class SentenceDiagnosis:
    """Human-readable issues found in a candidate sentence."""
    quality: QualityGrade
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quality": self.quality.value,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }
