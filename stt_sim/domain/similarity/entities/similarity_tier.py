"""
Domain Entity: Similarity Tier

Coarse grade of a headline similarity score for review.
"""

from enum import Enum


class SimilarityTier(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @classmethod
    def classify(cls, score: float, high: float = 0.8, medium: float = 0.6) -> "SimilarityTier":
        """
        Tier(s) = { HIGH   if s >= high
                  { MEDIUM if medium <= s < high
                  { LOW    otherwise
        """
        if score >= high:
            return cls.HIGH
        elif score >= medium:
            return cls.MEDIUM
        return cls.LOW
