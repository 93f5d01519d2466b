"""
Domain Entity: Scoring Options

Weight and threshold objects passed into the scoring services.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Dict, Any


@dataclass(frozen=True)
class EnsembleWeights:
    """Weights of the vector ensemble. Need not sum to 1."""
    cosine: float = 0.6
    euclidean: float = 0.25
    manhattan: float = 0.15


@dataclass(frozen=True)
class SimilarityOptions:
    """
    Per-call options for calculate_all_similarities.

    Attributes:
        jaccard_threshold: Binarization threshold for the jaccard metric
        ensemble_weights: Weights of the vector ensemble
        weights: Per-dimension weights; weighted_cosine is skipped when None
    """
    jaccard_threshold: float = 0.5
    ensemble_weights: EnsembleWeights = field(default_factory=EnsembleWeights)
    weights: Optional[Sequence[float]] = None


@dataclass(frozen=True)
class STTWeights:
    """Weights of the composite (string-only) STT similarity."""
    jaro_winkler: float = 0.4
    levenshtein: float = 0.3
    phonetic: float = 0.3

    def merged(self, overrides: Optional[Dict[str, float]] = None) -> "STTWeights":
        """Return a copy with caller overrides applied on top of these weights."""
        if not overrides:
            return self
        values = {
            "jaro_winkler": self.jaro_winkler,
            "levenshtein": self.levenshtein,
            "phonetic": self.phonetic,
        }
        unknown = set(overrides) - set(values)
        if unknown:
            raise ValueError(f"Unknown STT weight(s): {sorted(unknown)}")
        values.update(overrides)
        return STTWeights(**values)


@dataclass(frozen=True)
class STTEnsembleWeights:
    """Weights fusing semantic cosine with the string metrics (stt_ensemble)."""
    semantic: float = 0.4
    jaro_winkler: float = 0.25
    phonetic: float = 0.20
    levenshtein: float = 0.15


@dataclass(frozen=True)
class CorrectionPenalties:
    """Multipliers applied when a lexicon correction was needed to win."""
    single_side: float = 0.95
    both_sides: float = 0.9
    sentence_substitution: float = 0.9


@dataclass(frozen=True)
class SentenceWeights:
    keyword_weighted: float = 0.4
    base_similarity: float = 0.25
    stt_corrected: float = 0.2
    completeness: float = 0.15


def weights_from_config(cls, section: Optional[Dict[str, Any]]):
    """Build a weights dataclass from a config mapping, keeping defaults for missing keys."""
    if not section:
        return cls()
    return cls(**{k: float(v) for k, v in section.items() if k in cls.__dataclass_fields__})
