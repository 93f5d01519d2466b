"""Use cases - application flows over the scoring domain"""
from .score_candidate_use_case import ScoreCandidateUseCase

__all__ = ["ScoreCandidateUseCase"]
