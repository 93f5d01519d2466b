"""Data Transfer Objects - Request/Response contracts"""
from .score_request import (
    EnsembleWeightsModel,
    SimilarityOptionsModel,
    ScorePairRequest,
    CandidateInput,
    RankCandidatesRequest,
    AnalyzeRequest,
)
from .score_response import AnalysisSummaryModel, ScorePairResponse, RankCandidatesResponse

__all__ = [
    "EnsembleWeightsModel",
    "SimilarityOptionsModel",
    "ScorePairRequest",
    "CandidateInput",
    "RankCandidatesRequest",
    "AnalyzeRequest",
    "AnalysisSummaryModel",
    "ScorePairResponse",
    "RankCandidatesResponse",
]
