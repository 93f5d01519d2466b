"""
Scoring Request DTOs

Input contracts for the scoring use case, decoupled from HTTP concerns.
Accepts both snake_case and the camelCase option names used by the review UI.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict
import uuid

from stt_sim.domain.similarity.entities import EnsembleWeights, SimilarityOptions


class EnsembleWeightsModel(BaseModel):
    cosine: float = 0.6
    euclidean: float = 0.25
    manhattan: float = 0.15


class SimilarityOptionsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jaccard_threshold: float = Field(0.5, alias="jaccardThreshold")
    ensemble_weights: Optional[EnsembleWeightsModel] = Field(None, alias="ensembleWeights")
    weights: Optional[List[float]] = Field(
        None,
        description="Per-dimension weights; weighted_cosine is skipped when omitted"
    )

    def to_options(self, default_weights: Optional[EnsembleWeights] = None) -> SimilarityOptions:
        """Convert to the domain options object."""
        if self.ensemble_weights is not None:
            ensemble_weights = EnsembleWeights(**self.ensemble_weights.model_dump())
        else:
            ensemble_weights = default_weights or EnsembleWeights()
        return SimilarityOptions(
            jaccard_threshold=self.jaccard_threshold,
            ensemble_weights=ensemble_weights,
            weights=self.weights,
        )


class ScorePairRequest(BaseModel):
    """
    Request DTO for scoring one candidate against one expected text.

    Attributes:
        expected_text: Reference text
        candidate_text: Recognized (STT) text
        expected_embedding: Embedding of the reference text
        candidate_embedding: Embedding of the candidate text
        keyword: Optional required keyword; enables sentence quality scoring
        options: Vector metric options
        candidate_id: Optional caller-side identifier echoed in the response
        trace_id: Unique identifier for tracing this call
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "expected_text": "고객님, 요청하신 서류를 확인해 드리겠습니다.",
                "candidate_text": "고객님 요청하신 셔류를 확인해 드리겠습니다",
                "expected_embedding": [0.6, 0.8],
                "candidate_embedding": [0.8, 0.6],
                "keyword": "서류",
            }
        }
    )

    expected_text: str = Field("", description="Reference text")
    candidate_text: str = Field("", description="Recognized text")
    expected_embedding: List[float] = Field(..., description="Embedding of the reference text")
    candidate_embedding: List[float] = Field(..., description="Embedding of the candidate text")
    keyword: Optional[str] = Field(None, description="Required keyword")
    options: SimilarityOptionsModel = Field(default_factory=SimilarityOptionsModel)
    candidate_id: Optional[str] = None
    trace_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique trace ID for logging and debugging"
    )


class CandidateInput(BaseModel):
    """One candidate transcript in a ranking request."""
    candidate_id: str
    candidate_text: str = ""
    candidate_embedding: List[float]


class RankCandidatesRequest(BaseModel):
    """
    Request DTO for ranking several candidates against one expected text.
    """

    expected_text: str = ""
    expected_embedding: List[float]
    keyword: Optional[str] = None
    candidates: List[CandidateInput] = Field(default_factory=list)
    options: SimilarityOptionsModel = Field(default_factory=SimilarityOptionsModel)
    trace_id: str = Field(default_factory=lambda: str(uuid.uuid4()))


class AnalyzeRequest(BaseModel):
    """Any metric map to summarize."""
    similarities: Dict[str, float] = Field(default_factory=dict)
