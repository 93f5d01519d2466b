"""
Scoring Response DTOs

Output contracts of the scoring use case. Rendering code reads these by key.
"""

from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field


class AnalysisSummaryModel(BaseModel):
    highest: Optional[Dict[str, Any]] = None
    lowest: Optional[Dict[str, Any]] = None
    average: Optional[float] = None
    variance: Optional[float] = None


class ScorePairResponse(BaseModel):
    """
    Response DTO for one scored candidate.

    Attributes:
        trace_id: Trace ID from the request
        candidate_id: Identifier echoed from the request
        similarities: Named metric map (metric -> rounded score)
        analysis: Summary over every metric
        semantic_analysis: Summary over semantic (embedding) metrics only
        headline_score: stt_ensemble
        tier: HIGH / MEDIUM / LOW grade of the headline score
        degraded: True when every semantic metric is exactly 0
        stt_correction: Winning error-pattern correction configuration
        sentence_quality: Sentence quality result (only with a keyword)
        diagnosis: Sentence quality diagnosis (only with a keyword)
    """
    trace_id: str
    candidate_id: Optional[str] = None
    similarities: Dict[str, float]
    analysis: AnalysisSummaryModel
    semantic_analysis: AnalysisSummaryModel
    headline_score: float
    tier: str
    degraded: bool = False
    stt_correction: Optional[Dict[str, Any]] = None
    sentence_quality: Optional[Dict[str, Any]] = None
    diagnosis: Optional[Dict[str, Any]] = None


class RankCandidatesResponse(BaseModel):
    """Candidates ordered by headline score, best first."""
    trace_id: str
    expected_text: str
    ranked: List[ScorePairResponse] = Field(default_factory=list)
