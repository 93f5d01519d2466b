"""
Scoring API for the STT similarity engine

THIN FACADE - this file only handles:
- FastAPI endpoint setup
- HTTP request/response handling
- Delegation to ScoreCandidateUseCase

All scoring logic lives in stt_sim/domain/similarity/.
"""

import os
from typing import Optional
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException

from . import __version__
from .application.dtos import (
    AnalysisSummaryModel,
    AnalyzeRequest,
    RankCandidatesRequest,
    RankCandidatesResponse,
    ScorePairRequest,
    ScorePairResponse,
)
from .application.use_cases import ScoreCandidateUseCase
from .config import get_config_path
from .domain.similarity.services import DimensionMismatch, WeightLengthMismatch
from .logging_utils import StructuredLogger
from .models import ComponentType, EventType

API_PORT = int(os.getenv("PORT", os.getenv("STT_SIM_PORT", "8080")))

logger = StructuredLogger(ComponentType.SCORING_API)

# Global use case, built from the scoring config on first use
_use_case: Optional[ScoreCandidateUseCase] = None


def get_use_case() -> ScoreCandidateUseCase:
    """Lazy initialize the scoring use case from config."""
    global _use_case
    if _use_case is None:
        _use_case = ScoreCandidateUseCase.from_config()
        logger.log_event(
            "startup",
            EventType.SYSTEM_INIT,
            {"config_path": str(get_config_path())},
            metrics={"version": __version__},
        )
    return _use_case


def reset_use_case() -> None:
    """Drop the cached use case (useful for testing)."""
    global _use_case
    _use_case = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager - builds the scorers on startup"""
    get_use_case()
    logger.logger.info("Scoring API ready")
    yield
    logger.logger.info("Scoring API shutting down")


app = FastAPI(title="STT-Similarity-Scoring", version=__version__, lifespan=lifespan)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "component": "scoring_api",
        "version": __version__,
        "config_path": str(get_config_path()),
    }


@app.post("/score", response_model=ScorePairResponse)
def score(request: ScorePairRequest):
    """Score one candidate transcript against one expected text."""
    try:
        return get_use_case().execute(request)
    except (DimensionMismatch, WeightLengthMismatch) as e:
        logger.warning(request.trace_id, "Rejected scoring request", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/rank", response_model=RankCandidatesResponse)
def rank(request: RankCandidatesRequest):
    """Rank several candidate transcripts against one expected text."""
    try:
        return get_use_case().rank(request)
    except (DimensionMismatch, WeightLengthMismatch) as e:
        logger.warning(request.trace_id, "Rejected ranking request", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/analyze", response_model=AnalysisSummaryModel)
def analyze(request: AnalyzeRequest):
    """Summarize any named-metric map."""
    return get_use_case().analyze(request.similarities)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=API_PORT)
