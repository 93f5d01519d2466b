from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from enum import Enum
import time


class ComponentType(str, Enum):
    SCORING_ENGINE = "ScoringEngine"
    SENTENCE_SCORER = "SentenceScorer"
    SCORING_API = "ScoringAPI"


class EventType(str, Enum):
    SYSTEM_INIT = "System_Init"
    SCORING_STARTED = "Scoring_Started"
    SCORING_COMPLETED = "Scoring_Completed"
    SCORING_DEGRADED = "Scoring_Degraded"
    CORRECTION_APPLIED = "Correction_Applied"


class LogEntry(BaseModel):
    trace_id: str
    timestamp: float = Field(default_factory=time.time)
    component: ComponentType
    event_type: EventType
    payload_hash: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    message: Optional[str] = None
