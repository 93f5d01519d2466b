"""
Domain Entity: Analysis Summary

Read-only statistics over one metric map.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Any


@dataclass(frozen=True)
class MetricExtremum:
    """A metric name paired with its score."""
    method: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"method": self.method, "value": self.value}


@dataclass(frozen=True)
class AnalysisSummary:
    """
    Highest/lowest metric, population mean and variance of a metric map.

    Every field is None when the source map was empty.
    """
    highest: Optional[MetricExtremum] = None
    lowest: Optional[MetricExtremum] = None
    average: Optional[float] = None
    variance: Optional[float] = None

    def is_empty(self) -> bool:
        return self.highest is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "highest": self.highest.to_dict() if self.highest else None,
            "lowest": self.lowest.to_dict() if self.lowest else None,
            "average": self.average,
            "variance": self.variance,
        }
