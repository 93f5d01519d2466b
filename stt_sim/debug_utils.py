"""
Debug Utilities for the Scoring Pipeline

Verbose step-by-step dumps of intermediate scores, written to stderr.

Enable with: DEBUG_VERBOSE=true
"""

import os
import sys
import json
from typing import Any, Dict, Optional
from datetime import datetime, timezone

DEBUG_VERBOSE = os.getenv("DEBUG_VERBOSE", "false").lower() == "true"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _truncate(value: Any, max_len: int = 500) -> str:
    """Truncate long values for display."""
    s = str(value)
    if len(s) > max_len:
        return s[:max_len] + f"... [truncated, {len(s)} chars total]"
    return s


def _format_payload(payload: Any) -> str:
    """Format payload for debug output."""
    if payload is None:
        return "None"
    if isinstance(payload, dict):
        try:
            formatted = json.dumps(payload, indent=2, default=str, ensure_ascii=False)
            return _truncate(formatted, 2000)
        except (TypeError, ValueError):
            return _truncate(str(payload), 2000)
    return _truncate(str(payload), 2000)


def debug_log(component: str, message: str, data: Any = None):
    """
    Log a debug message.

    Args:
        component: Component name
        message: Log message
        data: Optional data to log
    """
    if not DEBUG_VERBOSE:
        return

    print(f"[DEBUG {_timestamp()}] [{component}] {message}", file=sys.stderr, flush=True)
    if data is not None:
        formatted = _format_payload(data)
        for line in formatted.split('\n')[:10]:
            print(f"    {line}", file=sys.stderr, flush=True)


def debug_stt_analysis(expected: str, candidate: str, metrics: Dict[str, float]):
    """Print a per-metric STT breakdown for one text pair."""
    if not DEBUG_VERBOSE:
        return

    separator = "=" * 60
    print(f"\n{separator}", file=sys.stderr, flush=True)
    print(f"STT similarity: \"{_truncate(expected, 80)}\" vs \"{_truncate(candidate, 80)}\"",
          file=sys.stderr, flush=True)
    for name, value in metrics.items():
        print(f"   {name:<14} {value}", file=sys.stderr, flush=True)
    print(f"{separator}\n", file=sys.stderr, flush=True)


def debug_scoring_result(trace_id: str, similarities: Dict[str, float],
                         degraded: bool, summary: Optional[Dict] = None):
    """Dump the fused metric map produced for one candidate."""
    if not DEBUG_VERBOSE:
        return

    status = "DEGRADED" if degraded else "OK"
    print(f"[DEBUG {_timestamp()}] [ScoringEngine] trace_id={trace_id} status={status}",
          file=sys.stderr, flush=True)
    formatted = _format_payload(similarities)
    for line in formatted.split('\n'):
        print(f"    {line}", file=sys.stderr, flush=True)
    if summary:
        print(f"    summary: {_truncate(summary, 300)}", file=sys.stderr, flush=True)
