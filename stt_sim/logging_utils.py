import logging
import json
import hashlib
import time
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from .models import LogEntry, ComponentType, EventType


class STTJSONFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(STTJSONFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = time.time()
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname


def get_logger(name: str):
    logger = logging.getLogger(name)
    # Loggers are process-wide; attach the JSON handler only once
    if not any(isinstance(h.formatter, STTJSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        formatter = STTJSONFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


class StructuredLogger:
    def __init__(self, component: ComponentType):
        self.logger = get_logger(component.value)
        self.component = component

    def hash_payload(self, payload: Any) -> str:
        """Create a hash of the payload for audit."""
        dumped = json.dumps(payload, sort_keys=True, default=str)
        return hashlib.md5(dumped.encode()).hexdigest()[:16]

    def log_event(self,
                  trace_id: str,
                  event_type: EventType,
                  payload: Any,
                  metrics: Dict[str, Any] = None):

        entry = LogEntry(
            trace_id=trace_id,
            component=self.component,
            event_type=event_type,
            payload_hash=self.hash_payload(payload),
            metrics=metrics or {},
            message=str(payload)[:200]
        )

        self.logger.info(json.dumps(entry.model_dump(), default=str, ensure_ascii=False))

    def warning(self, trace_id: str, message: str, **context):
        """Log a warning tied to a trace, with optional context fields."""
        self.logger.warning(json.dumps({
            "trace_id": trace_id,
            "component": self.component.value,
            "message": message,
            "context": context,
        }, default=str, ensure_ascii=False))
