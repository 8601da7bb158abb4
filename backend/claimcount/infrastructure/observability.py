"""Structured Logging — one JSON object per log line.

Invariants:
    - Every line has timestamp (from the record, UTC), level, logger, message
    - Count identifiers passed via extra= (policy_id, driver_id, source, claim_count,
      error_code, path) are copied only when set
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - Formatter on stdlib logging; services only ever call logging.getLogger(__name__)
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "policy_id", "driver_id", "source", "claim_count", "error_code", "path",
)
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "claimcount"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: getattr(record, key) for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the root handler; fmt is "json" or anything else for plain text."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT)
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
