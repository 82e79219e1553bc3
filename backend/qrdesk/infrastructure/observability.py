"""Structured Logging: one JSON object per line, QRDesk extras grouped under "context".

Invariants:
    - Every line carries timestamp (the record's creation time, UTC), level, logger, message
    - Only the extras QRDesk code passes are emitted: user_id (credential and QR
      stores), qr_type (QR store), checkout_session_id (Stripe client), error_code
      and path (error handlers, origin guard); anything else on the record is dropped
    - setup_logging is idempotent: calling it again replaces its own handler
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "qrdesk"


class JSONFormatter(logging.Formatter):
    """Format records as JSON for production log shipping."""

    context_fields = (
        "user_id", "qr_type", "checkout_session_id", "error_code", "path",
    )

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = {
            name: getattr(record, name)
            for name in self.context_fields
            if getattr(record, name, None) is not None
        }
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the QRDesk handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
