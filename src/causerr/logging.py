from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .config import settings
from .core import DecoratedError, get_id, get_message

_CONFIGURED = False


def _decorated_error(record: logging.LogRecord) -> DecoratedError | None:
    err = getattr(record, "error", None)
    if isinstance(err, DecoratedError):
        return err
    if record.exc_info and isinstance(record.exc_info[1], DecoratedError):
        return record.exc_info[1]
    return None


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Cause and stack stay in exc_info.
        err = _decorated_error(record)
        if err is not None:
            error_id = get_id(err)
            if error_id >= 0:
                payload["error_id"] = error_id
            payload["error_message"] = get_message(err)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def configure_logging(*, level: str | None = None) -> None:
    """Idempotent logging setup.

    - JSON logs to stdout.
    - Falls back to CAUSERR_LOG_LEVEL when no level is given.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_level = (level or settings.log_level or "INFO").upper()
    root = logging.getLogger()
    root.setLevel(log_level)

    # Replace handlers to avoid duplicate logs on repeated setup.
    root.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)

    _CONFIGURED = True
