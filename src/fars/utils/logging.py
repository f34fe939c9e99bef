"""Logging setup for the ``fars`` package: JSON or plain console output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed through ``extra=`` (year, region, path, ...) follow the
    standard keys in sorted order; ``None`` values are omitted.  ``ts`` is
    UTC.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and value is not None
        }
        for key in sorted(extras):
            payload[key] = extras[key]

        return json.dumps(payload, default=str)


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Optional[Any] = None,
) -> logging.Logger:
    """Attach one stream handler to the ``fars`` logger.

    Calling it again replaces the previous handler instead of stacking.

    Args:
        level: Logging level for the ``fars`` logger.
        json_format: Use :class:`JsonFormatter` instead of plain text.
        stream: Output stream; defaults to ``sys.stderr``.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        if getattr(handler, "_fars_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT)
    )
    handler._fars_handler = True
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
