"""Logging setup for blog-spec.

Two loggers are used:
- ``blog_spec``: the package logger, plain text unless structured logging is on
- ``blog_spec.errors``: structured JSON records for read and config failures
"""

import datetime
import json
import logging
import sys
import traceback
from enum import Enum
from typing import Any

from .config import Settings

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord has; anything else was passed through ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime", "taskName"}
)


class ErrorCategory(Enum):
    """Severity used for structured error records."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


_CATEGORY_LEVELS = {
    ErrorCategory.CRITICAL: logging.CRITICAL,
    ErrorCategory.ERROR: logging.ERROR,
    ErrorCategory.WARNING: logging.WARNING,
    ErrorCategory.INFO: logging.INFO,
}


class StructuredLogFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb),
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        return json.dumps(log_data, default=str)


# --- Logger Setup ---
logger = logging.getLogger("blog_spec")

error_logger = logging.getLogger("blog_spec.errors")
error_logger.setLevel(logging.INFO)
_error_handler = logging.StreamHandler(sys.stderr)
_error_handler.setFormatter(StructuredLogFormatter())
error_logger.addHandler(_error_handler)
# Structured records go to their own handler only
error_logger.propagate = False


def configure_logging(settings: Settings) -> None:
    """Apply the configured level and formatter to the package logger."""
    logger.setLevel(settings.log_level)
    formatter = StructuredLogFormatter() if settings.structured_logging else logging.Formatter(PLAIN_FORMAT)

    handler = next((h for h in logger.handlers if getattr(h, "_blog_spec_handler", False)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler._blog_spec_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setFormatter(formatter)


def log_structured_error(
    category: ErrorCategory,
    message: str,
    exception: Exception | None = None,
    context: dict[str, Any] | None = None,
    operation: str | None = None,
    **extra: Any,
) -> None:
    """Log a failure with its category, operation and context as JSON fields."""
    fields: dict[str, Any] = {"error_category": category.value}
    if operation:
        fields["operation"] = operation
    if context:
        fields.update(context)
    if exception is not None and hasattr(exception, "to_dict"):
        fields["error"] = exception.to_dict()
    fields.update(extra)

    error_logger.log(
        _CATEGORY_LEVELS[category],
        message,
        exc_info=exception,
        extra=fields,
    )
