"""
Logging configuration for SDK consumers.

The library itself only creates module loggers (``logging.getLogger(__name__)``)
and never installs handlers on import. Applications and scripts that want the
SDK's log lines on stdout call ``configure_logging()`` once at startup.

Features:
- Plain console format in development
- Structured JSON lines everywhere else
- Provider/model/request id extras carried into the JSON payload
"""

import json
import logging
import sys

from aiproxy.config.config import Config

logger = logging.getLogger(__name__)

# Record attributes promoted into the JSON payload when a caller passes them via `extra=`
_CONTEXT_FIELDS = ("provider", "model", "request_id", "attempt", "status_code")


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Formats log records as JSON with job context and exception details.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: LogRecord to format

        Returns:
            str: JSON-formatted log entry
        """
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logging(level: str | None = None) -> logging.Handler:
    """
    Configure root logging for an application using the SDK.

    Sets up:
    - Console handler on stdout
    - Plain format in development, JSON formatting otherwise
    - Quieter levels for the HTTP libraries

    Args:
        level: Log level name; defaults to Config.LOG_LEVEL

    Returns:
        logging.Handler: the installed console handler
    """
    resolved_level = logging.getLevelName((level or Config.LOG_LEVEL).upper())
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)

    # Clear existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved_level)

    if Config.IS_DEVELOPMENT:
        console_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        console_formatter = StructuredFormatter()

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    # Set log levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.debug(f"Console logging configured at {logging.getLevelName(resolved_level)}")
    return console_handler
