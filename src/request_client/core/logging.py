"""
Logging for request-client.

The package logger ``request_client`` is silent by default (a ``NullHandler``
is installed at import). Applications either configure the standard
``logging`` tree themselves or pass :class:`LoggingConfig` to
``with_logging`` to get a console handler on a per-host child logger.

Example:
    >>> from request_client import Client, LoggingConfig, with_logging
    >>> client = Client(
    ...     "https://api.example.com",
    ...     with_logging(LoggingConfig.create(level="DEBUG", format="json")),
    ... )
"""

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict
from urllib.parse import urlparse

ROOT_LOGGER_NAME = "request_client"

# Attributes every LogRecord has; anything else came from ``extra``
_RECORD_FIELDS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class LogLevel(str, Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""
    JSON = "json"
    TEXT = "text"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Configuration for client logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format (json, text)
        enable_console: Attach a stdout handler
    """

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    enable_console: bool = True

    @classmethod
    def create(
        cls,
        level: str = "INFO",
        format: str = "text",
        enable_console: bool = True,
    ) -> "LoggingConfig":
        """Create LoggingConfig with string values."""
        return cls(
            level=LogLevel(level.upper()),
            format=LogFormat(format.lower()),
            enable_console=enable_console,
        )


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_FIELDS and not key.startswith('_')
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record: timestamp, level, logger, message and any
    ``extra`` fields.

    Example output:
        {"timestamp": "2024-01-15T10:30:45.123000Z", "level": "DEBUG",
         "logger": "request_client.api.example.com",
         "message": "Request completed", "method": "GET", "status_code": 200}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(_extra_fields(record))

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """
    Plain text formatter.

    Format: [timestamp] [level] [logger] message key=value ...
    """

    def __init__(self):
        super().__init__(
            fmt='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)
        extra = " ".join(f"{key}={value}" for key, value in _extra_fields(record).items())
        if extra:
            base_msg += " " + extra
        return base_msg


def get_formatter(log_format: LogFormat) -> logging.Formatter:
    if log_format == LogFormat.JSON:
        return JSONFormatter()
    return TextFormatter()


def logger_name_for(base_url: str) -> str:
    """
    Per-host logger name, e.g. ``request_client.api.example.com``.

    Always a descendant of ``request_client``.
    """
    host = urlparse(base_url).netloc
    return f"{ROOT_LOGGER_NAME}.{host}" if host else ROOT_LOGGER_NAME


def configure_logger(config: LoggingConfig, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Apply ``config`` to the named logger.

    Existing handlers installed by a previous call are replaced, so calling
    this twice for the same host does not duplicate output.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.level.value))

    for handler in list(logger.handlers):
        if getattr(handler, "_request_client_handler", False):
            logger.removeHandler(handler)

    if config.enable_console:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(get_formatter(config.format))
        handler._request_client_handler = True
        logger.addHandler(handler)
        logger.propagate = False

    return logger
