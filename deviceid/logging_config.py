"""
Structured logging configuration for deviceid.

Provides JSON or text logs with trace_id support for correlating the log
lines of one identifier computation.

Environment Variables:
    DEVICEID_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    DEVICEID_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from deviceid.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="compute-1")
    logger.info("Computing device id", extra={"components": 3})

Logs go to stderr; stdout is reserved for command output.
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logger.

    Args:
        settings: Settings to read level/format from (default: Settings.from_env())
    """
    if settings is None:
        settings = Settings.from_env()

    level = LEVEL_MAP.get(settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if settings.log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
