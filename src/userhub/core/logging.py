"""
Loguru configuration for the application.

This module configures loguru with:
- Automatic Trace ID in each log
- Human-readable or JSON output, selected by ``settings.log_format``
- Redirection of standard library logs to loguru
"""

import logging
import sys
from typing import Any

from loguru import logger

from userhub.config import settings
from userhub.core.trace_context import current_trace_id

HUMAN_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DDTHH:mm:ss.SSSZ}</green> | <level>{level: <8}</level> | "
    "trace_id={extra[trace_id]} | {name}:{function}:{line} - <level>{message}</level>"
)


def add_trace_id(record: dict[str, Any]) -> bool:
    """
    Adds the trace_id to the log record.

    The trace_id is obtained from the current request context,
    allowing tracking of logs from the same request. A trace_id bound
    explicitly with ``logger.bind`` is kept.

    Args:
        record: Loguru record

    Returns:
        True to indicate that the filter passed
    """
    record["extra"].setdefault("trace_id", current_trace_id())
    return True


def get_log_format() -> str:
    """
    Get the loguru format string for the configured output.

    JSON output is serialized by loguru itself (``serialize=True``); the
    format only shapes the ``text`` field of each JSON line.

    Returns:
        Loguru format string
    """
    if settings.log_format == "json":
        return "{message}"
    return HUMAN_LOG_FORMAT


def configure_logger() -> None:
    """
    Configures loguru with application settings.

    This function:
    1. Removes default loguru handlers
    2. Adds a stderr handler (colored text, or one JSON object per line)
    3. Configures level, trace id filter and enqueueing
    """
    logger.remove()

    json_output = settings.log_format == "json"
    logger.add(
        sink=sys.stderr,
        level=settings.log_level,
        format=get_log_format(),
        filter=add_trace_id,
        colorize=not json_output,
        serialize=json_output,
        backtrace=True,
        diagnose=settings.debug,
        enqueue=settings.logger_enqueue,
    )


# Configure logger when importing the module
configure_logger()


__all__ = ["logger", "InterceptHandler", "intercept_standard_logging"]


class InterceptHandler(logging.Handler):
    """
    Handler to redirect standard logging logs to loguru.

    This allows capturing logs from libraries that use standard logging
    (like uvicorn, fastapi, sqlalchemy) and process them with loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """
        Redirects a standard logging record to loguru.

        Args:
            record: logging.LogRecord record
        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging() -> None:
    """
    Configures redirection of standard logging to loguru.

    Intercepts logs from uvicorn, fastapi and the SQLAlchemy engine/pool.
    Call this once at process start.
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO, force=True)

    for logger_name in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ]:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False
