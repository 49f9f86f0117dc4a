"""
Loguru configuration for the client.

This module configures loguru with:
- Trace ID of the request in flight in each log
- Configurable level and format from settings
- Redirection of standard library logs (httpx, httpcore) to loguru
"""

import logging
import sys
from typing import Any

from loguru import logger

from certstore_client.config import Settings, get_settings
from certstore_client.core.trace_context import trace_id_context

__all__ = [
    "logger",
    "InterceptHandler",
    "add_trace_id",
    "configure_logger",
    "intercept_standard_logging",
]


def add_trace_id(record: dict[str, Any]) -> bool:
    """
    Adds the trace_id to the log record.

    The trace_id is set by the transport for each request sent to the
    service, so every line logged while handling it can be correlated.

    Args:
        record: Loguru record

    Returns:
        True to indicate that the filter passed
    """
    trace_id = trace_id_context.get()
    record["extra"]["trace_id"] = trace_id if trace_id else "N/A"
    return True


def configure_logger(settings: Settings | None = None) -> None:
    """
    Configures loguru with client settings.

    This function:
    1. Removes default loguru handlers
    2. Adds handler to stderr with custom configuration
    3. Optionally redirects httpx logging to loguru

    Args:
        settings: Settings to read from, defaults to the cached global settings
    """
    settings = settings or get_settings()

    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
        filter=add_trace_id,
        colorize=True,
        serialize=False,
        backtrace=True,
        diagnose=False,
        enqueue=settings.logger_enqueue,
    )

    if settings.intercept_httpx_logs:
        intercept_standard_logging()


class InterceptHandler(logging.Handler):
    """
    Handler to redirect standard logging logs to loguru.

    httpx and httpcore log through the standard library; this handler lets
    their records share the loguru sink and format.
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

    Intercepts logs from:
    - httpx (HTTP client)
    - httpcore (connection pool)
    """
    for logger_name in ["httpx", "httpcore"]:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False
