"""
Structured Logging Configuration

This module configures structured logging using the 'structlog' library.
It sets up processors for adding timestamps, log levels and service context,
and renders logs in JSON or colorized console format.

Diagnostics go to stderr so they never mix with a conversation on stdout.
"""

import logging
import os
import sys

import structlog
from structlog import dev as structlog_dev

SERVICE_NAME = "support-responder"


def add_service_context(logger, method_name, event_dict):
    """Add service context to the log record."""
    event_dict['service'] = SERVICE_NAME
    # Print loggers have no name; fall back to the bound logger name
    component = getattr(logger, 'name', None) or event_dict.pop('logger_name', None)
    if component:
        event_dict['component'] = component
    return event_dict


def configure_logging(log_level="INFO", log_format="console", log_color=None, stream=None):
    """
    Set up structured logging.

    Environment overrides (optional):
      - LOG_LEVEL: debug|info|warning|error (default: argument)
      - LOG_FORMAT: json|console (default: argument)
      - LOG_COLOR:  0|1 (console only; default: 1 when stream is a tty)
    """
    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        log_level = env_level.upper()
    log_format = os.getenv("LOG_FORMAT", log_format).strip().lower()
    stream = stream or sys.stderr
    if log_color is None:
        log_color = os.getenv("LOG_COLOR", "1").strip() not in ("0", "false", "False") and stream.isatty()

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_context,
    ]

    if log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog_dev.ConsoleRenderer(colors=log_color))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """
    Get a structlog logger.

    Until logging is configured, diagnostics are printed to stderr instead
    of structlog's default stdout.
    """
    if structlog.is_configured():
        return structlog.get_logger(name, logger_name=name)
    return structlog.wrap_logger(structlog.PrintLogger(sys.stderr), logger_name=name)
