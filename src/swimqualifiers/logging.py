"""Structured logging configuration for swimqualifiers.

Usage:
    from swimqualifiers.logging import get_logger, configure_logging

    # Call once at startup
    configure_logging()

    # Get a logger in any module
    logger = get_logger(__name__)
    logger.info("standards_indexed", standards=412, events=34)

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    LOG_FORMAT: json, console (default: console for dev, json for prod)
    ENVIRONMENT: local, development, production (default: development)
"""

import logging
import os
import sys
from typing import Any

import structlog


def _get_environment() -> str:
    """Get current environment."""
    return os.getenv("ENVIRONMENT", "development").lower()


def _get_log_level(level: str | None = None) -> int:
    """Resolve a level name, falling back to LOG_LEVEL from the environment."""
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def _get_log_format(log_format: str | None, environment: str) -> str:
    """Get log format - json for prod, console for dev."""
    explicit = log_format or os.getenv("LOG_FORMAT")
    if explicit:
        return explicit.lower()
    return "json" if environment == "production" else "console"


def _add_environment(environment: str) -> structlog.typing.Processor:
    """Build a processor that adds the environment to all log entries."""

    def add_environment(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["environment"] = environment
        return event_dict

    return add_environment


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    environment: str | None = None,
) -> None:
    """Configure structlog for the application.

    Call this once at startup (the CLI does it before every command).

    Args:
        level: Log level name. Defaults to LOG_LEVEL from the environment.
        log_format: "json" or "console". Defaults to LOG_FORMAT, else json in production.
        environment: Environment name added to every entry. Defaults to ENVIRONMENT.
    """
    resolved_environment = (environment or _get_environment()).lower()
    resolved_format = _get_log_format(log_format, resolved_environment)
    log_level = _get_log_level(level)

    # Shared processors for all formats
    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_environment(resolved_environment),
    ]

    if resolved_format == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library logging carries the rendered structlog lines
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    # openpyxl warns about every unknown extension in meet exports
    logging.getLogger("openpyxl").setLevel(logging.ERROR)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        A configured structlog logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Example:
        bind_context(run_id="abc123")
        logger.info("processing")  # Will include run_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
