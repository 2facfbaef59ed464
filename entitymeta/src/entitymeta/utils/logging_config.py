"""Structured logging configuration for entitymeta.

The library modules only ask for named structlog loggers through get_logger() and leave the
structlog configuration to the host application. configure_logging() is an opt-in setup, with
context variables, ISO timestamps and a console or JSON renderer chosen from the settings, for
applications and scripts that have no logging setup of their own.
"""

from __future__ import annotations

import logging

import structlog

from ..config import get_settings

_configured = False


def configure_logging(force: bool = False) -> None:
    """Configure structlog processors once.

    Never called by the library itself. Safe to call multiple times, only the first invocation
    takes effect unless ``force`` is set.

    Args:
        force (bool): Reconfigure even if logging was already configured. Defaults to False.
    """
    global _configured
    if _configured and not force:
        return

    settings = get_settings()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_renderer == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a bound logger with the given name.

    The logger is lazy: it follows whatever structlog configuration is active when it is first
    used, and configures nothing itself.

    Args:
        name (str): Logger name, typically the module name.

    Returns:
        A structlog bound logger bound with the given name.
    """
    return structlog.get_logger(logger_name=name)
