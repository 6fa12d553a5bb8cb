"""Structured logging configuration using structlog.

Only entry points call ``setup_logging``; library modules just use
``structlog.get_logger(__name__)``.
"""

import sys
from typing import Any

import structlog

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

# env_logger spellings
ALIASES = {
    "TRACE": "DEBUG",
    "WARN": "WARNING",
    "OFF": "CRITICAL",
}


def normalize_level(level: str) -> str:
    """Map a level setting to one of the names in ``LEVELS``.

    Accepts plain names in any case as well as env_logger style directives
    such as ``afterparty=debug`` or ``warn,hyper=info``. The first directive
    naming a known level wins.

    Args:
        level: Raw level setting.

    Returns:
        Upper-case level name, INFO if nothing is recognized.
    """
    for directive in level.split(","):
        name = directive.rpartition("=")[2].strip().upper()
        name = ALIASES.get(name, name)
        if name in LEVELS:
            return name
    return "INFO"


def setup_logging(level: str = "INFO", format: str = "console") -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level, see ``normalize_level``.
        format: "json" for machine-readable output, anything else for the
            console renderer.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LEVELS[normalize_level(level)]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )
