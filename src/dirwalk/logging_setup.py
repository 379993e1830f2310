"""Logging configuration for the dirwalk command line tool.

The library modules wrap a stdlib logger with ``structlog.wrap_logger``, so their
events are dropped until the CLI calls ``configure_logging``.
"""

import logging
import sys

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(log_level_str: str = "warning") -> None:
    """Configure structlog to render console-friendly events on stderr.

    Args:
        log_level_str: Name of the minimum level to emit. Unknown names fall back
            to warning.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.WARNING)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=shared_processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        foreign_pre_chain=[structlog.stdlib.add_log_level],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger("dirwalk")
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    structlog.get_logger(__name__).debug("logging_configured", level=log_level_str)
