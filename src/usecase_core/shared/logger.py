"""
Structured logging helpers.

The library never configures logging on import. Applications call
``configure_logging`` once at startup; modules obtain their logger with
``get_logger(__name__)``.

Usage:
    ```python
    from usecase_core.shared.logger import configure_logging, get_logger

    configure_logging(log_level="DEBUG")
    logger = get_logger(__name__)
    logger.info("Use case completed", use_case="CreateOrder", duration_ms=3.2)
    ```
"""

import logging
import sys
from typing import cast

import structlog

from usecase_core.config import get_app_config

Logger = structlog.stdlib.BoundLogger


def configure_logging(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        log_level: Minimum level name. Defaults to the configured ``log_level``.
        json_logs: Render JSON lines instead of coloured console output.
            Defaults to the configured ``json_logs``.
    """
    app_config = get_app_config()
    level_name = (log_level or app_config.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    use_json = app_config.json_logs if json_logs is None else json_logs

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )


def get_logger(name: str | None = None) -> Logger:
    """Return a structured logger bound to ``name``."""
    return cast(Logger, structlog.get_logger(name))
