"""Konfiguracja logowania strukturalnego."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: int = logging.INFO, *, json_output: bool = False) -> None:
    """Inicjalizuje logowanie aplikacji.

    Logi trafiają na stderr, aby nie mieszać się z raportem wypisywanym
    na standardowe wyjście.
    """

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
