"""structlog-backed LoggerProtocol implementation writing to stdout.

Development gets colored key=value lines; every other environment gets one
JSON object per line (see core/container/infrastructure.py).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _build_processors(use_json: bool) -> list[structlog.types.Processor]:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


class ConsoleAdapter:
    """Console logger for rule registration events.

    Args:
        use_json: Render JSON lines instead of colored console output.
        level: Lowest level name that is emitted ('DEBUG' shows each rule).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        structlog.configure(
            processors=_build_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping()[level.upper()]
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure, e.g. a MissingPredicateError raised during boot."""
        if error is not None:
            context.update(
                error_type=type(error).__name__, error_message=str(error)
            )
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Copy of this adapter whose lines all carry ``context``.

        Shares the structlog configuration; only the bound logger differs.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
