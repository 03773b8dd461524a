"""Logging surface the rule registry depends on.

The registry logs one DEBUG line per installed rule, one INFO summary once
every rule is installed, and an ERROR with the exception attached when a
rule has no predicate. Any structlog-style logger with these methods fits
(PEP 544 structural typing); ConsoleAdapter is the bundled one.

    logger = get_logger().bind(component="rule_registry")
    logger.info("Validation rules registered", rule_count=3)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger: a fixed message plus key-value context."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure; ``error`` is flattened into error_type/error_message."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every later line."""
        ...
