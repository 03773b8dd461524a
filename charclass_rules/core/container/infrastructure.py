"""Infrastructure dependency factories.

Application-scoped singletons for infrastructure services:
- Logging (console, structlog)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from charclass_rules.core.config import settings

if TYPE_CHECKING:
    from charclass_rules.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger bound with app name and version.
    """
    from charclass_rules.infrastructure.logging.console_adapter import ConsoleAdapter

    logger = ConsoleAdapter(
        use_json=not settings.is_development, level=settings.log_level
    )
    return logger.bind(app=settings.app_name, version=settings.app_version)
