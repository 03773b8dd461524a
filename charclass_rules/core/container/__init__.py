"""Dependency injection container (composition root).

Cached factories for application-scoped singletons plus the boot hook that
installs the rules into a host validator.

Usage:
    from charclass_rules.core.container import boot_validation, get_logger
"""

from charclass_rules.core.container.infrastructure import get_logger
from charclass_rules.core.container.validation import (
    boot_validation,
    get_rule_registry,
)

__all__ = [
    "boot_validation",
    "get_logger",
    "get_rule_registry",
]
