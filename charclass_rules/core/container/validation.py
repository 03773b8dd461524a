"""Validation rule wiring.

``boot_validation`` is the hook a host application calls once at startup,
before any validation traffic, with its validator instance.

Usage:
    from charclass_rules.core.container import boot_validation

    def on_startup(app) -> None:
        boot_validation(app.validator)
"""

from functools import lru_cache

from charclass_rules.core.container.infrastructure import get_logger
from charclass_rules.domain.protocols.host_validator_protocol import (
    HostValidatorProtocol,
)
from charclass_rules.domain.validators.rule_registry import RuleRegistry


@lru_cache()
def get_rule_registry() -> RuleRegistry:
    """Get the default RuleRegistry singleton (app-scoped).

    Built with DEFAULT_RULES, so a rule without a predicate fails here, on
    first use during startup.

    Returns:
        RuleRegistry: Registry for has_lowercase, has_uppercase, has_numeric.

    Raises:
        MissingPredicateError: If a default rule has no predicate.
    """
    return RuleRegistry(logger=get_logger())


def boot_validation(
    validator: HostValidatorProtocol, registry: RuleRegistry | None = None
) -> None:
    """Install the custom rules into a host validator.

    Args:
        validator: Host validator exposing ``extend(rule, adapter)``.
        registry: Registry to install; defaults to get_rule_registry().

    Raises:
        MissingPredicateError: If a declared rule has no predicate.
    """
    if registry is None:
        registry = get_rule_registry()
    registry.register(validator)
