"""Rule checks usable without a host validator.

Two flavors over the same catalog predicates:
- validate_rule / validate_rules return Result types (application code)
- require_rule builds a raising validator for Pydantic's AfterValidator

Usage:
    result = validate_rules(password, ["has_lowercase", "has_numeric"], "password")
    match result:
        case Success(value=value):
            ...
        case Failure(error=error):
            print(error.message)
"""

from collections.abc import Callable, Iterable
from typing import Any

from charclass_rules.core.enums import ErrorCode
from charclass_rules.core.errors import ValidationError
from charclass_rules.core.result import Failure, Result, Success
from charclass_rules.domain.validators.registry import (
    ValidationRuleMetadata,
    get_validation_rule,
)


def _passes(rule: ValidationRuleMetadata, value: Any, field_name: str) -> bool:
    if rule.accepts_context:
        return bool(rule.predicate(value, field_name, [], None))
    return bool(rule.predicate(value))


def validate_rule(
    value: Any, rule_name: str, field_name: str
) -> Result[Any, ValidationError]:
    """Check a value against a single catalog rule.

    Args:
        value: Value to check.
        rule_name: Catalog rule name (e.g., 'has_numeric').
        field_name: Name of the field being validated.

    Returns:
        Success with the unchanged value, or Failure with ValidationError
        (VALIDATION_FAILED when the value fails, UNKNOWN_RULE when the rule
        is not in the catalog).
    """
    rule = get_validation_rule(rule_name)
    if rule is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.UNKNOWN_RULE,
                message=f"Unknown validation rule: {rule_name}",
                field=field_name,
                rule=rule_name,
            )
        )

    if not _passes(rule, value, field_name):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field_name} failed {rule_name}: {rule.description}",
                field=field_name,
                rule=rule_name,
            )
        )
    return Success(value=value)


def validate_rules(
    value: Any, rule_names: Iterable[str], field_name: str
) -> Result[Any, ValidationError]:
    """Check a value against several rules, stopping at the first failure.

    Args:
        value: Value to check.
        rule_names: Catalog rule names, checked in order.
        field_name: Name of the field being validated.

    Returns:
        Success with the unchanged value, or the first Failure.
    """
    for rule_name in rule_names:
        result = validate_rule(value, rule_name, field_name)
        if isinstance(result, Failure):
            return result
    return Success(value=value)


def require_rule(rule_name: str) -> Callable[[str], str]:
    """Build a validator that raises ValueError when the rule fails.

    Args:
        rule_name: Catalog rule name.

    Returns:
        Function returning its input unchanged when it passes.

    Raises:
        KeyError: If rule_name is not in the catalog (at build time).
    """
    if get_validation_rule(rule_name) is None:
        raise KeyError(f"Unknown validation rule: {rule_name}")

    def check(v: str) -> str:
        match validate_rule(v, rule_name, "value"):
            case Failure(error=error):
                raise ValueError(error.message)
        return v

    check.__name__ = f"require_{rule_name}"
    return check
