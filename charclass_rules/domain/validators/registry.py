"""Validation Rules Registry.

Single source of truth for every rule this package can install into a host
validator, with self-enforcing compliance tests
(tests/unit/test_validation_registry_compliance.py).

Adding a rule:
    1. Write the predicate in functions.py.
    2. Add a ValidationRuleMetadata entry below, keyed by its snake_case name.
    3. Add the name to DEFAULT_RULES in rule_registry.py to activate it.

The predicate table the RuleRegistry resolves against is derived from this
catalog, keyed by the convention name (``has_numeric`` -> ``validateHasNumeric``).
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from charclass_rules.domain.validators.functions import (
    has_lowercase,
    has_numeric,
    has_uppercase,
)
from charclass_rules.domain.validators.naming import resolve_method_name

Predicate = Callable[..., bool]


class ValidationCategory(str, Enum):
    """Categories for validation rules."""

    CHARACTER_CLASS = "character_class"  # has_lowercase, has_uppercase, has_numeric


@dataclass(frozen=True, kw_only=True)
class ValidationRuleMetadata:
    """Metadata for a single validation rule.

    Attributes:
        rule_name: Unique snake_case identifier used in rule-sets.
        predicate: Pure function returning True when the value passes.
        description: Human-readable description of the requirement.
        examples: Values that pass the rule.
        counter_examples: Values that fail the rule.
        category: Category for grouping.
        accepts_context: When True the predicate is called as
            ``predicate(value, attribute, parameters, validator)`` instead of
            ``predicate(value)``.

    Example:
        >>> metadata = ValidationRuleMetadata(
        ...     rule_name="has_numeric",
        ...     predicate=has_numeric,
        ...     description="At least one digit (0-9)",
        ...     examples=["abc1"],
        ...     counter_examples=["abc"],
        ...     category=ValidationCategory.CHARACTER_CLASS,
        ... )
    """

    rule_name: str
    predicate: Predicate
    description: str
    examples: list[Any]
    counter_examples: list[Any]
    category: ValidationCategory
    accepts_context: bool = False

    @property
    def method_name(self) -> str:
        """Predicate name under the naming convention."""
        return resolve_method_name(self.rule_name)


# =============================================================================
# Validation Rules Registry
# =============================================================================

VALIDATION_RULES_REGISTRY: dict[str, ValidationRuleMetadata] = {
    "has_lowercase": ValidationRuleMetadata(
        rule_name="has_lowercase",
        predicate=has_lowercase,
        description="At least one lowercase ASCII letter (a-z)",
        examples=["abcDEF123", "PASSWORd", "x"],
        counter_examples=["ABC123", "", None, 123, ["abc"]],
        category=ValidationCategory.CHARACTER_CLASS,
    ),
    "has_uppercase": ValidationRuleMetadata(
        rule_name="has_uppercase",
        predicate=has_uppercase,
        description="At least one uppercase ASCII letter (A-Z)",
        examples=["abcDEF123", "Password", "X"],
        counter_examples=["abc123", "", None, 123, {"key": "ABC"}],
        category=ValidationCategory.CHARACTER_CLASS,
    ),
    "has_numeric": ValidationRuleMetadata(
        rule_name="has_numeric",
        predicate=has_numeric,
        description="At least one digit (0-9)",
        examples=["abcDEF123", "passw0rd", 7, 3.5],
        counter_examples=["abcDEF", "", None, ["123"]],
        category=ValidationCategory.CHARACTER_CLASS,
    ),
}


def build_predicate_table(
    rules: Iterable[ValidationRuleMetadata],
) -> Mapping[str, ValidationRuleMetadata]:
    """Key catalog entries by convention name (e.g., 'validateHasNumeric').

    Args:
        rules: Catalog entries.

    Returns:
        Read-only mapping from predicate name to entry.

    Raises:
        ValueError: If two rule names resolve to the same predicate name
            (e.g., 'has_numeric' and 'has__numeric').
    """
    table: dict[str, ValidationRuleMetadata] = {}
    for rule in rules:
        existing = table.get(rule.method_name)
        if existing is not None:
            raise ValueError(
                f"Rules '{existing.rule_name}' and '{rule.rule_name}' both resolve "
                f"to '{rule.method_name}'"
            )
        table[rule.method_name] = rule
    return MappingProxyType(table)


PREDICATE_TABLE = build_predicate_table(VALIDATION_RULES_REGISTRY.values())


# =============================================================================
# Helper Functions
# =============================================================================


def get_validation_rule(rule_name: str) -> ValidationRuleMetadata | None:
    """Get validation rule metadata by name.

    Args:
        rule_name: Name of the validation rule (e.g., 'has_numeric').

    Returns:
        ValidationRuleMetadata if found, None otherwise.
    """
    return VALIDATION_RULES_REGISTRY.get(rule_name)


def get_all_validation_rules() -> list[ValidationRuleMetadata]:
    """Get all validation rules in the registry."""
    return list(VALIDATION_RULES_REGISTRY.values())


def get_rules_by_category(category: ValidationCategory) -> list[ValidationRuleMetadata]:
    """Get all validation rules in a specific category.

    Args:
        category: Category to filter by.

    Returns:
        List of ValidationRuleMetadata objects in the category.
    """
    return [
        rule for rule in VALIDATION_RULES_REGISTRY.values() if rule.category == category
    ]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dictionary with:
        - total_rules: Total number of rules
        - by_category: Count of rules per category
    """
    rules = list(VALIDATION_RULES_REGISTRY.values())
    category_counts: dict[str, int] = {}

    for rule in rules:
        category_key = rule.category.value
        category_counts[category_key] = category_counts.get(category_key, 0) + 1

    return {
        "total_rules": len(rules),
        "by_category": category_counts,
    }
