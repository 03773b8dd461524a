"""Validators package exports.

Exports:
    - Predicates and coercion (from functions.py)
    - Naming convention (from naming.py)
    - Rule catalog (from registry.py)
    - RuleRegistry (from rule_registry.py)
    - Result-returning and raising checks (from checks.py)
"""

from charclass_rules.domain.validators.checks import (
    require_rule,
    validate_rule,
    validate_rules,
)
from charclass_rules.domain.validators.functions import (
    has_lowercase,
    has_numeric,
    has_uppercase,
    to_matchable_text,
)
from charclass_rules.domain.validators.naming import resolve_method_name, studly_case
from charclass_rules.domain.validators.registry import (
    PREDICATE_TABLE,
    VALIDATION_RULES_REGISTRY,
    ValidationCategory,
    ValidationRuleMetadata,
    get_all_validation_rules,
    get_rules_by_category,
    get_statistics,
    get_validation_rule,
)
from charclass_rules.domain.validators.rule_registry import DEFAULT_RULES, RuleRegistry

__all__ = [
    # Predicates
    "has_lowercase",
    "has_uppercase",
    "has_numeric",
    "to_matchable_text",
    # Naming
    "resolve_method_name",
    "studly_case",
    # Catalog
    "PREDICATE_TABLE",
    "VALIDATION_RULES_REGISTRY",
    "ValidationCategory",
    "ValidationRuleMetadata",
    "get_validation_rule",
    "get_all_validation_rules",
    "get_rules_by_category",
    "get_statistics",
    # Registration
    "DEFAULT_RULES",
    "RuleRegistry",
    # Checks
    "validate_rule",
    "validate_rules",
    "require_rule",
]
