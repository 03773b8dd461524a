"""Character-class validation rules for a host validator.

Registers ``has_lowercase``, ``has_uppercase`` and ``has_numeric`` with any
validator exposing ``extend(rule, adapter)``.

Usage:
    from charclass_rules import boot_validation

    boot_validation(validator)
"""

from charclass_rules.core.container import boot_validation, get_rule_registry

__all__ = ["boot_validation", "get_rule_registry"]
