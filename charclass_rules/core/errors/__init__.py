"""Core errors package.

Usage:
    from charclass_rules.core.errors import DomainError, ValidationError
    from charclass_rules.core.errors import MissingPredicateError
"""

from charclass_rules.core.errors.common_errors import ValidationError
from charclass_rules.core.errors.domain_error import DomainError
from charclass_rules.core.errors.registration_error import MissingPredicateError

__all__ = [
    "DomainError",
    "MissingPredicateError",
    "ValidationError",
]
