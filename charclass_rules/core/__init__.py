"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes for validation failures and registration errors

The core module has NO dependencies on other application layers.
"""

from charclass_rules.core.enums import ErrorCode
from charclass_rules.core.errors import (
    DomainError,
    MissingPredicateError,
    ValidationError,
)
from charclass_rules.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "MissingPredicateError",
    "Result",
    "Success",
    "ValidationError",
]
