"""Common error classes.

Usage:
    from charclass_rules.core.errors import ValidationError
    from charclass_rules.core.enums import ErrorCode
    from charclass_rules.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message="password must contain a digit",
        field="password",
        rule="has_numeric",
    ))
"""

from dataclasses import dataclass

from charclass_rules.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        rule: Rule name that rejected the value.
    """

    field: str | None = None
    rule: str | None = None
