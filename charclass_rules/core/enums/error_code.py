"""Error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes carried by ValidationError."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Rule lookup errors
    UNKNOWN_RULE = "unknown_rule"
