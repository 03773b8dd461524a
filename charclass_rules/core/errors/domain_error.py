"""DomainError: a validation outcome carried as data.

Rule checks hand these back inside ``Failure`` rather than raising, so a
caller can decide whether a rejected value is fatal. Startup wiring faults
(a rule with no predicate) are raised instead; see registration_error.py.
"""

from dataclasses import dataclass

from charclass_rules.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base for error values returned in a Failure. Not an Exception.

    Attributes:
        code: Which kind of rejection this is.
        message: Text suitable for an end user (e.g., "password failed has_numeric").
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
