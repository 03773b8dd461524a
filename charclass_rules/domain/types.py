"""Annotated types enforcing the character-class rules on Pydantic models.

Same predicates the host validator runs, applied through AfterValidator.

Usage:
    from charclass_rules.domain.types import MixedCaseAlphanumeric

    class ChangePassword(BaseModel):
        new_password: MixedCaseAlphanumeric
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from charclass_rules.domain.validators import require_rule

HasLowercase = Annotated[
    str,
    Field(
        description="Text containing at least one lowercase letter (a-z)",
        examples=["abcDEF123"],
    ),
    AfterValidator(require_rule("has_lowercase")),
]

HasUppercase = Annotated[
    str,
    Field(
        description="Text containing at least one uppercase letter (A-Z)",
        examples=["abcDEF123"],
    ),
    AfterValidator(require_rule("has_uppercase")),
]

HasNumeric = Annotated[
    str,
    Field(
        description="Text containing at least one digit (0-9)",
        examples=["abcDEF123"],
    ),
    AfterValidator(require_rule("has_numeric")),
]

MixedCaseAlphanumeric = Annotated[
    str,
    Field(
        description="Text containing a lowercase letter, an uppercase letter and a digit",
        examples=["abcDEF123", "Passw0rd"],
    ),
    AfterValidator(require_rule("has_lowercase")),
    AfterValidator(require_rule("has_uppercase")),
    AfterValidator(require_rule("has_numeric")),
]
"""Typical password composition rule-set.

Examples:
    >>> from pydantic import BaseModel
    >>> class ChangePassword(BaseModel):
    ...     new_password: MixedCaseAlphanumeric
    >>> ChangePassword(new_password="Passw0rd").new_password
    'Passw0rd'
"""
