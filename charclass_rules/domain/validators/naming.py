"""Rule name to predicate name convention.

A rule declared as ``new_custom_rule`` is backed by the predicate registered
as ``validateNewCustomRule``: the ``validate`` prefix followed by the
StudlyCase form of the rule name.
"""

import re

METHOD_PREFIX = "validate"

_RULE_NAME = re.compile(r"[A-Za-z0-9_]+")


def studly_case(rule: str) -> str:
    """Convert a snake_case identifier to StudlyCase.

    Only the first letter of each segment is upper-cased; the rest of the
    segment is left as is.

    Args:
        rule: snake_case identifier (e.g., 'has_lowercase').

    Returns:
        StudlyCase identifier (e.g., 'HasLowercase').

    Raises:
        ValueError: If rule is empty or contains characters other than ASCII
            letters, digits and underscores.
    """
    if not rule or not _RULE_NAME.fullmatch(rule):
        raise ValueError(f"Invalid rule name: {rule!r}")
    return "".join(segment[:1].upper() + segment[1:] for segment in rule.split("_"))


def resolve_method_name(rule: str) -> str:
    """Resolve the predicate name a rule must be backed by.

    Args:
        rule: snake_case rule name.

    Returns:
        Predicate name, e.g. 'has_numeric' -> 'validateHasNumeric'.

    Raises:
        ValueError: If rule is not a valid rule name.
    """
    return METHOD_PREFIX + studly_case(rule)
