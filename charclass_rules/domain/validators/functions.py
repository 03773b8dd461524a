"""Character-class predicates.

Predicates are pure functions ``(value) -> bool``. They never raise: a value
that cannot be treated as text simply fails the rule, the same way a string
without the wanted character does.

Coercion policy lives in one place, ``to_matchable_text``:
- None and structured values (lists, dicts, sets, objects) -> no text
- str -> itself
- bool -> "1" for True, "" for False
- int, float, Decimal -> str(value); ints too long to stringify -> no text
- bytes -> ASCII text, undecodable bytes replaced

Character classes are ASCII only.
"""

import re
from decimal import Decimal
from typing import Any

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_NUMERIC = re.compile(r"[0-9]")


def to_matchable_text(value: Any) -> str | None:
    """Convert a submitted value to the text the predicates match against.

    Args:
        value: Raw value as received by the host validator.

    Returns:
        Text representation for scalars, None when the value has no text form.

    Example:
        >>> to_matchable_text(42)
        '42'
        >>> to_matchable_text(["a"]) is None
        True
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float, Decimal)):
        try:
            return str(value)
        except ValueError:
            # int above sys.get_int_max_str_digits()
            return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("ascii", errors="replace")
    return None


def _contains(pattern: re.Pattern[str], value: Any) -> bool:
    text = to_matchable_text(value)
    if text is None:
        return False
    return pattern.search(text) is not None


def has_lowercase(value: Any) -> bool:
    """Check that the value contains at least one ``a``-``z`` character.

    Example:
        >>> has_lowercase("abcDEF123")
        True
        >>> has_lowercase("ABC123")
        False
    """
    return _contains(_LOWERCASE, value)


def has_uppercase(value: Any) -> bool:
    """Check that the value contains at least one ``A``-``Z`` character.

    Example:
        >>> has_uppercase("abcDEF123")
        True
        >>> has_uppercase("abc123")
        False
    """
    return _contains(_UPPERCASE, value)


def has_numeric(value: Any) -> bool:
    """Check that the value contains at least one ``0``-``9`` character.

    Example:
        >>> has_numeric("abcDEF123")
        True
        >>> has_numeric(None)
        False
    """
    return _contains(_NUMERIC, value)
