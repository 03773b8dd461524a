"""Success / Failure pair returned by rule checks.

    match validate_rule(value, "has_numeric", "password"):
        case Success(value=value):
            ...
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """The value passed every rule it was checked against."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """A rule rejected the value; ``error`` says which and why."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
