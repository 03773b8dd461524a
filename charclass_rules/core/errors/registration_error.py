"""Errors raised while wiring rules into a host validator.

Unlike DomainError these are real exceptions: a rule declared without a
predicate is a programmer error and must abort startup.
"""


class MissingPredicateError(LookupError):
    """Raised when a declared rule name has no predicate behind it."""

    def __init__(self, rule: str, method: str) -> None:
        """Initialize missing predicate error.

        Args:
            rule: Declared rule name (e.g., 'has_symbol').
            method: Predicate name the rule resolved to (e.g., 'validateHasSymbol').
        """
        super().__init__(f"Method [{method}] does not exist for rule [{rule}].")
        self.rule = rule
        self.method = method
