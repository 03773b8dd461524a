"""RuleRegistry: installs declared rules into a host validator.

Each declared rule name is resolved through the naming convention
(``has_numeric`` -> ``validateHasNumeric``) against an explicit predicate
table. Resolution happens when the registry is built and again before any
``extend`` call, so a rule without a predicate stops startup and never
reaches the host.

Usage:
    >>> registry = RuleRegistry(logger=get_logger())
    >>> registry.register(validator)
    >>> # validator now accepts 'has_lowercase|has_uppercase|has_numeric'
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from charclass_rules.core.errors import MissingPredicateError
from charclass_rules.domain.protocols.host_validator_protocol import (
    HostValidatorProtocol,
    RuleAdapter,
)
from charclass_rules.domain.protocols.logger_protocol import LoggerProtocol
from charclass_rules.domain.validators.naming import resolve_method_name
from charclass_rules.domain.validators.registry import (
    PREDICATE_TABLE,
    ValidationRuleMetadata,
)

# Convention: 'new_custom_rule' must be backed by 'validateNewCustomRule'.
DEFAULT_RULES: tuple[str, ...] = (
    "has_lowercase",
    "has_uppercase",
    "has_numeric",
)


class RuleRegistry:
    """Fixed set of rule names to activate against a host validator.

    Attributes:
        _rules: Declared rule names, in registration order.
        _predicates: Catalog entries keyed by convention name.
        _logger: Logger bound with ``component="rule_registry"``.

    Raises:
        ValueError: If a rule name is malformed or declared twice.
        MissingPredicateError: If a rule name has no predicate.
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        rules: Iterable[str] = DEFAULT_RULES,
        predicates: Mapping[str, ValidationRuleMetadata] = PREDICATE_TABLE,
    ) -> None:
        self._rules = tuple(rules)
        self._predicates = predicates
        self._logger = logger.bind(component="rule_registry")

        duplicates = sorted({rule for rule in self._rules if self._rules.count(rule) > 1})
        if duplicates:
            raise ValueError(f"Duplicate rule names: {', '.join(duplicates)}")

        for rule in self._rules:
            self._resolve(rule)

    @property
    def rules(self) -> tuple[str, ...]:
        """Declared rule names."""
        return self._rules

    def register(self, validator: HostValidatorProtocol) -> None:
        """Install an adapter for every declared rule into ``validator``.

        Calling this twice on the same host overwrites the same entries; the
        host's own ``extend`` semantics decide what happens to the old adapter.

        Args:
            validator: Host validator exposing ``extend(rule, adapter)``.

        Raises:
            MissingPredicateError: If a rule has no predicate. Raised before
                the first ``extend`` call.
        """
        adapters = [(rule, self._make_adapter(self._resolve(rule))) for rule in self._rules]

        for rule, adapter in adapters:
            validator.extend(rule, adapter)
            self._logger.debug(
                "Validation rule registered",
                rule=rule,
                method=resolve_method_name(rule),
            )

        self._logger.info(
            "Validation rules registered",
            rule_count=len(adapters),
            rules=list(self._rules),
        )

    def _resolve(self, rule: str) -> ValidationRuleMetadata:
        method = resolve_method_name(rule)
        entry = self._predicates.get(method)
        if entry is None:
            error = MissingPredicateError(rule, method)
            self._logger.error(
                "Validation rule has no predicate",
                error=error,
                rule=rule,
                method=method,
            )
            raise error
        return entry

    @staticmethod
    def _make_adapter(entry: ValidationRuleMetadata) -> RuleAdapter:
        predicate = entry.predicate

        if entry.accepts_context:

            def adapter(
                attribute: str, value: Any, parameters: Sequence[str], validator: Any
            ) -> bool:
                return bool(predicate(value, attribute, parameters, validator))

        else:

            def adapter(
                attribute: str, value: Any, parameters: Sequence[str], validator: Any
            ) -> bool:
                return bool(predicate(value))

        return adapter
