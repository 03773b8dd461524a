"""HostValidatorProtocol definition.

The host validator is the external validation engine that owns the rule
table. This package only ever calls ``extend``; rule-set parsing, error
messages and attribute resolution stay on the host side.

Adapter call signature (positional, as the host invokes it):
    adapter(attribute, value, parameters, validator) -> bool

Usage:
    from charclass_rules.domain.protocols import HostValidatorProtocol

    def boot(validator: HostValidatorProtocol) -> None:
        validator.extend("has_numeric", adapter)
"""

from collections.abc import Callable, Sequence
from typing import Any, Protocol

RuleAdapter = Callable[[str, Any, Sequence[str], Any], bool]


class HostValidatorProtocol(Protocol):
    """Protocol for validators that accept custom rules.

    Hosts overwrite an existing entry when ``extend`` is called again with
    the same rule name.
    """

    def extend(self, rule: str, adapter: RuleAdapter) -> None:
        """Install ``adapter`` under ``rule`` in the host's rule table.

        Args:
            rule: Rule name used in declarative rule-sets (e.g., 'has_numeric').
            adapter: Callable invoked as ``adapter(attribute, value, parameters,
                validator)`` returning True when the value passes.
        """
        ...
