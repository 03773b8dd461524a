"""Domain protocols (ports).

Structural interfaces for the collaborators this package talks to:
- HostValidatorProtocol: the external validator that owns the rule table
- LoggerProtocol: structured logging
"""

from charclass_rules.domain.protocols.host_validator_protocol import (
    HostValidatorProtocol,
    RuleAdapter,
)
from charclass_rules.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "HostValidatorProtocol",
    "LoggerProtocol",
    "RuleAdapter",
]
