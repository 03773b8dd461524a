"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from charclass_rules.core.enums import ErrorCode, Environment
"""

from charclass_rules.core.enums.environment import Environment
from charclass_rules.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
