"""Pytest configuration and shared fixtures.

Fixtures:
- host_validator: recording fake of a host validator (``extend`` only)
- mock_logger: MagicMock logger whose bind() returns itself
"""

from collections.abc import Sequence
from typing import Any
from unittest.mock import MagicMock

import pytest

from charclass_rules.domain.protocols import RuleAdapter


class RecordingValidator:
    """Fake host validator.

    Keeps a rule table with overwrite-on-extend semantics and records every
    ``extend`` call so tests can assert on ordering and counts.
    """

    def __init__(self) -> None:
        self.rules: dict[str, RuleAdapter] = {}
        self.calls: list[str] = []

    def extend(self, rule: str, adapter: RuleAdapter) -> None:
        self.calls.append(rule)
        self.rules[rule] = adapter

    def passes(
        self,
        rule: str,
        value: Any,
        attribute: str = "field",
        parameters: Sequence[str] = (),
    ) -> bool:
        """Invoke an installed rule the way a host would."""
        return self.rules[rule](attribute, value, list(parameters), self)


@pytest.fixture
def host_validator() -> RecordingValidator:
    """Fresh fake host validator per test."""
    return RecordingValidator()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
