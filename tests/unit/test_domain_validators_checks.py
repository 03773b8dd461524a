"""Unit tests for Result-returning and raising rule checks.

Tests cover:
- validate_rule: Success, Failure(VALIDATION_FAILED), Failure(UNKNOWN_RULE)
- validate_rules: first failure wins, all-pass returns Success
- require_rule: raising validator used by Pydantic types
"""

import pytest

from charclass_rules.core.enums import ErrorCode
from charclass_rules.core.result import Failure, Success
from charclass_rules.domain.validators import (
    require_rule,
    validate_rule,
    validate_rules,
)


@pytest.mark.unit
class TestValidateRule:
    """Test validate_rule function."""

    def test_passing_value_returns_success(self):
        result = validate_rule("abc1", "has_numeric", "password")

        assert isinstance(result, Success)
        assert result.value == "abc1"

    def test_failing_value_returns_validation_failed(self):
        result = validate_rule("abc", "has_numeric", "password")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "password"
        assert result.error.rule == "has_numeric"
        assert "password failed has_numeric" in result.error.message

    def test_non_text_value_fails_without_raising(self):
        result = validate_rule(["1"], "has_numeric", "pin")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED

    def test_unknown_rule_returns_unknown_rule(self):
        result = validate_rule("abc", "has_symbol", "password")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNKNOWN_RULE
        assert result.error.rule == "has_symbol"

    def test_error_string_includes_code(self):
        result = validate_rule("abc", "has_uppercase", "password")

        assert isinstance(result, Failure)
        assert str(result.error).startswith("validation_failed: ")


@pytest.mark.unit
class TestValidateRules:
    """Test validate_rules function."""

    def test_all_rules_pass(self):
        result = validate_rules(
            "abcDEF123", ["has_lowercase", "has_uppercase", "has_numeric"], "password"
        )

        assert isinstance(result, Success)
        assert result.value == "abcDEF123"

    def test_first_failure_is_returned(self):
        result = validate_rules(
            "abc", ["has_lowercase", "has_uppercase", "has_numeric"], "password"
        )

        assert isinstance(result, Failure)
        assert result.error.rule == "has_uppercase"

    def test_no_rules_is_success(self):
        assert isinstance(validate_rules(None, [], "field"), Success)


@pytest.mark.unit
class TestRequireRule:
    """Test require_rule validator factory."""

    def test_passing_value_is_returned(self):
        check = require_rule("has_lowercase")

        assert check("abc") == "abc"

    def test_failing_value_raises_value_error(self):
        check = require_rule("has_lowercase")

        with pytest.raises(ValueError, match="has_lowercase"):
            check("ABC")

    def test_unknown_rule_fails_when_built(self):
        with pytest.raises(KeyError):
            require_rule("has_symbol")

    def test_validator_is_named_after_rule(self):
        assert require_rule("has_numeric").__name__ == "require_has_numeric"
