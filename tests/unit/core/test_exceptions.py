"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from charsheet.core.exceptions import (
    CharsheetError,
    ConfigurationError,
    InsufficientFundsError,
    LedgerError,
    NoCoinChangeError,
    RulesError,
    RulesLookupError,
    TraitQueryError,
    UnknownRulesetError,
    ValidationError,
)


class TestCharsheetError:
    """Tests for the base CharsheetError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = CharsheetError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = CharsheetError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(CharsheetError("Test", details={"x": 1}))
        assert "CharsheetError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestConfigurationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error_with_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Missing value", config_key="CHARSHEET_LOG_LEVEL")
        assert exc.details["config_key"] == "CHARSHEET_LOG_LEVEL"

    def test_validation_error_with_field(self) -> None:
        """Test ValidationError with field info."""
        exc = ValidationError("Out of range", field_name="score", invalid_value=31)
        assert exc.details["field_name"] == "score"
        assert exc.details["invalid_value"] == 31


class TestRulesExceptions:
    """Tests for rules-related exceptions."""

    def test_unknown_ruleset_error(self) -> None:
        """Test UnknownRulesetError carries the requested id."""
        exc = UnknownRulesetError("Unknown ruleset", ruleset_id="srd35")
        assert exc.details["ruleset_id"] == "srd35"

    def test_rules_lookup_error(self) -> None:
        """Test RulesLookupError carries class and level."""
        exc = RulesLookupError("Bad lookup", class_name="artificer", level=3)
        assert exc.details == {"class_name": "artificer", "level": 3}

    def test_level_zero_is_recorded(self) -> None:
        """Test a level of zero is kept in the details."""
        exc = RulesLookupError("Bad lookup", level=0)
        assert exc.details["level"] == 0


class TestLedgerExceptions:
    """Tests for ledger exceptions."""

    def test_insufficient_funds_totals(self) -> None:
        """Test InsufficientFundsError with copper totals."""
        exc = InsufficientFundsError("Too poor", needed_copper=500, available_copper=120)
        assert exc.details["needed_copper"] == 500
        assert exc.details["available_copper"] == 120
        assert exc.denominations == {}

    def test_insufficient_funds_denominations(self) -> None:
        """Test InsufficientFundsError names negative denominations."""
        exc = InsufficientFundsError("Too poor", denominations={"gp": -3})
        assert exc.denominations == {"gp": -3}
        assert "gp" in str(exc)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        ("exc_class", "parent"),
        [
            (ConfigurationError, CharsheetError),
            (ValidationError, CharsheetError),
            (RulesError, CharsheetError),
            (UnknownRulesetError, RulesError),
            (RulesLookupError, RulesError),
            (TraitQueryError, RulesError),
            (LedgerError, CharsheetError),
            (InsufficientFundsError, LedgerError),
            (NoCoinChangeError, LedgerError),
        ],
    )
    def test_inheritance(self, exc_class: type[Exception], parent: type[Exception]) -> None:
        """Test each exception derives from its category base."""
        assert issubclass(exc_class, parent)

    def test_catch_all_with_base(self) -> None:
        """Test that all library exceptions can be caught with the base class."""
        with pytest.raises(CharsheetError):
            raise NoCoinChangeError("nothing to do")
