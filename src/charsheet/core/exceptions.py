"""Custom exception hierarchy for the character sheet rules core.

All exceptions inherit from CharsheetError, so the surrounding application
can catch one type at its boundary while still reading domain context from
``details``.

The rules and ledger arithmetic are total functions and never raise for
expected game conditions (zero slots, an empty lineage list, a purse left
in deficit). The exceptions here belong to the layers around them:
configuration, strict lookup mode, and the affordability-checked coin update.

Example:
    >>> from charsheet.core.exceptions import InsufficientFundsError
    >>> raise InsufficientFundsError("Not enough coin", needed_copper=500, available_copper=120)
"""

from __future__ import annotations

from typing import Any


class CharsheetError(Exception):
    """Base exception for all character sheet errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(CharsheetError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(CharsheetError):
    """Raised when caller-supplied data fails validation."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Rules Domain Exceptions
# =============================================================================


class RulesError(CharsheetError):
    """Base exception for ruleset selection and query errors."""


class UnknownRulesetError(RulesError):
    """Raised when a ruleset identifier does not name a registered bundle."""

    def __init__(
        self,
        message: str,
        *,
        ruleset_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown ruleset error.

        Args:
            message: Human-readable error description.
            ruleset_id: The identifier that failed to resolve.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if ruleset_id:
            combined_details["ruleset_id"] = ruleset_id
        super().__init__(message, details=combined_details)


class RulesLookupError(RulesError):
    """Raised in strict mode for an unknown class or an out-of-table level.

    With strict lookups disabled the query functions return zero/empty
    values instead, so this is a development-time precondition check.
    """

    def __init__(
        self,
        message: str,
        *,
        class_name: str | None = None,
        level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize lookup error with the offending query arguments.

        Args:
            message: Human-readable error description.
            class_name: Class name that was queried.
            level: Character level that was queried.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if class_name:
            combined_details["class_name"] = class_name
        if level is not None:
            combined_details["level"] = level
        super().__init__(message, details=combined_details)


class TraitQueryError(RulesError):
    """Raised when a trait query does not name exactly one trait owner."""


# =============================================================================
# Ledger Domain Exceptions
# =============================================================================


class LedgerError(CharsheetError):
    """Base exception for coin purse updates."""


class InsufficientFundsError(LedgerError):
    """Raised when a coin update would leave the purse with a negative balance."""

    def __init__(
        self,
        message: str,
        *,
        needed_copper: int | None = None,
        available_copper: int | None = None,
        denominations: dict[str, int] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize insufficient funds error with purse context.

        Args:
            message: Human-readable error description.
            needed_copper: Copper value the update tried to remove.
            available_copper: Copper value held before the update.
            denominations: Denominations that would go negative, with the
                value each would end at.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if needed_copper is not None:
            combined_details["needed_copper"] = needed_copper
        if available_copper is not None:
            combined_details["available_copper"] = available_copper
        if denominations:
            combined_details["denominations"] = denominations
        self.denominations = denominations or {}
        super().__init__(message, details=combined_details)


class NoCoinChangeError(LedgerError):
    """Raised when a coin update carries no non-zero delta."""


__all__ = [
    # Base exception
    "CharsheetError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Rules exceptions
    "RulesError",
    "UnknownRulesetError",
    "RulesLookupError",
    "TraitQueryError",
    # Ledger exceptions
    "LedgerError",
    "InsufficientFundsError",
    "NoCoinChangeError",
]
