"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        CharsheetError: Base exception for all library errors.
        ConfigurationError / ValidationError: Settings and input errors.
        RulesError and subclasses: Ruleset selection and lookup errors.
        LedgerError and subclasses: Rejected coin updates.

    Configuration:
        Settings: Main settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up logging.
        get_logger: Get a configured logger instance.
        sheet_context: Tag log entries with the sheet being worked on.
"""

from __future__ import annotations

from charsheet.core.config import (
    LedgerSettings,
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
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
from charsheet.core.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    sheet_context,
)


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
    # Configuration
    "Settings",
    "RulesSettings",
    "LedgerSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "sheet_context",
]
