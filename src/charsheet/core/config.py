"""Configuration management for the character sheet rules core.

Settings are loaded with pydantic-settings from environment variables and an
optional ``.env`` file. The rules core itself is pure; configuration only
decides which ruleset new characters default to, how strictly out-of-domain
lookups are treated, and how the logging stack is set up.

Example:
    >>> from charsheet.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.default_ruleset
    <RulesetId.SRD52: 'srd52'>

Environment Variables:
    CHARSHEET_DEBUG: Enable debug mode.
    CHARSHEET_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    CHARSHEET_LOG_JSON: Emit JSON log lines instead of console output.
    CHARSHEET_RULES_DEFAULT_RULESET: Ruleset bound to new characters (srd51, srd52).
    CHARSHEET_RULES_STRICT_LOOKUPS: Raise on unknown classes and out-of-table levels.
    CHARSHEET_LEDGER_MAKE_CHANGE_BY_DEFAULT: Break larger coins when spending.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from charsheet.core.exceptions import ConfigurationError
from charsheet.models.enums import RulesetId


class RulesSettings(BaseSettings):
    """Configuration for ruleset selection and lookup policy.

    Attributes:
        default_ruleset: Ruleset bound to newly created characters.
        strict_lookups: Raise RulesLookupError for unknown classes and
            out-of-table levels instead of returning zero/empty values.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARSHEET_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_ruleset: RulesetId = Field(
        default=RulesetId.SRD52,
        description="Ruleset bound to new characters",
    )
    strict_lookups: bool = Field(
        default=False,
        description="Fail fast on out-of-domain rules lookups",
    )


class LedgerSettings(BaseSettings):
    """Configuration for coin purse updates.

    Attributes:
        make_change_by_default: Whether coin updates break larger coins to
            cover a shortfall when the caller does not say otherwise.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARSHEET_LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    make_change_by_default: bool = Field(
        default=True,
        description="Make change from larger denominations by default",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Emit JSON log lines.
        rules: Ruleset settings.
        ledger: Coin ledger settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARSHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Character Sheet Rules",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)
    ledger: LedgerSettings = Field(default_factory=LedgerSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "LedgerSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
