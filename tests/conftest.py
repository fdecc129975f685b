"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the character sheet rules core test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from charsheet.models import CoinPurse


if TYPE_CHECKING:
    from collections.abc import Generator

    from charsheet.rules import Ruleset


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from charsheet.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "CHARSHEET_DEBUG": "true",
        "CHARSHEET_LOG_LEVEL": "DEBUG",
        "CHARSHEET_RULES_DEFAULT_RULESET": "srd51",
        "CHARSHEET_RULES_STRICT_LOOKUPS": "true",
        "CHARSHEET_LEDGER_MAKE_CHANGE_BY_DEFAULT": "false",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def strict_lookups(monkeypatch: pytest.MonkeyPatch) -> None:
    """Turn on strict rules lookups for one test."""
    from charsheet.core.config import clear_settings_cache

    monkeypatch.setenv("CHARSHEET_RULES_STRICT_LOOKUPS", "true")
    clear_settings_cache()


# =============================================================================
# Ruleset Fixtures
# =============================================================================


@pytest.fixture
def legacy_rules() -> Ruleset:
    """Provide the legacy (SRD 5.1) ruleset."""
    from charsheet.rules import get_ruleset

    return get_ruleset("srd51")


@pytest.fixture
def current_rules() -> Ruleset:
    """Provide the current (SRD 5.2) ruleset."""
    from charsheet.rules import get_ruleset

    return get_ruleset("srd52")


@pytest.fixture(params=["srd51", "srd52"])
def any_rules(request: pytest.FixtureRequest) -> Ruleset:
    """Provide each ruleset in turn."""
    from charsheet.rules import get_ruleset

    return get_ruleset(request.param)


# =============================================================================
# Coin Fixtures
# =============================================================================


@pytest.fixture
def sample_purse() -> CoinPurse:
    """Provide a purse holding a little of everything.

    Returns:
        1 pp, 12 gp, 1 ep, 5 sp and 7 cp (2407 cp total).
    """
    return CoinPurse(pp=1, gp=12, ep=1, sp=5, cp=7)
