"""Charsheet - rules core for a tabletop character sheet manager.

Pure, deterministic rules resolution: spell progression across the legacy
(SRD 5.1) and current (SRD 5.2) rulesets, and coin purse arithmetic with
change-making.

Example:
    >>> from charsheet import CoinPurse, get_ruleset, update_coins
    >>>
    >>> rules = get_ruleset("srd52")
    >>> rules.get_slots_for("half", 5)
    [1, 1, 1, 1, 2, 2]
    >>>
    >>> update_coins(CoinPurse(gp=2), CoinPurse(cp=-15))
    CoinPurse(pp=0, gp=1, ep=0, sp=8, cp=5)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 value types (enums, ruleset records, coin purse).
    rules: Ruleset bundles, progression queries, trait listing.
    ledger: Coin valuation, change-making and checked updates.
"""

from __future__ import annotations

# Core
from charsheet.core.config import Settings, get_settings
from charsheet.core.exceptions import CharsheetError
from charsheet.core.logging import configure_logging, get_logger, sheet_context

# Models
from charsheet.models import CasterKind, ClassName, CoinPurse, Denomination, RulesetId

# Ledger
from charsheet.ledger import apply_deltas_with_change, describe_coin_change, to_copper, update_coins

# Rules
from charsheet.rules import Ruleset, ability_modifier, get_ruleset, get_traits


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "CharsheetError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "sheet_context",
    # Models
    "CasterKind",
    "ClassName",
    "CoinPurse",
    "Denomination",
    "RulesetId",
    # Rules
    "Ruleset",
    "ability_modifier",
    "get_ruleset",
    "get_traits",
    # Ledger
    "to_copper",
    "apply_deltas_with_change",
    "update_coins",
    "describe_coin_change",
]
