"""Pydantic V2 value types for the character sheet rules core.

Submodules:
    enums: Closed vocabularies (Ability, ClassName, CasterKind, Denomination, ...).
    ruleset: Ruleset records (Species, Background, ClassDef, SpellProgressionRow, ...).
    coins: The CoinPurse model.

Example:
    >>> from charsheet.models import CoinPurse, CasterKind
    >>> CoinPurse(gp=3).gp
    3
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from charsheet.models.enums import (
    Ability,
    CasterKind,
    ClassName,
    Denomination,
    RulesetId,
    Size,
    Skill,
    SpellChangeEvent,
    TraitSource,
)

# =============================================================================
# Ruleset Records
# =============================================================================
from charsheet.models.ruleset import (
    Background,
    Choice,
    ClassDef,
    Lineage,
    SpellcastingConfig,
    SpellcastingDisabled,
    SpellcastingEnabled,
    SpellProgressionRow,
    Species,
    Subclass,
    Trait,
)

# =============================================================================
# Coins
# =============================================================================
from charsheet.models.coins import CoinPurse


__all__ = [
    # === Enumerations ===
    "Ability",
    "Skill",
    "Size",
    "ClassName",
    "CasterKind",
    "SpellChangeEvent",
    "RulesetId",
    "TraitSource",
    "Denomination",
    # === Ruleset Records ===
    "Trait",
    "Choice",
    "Lineage",
    "Species",
    "Background",
    "SpellcastingDisabled",
    "SpellcastingEnabled",
    "SpellcastingConfig",
    "Subclass",
    "ClassDef",
    "SpellProgressionRow",
    # === Coins ===
    "CoinPurse",
]
