"""Ruleset bundles and the queries over them.

Example:
    >>> from charsheet.rules import get_ruleset
    >>> get_ruleset("srd51").max_spells_prepared("cleric", 5, ability_modifier=3)
    8
"""

from __future__ import annotations

from charsheet.rules.progression import (
    Ruleset,
    SlotCurve,
    ability_modifier,
    build_slot_curve,
    slots_from_progression,
)
from charsheet.rules.registry import available_rulesets, get_ruleset
from charsheet.rules.srd51 import SRD51
from charsheet.rules.srd52 import SRD52
from charsheet.rules.traits import SourcedTrait, get_traits


__all__ = [
    # === Queries ===
    "Ruleset",
    "SlotCurve",
    "ability_modifier",
    "build_slot_curve",
    "slots_from_progression",
    # === Bundles ===
    "SRD51",
    "SRD52",
    "available_rulesets",
    "get_ruleset",
    # === Traits ===
    "SourcedTrait",
    "get_traits",
]
