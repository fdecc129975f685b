"""Rules constants shared across the character sheet core."""

from __future__ import annotations

# =============================================================================
# Level Bounds
# =============================================================================

MIN_TABLE_LEVEL = 0
"""Zero-row of every progression table (not yet a member of the class)."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level."""

# =============================================================================
# Spell Levels
# =============================================================================

MAX_SPELL_LEVEL = 9
"""Highest spell level; slot rows always carry this many entries."""

# =============================================================================
# Ability Scores
# =============================================================================

MIN_ABILITY_SCORE = 1
MAX_ABILITY_SCORE = 30


__all__ = [
    "MIN_TABLE_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "MAX_SPELL_LEVEL",
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
]
