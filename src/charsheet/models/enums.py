"""Enumeration types for the character sheet rules core.

These enums are the closed vocabularies the rulesets are written in:
abilities, skills, class names, caster kinds and coin denominations.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """The six ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name


class Skill(StrEnum):
    """Skills, spelled the way character sheets print them."""

    ACROBATICS = "acrobatics"
    ANIMAL_HANDLING = "animal handling"
    ARCANA = "arcana"
    ATHLETICS = "athletics"
    DECEPTION = "deception"
    HISTORY = "history"
    INSIGHT = "insight"
    INTIMIDATION = "intimidation"
    INVESTIGATION = "investigation"
    MEDICINE = "medicine"
    NATURE = "nature"
    PERCEPTION = "perception"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"
    RELIGION = "religion"
    SLEIGHT_OF_HAND = "sleight of hand"
    STEALTH = "stealth"
    SURVIVAL = "survival"

    @property
    def ability(self) -> Ability:
        """Get the ability score a check with this skill uses.

        Returns:
            The Ability associated with this skill.
        """
        return _SKILL_ABILITIES[self]


_SKILL_ABILITIES: dict[Skill, Ability] = {
    Skill.ACROBATICS: Ability.DEX,
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.ARCANA: Ability.INT,
    Skill.ATHLETICS: Ability.STR,
    Skill.DECEPTION: Ability.CHA,
    Skill.HISTORY: Ability.INT,
    Skill.INSIGHT: Ability.WIS,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.INVESTIGATION: Ability.INT,
    Skill.MEDICINE: Ability.WIS,
    Skill.NATURE: Ability.INT,
    Skill.PERCEPTION: Ability.WIS,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
    Skill.RELIGION: Ability.INT,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    Skill.SURVIVAL: Ability.WIS,
}


class Size(StrEnum):
    """Creature sizes."""

    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"
    GARGANTUAN = "gargantuan"


class ClassName(StrEnum):
    """The twelve character classes shared by both rulesets."""

    BARBARIAN = "barbarian"
    BARD = "bard"
    CLERIC = "cleric"
    DRUID = "druid"
    FIGHTER = "fighter"
    MONK = "monk"
    PALADIN = "paladin"
    RANGER = "ranger"
    ROGUE = "rogue"
    SORCERER = "sorcerer"
    WARLOCK = "warlock"
    WIZARD = "wizard"


class CasterKind(StrEnum):
    """Spell slot progression a spellcasting class follows.

    FULL, HALF and THIRD share the flat slots-per-spell-level shape. PACT
    has few slots, all of one level, recharging on a short rest.
    """

    FULL = "full"
    HALF = "half"
    THIRD = "third"
    PACT = "pact"


class SpellChangeEvent(StrEnum):
    """When a caster may swap the spells they have prepared."""

    LEVEL_UP = "levelup"
    LONG_REST = "longrest"


class RulesetId(StrEnum):
    """Identifiers of the available ruleset bundles."""

    SRD51 = "srd51"
    SRD52 = "srd52"


class TraitSource(StrEnum):
    """Where a character trait comes from."""

    SPECIES = "species"
    LINEAGE = "lineage"
    BACKGROUND = "background"
    CLASS = "class"
    SUBCLASS = "subclass"


class Denomination(StrEnum):
    """Coin denominations, declared from lowest to highest value."""

    CP = "cp"
    SP = "sp"
    EP = "ep"
    GP = "gp"
    PP = "pp"

    @property
    def copper_value(self) -> int:
        """Get the worth of one coin in copper pieces.

        Returns:
            Copper pieces per coin (1 for cp, 1000 for pp).
        """
        return _COPPER_VALUES[self]

    @property
    def full_name(self) -> str:
        """Get the metal name used in transaction summaries.

        Returns:
            Lowercase metal name (e.g., 'gold' for GP).
        """
        return _METAL_NAMES[self]


_COPPER_VALUES: dict[Denomination, int] = {
    Denomination.CP: 1,
    Denomination.SP: 10,
    Denomination.EP: 50,
    Denomination.GP: 100,
    Denomination.PP: 1000,
}

_METAL_NAMES: dict[Denomination, str] = {
    Denomination.CP: "copper",
    Denomination.SP: "silver",
    Denomination.EP: "electrum",
    Denomination.GP: "gold",
    Denomination.PP: "platinum",
}


__all__ = [
    "Ability",
    "Skill",
    "Size",
    "ClassName",
    "CasterKind",
    "SpellChangeEvent",
    "RulesetId",
    "TraitSource",
    "Denomination",
]
