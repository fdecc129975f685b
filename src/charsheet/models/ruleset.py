"""Pydantic V2 models for ruleset definitions.

A ruleset is authored as plain data: species with optional lineages,
backgrounds, and class definitions with their subclasses and spellcasting
configuration. Every model here is frozen so a bundle built at import time
can be shared across threads without copying.

Models:
    Trait: A named feature, optionally gated by character level.
    Choice: "Choose N from these options" proficiency picks.
    Lineage / Species: Species and their optional lineage variants.
    Background: Background proficiencies, equipment and traits.
    Subclass / ClassDef: Class chassis and subclass options.
    SpellcastingDisabled / SpellcastingEnabled: The SpellcastingConfig variants.
    SpellProgressionRow: One level of a class's spell progression table.
"""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from charsheet.core.constants import MAX_CHARACTER_LEVEL, MAX_SPELL_LEVEL, MIN_TABLE_LEVEL
from charsheet.models.enums import Ability, CasterKind, ClassName, Size, Skill, SpellChangeEvent


HitDie = Literal[6, 8, 10, 12]

TableLevel = Annotated[
    int,
    Field(ge=MIN_TABLE_LEVEL, le=MAX_CHARACTER_LEVEL, description="Character level (0-20)"),
]


class _RulesModel(BaseModel):
    """Shared configuration for immutable ruleset records."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# =============================================================================
# Traits and Choices
# =============================================================================


class Trait(_RulesModel):
    """A named character feature.

    Attributes:
        name: Trait name as printed on the sheet.
        description: Rules text summary.
        level: Level at which the trait is gained; None means always.
    """

    name: str = Field(min_length=1)
    description: str = ""
    level: TableLevel | None = None

    def applies_at(self, level: int | None) -> bool:
        """Check whether the trait is held at a character level.

        Args:
            level: Character level, or None to ignore level gating.

        Returns:
            True if the trait is ungated or gained at or below ``level``.
        """
        if level is None or self.level is None:
            return True
        return self.level <= level


class Choice(_RulesModel):
    """Choose ``choose`` items from ``options``."""

    choose: Annotated[int, Field(ge=1)]
    options: tuple[str, ...]


ToolProficiency: TypeAlias = str | Choice


# =============================================================================
# Species and Backgrounds
# =============================================================================


class Lineage(_RulesModel):
    """An optional variant of a species (e.g. high elf, rock gnome)."""

    name: str = Field(min_length=1)
    description: str = ""
    ability_score_modifiers: dict[Ability, int] = Field(default_factory=dict)
    traits: tuple[Trait, ...] = ()


class Species(_RulesModel):
    """A playable species.

    Attributes:
        name: Species name.
        size: Creature size.
        speed: Walking speed in feet.
        description: Short flavor summary.
        ability_score_modifiers: Fixed ability increases (legacy ruleset only).
        lineages: Optional lineage variants, in declaration order.
        traits: Species-wide traits.
    """

    name: str = Field(min_length=1)
    size: Size
    speed: Annotated[int, Field(ge=0)]
    description: str = ""
    ability_score_modifiers: dict[Ability, int] = Field(default_factory=dict)
    lineages: tuple[Lineage, ...] = ()
    traits: tuple[Trait, ...] = ()

    def get_lineage(self, name: str) -> Lineage | None:
        """Find a lineage by name, ignoring case."""
        wanted = name.lower()
        return next((lin for lin in self.lineages if lin.name.lower() == wanted), None)


class Background(_RulesModel):
    """A character background.

    The legacy ruleset grants languages; the current ruleset grants a feat
    and a set of abilities to raise instead.
    """

    name: str = Field(min_length=1)
    description: str = ""
    skill_proficiencies: tuple[Skill, ...]
    tool_proficiencies: tuple[ToolProficiency, ...] = ()
    ability_scores: tuple[Ability, ...] = ()
    additional_languages: Annotated[int, Field(ge=0)] = 0
    feat: str | None = None
    equipment: tuple[str, ...] = ()
    traits: tuple[Trait, ...] = ()


# =============================================================================
# Spellcasting Configuration
# =============================================================================


class SpellcastingDisabled(_RulesModel):
    """The class never casts spells."""

    enabled: Literal[False] = False


class SpellcastingEnabled(_RulesModel):
    """The class (or one of its subclasses) casts spells.

    Attributes:
        kind: Slot progression curve the caster follows.
        ability: Spellcasting ability.
        change_prepared: When prepared spells may be swapped.
        granting_subclasses: Subclasses that unlock spellcasting. Empty when
            every member of the class casts; otherwise callers must check
            subclass membership before querying progression.
        notes: Free-form authoring notes.
    """

    enabled: Literal[True] = True
    kind: CasterKind
    ability: Ability
    change_prepared: SpellChangeEvent
    granting_subclasses: tuple[str, ...] = ()
    notes: str | None = None

    @property
    def is_subclass_granted(self) -> bool:
        """Whether spellcasting comes from a subclass rather than the class."""
        return bool(self.granting_subclasses)


SpellcastingConfig: TypeAlias = SpellcastingDisabled | SpellcastingEnabled


# =============================================================================
# Classes
# =============================================================================


class Subclass(_RulesModel):
    """A subclass option and the traits it adds."""

    name: str = Field(min_length=1)
    description: str = ""
    traits: tuple[Trait, ...] = ()


class ClassDef(_RulesModel):
    """A character class definition.

    Attributes:
        name: Class name.
        description: Short summary.
        hit_die: Hit die size.
        primary_abilities: Abilities the class relies on.
        saving_throws: Saving throw proficiencies.
        armor_proficiencies: Armor training.
        weapon_proficiencies: Weapon proficiencies.
        tool_proficiencies: Fixed tools or tool choices.
        skill_choices: Skill proficiency pick.
        traits: Base class features, optionally level gated.
        subclasses: Subclass options.
        subclass_level: Character level at which a subclass must be chosen.
        spellcasting: Spellcasting configuration.
    """

    name: ClassName
    description: str = ""
    hit_die: HitDie
    primary_abilities: tuple[Ability, ...]
    saving_throws: tuple[Ability, ...]
    armor_proficiencies: tuple[str, ...] = ()
    weapon_proficiencies: tuple[str, ...] = ()
    tool_proficiencies: tuple[ToolProficiency, ...] = ()
    skill_choices: Choice
    traits: tuple[Trait, ...] = ()
    subclasses: tuple[Subclass, ...] = ()
    subclass_level: Annotated[int, Field(ge=1, le=MAX_CHARACTER_LEVEL)] = 3
    spellcasting: SpellcastingConfig = Field(default_factory=SpellcastingDisabled)

    @property
    def subclass_names(self) -> list[str]:
        """Names of the subclass options, in declaration order."""
        return [subclass.name for subclass in self.subclasses]

    def get_subclass(self, name: str) -> Subclass | None:
        """Find a subclass by name, ignoring case."""
        wanted = name.lower()
        return next((sc for sc in self.subclasses if sc.name.lower() == wanted), None)


# =============================================================================
# Spell Progression
# =============================================================================


class SpellProgressionRow(_RulesModel):
    """One level of a class's spell progression table.

    Attributes:
        level: Class level this row describes (0 is the zero-row).
        cantrips: Cantrips known.
        spells_prepared: Explicit prepared/known count, or None when the
            count is computed from the ability modifier.
        slots: Slots for spell levels 1-9. Shorter inputs are zero padded.
        arcanum: Pact caster arcanum as (spell level, count) pairs in
            ascending spell level. A mapping is accepted and sorted.
    """

    level: TableLevel
    cantrips: Annotated[int, Field(ge=0)] = 0
    spells_prepared: Annotated[int, Field(ge=0)] | None = None
    slots: tuple[int, ...] = (0,) * MAX_SPELL_LEVEL
    arcanum: tuple[tuple[int, int], ...] = ()

    @field_validator("slots", mode="before")
    @classmethod
    def pad_slots(cls, value: object) -> object:
        """Zero pad slot rows authored with fewer than nine entries."""
        if isinstance(value, (list, tuple)):
            if len(value) > MAX_SPELL_LEVEL:
                msg = f"slot rows hold at most {MAX_SPELL_LEVEL} entries, got {len(value)}"
                raise ValueError(msg)
            return tuple(value) + (0,) * (MAX_SPELL_LEVEL - len(value))
        return value

    @field_validator("arcanum", mode="before")
    @classmethod
    def sort_arcanum(cls, value: object) -> object:
        """Accept ``{spell_level: count}`` and store it as sorted pairs."""
        if isinstance(value, dict):
            return tuple(sorted(value.items()))
        return value


__all__ = [
    "HitDie",
    "TableLevel",
    "Trait",
    "Choice",
    "ToolProficiency",
    "Lineage",
    "Species",
    "Background",
    "SpellcastingDisabled",
    "SpellcastingEnabled",
    "SpellcastingConfig",
    "Subclass",
    "ClassDef",
    "SpellProgressionRow",
]
