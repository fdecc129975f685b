"""Spellcasting progression queries over a ruleset bundle.

A Ruleset is an immutable bundle of species, class and background data plus
the progression tables the query methods read. Two bundles exist (legacy
``srd51`` and current ``srd52``); both expose the same interface and differ
only in their data and in which table rows carry explicit prepared counts.

Every query is a pure function of its arguments. Out-of-domain input (an
unknown class name, a level outside 0-20) yields the zero/empty result and a
warning, or raises RulesLookupError when ``rules.strict_lookups`` is on.

Example:
    >>> from charsheet.rules import get_ruleset
    >>> rules = get_ruleset("srd52")
    >>> rules.max_cantrips_known("wizard", 4)
    4
    >>> rules.get_slots_for("full", 3)
    [1, 1, 1, 1, 2, 2]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from charsheet.core.config import get_settings
from charsheet.core.constants import (
    MAX_ABILITY_SCORE,
    MAX_CHARACTER_LEVEL,
    MAX_SPELL_LEVEL,
    MIN_ABILITY_SCORE,
    MIN_TABLE_LEVEL,
)
from charsheet.core.exceptions import RulesError, RulesLookupError, ValidationError
from charsheet.core.logging import get_logger
from charsheet.models.enums import CasterKind, ClassName, RulesetId
from charsheet.models.ruleset import (
    Background,
    ClassDef,
    Lineage,
    SpellcastingDisabled,
    SpellcastingEnabled,
    SpellProgressionRow,
    Species,
)


logger = get_logger(__name__)

SlotCurve = Mapping[int, tuple[int, ...]]
"""Caster level -> slots for spell levels 1-9."""

_TABLE_SIZE = MAX_CHARACTER_LEVEL - MIN_TABLE_LEVEL + 1


# =============================================================================
# Table Helpers
# =============================================================================


def build_slot_curve(rows: Mapping[int, Sequence[int]]) -> SlotCurve:
    """Build a read-only slot curve, zero padding each row to nine entries.

    Args:
        rows: Level -> slots per spell level, lowest spell level first.

    Returns:
        An immutable level -> nine-tuple mapping.
    """
    curve: dict[int, tuple[int, ...]] = {}
    for level, slots in rows.items():
        if len(slots) > MAX_SPELL_LEVEL:
            raise RulesError(
                f"Slot row for level {level} has more than {MAX_SPELL_LEVEL} entries",
                details={"level": level, "slots": list(slots)},
            )
        curve[level] = tuple(slots) + (0,) * (MAX_SPELL_LEVEL - len(slots))
    return MappingProxyType(curve)


def slots_from_progression(slots_per_level: Sequence[int]) -> list[int]:
    """Flatten per-spell-level slot counts into one entry per slot.

    Args:
        slots_per_level: Slot counts where index 0 is 1st-level spells.

    Returns:
        Spell levels in ascending order, one element per slot.

    Example:
        >>> slots_from_progression([2, 1])
        [1, 1, 2]
    """
    flattened: list[int] = []
    for spell_level in range(1, MAX_SPELL_LEVEL + 1):
        count = slots_per_level[spell_level - 1] if spell_level <= len(slots_per_level) else 0
        flattened.extend([spell_level] * count)
    return flattened


def ability_modifier(score: int) -> int:
    """Get the modifier for an ability score.

    Args:
        score: Ability score (1-30).

    Returns:
        ``(score - 10) // 2``, rounded down (8 -> -1, 15 -> 2).

    Raises:
        ValidationError: If the score is outside 1-30.
    """
    if not MIN_ABILITY_SCORE <= score <= MAX_ABILITY_SCORE:
        raise ValidationError(
            f"Ability score must be between {MIN_ABILITY_SCORE} and {MAX_ABILITY_SCORE}",
            field_name="score",
            invalid_value=score,
        )
    return (score - 10) // 2


def _coerce_class_name(class_name: ClassName | str) -> ClassName | None:
    try:
        return ClassName(str(class_name).lower())
    except ValueError:
        return None


# =============================================================================
# Ruleset
# =============================================================================


@dataclass(frozen=True)
class Ruleset:
    """An immutable, versioned bundle of rules data plus query functions.

    Attributes:
        id: Ruleset identifier.
        description: Human-readable summary.
        species: Species in declaration order.
        classes: Class definitions keyed by class name.
        backgrounds: Backgrounds keyed by lowercase name.
        spell_tables: Per-level progression rows for the native spellcasting
            classes, indexed by level 0-20.
        slot_curves: Generic slot curves for FULL, HALF and THIRD casters.
        subclass_caster_cantrips: Shared cantrips curve (index = level) for
            classes whose spellcasting comes from a subclass.
        subclass_caster_prepared: Shared prepared-spells curve for the same.
    """

    id: RulesetId
    description: str
    species: tuple[Species, ...]
    classes: Mapping[ClassName, ClassDef]
    backgrounds: Mapping[str, Background]
    spell_tables: Mapping[ClassName, tuple[SpellProgressionRow, ...]]
    slot_curves: Mapping[CasterKind, SlotCurve]
    subclass_caster_cantrips: tuple[int, ...]
    subclass_caster_prepared: tuple[int, ...]
    _pact_class: ClassName | None = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "species", tuple(self.species))
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))
        object.__setattr__(
            self,
            "backgrounds",
            MappingProxyType({name.lower(): bg for name, bg in self.backgrounds.items()}),
        )
        object.__setattr__(
            self,
            "spell_tables",
            MappingProxyType({name: tuple(rows) for name, rows in self.spell_tables.items()}),
        )
        object.__setattr__(self, "slot_curves", MappingProxyType(dict(self.slot_curves)))
        object.__setattr__(self, "subclass_caster_cantrips", tuple(self.subclass_caster_cantrips))
        object.__setattr__(self, "subclass_caster_prepared", tuple(self.subclass_caster_prepared))
        self._validate()

        pact_class = next(
            (
                name
                for name, class_def in self.classes.items()
                if isinstance(class_def.spellcasting, SpellcastingEnabled)
                and class_def.spellcasting.kind is CasterKind.PACT
            ),
            None,
        )
        object.__setattr__(self, "_pact_class", pact_class)

    def _validate(self) -> None:
        """Check table shapes once, at construction."""
        for class_name, rows in self.spell_tables.items():
            if len(rows) != _TABLE_SIZE:
                raise RulesError(
                    f"Spell table for {class_name} must have {_TABLE_SIZE} rows",
                    details={"ruleset": self.id.value, "rows": len(rows)},
                )
            for index, row in enumerate(rows):
                if row.level != index:
                    raise RulesError(
                        f"Spell table for {class_name} is out of order at row {index}",
                        details={"ruleset": self.id.value, "row_level": row.level},
                    )
        for curve_name, curve in (
            ("cantrips", self.subclass_caster_cantrips),
            ("prepared", self.subclass_caster_prepared),
        ):
            if len(curve) != _TABLE_SIZE:
                raise RulesError(
                    f"Subclass caster {curve_name} curve must have {_TABLE_SIZE} entries",
                    details={"ruleset": self.id.value, "entries": len(curve)},
                )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_class(self, class_name: ClassName | str) -> ClassDef | None:
        """Get a class definition by name, ignoring case."""
        name = _coerce_class_name(class_name)
        return self.classes.get(name) if name else None

    def get_species(self, species_name: str) -> Species | None:
        """Get a species by name, ignoring case."""
        wanted = species_name.lower()
        return next((sp for sp in self.species if sp.name.lower() == wanted), None)

    def get_background(self, background_name: str) -> Background | None:
        """Get a background by name, ignoring case."""
        return self.backgrounds.get(background_name.lower())

    def caster_kind(self, class_name: ClassName | str) -> CasterKind | None:
        """Get the slot curve a class follows, or None for non-casters."""
        class_def = self.get_class(class_name)
        if class_def is None or isinstance(class_def.spellcasting, SpellcastingDisabled):
            return None
        return class_def.spellcasting.kind

    def grants_spellcasting(self, class_name: ClassName | str, subclass: str | None = None) -> bool:
        """Check whether a class/subclass pair casts spells.

        Callers must make this check before querying progression for classes
        whose spellcasting comes from a subclass.

        Args:
            class_name: The class.
            subclass: The chosen subclass, if any.

        Returns:
            True if members of the class with this subclass cast spells.
        """
        class_def = self.get_class(class_name)
        if class_def is None:
            return False
        spellcasting = class_def.spellcasting
        if isinstance(spellcasting, SpellcastingDisabled):
            return False
        if not spellcasting.is_subclass_granted:
            return True
        if subclass is None:
            return False
        granting = {name.lower() for name in spellcasting.granting_subclasses}
        return subclass.lower() in granting

    # -------------------------------------------------------------------------
    # Progression Queries
    # -------------------------------------------------------------------------

    def max_cantrips_known(self, class_name: ClassName | str, level: int) -> int:
        """Get how many cantrips a member of a class knows at a level.

        Native spellcasting classes read their own table. Classes whose
        spellcasting comes from a subclass read the shared subclass caster
        curve without checking the subclass. Non-casters know none.

        Args:
            class_name: The class.
            level: Level in that class (0-20).

        Returns:
            Cantrips known.
        """
        class_def = self._resolve("max_cantrips_known", class_name, level)
        if class_def is None:
            return 0

        spellcasting = class_def.spellcasting
        if isinstance(spellcasting, SpellcastingDisabled):
            return 0
        if spellcasting.is_subclass_granted:
            return self.subclass_caster_cantrips[level]
        row = self._table_row(class_def.name, level)
        return row.cantrips if row else 0

    def max_spells_prepared(
        self,
        class_name: ClassName | str,
        level: int,
        ability_modifier: int = 0,
    ) -> int:
        """Get the cap on prepared (or known) spells for a class at a level.

        An explicit count in the class's table row wins and the modifier is
        ignored. Otherwise full casters prepare ``modifier + level`` and half
        casters ``modifier + level // 2``. A low modifier can push the formula
        below zero; callers decide how to present that. Classes
        whose spellcasting comes from a subclass read the shared subclass
        caster curve.

        Args:
            class_name: The class.
            level: Level in that class (0-20).
            ability_modifier: Spellcasting ability modifier.

        Returns:
            Maximum prepared spells.
        """
        class_def = self._resolve("max_spells_prepared", class_name, level)
        if class_def is None:
            return 0

        spellcasting = class_def.spellcasting
        if isinstance(spellcasting, SpellcastingDisabled):
            return 0
        if spellcasting.is_subclass_granted:
            return self.subclass_caster_prepared[level]
        row = self._table_row(class_def.name, level)
        if row is None:
            return 0
        if row.spells_prepared is not None:
            return row.spells_prepared
        return _prepared_by_formula(spellcasting.kind, level, ability_modifier)

    def get_slots_for(self, caster_kind: CasterKind | str, level: int) -> list[int]:
        """Get the spell slots a caster kind has at a caster level.

        Args:
            caster_kind: The slot progression to read.
            level: Caster level (0-20).

        Returns:
            One element per slot, holding that slot's spell level, in
            ascending spell level order (e.g. ``[1, 1, 2]``).
        """
        try:
            kind = CasterKind(caster_kind)
        except ValueError:
            self._out_of_domain("get_slots_for", f"Unknown caster kind {caster_kind!r}", caster_kind, level)
            return []
        if not self._level_in_table("get_slots_for", kind.value, level):
            return []

        if kind is CasterKind.PACT:
            row = self._pact_row(level)
            return slots_from_progression(row.slots) if row else []

        curve = self.slot_curves.get(kind)
        if curve is None:
            return []
        return slots_from_progression(curve.get(level, ()))

    def get_mystic_arcanum(self, level: int) -> list[int]:
        """Get the arcanum spell levels a pact caster has unlocked.

        Arcanum spells are cast once per long rest without spending a slot.

        Args:
            level: Pact caster level (0-20).

        Returns:
            Spell levels of the unlocked arcana, ascending.
        """
        if not self._level_in_table("get_mystic_arcanum", CasterKind.PACT.value, level):
            return []
        row = self._pact_row(level)
        if row is None:
            return []
        arcana: list[int] = []
        for spell_level, count in row.arcanum:
            arcana.extend([spell_level] * count)
        return arcana

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    def list_lineages(self, species_name: str | None = None) -> list[Lineage]:
        """List lineage variants for one species, or for every species.

        Args:
            species_name: Species to scope to; None lists all lineages in
                species declaration order.

        Returns:
            Lineages, empty if the species has none or is unknown.
        """
        if species_name is not None:
            species = self.get_species(species_name)
            return list(species.lineages) if species else []
        return [lineage for species in self.species for lineage in species.lineages]

    def list_subclasses(self, class_name: ClassName | str | None = None) -> list[str]:
        """List subclass names for one class, or for every class.

        Args:
            class_name: Class to scope to; None lists every subclass in class
                declaration order.

        Returns:
            Subclass names, empty for an unknown class.
        """
        if class_name is not None:
            class_def = self.get_class(class_name)
            return class_def.subclass_names if class_def else []
        return [name for class_def in self.classes.values() for name in class_def.subclass_names]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _resolve(self, operation: str, class_name: ClassName | str, level: int) -> ClassDef | None:
        class_def = self.get_class(class_name)
        if class_def is None:
            self._out_of_domain(operation, f"Unknown class {class_name!r}", class_name, level)
            return None
        if not self._level_in_table(operation, class_def.name.value, level):
            return None
        return class_def

    def _level_in_table(self, operation: str, subject: str, level: int) -> bool:
        if MIN_TABLE_LEVEL <= level <= MAX_CHARACTER_LEVEL:
            return True
        self._out_of_domain(operation, f"Level {level} is outside the progression tables", subject, level)
        return False

    def _out_of_domain(self, operation: str, message: str, subject: object, level: int) -> None:
        if get_settings().rules.strict_lookups:
            raise RulesLookupError(
                message,
                class_name=str(subject),
                level=level,
                details={"ruleset": self.id.value, "operation": operation},
            )
        logger.warning(
            "Out-of-domain rules lookup",
            ruleset=self.id.value,
            operation=operation,
            subject=str(subject),
            level=level,
        )

    def _table_row(self, class_name: ClassName, level: int) -> SpellProgressionRow | None:
        rows = self.spell_tables.get(class_name)
        return rows[level] if rows else None

    def _pact_row(self, level: int) -> SpellProgressionRow | None:
        if self._pact_class is None:
            return None
        return self._table_row(self._pact_class, level)


def _prepared_by_formula(kind: CasterKind, level: int, ability_modifier: int) -> int:
    if kind is CasterKind.FULL:
        return ability_modifier + level
    if kind is CasterKind.HALF:
        return ability_modifier + level // 2
    # Third and pact casters always list explicit counts.
    return 0


__all__ = [
    "SlotCurve",
    "Ruleset",
    "ability_modifier",
    "build_slot_curve",
    "slots_from_progression",
]
