"""Progression tables shared by both SRD rulesets.

Tables are level-indexed sequences of length 21 (index 0 is the zero-row for
a character with no levels in the class). Slot rows list slots per spell
level starting at 1st level and are zero padded when the rows are built.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from charsheet.core.constants import MAX_CHARACTER_LEVEL
from charsheet.models.enums import ClassName
from charsheet.models.ruleset import SpellProgressionRow, Trait


# =============================================================================
# Slot Curves
# =============================================================================

FULL_CASTER_SLOTS: tuple[tuple[int, ...], ...] = (
    (),  # 0
    (2,),
    (3,),
    (4, 2),
    (4, 3),
    (4, 3, 2),  # 5
    (4, 3, 3),
    (4, 3, 3, 1),
    (4, 3, 3, 2),
    (4, 3, 3, 3, 1),
    (4, 3, 3, 3, 2),  # 10
    (4, 3, 3, 3, 2, 1),
    (4, 3, 3, 3, 2, 1),
    (4, 3, 3, 3, 2, 1, 1),
    (4, 3, 3, 3, 2, 1, 1),
    (4, 3, 3, 3, 2, 1, 1, 1),  # 15
    (4, 3, 3, 3, 2, 1, 1, 1),
    (4, 3, 3, 3, 2, 1, 1, 1, 1),
    (4, 3, 3, 3, 3, 1, 1, 1, 1),
    (4, 3, 3, 3, 3, 2, 1, 1, 1),
    (4, 3, 3, 3, 3, 2, 2, 1, 1),  # 20
)

# Half casters share one curve in both rulesets.
HALF_CASTER_SLOTS: tuple[tuple[int, ...], ...] = (
    (),  # 0
    (2,),
    (2,),
    (3,),
    (3,),
    (4, 2),  # 5
    (4, 2),
    (4, 3),
    (4, 3),
    (4, 3, 2),
    (4, 3, 2),  # 10
    (4, 3, 3),
    (4, 3, 3),
    (4, 3, 3, 1),
    (4, 3, 3, 1),
    (4, 3, 3, 2),  # 15
    (4, 3, 3, 2),
    (4, 3, 3, 3, 1),
    (4, 3, 3, 3, 1),
    (4, 3, 3, 3, 2),
    (4, 3, 3, 3, 2),  # 20
)

THIRD_CASTER_SLOTS: tuple[tuple[int, ...], ...] = (
    (),  # 0
    (),
    (),
    (2,),
    (3,),
    (3,),  # 5
    (3, 2),
    (4, 2),
    (4, 2),
    (4, 2),
    (4, 3),  # 10
    (4, 3),
    (4, 3),
    (4, 3, 2),
    (4, 3, 2),
    (4, 3, 2),  # 15
    (4, 3, 3),
    (4, 3, 3),
    (4, 3, 3),
    (4, 3, 3, 1),
    (4, 3, 3, 1),  # 20
)

# Pact magic: every slot is of the highest level the warlock can cast.
PACT_SLOTS: tuple[tuple[int, ...], ...] = (
    (),  # 0
    (1,),
    (2,),
    (0, 2),
    (0, 2),
    (0, 0, 2),  # 5
    (0, 0, 2),
    (0, 0, 0, 2),
    (0, 0, 0, 2),
    (0, 0, 0, 0, 2),
    (0, 0, 0, 0, 2),  # 10
    (0, 0, 0, 0, 3),
    (0, 0, 0, 0, 3),
    (0, 0, 0, 0, 3),
    (0, 0, 0, 0, 3),
    (0, 0, 0, 0, 3),  # 15
    (0, 0, 0, 0, 3),
    (0, 0, 0, 0, 4),
    (0, 0, 0, 0, 4),
    (0, 0, 0, 0, 4),
    (0, 0, 0, 0, 4),  # 20
)

# Level at which each arcanum spell level unlocks.
MYSTIC_ARCANUM_UNLOCKS: dict[int, int] = {11: 6, 13: 7, 15: 8, 17: 9}


# =============================================================================
# Cantrip and Prepared Curves
# =============================================================================

NATIVE_CANTRIPS: dict[ClassName, tuple[int, ...]] = {
    ClassName.BARD: (0, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    ClassName.CLERIC: (0, 3, 3, 3, 4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5),
    ClassName.DRUID: (0, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    ClassName.SORCERER: (0, 4, 4, 4, 5, 5, 5, 5, 5, 5, 6, 6, 6, 6, 6, 6, 6, 6, 6, 6, 6),
    ClassName.WARLOCK: (0, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4),
    ClassName.WIZARD: (0, 3, 3, 3, 4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5),
}

NO_CANTRIPS: tuple[int, ...] = (0,) * (MAX_CHARACTER_LEVEL + 1)

# Legacy eldritch knight / arcane trickster curves, shared by both classes.
SUBCLASS_CASTER_CANTRIPS: tuple[int, ...] = (
    0, 0, 0, 2, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3,
)
SUBCLASS_CASTER_PREPARED: tuple[int, ...] = (
    0, 0, 0, 3, 4, 4, 5, 6, 6, 7, 8, 8, 9, 10, 10, 11, 11, 12, 13, 13, 13,
)


# =============================================================================
# Builders
# =============================================================================


def level_rows(rows: Mapping[int, Sequence[int]] | Sequence[Sequence[int]]) -> dict[int, Sequence[int]]:
    """Key a level-indexed slot table by level."""
    if isinstance(rows, Mapping):
        return dict(rows)
    return dict(enumerate(rows))


def build_progression(
    *,
    cantrips: Sequence[int],
    slots: Sequence[Sequence[int]],
    prepared: Sequence[int] | None = None,
    with_arcanum: bool = False,
) -> tuple[SpellProgressionRow, ...]:
    """Assemble a class's 21-row spell progression table.

    Args:
        cantrips: Cantrips known, indexed by level 0-20.
        slots: Slot rows, indexed by level 0-20.
        prepared: Explicit prepared/known counts for levels 1-20 (20
            entries). None leaves the counts to the ability-modifier
            formula. Row 0 always prepares nothing.
        with_arcanum: Fill in the pact caster's mystic arcanum.

    Returns:
        Rows for levels 0 through 20.
    """
    rows = [SpellProgressionRow(level=0, spells_prepared=0)]
    for level in range(1, MAX_CHARACTER_LEVEL + 1):
        arcanum = (
            {spell_level: 1 for unlock, spell_level in MYSTIC_ARCANUM_UNLOCKS.items() if unlock <= level}
            if with_arcanum
            else {}
        )
        rows.append(
            SpellProgressionRow(
                level=level,
                cantrips=cantrips[level],
                spells_prepared=prepared[level - 1] if prepared is not None else None,
                slots=slots[level],
                arcanum=arcanum,
            )
        )
    return tuple(rows)


def traits(*entries: str | tuple[str, int] | tuple[str, int, str]) -> tuple[Trait, ...]:
    """Shorthand for authoring trait lists.

    Each entry is a bare name (always held), ``(name, level)`` or
    ``(name, level, description)``.

    Example:
        >>> [t.level for t in traits("Rage", ("Extra Attack", 5))]
        [None, 5]
    """
    built: list[Trait] = []
    for entry in entries:
        if isinstance(entry, str):
            built.append(Trait(name=entry))
        elif len(entry) == 2:
            built.append(Trait(name=entry[0], level=entry[1]))
        else:
            built.append(Trait(name=entry[0], level=entry[1], description=entry[2]))
    return tuple(built)


__all__ = [
    "FULL_CASTER_SLOTS",
    "HALF_CASTER_SLOTS",
    "THIRD_CASTER_SLOTS",
    "PACT_SLOTS",
    "MYSTIC_ARCANUM_UNLOCKS",
    "NATIVE_CANTRIPS",
    "NO_CANTRIPS",
    "SUBCLASS_CASTER_CANTRIPS",
    "SUBCLASS_CASTER_PREPARED",
    "level_rows",
    "build_progression",
    "traits",
]
