"""Tests for spellcasting progression queries."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from charsheet.core.exceptions import RulesError, RulesLookupError, ValidationError
from charsheet.models import CasterKind, ClassName, RulesetId
from charsheet.rules import (
    Ruleset,
    ability_modifier,
    build_slot_curve,
    slots_from_progression,
)


NON_CASTERS = (ClassName.BARBARIAN, ClassName.MONK)
SUBCLASS_CASTERS = (ClassName.FIGHTER, ClassName.ROGUE)


def _native_classes(rules: Ruleset) -> list[ClassName]:
    return list(rules.spell_tables)


class TestCantripsKnown:
    """Tests for max_cantrips_known."""

    @pytest.mark.parametrize(
        ("class_name", "level", "expected"),
        [
            ("wizard", 1, 3),
            ("wizard", 4, 4),
            ("wizard", 10, 5),
            ("bard", 3, 2),
            ("bard", 4, 3),
            ("sorcerer", 1, 4),
            ("sorcerer", 20, 6),
            ("warlock", 10, 4),
            ("cleric", 0, 0),
            ("paladin", 5, 0),
            ("ranger", 20, 0),
        ],
    )
    def test_native_tables(self, any_rules: Ruleset, class_name: str, level: int, expected: int) -> None:
        """Test native casters read their own table."""
        assert any_rules.max_cantrips_known(class_name, level) == expected

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(0, 0), (2, 0), (3, 2), (9, 2), (10, 3), (20, 3)],
    )
    def test_subclass_casters_share_a_curve(self, legacy_rules: Ruleset, level: int, expected: int) -> None:
        """Test legacy fighter and rogue read the same shared curve."""
        assert legacy_rules.max_cantrips_known(ClassName.FIGHTER, level) == expected
        assert legacy_rules.max_cantrips_known(ClassName.ROGUE, level) == expected

    @pytest.mark.parametrize("class_name", SUBCLASS_CASTERS)
    def test_current_fighter_and_rogue_know_none(self, current_rules: Ruleset, class_name: ClassName) -> None:
        """Test current fighters and rogues have no spellcasting subclass."""
        assert all(current_rules.max_cantrips_known(class_name, level) == 0 for level in range(21))
        assert all(current_rules.max_spells_prepared(class_name, level, 3) == 0 for level in range(21))

    @pytest.mark.parametrize("class_name", NON_CASTERS)
    def test_non_casters_know_none(self, any_rules: Ruleset, class_name: ClassName) -> None:
        """Test non-spellcasting classes know no cantrips at any level."""
        assert all(any_rules.max_cantrips_known(class_name, level) == 0 for level in range(21))

    def test_class_name_is_case_insensitive(self, current_rules: Ruleset) -> None:
        """Test class names may be given in any case."""
        assert current_rules.max_cantrips_known("Wizard", 1) == 3


class TestSpellsPrepared:
    """Tests for max_spells_prepared."""

    @pytest.mark.parametrize(
        ("class_name", "level", "modifier", "expected"),
        [
            ("cleric", 5, 3, 8),
            ("cleric", 5, 1, 6),
            ("druid", 1, 2, 3),
            ("wizard", 20, 5, 25),
            ("paladin", 5, 3, 5),
            ("ranger", 1, 2, 2),
        ],
    )
    def test_legacy_formula(
        self,
        legacy_rules: Ruleset,
        class_name: str,
        level: int,
        modifier: int,
        expected: int,
    ) -> None:
        """Test legacy prepared casters use modifier plus (half) level."""
        assert legacy_rules.max_spells_prepared(class_name, level, modifier) == expected

    @pytest.mark.parametrize(
        ("class_name", "level", "expected"),
        [
            ("bard", 1, 4),
            ("bard", 5, 9),
            ("bard", 12, 16),
            ("bard", 20, 22),
            ("sorcerer", 1, 4),
            ("sorcerer", 9, 14),
            ("sorcerer", 20, 22),
            ("warlock", 1, 2),
            ("warlock", 11, 11),
            ("warlock", 20, 15),
        ],
    )
    def test_legacy_known_casters(
        self, legacy_rules: Ruleset, class_name: str, level: int, expected: int
    ) -> None:
        """Test legacy known casters return their table count verbatim."""
        assert legacy_rules.max_spells_prepared(class_name, level, ability_modifier=99) == expected

    @pytest.mark.parametrize(
        ("class_name", "level", "expected"),
        [
            ("cleric", 5, 9),
            ("druid", 20, 22),
            ("bard", 1, 4),
            ("sorcerer", 1, 4),
            ("sorcerer", 2, 5),
            ("sorcerer", 20, 22),
            ("paladin", 6, 6),
            ("paladin", 9, 9),
            ("paladin", 1, 2),
            ("ranger", 20, 15),
            ("warlock", 1, 2),
        ],
    )
    def test_current_tables(self, current_rules: Ruleset, class_name: str, level: int, expected: int) -> None:
        """Test current rules read explicit counts for every native class but the wizard."""
        assert current_rules.max_spells_prepared(class_name, level, ability_modifier=4) == expected

    @pytest.mark.parametrize(("level", "modifier", "expected"), [(1, 3, 4), (5, 1, 6), (20, 4, 24)])
    def test_current_wizard_formula(self, current_rules: Ruleset, level: int, modifier: int, expected: int) -> None:
        """Test the current wizard prepares modifier plus level."""
        assert current_rules.spell_tables[ClassName.WIZARD][level].spells_prepared is None
        assert current_rules.max_spells_prepared("wizard", level, modifier) == expected

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(2, 0), (3, 3), (5, 4), (6, 5), (7, 6), (10, 8), (17, 12), (18, 13), (19, 13), (20, 13)],
    )
    def test_subclass_casters(self, legacy_rules: Ruleset, level: int, expected: int) -> None:
        """Test legacy fighter and rogue read the shared prepared curve."""
        for class_name in SUBCLASS_CASTERS:
            assert legacy_rules.max_spells_prepared(class_name, level, ability_modifier=5) == expected

    @pytest.mark.parametrize("class_name", NON_CASTERS)
    def test_non_casters_prepare_none(self, any_rules: Ruleset, class_name: ClassName) -> None:
        """Test non-spellcasting classes prepare nothing at any level."""
        assert all(any_rules.max_spells_prepared(class_name, level, 3) == 0 for level in range(21))

    def test_level_zero_prepares_nothing(self, legacy_rules: Ruleset) -> None:
        """Test the zero-row ignores the modifier."""
        assert legacy_rules.max_spells_prepared("cleric", 0, ability_modifier=4) == 0

    @pytest.mark.parametrize(
        ("class_name", "level", "modifier", "expected"),
        [("wizard", 1, -5, -4), ("cleric", 2, -3, -1), ("paladin", 1, -1, -1), ("ranger", 3, -1, 0)],
    )
    def test_formula_is_not_clamped(
        self, legacy_rules: Ruleset, class_name: str, level: int, modifier: int, expected: int
    ) -> None:
        """Test a low modifier passes straight through the formula."""
        assert legacy_rules.max_spells_prepared(class_name, level, ability_modifier=modifier) == expected

    def test_ruleset_divergence(self, legacy_rules: Ruleset, current_rules: Ruleset) -> None:
        """Test legacy counts follow the modifier while current counts do not."""
        assert legacy_rules.max_spells_prepared("cleric", 7, 1) != legacy_rules.max_spells_prepared("cleric", 7, 4)
        assert current_rules.max_spells_prepared("cleric", 7, 1) == current_rules.max_spells_prepared("cleric", 7, 4)


class TestSlots:
    """Tests for get_slots_for."""

    @pytest.mark.parametrize(
        ("kind", "level", "expected"),
        [
            ("full", 0, []),
            ("full", 1, [1, 1]),
            ("full", 3, [1, 1, 1, 1, 2, 2]),
            ("full", 9, [1, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 5]),
            ("full", 17, [1, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 5, 5, 6, 7, 8, 9]),
            ("half", 1, [1, 1]),
            ("half", 2, [1, 1]),
            ("half", 5, [1, 1, 1, 1, 2, 2]),
            ("half", 17, [1, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 5]),
            ("third", 2, []),
            ("third", 3, [1, 1]),
            ("third", 5, [1, 1, 1]),
            ("third", 6, [1, 1, 1, 2, 2]),
            ("third", 7, [1, 1, 1, 1, 2, 2]),
            ("third", 13, [1, 1, 1, 1, 2, 2, 2, 3, 3]),
            ("third", 19, [1, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4]),
            ("pact", 1, [1]),
            ("pact", 3, [2, 2]),
            ("pact", 11, [5, 5, 5]),
            ("pact", 17, [5, 5, 5, 5]),
        ],
    )
    def test_slots(self, any_rules: Ruleset, kind: str, level: int, expected: list[int]) -> None:
        """Test flattened slot lists."""
        assert any_rules.get_slots_for(kind, level) == expected

    def test_full_caster_capstone(self, any_rules: Ruleset) -> None:
        """Test the 20th-level full caster has 22 slots up to 9th level."""
        slots = any_rules.get_slots_for(CasterKind.FULL, 20)
        assert len(slots) == 22
        assert slots == sorted(slots)
        assert slots.count(9) == 1
        assert slots.count(6) == 2

    def test_half_casters_at_first_level(self, legacy_rules: Ruleset, current_rules: Ruleset) -> None:
        """Test half casters have two 1st-level slots at 1st level in both rulesets."""
        assert legacy_rules.get_slots_for("half", 1) == [1, 1]
        assert current_rules.get_slots_for("half", 1) == [1, 1]

    def test_slots_match_native_tables(self, any_rules: Ruleset) -> None:
        """Test each non-pact native class table agrees with its generic curve."""
        for class_name, rows in any_rules.spell_tables.items():
            kind = any_rules.caster_kind(class_name)
            if kind is CasterKind.PACT:
                continue
            for row in rows:
                assert slots_from_progression(row.slots) == any_rules.get_slots_for(kind, row.level)


class TestMysticArcanum:
    """Tests for get_mystic_arcanum."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, []), (10, []), (11, [6]), (12, [6]), (13, [6, 7]), (15, [6, 7, 8]), (17, [6, 7, 8, 9]), (20, [6, 7, 8, 9])],
    )
    def test_arcanum(self, any_rules: Ruleset, level: int, expected: list[int]) -> None:
        """Test arcanum spell levels unlock at 11, 13, 15 and 17."""
        assert any_rules.get_mystic_arcanum(level) == expected


class TestMonotonicity:
    """Tests that progression never goes backwards as level rises."""

    def test_cantrips_and_prepared(self, any_rules: Ruleset) -> None:
        """Test cantrips and explicit prepared counts are non-decreasing."""
        for class_name in _native_classes(any_rules):
            cantrips = [any_rules.max_cantrips_known(class_name, level) for level in range(21)]
            prepared = [any_rules.max_spells_prepared(class_name, level, 3) for level in range(21)]
            assert cantrips == sorted(cantrips), class_name
            assert prepared == sorted(prepared), class_name

    def test_slot_counts_per_spell_level(self, any_rules: Ruleset) -> None:
        """Test every slots-per-spell-level entry is non-decreasing."""
        for class_name, rows in any_rules.spell_tables.items():
            if any_rules.caster_kind(class_name) is CasterKind.PACT:
                continue
            for index in range(9):
                column = [row.slots[index] for row in rows]
                assert column == sorted(column), (class_name, index + 1)

    def test_pact_slots(self, any_rules: Ruleset) -> None:
        """Test pact slots grow in number and in level."""
        slots = [any_rules.get_slots_for("pact", level) for level in range(21)]
        counts = [len(row) for row in slots]
        highest = [max(row, default=0) for row in slots]
        assert counts == sorted(counts)
        assert highest == sorted(highest)

    def test_shared_curves(self, any_rules: Ruleset) -> None:
        """Test the subclass caster curves are non-decreasing."""
        assert list(any_rules.subclass_caster_cantrips) == sorted(any_rules.subclass_caster_cantrips)
        assert list(any_rules.subclass_caster_prepared) == sorted(any_rules.subclass_caster_prepared)


class TestListings:
    """Tests for lineage and subclass listings."""

    def test_lineages_for_species(self, legacy_rules: Ruleset) -> None:
        """Test lineages are listed in declaration order."""
        names = [lineage.name for lineage in legacy_rules.list_lineages("elf")]
        assert names == ["high elf", "wood elf", "drow"]

    def test_species_without_lineages(self, any_rules: Ruleset) -> None:
        """Test a species with no lineages lists none."""
        assert any_rules.list_lineages("human") == []

    def test_unknown_species(self, any_rules: Ruleset) -> None:
        """Test an unknown species lists none."""
        assert any_rules.list_lineages("warforged") == []

    def test_all_lineages(self, legacy_rules: Ruleset, current_rules: Ruleset) -> None:
        """Test flattened lineage listings."""
        assert len(legacy_rules.list_lineages()) == 10
        assert [lineage.name for lineage in current_rules.list_lineages()] == [
            "drow",
            "high elf",
            "wood elf",
            "forest gnome",
            "rock gnome",
        ]

    def test_subclasses_for_class(self, legacy_rules: Ruleset, current_rules: Ruleset) -> None:
        """Test subclass listings scoped to one class."""
        assert legacy_rules.list_subclasses("fighter") == ["champion", "battle master", "eldritch knight"]
        assert current_rules.list_subclasses(ClassName.FIGHTER) == ["champion"]
        assert current_rules.list_subclasses("rogue") == ["thief"]

    def test_all_subclasses(self, legacy_rules: Ruleset, current_rules: Ruleset) -> None:
        """Test flattened subclass listings."""
        assert len(legacy_rules.list_subclasses()) == 40
        current = current_rules.list_subclasses()
        assert len(current) == 12
        assert current[0] == "path of the berserker"

    def test_unknown_class(self, any_rules: Ruleset) -> None:
        """Test an unknown class lists no subclasses."""
        assert any_rules.list_subclasses("artificer") == []


class TestLookups:
    """Tests for record lookups and spellcasting membership."""

    def test_get_records(self, current_rules: Ruleset) -> None:
        """Test case-insensitive record lookups."""
        assert current_rules.get_class("WARLOCK").name is ClassName.WARLOCK
        assert current_rules.get_species("Goliath").speed == 35
        assert current_rules.get_background("Sage").feat == "Magic Initiate (Wizard)"
        assert current_rules.get_background("pirate") is None

    @pytest.mark.parametrize(
        ("class_name", "subclass", "expected"),
        [
            ("wizard", None, True),
            ("warlock", "the fiend", True),
            ("fighter", None, False),
            ("fighter", "champion", False),
            ("fighter", "Eldritch Knight", True),
            ("rogue", "thief", False),
            ("rogue", "arcane trickster", True),
            ("barbarian", "path of the berserker", False),
            ("artificer", None, False),
        ],
    )
    def test_grants_spellcasting(
        self, legacy_rules: Ruleset, class_name: str, subclass: str | None, expected: bool
    ) -> None:
        """Test class/subclass spellcasting membership."""
        assert legacy_rules.grants_spellcasting(class_name, subclass) is expected

    @pytest.mark.parametrize(("class_name", "subclass"), [("fighter", "eldritch knight"), ("rogue", "arcane trickster")])
    def test_current_subclasses_grant_nothing(self, current_rules: Ruleset, class_name: str, subclass: str) -> None:
        """Test the current rules have no fighter or rogue spellcasting."""
        assert current_rules.grants_spellcasting(class_name, subclass) is False
        assert current_rules.caster_kind(class_name) is None

    def test_caster_kind(self, any_rules: Ruleset) -> None:
        """Test caster kinds per class."""
        assert any_rules.caster_kind("warlock") is CasterKind.PACT
        assert any_rules.caster_kind("paladin") is CasterKind.HALF
        assert any_rules.caster_kind("monk") is None

    def test_legacy_third_casters(self, legacy_rules: Ruleset) -> None:
        """Test legacy fighters and rogues follow the third caster curve."""
        assert legacy_rules.caster_kind("rogue") is CasterKind.THIRD
        assert legacy_rules.caster_kind("fighter") is CasterKind.THIRD


class TestOutOfDomain:
    """Tests for the lenient and strict lookup policies."""

    def test_unknown_class_lenient(self, current_rules: Ruleset) -> None:
        """Test an unknown class returns zero and logs a warning."""
        with capture_logs() as logs:
            assert current_rules.max_cantrips_known("artificer", 3) == 0

        assert logs[0]["log_level"] == "warning"
        assert logs[0]["operation"] == "max_cantrips_known"
        assert logs[0]["ruleset"] == "srd52"

    @pytest.mark.parametrize("level", [-1, 21])
    def test_out_of_table_level_lenient(self, current_rules: Ruleset, level: int) -> None:
        """Test out-of-table levels give zero/empty values."""
        assert current_rules.max_cantrips_known("wizard", level) == 0
        assert current_rules.max_spells_prepared("wizard", level, 3) == 0
        assert current_rules.get_slots_for("full", level) == []
        assert current_rules.get_mystic_arcanum(level) == []

    def test_unknown_caster_kind_lenient(self, current_rules: Ruleset) -> None:
        """Test an unknown caster kind gives no slots."""
        assert current_rules.get_slots_for("psionic", 3) == []

    @pytest.mark.usefixtures("strict_lookups")
    def test_strict_unknown_class(self, current_rules: Ruleset) -> None:
        """Test strict mode raises for an unknown class."""
        with pytest.raises(RulesLookupError) as exc_info:
            current_rules.max_spells_prepared("artificer", 3, 2)

        assert exc_info.value.details["class_name"] == "artificer"
        assert exc_info.value.details["operation"] == "max_spells_prepared"

    @pytest.mark.usefixtures("strict_lookups")
    def test_strict_out_of_table_level(self, legacy_rules: Ruleset) -> None:
        """Test strict mode raises for a level outside 0-20."""
        with pytest.raises(RulesLookupError) as exc_info:
            legacy_rules.get_slots_for("full", 21)

        assert exc_info.value.details["level"] == 21

    @pytest.mark.usefixtures("strict_lookups")
    def test_strict_mode_keeps_valid_zero_results(self, legacy_rules: Ruleset) -> None:
        """Test strict mode still returns zero for legitimate zero values."""
        assert legacy_rules.max_cantrips_known("barbarian", 5) == 0
        assert legacy_rules.get_slots_for("third", 1) == []


class TestHelpers:
    """Tests for module-level helpers."""

    def test_slots_from_progression(self) -> None:
        """Test flattening slot counts."""
        assert slots_from_progression([2, 1]) == [1, 1, 2]
        assert slots_from_progression([0, 0, 2]) == [3, 3]
        assert slots_from_progression([]) == []

    def test_build_slot_curve_pads(self) -> None:
        """Test curves are padded to nine entries."""
        curve = build_slot_curve({1: [2]})
        assert curve[1] == (2, 0, 0, 0, 0, 0, 0, 0, 0)

    def test_build_slot_curve_rejects_long_rows(self) -> None:
        """Test rows over nine spell levels are rejected."""
        with pytest.raises(RulesError):
            build_slot_curve({1: [1] * 10})

    def test_ruleset_rejects_short_tables(self, current_rules: Ruleset) -> None:
        """Test a ruleset with a truncated table fails at construction."""
        with pytest.raises(RulesError):
            Ruleset(
                id=RulesetId.SRD52,
                description="broken",
                species=current_rules.species,
                classes=current_rules.classes,
                backgrounds=current_rules.backgrounds,
                spell_tables={ClassName.WIZARD: current_rules.spell_tables[ClassName.WIZARD][:5]},
                slot_curves=current_rules.slot_curves,
                subclass_caster_cantrips=current_rules.subclass_caster_cantrips,
                subclass_caster_prepared=current_rules.subclass_caster_prepared,
            )

    def test_ruleset_is_immutable(self, current_rules: Ruleset) -> None:
        """Test ruleset attributes cannot be reassigned or mutated."""
        with pytest.raises(AttributeError):
            current_rules.description = "changed"  # type: ignore[misc]
        with pytest.raises(TypeError):
            current_rules.classes[ClassName.WIZARD] = None  # type: ignore[index]

    def test_arcanum_rows_are_immutable(self, any_rules: Ruleset) -> None:
        """Test a shared pact row cannot be changed through its arcanum."""
        row = any_rules.spell_tables[ClassName.WARLOCK][11]
        assert row.arcanum == ((6, 1),)

        with pytest.raises(TypeError):
            row.arcanum[0] = (6, 5)  # type: ignore[index]
        with pytest.raises(AttributeError):
            row.arcanum.append((7, 1))  # type: ignore[attr-defined]

        assert any_rules.get_mystic_arcanum(11) == [6]

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1, -5), (8, -1), (9, -1), (10, 0), (11, 0), (15, 2), (20, 5), (30, 10)],
    )
    def test_ability_modifier(self, score: int, expected: int) -> None:
        """Test ability modifiers round down."""
        assert ability_modifier(score) == expected

    @pytest.mark.parametrize("score", [0, 31])
    def test_ability_modifier_range(self, score: int) -> None:
        """Test out-of-range scores are rejected."""
        with pytest.raises(ValidationError):
            ability_modifier(score)
