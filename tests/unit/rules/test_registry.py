"""Tests for ruleset selection."""

from __future__ import annotations

import pytest

from charsheet.core.exceptions import UnknownRulesetError
from charsheet.models import RulesetId
from charsheet.rules import SRD51, SRD52, available_rulesets, get_ruleset


class TestGetRuleset:
    """Tests for get_ruleset."""

    @pytest.mark.parametrize(
        ("ruleset_id", "expected"),
        [
            ("srd51", SRD51),
            ("SRD52", SRD52),
            (RulesetId.SRD52, SRD52),
        ],
    )
    def test_lookup(self, ruleset_id: str, expected: object) -> None:
        """Test identifiers resolve regardless of case or type."""
        assert get_ruleset(ruleset_id) is expected

    def test_default_is_current(self) -> None:
        """Test no identifier selects the current rules by default."""
        assert get_ruleset() is SRD52

    def test_default_from_environment(self, mock_env_vars: dict[str, str]) -> None:
        """Test the default ruleset follows configuration."""
        assert get_ruleset() is SRD51

    def test_unknown(self) -> None:
        """Test unknown identifiers are rejected with the available list."""
        with pytest.raises(UnknownRulesetError) as exc_info:
            get_ruleset("3.5e")

        assert exc_info.value.details["ruleset_id"] == "3.5e"
        assert exc_info.value.details["available"] == ["srd51", "srd52"]

    def test_available(self) -> None:
        """Test both rulesets are registered, legacy first."""
        assert available_rulesets() == [RulesetId.SRD51, RulesetId.SRD52]


class TestBundleContents:
    """Tests for the shape of each bundle."""

    def test_every_class_present(self) -> None:
        """Test both bundles define all twelve classes."""
        assert len(SRD51.classes) == 12
        assert len(SRD52.classes) == 12

    def test_backgrounds(self) -> None:
        """Test legacy and current background catalogs."""
        assert SRD51.get_background("folk hero") is not None
        assert SRD51.get_background("folk hero").feat is None
        assert sorted(SRD52.backgrounds) == ["acolyte", "criminal", "sage", "soldier"]

    def test_speeds(self) -> None:
        """Test species speeds that differ between versions."""
        assert SRD51.get_species("dwarf").speed == 25
        assert SRD52.get_species("dwarf").speed == 30

    def test_legacy_ability_bonuses(self) -> None:
        """Test legacy species carry fixed ability score increases."""
        mountain = SRD51.get_species("dwarf").get_lineage("mountain dwarf")
        assert mountain is not None
        assert mountain.ability_score_modifiers
        assert not SRD52.get_species("dwarf").ability_score_modifiers

    def test_spell_tables_cover_native_casters(self) -> None:
        """Test native casters have tables and subclass casters do not."""
        for rules in (SRD51, SRD52):
            for name in rules.classes:
                has_table = name in rules.spell_tables
                assert has_table is rules.grants_spellcasting(name), (rules.id, name)
