"""Trait resolution for a single owner (species, background or class).

Traits are listed in declaration order: a species' own traits come before
its lineage's, a class's before its subclass's. With ``level`` given, traits
gated above that level are left out.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from charsheet.core.exceptions import TraitQueryError
from charsheet.models.enums import ClassName, TraitSource
from charsheet.models.ruleset import Trait
from charsheet.rules.progression import Ruleset


class SourcedTrait(BaseModel):
    """A trait tagged with where it came from.

    Attributes:
        source: Kind of owner that grants the trait.
        owner: Name of the species, lineage, background, class or subclass.
        name: Trait name.
        description: Rules text summary.
        level: Level at which the trait is gained, if gated.
    """

    model_config = ConfigDict(frozen=True)

    source: TraitSource
    owner: str
    name: str
    description: str = ""
    level: int | None = None

    @classmethod
    def from_trait(cls, trait: Trait, source: TraitSource, owner: str) -> SourcedTrait:
        return cls(
            source=source,
            owner=owner,
            name=trait.name,
            description=trait.description,
            level=trait.level,
        )


def _collect(
    found: list[SourcedTrait],
    traits: tuple[Trait, ...],
    source: TraitSource,
    owner: str,
    level: int | None,
) -> None:
    found.extend(
        SourcedTrait.from_trait(trait, source, owner) for trait in traits if trait.applies_at(level)
    )


def get_traits(
    ruleset: Ruleset,
    *,
    species: str | None = None,
    lineage: str | None = None,
    background: str | None = None,
    class_name: ClassName | str | None = None,
    subclass: str | None = None,
    level: int | None = None,
) -> list[SourcedTrait]:
    """List the traits one owner grants.

    Args:
        ruleset: Ruleset to read.
        species: Species name; may be combined with ``lineage``.
        lineage: Lineage of ``species``.
        background: Background name.
        class_name: Class name; may be combined with ``subclass``.
        subclass: Subclass of ``class_name``.
        level: Character level for gating; None lists every trait.

    Returns:
        Traits in declaration order, tagged with their source.

    Raises:
        TraitQueryError: If not exactly one of species, background or
            class_name is given, a lineage/subclass is given without its
            owner, or any name is unknown to the ruleset.

    Example:
        >>> from charsheet.rules import get_ruleset
        >>> [t.name for t in get_traits(get_ruleset("srd52"), species="goliath", level=1)]
        ['Giant Ancestry', 'Powerful Build']
    """
    owners = [name for name in (species, background, class_name) if name is not None]
    if len(owners) != 1:
        raise TraitQueryError(
            "Exactly one of species, background or class_name is required",
            details={"given": owners},
        )
    if lineage is not None and species is None:
        raise TraitQueryError("A lineage can only be queried together with its species")
    if subclass is not None and class_name is None:
        raise TraitQueryError("A subclass can only be queried together with its class")

    found: list[SourcedTrait] = []
    ruleset_name = ruleset.id.value

    if species is not None:
        species_def = ruleset.get_species(species)
        if species_def is None:
            raise TraitQueryError(f"Unknown species: {species}", details={"ruleset": ruleset_name})
        _collect(found, species_def.traits, TraitSource.SPECIES, species_def.name, level)
        if lineage is not None:
            lineage_def = species_def.get_lineage(lineage)
            if lineage_def is None:
                raise TraitQueryError(
                    f"Unknown lineage for {species_def.name}: {lineage}",
                    details={"ruleset": ruleset_name},
                )
            _collect(found, lineage_def.traits, TraitSource.LINEAGE, lineage_def.name, level)

    elif background is not None:
        background_def = ruleset.get_background(background)
        if background_def is None:
            raise TraitQueryError(f"Unknown background: {background}", details={"ruleset": ruleset_name})
        _collect(found, background_def.traits, TraitSource.BACKGROUND, background_def.name, level)

    else:
        class_def = ruleset.get_class(class_name)
        if class_def is None:
            raise TraitQueryError(f"Unknown class: {class_name}", details={"ruleset": ruleset_name})
        _collect(found, class_def.traits, TraitSource.CLASS, class_def.name.value, level)
        if subclass is not None:
            subclass_def = class_def.get_subclass(subclass)
            if subclass_def is None:
                raise TraitQueryError(
                    f"Unknown subclass for {class_def.name}: {subclass}",
                    details={"ruleset": ruleset_name},
                )
            _collect(found, subclass_def.traits, TraitSource.SUBCLASS, subclass_def.name, level)

    return found


__all__ = ["SourcedTrait", "get_traits"]
