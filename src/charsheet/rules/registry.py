"""Ruleset registry.

Both bundles are built once at import time and shared process-wide; they
are immutable, so callers may hold on to them freely.

Example:
    >>> from charsheet.rules.registry import get_ruleset
    >>> get_ruleset("srd51").id
    <RulesetId.SRD51: 'srd51'>
"""

from __future__ import annotations

from charsheet.core.config import get_settings
from charsheet.core.exceptions import UnknownRulesetError
from charsheet.models.enums import RulesetId
from charsheet.rules.progression import Ruleset
from charsheet.rules.srd51 import SRD51
from charsheet.rules.srd52 import SRD52


_RULESETS: dict[RulesetId, Ruleset] = {
    RulesetId.SRD51: SRD51,
    RulesetId.SRD52: SRD52,
}


def get_ruleset(ruleset_id: RulesetId | str | None = None) -> Ruleset:
    """Get a ruleset bundle by identifier.

    Args:
        ruleset_id: ``RulesetId`` or its string value. None selects the
            configured default (``rules.default_ruleset``).

    Returns:
        The shared Ruleset instance.

    Raises:
        UnknownRulesetError: If no bundle has that identifier.
    """
    if ruleset_id is None:
        return _RULESETS[get_settings().rules.default_ruleset]

    try:
        key = RulesetId(str(ruleset_id).lower())
    except ValueError as e:
        raise UnknownRulesetError(
            f"Unknown ruleset: {ruleset_id}",
            ruleset_id=str(ruleset_id),
            details={"available": [rid.value for rid in _RULESETS]},
        ) from e
    return _RULESETS[key]


def available_rulesets() -> list[RulesetId]:
    """List registered ruleset identifiers, legacy first."""
    return list(_RULESETS)


__all__ = ["get_ruleset", "available_rulesets"]
