"""Coin valuation and change-making.

Deltas are applied column by column first. Any denomination left negative is
then covered, lowest denomination first, by breaking coins of the smallest
higher denomination that holds a positive balance. Coins are only ever
broken downward along these conversions:

    pp -> 10 gp
    gp -> 10 sp
    gp -> 2 ep
    ep -> 5 sp
    sp -> 10 cp

The gp -> 2 ep edge is the only way electrum is received as change: an
electrum shortfall is paid by breaking gold.

A multi-step break (e.g. pp -> gp -> sp -> cp) breaks one unit at each step,
leaving the remainder in the intermediate denominations. Lower denominations
are never consolidated upward. A deficit nothing can cover stays negative;
rejecting unaffordable spends is left to ``charsheet.ledger.service``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from charsheet.core.logging import get_logger
from charsheet.models.coins import CoinPurse
from charsheet.models.enums import Denomination


logger = get_logger(__name__)


@dataclass(frozen=True)
class Conversion:
    """Breaking one ``source`` coin yields ``rate`` ``target`` coins."""

    source: Denomination
    target: Denomination
    rate: int


CONVERSIONS: tuple[Conversion, ...] = (
    Conversion(Denomination.PP, Denomination.GP, 10),
    Conversion(Denomination.GP, Denomination.SP, 10),
    Conversion(Denomination.GP, Denomination.EP, 2),
    Conversion(Denomination.EP, Denomination.SP, 5),
    Conversion(Denomination.SP, Denomination.CP, 10),
)


def _shortest_path(source: Denomination, target: Denomination) -> tuple[Conversion, ...] | None:
    """Find the fewest conversions that turn ``source`` coins into ``target``."""
    queue: deque[tuple[Denomination, tuple[Conversion, ...]]] = deque([(source, ())])
    seen = {source}
    while queue:
        denom, path = queue.popleft()
        if denom is target:
            return path
        for conversion in CONVERSIONS:
            if conversion.source is denom and conversion.target not in seen:
                seen.add(conversion.target)
                queue.append((conversion.target, path + (conversion,)))
    return None


def _build_break_paths() -> dict[tuple[Denomination, Denomination], tuple[Conversion, ...]]:
    paths: dict[tuple[Denomination, Denomination], tuple[Conversion, ...]] = {}
    for source in Denomination:
        for target in Denomination:
            if source.copper_value <= target.copper_value:
                continue
            path = _shortest_path(source, target)
            if path is not None:
                paths[(source, target)] = path
    return paths


_BREAK_PATHS = _build_break_paths()


def to_copper(purse: CoinPurse) -> int:
    """Value a purse in copper pieces.

    Args:
        purse: Coin counts (negative counts subtract).

    Returns:
        ``1000*pp + 100*gp + 50*ep + 10*sp + cp``.

    Example:
        >>> to_copper(CoinPurse(pp=1, gp=1, ep=1, sp=1, cp=1))
        1161
    """
    return sum(denom.copper_value * count for denom, count in purse.as_dict().items())


def _find_source(counts: dict[Denomination, int], target: Denomination) -> Denomination | None:
    for denom in Denomination:
        if denom.copper_value <= target.copper_value:
            continue
        if counts[denom] > 0 and (denom, target) in _BREAK_PATHS:
            return denom
    return None


def apply_deltas_with_change(current: CoinPurse, deltas: CoinPurse) -> CoinPurse:
    """Add signed deltas to a purse, breaking coins to cover shortfalls.

    Never raises. When total funds are insufficient the uncovered
    denomination stays negative, so callers must check affordability (see
    ``update_coins``) or treat a negative result as an error.

    Args:
        current: Coins on hand.
        deltas: Signed changes per denomination.

    Returns:
        The updated purse. Whenever the spend was affordable,
        ``to_copper(result) == to_copper(current) + to_copper(deltas)``.

    Example:
        >>> apply_deltas_with_change(CoinPurse(gp=1), CoinPurse(cp=-1))
        CoinPurse(pp=0, gp=0, ep=0, sp=9, cp=9)
    """
    counts = {denom: current.count(denom) + deltas.count(denom) for denom in Denomination}

    for target in Denomination:
        while counts[target] < 0:
            source = _find_source(counts, target)
            if source is None:
                logger.debug(
                    "Deficit left uncovered",
                    denomination=target.value,
                    deficit=-counts[target],
                )
                break

            path = _BREAK_PATHS[(source, target)]
            if len(path) == 1:
                rate = path[0].rate
                needed = -(counts[target] // rate)  # ceil(deficit / rate)
                units = min(counts[source], needed)
                counts[source] -= units
                counts[target] += units * rate
            else:
                units = 1
                for conversion in path:
                    counts[conversion.source] -= 1
                    counts[conversion.target] += conversion.rate

            logger.debug(
                "Broke coins",
                source=source.value,
                target=target.value,
                units=units,
                steps=len(path),
            )

    return CoinPurse.from_mapping(counts)


__all__ = [
    "Conversion",
    "CONVERSIONS",
    "to_copper",
    "apply_deltas_with_change",
]
