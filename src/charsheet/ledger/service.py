"""Affordability-checked coin updates.

The arithmetic in ``charsheet.ledger.arithmetic`` never raises; this module
is the layer callers go through when a transaction must be rejected rather
than leave a purse in deficit.

Example:
    >>> from charsheet.models import CoinPurse
    >>> update_coins(CoinPurse(gp=10), CoinPurse(sp=-5))
    CoinPurse(pp=0, gp=9, ep=0, sp=5, cp=0)
"""

from __future__ import annotations

from charsheet.core.config import get_settings
from charsheet.core.exceptions import InsufficientFundsError, NoCoinChangeError
from charsheet.core.logging import get_logger
from charsheet.ledger.arithmetic import apply_deltas_with_change, to_copper
from charsheet.models.coins import CoinPurse
from charsheet.models.enums import Denomination


logger = get_logger(__name__)


def _negative_denominations(purse: CoinPurse) -> dict[str, int]:
    return {denom.value: count for denom, count in purse.as_dict().items() if count < 0}


def update_coins(
    current: CoinPurse,
    deltas: CoinPurse,
    *,
    make_change: bool | None = None,
) -> CoinPurse:
    """Apply a coin transaction, rejecting it if it cannot be paid.

    Args:
        current: Coins on hand.
        deltas: Signed changes; positive gains, negative spends.
        make_change: Break larger coins to cover a shortfall. None uses
            ``ledger.make_change_by_default``.

    Returns:
        The new purse, with no negative denomination.

    Raises:
        NoCoinChangeError: If every delta is zero.
        InsufficientFundsError: If the purse cannot pay. With change-making
            this means the total value would go negative (or no coin could
            be broken into the missing denomination); without it, any
            denomination going negative.
    """
    if deltas.is_zero:
        raise NoCoinChangeError("Must change at least one coin value")

    if make_change is None:
        make_change = get_settings().ledger.make_change_by_default

    available = to_copper(current)
    delta_copper = to_copper(deltas)

    if make_change:
        if available + delta_copper < 0:
            logger.info(
                "Coin update rejected",
                reason="insufficient_total",
                available_cp=available,
                delta_cp=delta_copper,
            )
            raise InsufficientFundsError(
                f"Insufficient funds: need {abs(delta_copper)}cp but only have {available}cp total",
                needed_copper=abs(delta_copper),
                available_copper=available,
            )
        result = apply_deltas_with_change(current, deltas)
    else:
        result = current + deltas

    shortfalls = _negative_denominations(result)
    if shortfalls:
        logger.info(
            "Coin update rejected",
            reason="negative_denomination",
            make_change=make_change,
            shortfalls=shortfalls,
        )
        listed = ", ".join(f"{denom} would be {count}" for denom, count in shortfalls.items())
        raise InsufficientFundsError(
            f"Insufficient coins: {listed}",
            available_copper=available,
            denominations=shortfalls,
        )

    logger.debug("Coins updated", delta_cp=delta_copper, total_cp=to_copper(result))
    return result


def describe_coin_change(deltas: CoinPurse, note: str | None = None) -> str:
    """Summarize a coin transaction for display or approval prompts.

    Args:
        deltas: Signed changes per denomination.
        note: Optional free-text note, placed on its own line.

    Returns:
        e.g. ``"Spend 5 gold, 3 copper"``. The verb is "Gain" only when the
        net copper value is positive. An all-zero delta gives
        ``"No coin changes"``.
    """
    changes = [
        f"{abs(deltas.count(denom))} {denom.full_name}"
        for denom in reversed(Denomination)
        if deltas.count(denom) != 0
    ]
    if not changes:
        return "No coin changes"

    action = "Gain" if to_copper(deltas) > 0 else "Spend"
    message = f"{action} {', '.join(changes)}"
    if note:
        message += f"\n{note}"
    return message


__all__ = ["update_coins", "describe_coin_change"]
