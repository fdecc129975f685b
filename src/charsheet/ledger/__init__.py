"""Currency ledger: coin valuation, change-making and checked updates.

Example:
    >>> from charsheet.ledger import apply_deltas_with_change
    >>> from charsheet.models import CoinPurse
    >>> apply_deltas_with_change(CoinPurse(pp=1), CoinPurse(cp=-1))
    CoinPurse(pp=0, gp=9, ep=0, sp=9, cp=9)
"""

from __future__ import annotations

from charsheet.ledger.arithmetic import CONVERSIONS, Conversion, apply_deltas_with_change, to_copper
from charsheet.ledger.service import describe_coin_change, update_coins


__all__ = [
    # === Arithmetic ===
    "Conversion",
    "CONVERSIONS",
    "to_copper",
    "apply_deltas_with_change",
    # === Service ===
    "update_coins",
    "describe_coin_change",
]
