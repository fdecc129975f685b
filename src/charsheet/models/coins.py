"""Coin purse model.

A purse holds five signed coin counts. Counts are non-negative in steady
state, but the change-making arithmetic is allowed to leave a deficit in a
denomination when the purse cannot cover a spend, so negative values are
representable rather than rejected here.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from charsheet.models.enums import Denomination


class CoinPurse(BaseModel):
    """Platinum, gold, electrum, silver and copper piece counts.

    Also used for deltas, where positive counts are gains and negative
    counts are spends.

    Example:
        >>> purse = CoinPurse(gp=10, sp=5)
        >>> purse.gp
        10
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pp: int = Field(default=0, description="Platinum pieces")
    gp: int = Field(default=0, description="Gold pieces")
    ep: int = Field(default=0, description="Electrum pieces")
    sp: int = Field(default=0, description="Silver pieces")
    cp: int = Field(default=0, description="Copper pieces")

    @classmethod
    def zero(cls) -> CoinPurse:
        """Create an empty purse."""
        return cls()

    @classmethod
    def from_mapping(cls, counts: Mapping[Denomination | str, int]) -> CoinPurse:
        """Build a purse from a denomination -> count mapping.

        Missing denominations default to zero.

        Args:
            counts: Coin counts keyed by Denomination or its string value.

        Returns:
            The corresponding CoinPurse.
        """
        return cls(**{Denomination(key).value: value for key, value in counts.items()})

    def count(self, denomination: Denomination) -> int:
        """Get the coin count for one denomination."""
        return getattr(self, denomination.value)

    def as_dict(self) -> dict[Denomination, int]:
        """Return counts keyed by Denomination, lowest value first."""
        return {denom: self.count(denom) for denom in Denomination}

    @property
    def is_zero(self) -> bool:
        """Whether every count is zero."""
        return all(count == 0 for count in self.as_dict().values())

    @property
    def has_negative(self) -> bool:
        """Whether any denomination is in deficit."""
        return any(count < 0 for count in self.as_dict().values())

    def __add__(self, other: CoinPurse) -> CoinPurse:
        """Add two purses column by column, without making change."""
        if not isinstance(other, CoinPurse):
            return NotImplemented
        return CoinPurse(
            pp=self.pp + other.pp,
            gp=self.gp + other.gp,
            ep=self.ep + other.ep,
            sp=self.sp + other.sp,
            cp=self.cp + other.cp,
        )


__all__ = ["CoinPurse"]
