"""Market data model for a single OHLCV candle."""

import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marketframe.indicators.heikin_ashi import HeikinAshi

# Zero value for candle timestamps.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Candle:
    """OHLCV candle for one pair and interval.

    All fields default to zero values, so ``Candle()`` is the empty candle
    used as a sentinel by the Heikin Ashi recurrence and ``OHLC.last``.
    Naive ``time``/``updated_at`` values are taken as UTC.
    """

    pair: str = ""
    time: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    open: float = 0.0
    close: float = 0.0
    low: float = 0.0
    high: float = 0.0
    volume: float = 0.0
    complete: bool = False

    # Additional columns from CSV inputs
    metadata: dict[str, float] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        """Read naive timestamps as UTC so every candle compares with every other."""
        for name in ("time", "updated_at"):
            value = getattr(self, name)
            if value.tzinfo is None:
                object.__setattr__(self, name, value.replace(tzinfo=timezone.utc))

    def empty(self) -> bool:
        """True for the zero candle (no pair, no prices, no volume)."""
        return self.pair == "" and self.close == 0 and self.open == 0 and self.volume == 0

    def less(self, other: "Candle") -> bool:
        """Order by time, then update time, then pair."""
        if self.time != other.time:
            return self.time < other.time
        if self.updated_at != other.updated_at:
            return self.updated_at < other.updated_at
        return self.pair < other.pair

    def __lt__(self, other: "Candle") -> bool:
        if not isinstance(other, Candle):
            return NotImplemented
        return self.less(other)

    def to_slice(self, precision: int) -> list[str]:
        """
        Render the candle as a text row.

        Args:
            precision: Number of decimals for every float column.

        Returns:
            ``[unix_seconds, open, close, low, high, volume]``
        """
        return [
            str(math.floor(self.time.timestamp())),
            f"{self.open:.{precision}f}",
            f"{self.close:.{precision}f}",
            f"{self.low:.{precision}f}",
            f"{self.high:.{precision}f}",
            f"{self.volume:.{precision}f}",
        ]

    def to_heikin_ashi(self, ha: "HeikinAshi") -> "Candle":
        """Smooth this candle through ``ha``, keeping its identity fields."""
        smoothed = ha.calculate(self)
        return replace(
            self,
            open=smoothed.open,
            high=smoothed.high,
            low=smoothed.low,
            close=smoothed.close,
            metadata=dict(self.metadata),
        )
