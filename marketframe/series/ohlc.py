"""OHLC series container for technical analysis."""

import logging
import math
from enum import Enum
from typing import Any, Iterable, Iterator, Sequence, overload

import pandas as pd

from marketframe.indicators.heikin_ashi import calculate_heikin_ashi_series
from marketframe.indicators.price_average import (
    calculate_hl2,
    calculate_hlc3,
    calculate_ohlc4,
)
from marketframe.models.candle import Candle
from marketframe.series.series import Series

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["open", "high", "low", "close", "volume", "change_percent", "is_bull_market"]


class SeriesKind(str, Enum):
    """How the prices of a series were produced."""

    RAW = "RAW"  # As received from the feed
    HEIKIN_ASHI = "HEIKIN_ASHI"  # Smoothed, must not be smoothed again


class OHLC:
    """
    Ordered candle series with columnar views.

    Candles are stored as one list of records, so every column is aligned
    by construction. Column properties (``close``, ``open``, ...) return
    fresh ``Series`` copies; mutate the series through ``append``,
    ``extend`` or item assignment.

    Not safe for concurrent mutation: a single writer owns an instance.
    """

    def __init__(
        self,
        candles: Iterable[Candle] | None = None,
        kind: SeriesKind = SeriesKind.RAW,
    ) -> None:
        self._candles: list[Candle] = list(candles) if candles is not None else []
        self.kind = kind

    @classmethod
    def from_columns(
        cls,
        *,
        open: Sequence[float],
        high: Sequence[float],
        low: Sequence[float],
        close: Sequence[float],
        volume: Sequence[float],
        time: Sequence[Any],
        pair: str = "",
        **kwargs: Any,
    ) -> "OHLC":
        """
        Build a series from parallel columns.

        ``pair`` is stamped on every candle; remaining keywords go to the
        constructor.

        Raises:
            IndexError: If the columns have different lengths.
        """
        lengths = {
            "open": len(open),
            "high": len(high),
            "low": len(low),
            "close": len(close),
            "volume": len(volume),
            "time": len(time),
        }
        if len(set(lengths.values())) > 1:
            raise IndexError(f"OHLC columns are not aligned: {lengths}")

        candles = [
            Candle(pair=pair, time=t, open=o, high=h, low=l, close=c, volume=v)
            for o, h, l, c, v, t in zip(open, high, low, close, volume, time)
        ]
        return cls._from_candles(candles, pair, **kwargs)

    @classmethod
    def _from_candles(cls, candles: list[Candle], pair: str, **kwargs: Any) -> "OHLC":
        return cls(candles, **kwargs)

    # -- Container protocol ----------------------------------------------------

    def __len__(self) -> int:
        return len(self._candles)

    def __iter__(self) -> Iterator[Candle]:
        return iter(self._candles)

    @overload
    def __getitem__(self, index: int) -> Candle: ...

    @overload
    def __getitem__(self, index: slice) -> "OHLC": ...

    def __getitem__(self, index: int | slice) -> "Candle | OHLC":
        if isinstance(index, slice):
            return self._derive(self._candles[index], self.kind)
        return self._candles[index]

    def __setitem__(self, index: int, candle: Candle) -> None:
        self._candles[index] = candle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OHLC):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.kind == other.kind
            and self._candles == other._candles
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self)}, kind={self.kind.value})"

    def append(self, candle: Candle) -> None:
        self._candles.append(candle)

    def extend(self, candles: Iterable[Candle]) -> None:
        self._candles.extend(candles)

    def copy(self) -> "OHLC":
        return self._derive(list(self._candles), self.kind)

    def _derive(self, candles: list[Candle], kind: SeriesKind) -> "OHLC":
        """New series of the same type over ``candles``."""
        return type(self)(candles, kind=kind)

    # -- Columns -----------------------------------------------------------------

    @property
    def is_heikin_ashi(self) -> bool:
        return self.kind is SeriesKind.HEIKIN_ASHI

    @property
    def close(self) -> Series:
        return Series(c.close for c in self._candles)

    @property
    def open(self) -> Series:
        return Series(c.open for c in self._candles)

    @property
    def high(self) -> Series:
        return Series(c.high for c in self._candles)

    @property
    def low(self) -> Series:
        return Series(c.low for c in self._candles)

    @property
    def volume(self) -> Series:
        return Series(c.volume for c in self._candles)

    @property
    def time(self) -> Series:
        return Series(c.time for c in self._candles)

    @property
    def change_percent(self) -> Series:
        """(Close - Open) / Open per bar, NaN where open is zero."""
        return Series(
            (c.close - c.open) / c.open if c.open != 0 else math.nan
            for c in self._candles
        )

    @property
    def is_bull_market(self) -> Series:
        return Series(c.close > c.open for c in self._candles)

    # -- Derivations ---------------------------------------------------------------

    def hl2(self) -> list[float]:
        """(High + Low) / 2"""
        return calculate_hl2(self.high, self.low)

    def hlc3(self) -> list[float]:
        """(High + Low + Close) / 3"""
        return calculate_hlc3(self.high, self.low, self.close)

    def ohlc4(self) -> list[float]:
        """(Open + High + Low + Close) / 4"""
        return calculate_ohlc4(self.open, self.high, self.low, self.close)

    def candle(self, i: int) -> Candle:
        """Independent copy of the candle at index ``i``."""
        candle = self._candles[i]
        return Candle(
            pair=candle.pair,
            time=candle.time,
            updated_at=candle.updated_at,
            open=candle.open,
            close=candle.close,
            low=candle.low,
            high=candle.high,
            volume=candle.volume,
            complete=candle.complete,
            metadata=dict(candle.metadata),
        )

    def last(self, offset: int = 0) -> Candle:
        """
        Candle ``offset`` bars back from the most recent one.

        Returns the empty ``Candle()`` when the series has no candles.
        """
        if not self._candles:
            return Candle()
        index = len(self._candles) - 1 - offset
        if index < 0:
            raise IndexError(f"offset {offset} out of range for series of length {len(self)}")
        return self.candle(index)

    def to_heikin_ashi(self) -> "OHLC":
        """
        Return a Heikin Ashi smoothed copy of this series.

        The receiver is left untouched.

        Raises:
            ValueError: If the series is already Heikin Ashi.
        """
        if self.is_heikin_ashi:
            raise ValueError("series is already Heikin Ashi; smoothing twice is not supported")

        smoothed = calculate_heikin_ashi_series(self._candles)
        logger.debug("Converted %d candles to Heikin Ashi", len(smoothed))
        return self._derive(smoothed, SeriesKind.HEIKIN_ASHI)

    def to_frame(self) -> pd.DataFrame:
        """Export as a pandas DataFrame indexed by candle time."""
        data = {
            "open": self.open.values(),
            "high": self.high.values(),
            "low": self.low.values(),
            "close": self.close.values(),
            "volume": self.volume.values(),
            "change_percent": self.change_percent.values(),
            "is_bull_market": self.is_bull_market.values(),
        }
        index = pd.DatetimeIndex(self.time.values(), name="time")
        return pd.DataFrame(data, index=index, columns=FRAME_COLUMNS)
