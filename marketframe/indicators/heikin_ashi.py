"""
Heikin Ashi smoothing.

HA_Close = (O + H + L + C) / 4
HA_Open  = (prev_HA_Open + prev_HA_Close) / 2   [first: (O + C) / 2]
HA_High  = max(H, HA_Open, HA_Close)
HA_Low   = min(L, HA_Open, HA_Close)

The recurrence is order dependent: candles must be fed oldest-first.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable

from marketframe.models.candle import Candle

logger = logging.getLogger(__name__)


def calculate_heikin_ashi(candle: Candle, previous: Candle | None) -> Candle:
    """
    Calculate a single Heikin Ashi step.

    Args:
        candle: Raw candle.
        previous: Previous smoothed step, or None for the first candle.

    Returns:
        Candle holding only the smoothed open/high/low/close.
    """
    if previous is None or previous.empty():
        # First HA candle is seeded from the current candle
        open_value, close_value = candle.open, candle.close
    else:
        open_value, close_value = previous.open, previous.close

    ha_open = (open_value + close_value) / 2
    ha_close = (candle.open + candle.high + candle.low + candle.close) / 4

    return Candle(
        open=ha_open,
        close=ha_close,
        high=max(candle.high, ha_open, ha_close),
        low=min(candle.low, ha_open, ha_close),
    )


def calculate_heikin_ashi_series(candles: Iterable[Candle]) -> list[Candle]:
    """
    Smooth a whole candle sequence.

    Folds ``calculate_heikin_ashi`` over ``candles`` (oldest first) and
    returns new candles that keep each input's pair, time, volume and
    metadata.
    """
    smoothed: list[Candle] = []
    previous: Candle | None = None

    for candle in candles:
        previous = calculate_heikin_ashi(candle, previous)
        smoothed.append(_merge(candle, previous))

    return smoothed


def _merge(candle: Candle, step: Candle) -> Candle:
    return replace(
        candle,
        open=step.open,
        high=step.high,
        low=step.low,
        close=step.close,
        metadata=dict(candle.metadata),
    )


class HeikinAshi:
    """
    Incremental Heikin Ashi recurrence for one candle stream.

    Keeps the previous smoothed step. Use one instance per pair and call
    ``reset`` before reusing it on an unrelated series.
    """

    def __init__(self) -> None:
        self.previous: Candle | None = None
        self._last_time: datetime | None = None

    def calculate(self, candle: Candle) -> Candle:
        """Return the smoothed step for ``candle`` and remember it."""
        if self._last_time is not None and candle.time < self._last_time:
            logger.warning(
                "Heikin Ashi input out of order for %s: %s after %s",
                candle.pair or "<no pair>",
                candle.time.isoformat(),
                self._last_time.isoformat(),
            )

        step = calculate_heikin_ashi(candle, self.previous)
        self.previous = step
        self._last_time = candle.time
        return step

    def reset(self) -> None:
        self.previous = None
        self._last_time = None
