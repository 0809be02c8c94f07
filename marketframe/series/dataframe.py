"""Per-pair OHLC dataframe with custom indicator columns."""

import logging
from datetime import datetime
from typing import Any, Iterable

import pandas as pd

from marketframe.models.candle import ZERO_TIME, Candle
from marketframe.series.ohlc import OHLC, SeriesKind
from marketframe.series.series import Series

logger = logging.getLogger(__name__)


class Dataframe(OHLC):
    """
    OHLC series scoped to one trading pair.

    Attributes:
        pair: Trading pair (e.g. ``"BTCUSDT"``).
        last_update: Time of the last candle update.
        metadata: Custom user series keyed by name (e.g. indicator values).
    """

    def __init__(
        self,
        candles: Iterable[Candle] | None = None,
        *,
        pair: str = "",
        last_update: datetime = ZERO_TIME,
        metadata: dict[str, Series] | None = None,
        kind: SeriesKind = SeriesKind.RAW,
    ) -> None:
        super().__init__(candles, kind=kind)
        self.pair = pair
        self.last_update = last_update
        self.metadata: dict[str, Series] = metadata if metadata is not None else {}

    @classmethod
    def _from_candles(cls, candles: list[Candle], pair: str, **kwargs: Any) -> "Dataframe":
        return cls(candles, pair=pair, **kwargs)

    def __getitem__(self, index: int | slice) -> "Candle | Dataframe":
        if not isinstance(index, slice):
            return self._candles[index]

        # Metadata aligned with the candles is cut the same way
        metadata = {
            name: Series(values[index]) if len(values) == len(self) else values
            for name, values in self.metadata.items()
        }
        return Dataframe(
            self._candles[index],
            pair=self.pair,
            last_update=self.last_update,
            metadata=metadata,
            kind=self.kind,
        )

    def _derive(self, candles: list[Candle], kind: SeriesKind) -> "Dataframe":
        return Dataframe(
            candles,
            pair=self.pair,
            last_update=self.last_update,
            metadata=dict(self.metadata),
            kind=kind,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataframe):
            return NotImplemented
        return (
            super().__eq__(other) is True
            and self.pair == other.pair
            and self.last_update == other.last_update
            and self.metadata == other.metadata
        )

    def __repr__(self) -> str:
        return f"Dataframe(pair={self.pair!r}, len={len(self)}, kind={self.kind.value})"

    def sample(self, positions: int, window_metadata: bool = True) -> "Dataframe":
        """
        Window the dataframe to its newest ``positions`` candles.

        Args:
            positions: Number of candles to keep.
            window_metadata: Cut every metadata series to its newest
                ``positions`` values as well. When False the metadata dict is
                shared with the receiver unchanged.

        Returns:
            The receiver itself when it holds ``positions`` candles or fewer,
            otherwise a new ``Dataframe``.
        """
        start = len(self) - positions
        if start <= 0:
            return self

        if window_metadata:
            metadata = {
                name: Series(values).last_values(positions)
                for name, values in self.metadata.items()
            }
        else:
            metadata = self.metadata

        logger.debug("Sampled %s: %d of %d candles", self.pair, positions, len(self))
        return Dataframe(
            self._candles[start:],
            pair=self.pair,
            last_update=self.last_update,
            metadata=metadata,
            kind=self.kind,
        )

    def to_frame(self) -> pd.DataFrame:
        """Export candles plus every metadata series aligned with them."""
        frame = super().to_frame()
        for name, values in self.metadata.items():
            if len(values) == len(frame):
                frame[name] = list(values)
            else:
                logger.debug(
                    "Skipping metadata %r for %s: %d values for %d candles",
                    name,
                    self.pair,
                    len(values),
                    len(frame),
                )
        return frame
