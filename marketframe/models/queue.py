"""Priority queue placing candles from out-of-order sources."""

import heapq

from marketframe.models.candle import Candle


class CandleQueue:
    """Min-heap of candles, oldest (by ``Candle.less``) first."""

    def __init__(self, candles: list[Candle] | None = None) -> None:
        self._heap: list[Candle] = list(candles or [])
        heapq.heapify(self._heap)

    def push(self, candle: Candle) -> None:
        heapq.heappush(self._heap, candle)

    def pop(self) -> Candle:
        """Remove and return the oldest candle. Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty CandleQueue")
        return heapq.heappop(self._heap)

    def peek(self) -> Candle:
        """Return the oldest candle without removing it."""
        if not self._heap:
            raise IndexError("peek into an empty CandleQueue")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
