"""Ordered column of values with look-back helpers."""

from typing import Any


class Series(list):
    """
    A list of values ordered oldest-first.

    ``last(0)`` is the most recent value, ``last(1)`` the one before it.
    """

    def values(self) -> list[Any]:
        return list(self)

    def length(self) -> int:
        return len(self)

    def last(self, position: int = 0) -> Any:
        """Value ``position`` bars back from the end. Raises IndexError when out of range."""
        if position < 0 or position >= len(self):
            raise IndexError(f"position {position} out of range for series of length {len(self)}")
        return self[len(self) - 1 - position]

    def last_values(self, size: int) -> "Series":
        """The newest ``size`` values (the whole series when shorter)."""
        if size <= 0:
            return Series()
        return Series(self[-size:])

    def crossover(self, ref: "Series") -> bool:
        """True when this series moved above ``ref`` on the last bar."""
        return self.last(0) > ref.last(0) and self.last(1) <= ref.last(1)

    def crossunder(self, ref: "Series") -> bool:
        """True when this series moved below ``ref`` on the last bar."""
        return self.last(0) <= ref.last(0) and self.last(1) > ref.last(1)

    def cross(self, ref: "Series") -> bool:
        return self.crossover(ref) or self.crossunder(ref)
