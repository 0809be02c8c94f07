"""Candle series containers."""

from .dataframe import Dataframe
from .ohlc import OHLC, SeriesKind
from .series import Series

__all__ = [
    "Dataframe",
    "OHLC",
    "Series",
    "SeriesKind",
]
