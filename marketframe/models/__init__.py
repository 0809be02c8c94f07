"""Data models for candles, balances and exchange metadata."""

from .account import Account, Balance
from .asset import AssetInfo
from .candle import ZERO_TIME, Candle
from .queue import CandleQueue

__all__ = [
    "Account",
    "AssetInfo",
    "Balance",
    "Candle",
    "CandleQueue",
    "ZERO_TIME",
]
