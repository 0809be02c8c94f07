"""In-memory OHLCV candle series, Heikin Ashi smoothing and balance snapshots."""

from .config import Settings, TelegramSettings
from .indicators import HeikinAshi
from .models import Account, AssetInfo, Balance, Candle, CandleQueue
from .series import OHLC, Dataframe, Series, SeriesKind

__all__ = [
    "Account",
    "AssetInfo",
    "Balance",
    "Candle",
    "CandleQueue",
    "Dataframe",
    "HeikinAshi",
    "OHLC",
    "Series",
    "SeriesKind",
    "Settings",
    "TelegramSettings",
]
