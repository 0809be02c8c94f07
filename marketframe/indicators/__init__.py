"""Indicators derived from candle series."""

from .heikin_ashi import HeikinAshi, calculate_heikin_ashi, calculate_heikin_ashi_series
from .price_average import calculate_hl2, calculate_hlc3, calculate_ohlc4

__all__ = [
    "HeikinAshi",
    "calculate_heikin_ashi",
    "calculate_heikin_ashi_series",
    "calculate_hl2",
    "calculate_hlc3",
    "calculate_ohlc4",
]
