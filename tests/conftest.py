import os
from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest

from marketframe.models.candle import Candle

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_candle(
    index: int,
    open: float,
    high: float,
    low: float,
    close: float,
    volume: float = 1.0,
    pair: str = "BTCUSDT",
) -> Candle:
    """Candle on an hourly grid starting at BASE_TIME."""
    return Candle(
        pair=pair,
        time=BASE_TIME + timedelta(hours=index),
        updated_at=BASE_TIME + timedelta(hours=index),
        open=open,
        high=high,
        low=low,
        close=close,
        volume=volume,
        complete=True,
    )


@pytest.fixture
def raw_candles() -> list[Candle]:
    """Four hourly BTCUSDT candles, oldest first."""
    return [
        make_candle(0, 10.0, 25.0, 5.0, 20.0, 100.0),
        make_candle(1, 20.0, 30.0, 18.0, 28.0, 150.0),
        make_candle(2, 28.0, 29.0, 15.0, 16.0, 90.0),
        make_candle(3, 16.0, 22.0, 14.0, 21.0, 120.0),
    ]


@pytest.fixture(autouse=True)
def clean_settings_env() -> Generator[None, None, None]:
    """Ensure MARKETFRAME_* env vars do not interfere with tests unless explicitly set."""
    original_env = {}
    keys_to_clear = [
        "MARKETFRAME_SETTINGS_PATH",
        "MARKETFRAME_PAIRS",
        "MARKETFRAME_TELEGRAM_ENABLED",
        "MARKETFRAME_TELEGRAM_TOKEN",
        "MARKETFRAME_TELEGRAM_USERS",
    ]

    for key in keys_to_clear:
        if key in os.environ:
            original_env[key] = os.environ[key]
            os.environ.pop(key, None)

    yield

    for key, value in original_env.items():
        os.environ[key] = value
