"""Tests for the per-pair Dataframe."""

from datetime import datetime, timezone

from marketframe.models.candle import Candle
from marketframe.series.dataframe import Dataframe
from marketframe.series.ohlc import SeriesKind
from marketframe.series.series import Series

LAST_UPDATE = datetime(2024, 1, 1, 4, tzinfo=timezone.utc)


def make_dataframe(candles: list[Candle]) -> Dataframe:
    return Dataframe(
        candles,
        pair="BTCUSDT",
        last_update=LAST_UPDATE,
        metadata={"rsi": Series([40.0, 50.0, 60.0, 70.0])},
    )


def test_sample_larger_than_series_returns_input(raw_candles: list[Candle]) -> None:
    df = make_dataframe(raw_candles)

    assert df.sample(4) is df
    assert df.sample(10) is df
    assert df.sample(10) == make_dataframe(raw_candles)


def test_sample_keeps_newest_entries(raw_candles: list[Candle]) -> None:
    df = make_dataframe(raw_candles)

    sample = df.sample(2)

    assert len(sample) == 2
    assert sample.close == df.close[-2:]
    assert sample.open == df.open[-2:]
    assert sample.high == df.high[-2:]
    assert sample.low == df.low[-2:]
    assert sample.volume == df.volume[-2:]
    assert sample.time == df.time[-2:]
    assert sample.pair == "BTCUSDT"
    assert sample.last_update == LAST_UPDATE
    assert len(df) == 4


def test_sample_windows_metadata_by_default(raw_candles: list[Candle]) -> None:
    df = make_dataframe(raw_candles)

    sample = df.sample(2)

    assert sample.metadata["rsi"] == [60.0, 70.0]
    assert df.metadata["rsi"] == [40.0, 50.0, 60.0, 70.0]


def test_sample_can_share_metadata(raw_candles: list[Candle]) -> None:
    df = make_dataframe(raw_candles)

    sample = df.sample(2, window_metadata=False)

    assert sample.metadata is df.metadata


def test_sample_keeps_kind(raw_candles: list[Candle]) -> None:
    smoothed = make_dataframe(raw_candles).to_heikin_ashi()

    assert isinstance(smoothed, Dataframe)
    assert smoothed.pair == "BTCUSDT"
    assert smoothed.sample(2).kind is SeriesKind.HEIKIN_ASHI


def test_last_on_empty_dataframe() -> None:
    assert Dataframe(pair="BTCUSDT").last().empty()


def test_from_columns_sets_pair() -> None:
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)

    df = Dataframe.from_columns(
        open=[1.0],
        high=[2.0],
        low=[0.5],
        close=[1.5],
        volume=[3.0],
        time=[t0],
        pair="ETHUSDT",
    )

    assert df.pair == "ETHUSDT"
    assert df.candle(0).pair == "ETHUSDT"


def test_to_frame_includes_aligned_metadata(raw_candles: list[Candle]) -> None:
    df = make_dataframe(raw_candles)
    df.metadata["short"] = Series([1.0])

    frame = df.to_frame()

    assert frame["rsi"].tolist() == [40.0, 50.0, 60.0, 70.0]
    assert "short" not in frame.columns


def test_slice_windows_aligned_metadata(raw_candles: list[Candle]) -> None:
    df = make_dataframe(raw_candles)
    df.metadata["daily"] = Series([1.0])

    window = df[1:3]

    assert isinstance(window, Dataframe)
    assert window.close == df.close[1:3]
    assert window.metadata["rsi"] == [50.0, 60.0]
    assert window.metadata["daily"] == [1.0]
    assert window.pair == "BTCUSDT"
    assert df.metadata["rsi"] == [40.0, 50.0, 60.0, 70.0]


def test_indexing_returns_candle(raw_candles: list[Candle]) -> None:
    assert make_dataframe(raw_candles)[2] == raw_candles[2]
