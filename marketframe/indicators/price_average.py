"""Per-bar price averages (HL2, HLC3, OHLC4)."""


def _check_lengths(*columns: list[float]) -> int:
    length = len(columns[0])
    for column in columns[1:]:
        if len(column) != length:
            raise IndexError(
                f"price columns are not aligned: lengths {[len(c) for c in columns]}"
            )
    return length


def calculate_hl2(high: list[float], low: list[float]) -> list[float]:
    """(High + Low) / 2 for every bar."""
    _check_lengths(high, low)
    return [(h + l) / 2 for h, l in zip(high, low)]


def calculate_hlc3(high: list[float], low: list[float], close: list[float]) -> list[float]:
    """(High + Low + Close) / 3 for every bar."""
    _check_lengths(high, low, close)
    return [(h + l + c) / 3 for h, l, c in zip(high, low, close)]


def calculate_ohlc4(
    open_: list[float], high: list[float], low: list[float], close: list[float]
) -> list[float]:
    """
    Calculate the OHLC4 average price.

    OHLC4 = (Open + High + Low + Close) / 4

    Args:
        open_: Opening prices.
        high: High prices.
        low: Low prices.
        close: Closing prices.

    Returns:
        List of averages (same length as input).

    Raises:
        IndexError: If the columns have different lengths.
    """
    _check_lengths(open_, high, low, close)
    return [(o + h + l + c) / 4 for o, h, l, c in zip(open_, high, low, close)]
