"""Exchange metadata for a tradable pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetInfo:
    """
    Trading rules of a pair as published by the exchange.

    Stored and passed along untouched; nothing in this package derives it.
    """

    base_asset: str = ""
    quote_asset: str = ""

    min_price: float = 0.0
    max_price: float = 0.0
    min_quantity: float = 0.0
    max_quantity: float = 0.0
    step_size: float = 0.0
    tick_size: float = 0.0

    quote_precision: int = 0
    base_asset_precision: int = 0

    @property
    def pair(self) -> str:
        """Base and quote asset joined (e.g. ``BTCUSDT``)."""
        return f"{self.base_asset}{self.quote_asset}"
