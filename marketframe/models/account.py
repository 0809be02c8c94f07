"""Account balance snapshot models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Balance:
    """Holdings of a single asset."""

    asset: str = ""
    free: float = 0.0
    lock: float = 0.0
    leverage: float = 0.0

    @property
    def total(self) -> float:
        """Free plus locked amount."""
        return self.free + self.lock


@dataclass
class Account:
    """
    Snapshot of balances per asset.

    Asset entries are not required to be unique. Amounts are summed as-is,
    so mixing currencies in ``equity`` is the caller's concern.
    """

    balances: list[Balance] = field(default_factory=list)

    def balance(self, asset_tick: str, quote_tick: str) -> tuple[Balance, Balance]:
        """
        Look up the balances of a trading pair.

        Args:
            asset_tick: Base asset symbol (e.g. ``"BTC"``).
            quote_tick: Quote asset symbol (e.g. ``"USDT"``).

        Returns:
            ``(asset_balance, quote_balance)``. The first entry found wins;
            a missing asset yields a zero ``Balance``.
        """
        asset_balance: Balance | None = None
        quote_balance: Balance | None = None

        for balance in self.balances:
            if balance.asset == asset_tick:
                if asset_balance is None:
                    asset_balance = balance
            elif balance.asset == quote_tick:
                if quote_balance is None:
                    quote_balance = balance

            if asset_balance is not None and quote_balance is not None:
                break

        return asset_balance or Balance(), quote_balance or Balance()

    def equity(self) -> float:
        """Sum of free and locked amounts across all balances."""
        return sum(balance.free + balance.lock for balance in self.balances)
