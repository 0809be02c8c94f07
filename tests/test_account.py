"""Tests for Account and Balance models."""

import pytest

from marketframe.models.account import Account, Balance
from marketframe.models.asset import AssetInfo


@pytest.fixture
def account() -> Account:
    return Account(
        balances=[
            Balance(asset="BTC", free=1.0, lock=0.5),
            Balance(asset="ETH", free=2.0, lock=0.0),
        ]
    )


def test_equity_sums_free_and_lock(account: Account) -> None:
    assert account.equity() == 3.5


def test_equity_of_empty_account() -> None:
    assert Account().equity() == 0.0


def test_balance_lookup_with_missing_quote(account: Account) -> None:
    asset, quote = account.balance("BTC", "USDT")

    assert asset == Balance(asset="BTC", free=1.0, lock=0.5)
    assert quote == Balance()
    assert quote.total == 0.0


def test_balance_lookup_both_found(account: Account) -> None:
    asset, quote = account.balance("ETH", "BTC")

    assert asset.asset == "ETH"
    assert quote.asset == "BTC"


def test_balance_first_match_wins_on_duplicates() -> None:
    account = Account(
        balances=[
            Balance(asset="BTC", free=1.0),
            Balance(asset="BTC", free=9.0),
            Balance(asset="USDT", free=100.0),
        ]
    )

    asset, quote = account.balance("BTC", "USDT")

    assert asset.free == 1.0
    assert quote.free == 100.0
    assert account.equity() == 110.0


def test_balance_total() -> None:
    assert Balance(asset="BTC", free=1.25, lock=0.75).total == 2.0


def test_asset_info_pair() -> None:
    info = AssetInfo(base_asset="BTC", quote_asset="USDT", tick_size=0.01, quote_precision=2)
    assert info.pair == "BTCUSDT"
    assert info.tick_size == 0.01
