"""
Tests for bitstamp_client/api/public_market_data.py

Covers the unauthenticated endpoints: transactions, ticker,
order book and the EUR/USD rate.
"""

import pytest
from unittest.mock import AsyncMock

from bitstamp_client.api.public_market_data import (
    TRANSACTION_INTERVALS,
    get_eur_usd,
    get_order_book,
    get_ticker,
    get_transactions,
)


class TestGetTransactions:
    """Tests for get_transactions()"""

    @pytest.mark.asyncio
    async def test_fetches_recent_trades(self):
        """Happy path: GET v2/transactions scoped to the pair."""
        mock_request = AsyncMock(return_value=[{"tid": "1", "price": "100"}])

        result = await get_transactions(mock_request, "btcusd")

        assert result == [{"tid": "1", "price": "100"}]
        mock_request.assert_awaited_once_with("GET", "v2/transactions", {"pair": "btcusd", "time": None})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("interval", TRANSACTION_INTERVALS)
    async def test_time_filter(self, interval):
        """Happy path: time window is passed through."""
        mock_request = AsyncMock(return_value=[])

        await get_transactions(mock_request, "ethusd", time=interval)

        assert mock_request.call_args[0][2] == {"pair": "ethusd", "time": interval}

    @pytest.mark.asyncio
    async def test_extra_filters_pass_through(self):
        """Happy path: filters beyond time reach the request unchanged."""
        mock_request = AsyncMock(return_value=[])

        await get_transactions(mock_request, "btcusd", time="day", since_id=42)

        assert mock_request.call_args[0][2] == {"since_id": 42, "pair": "btcusd", "time": "day"}

    @pytest.mark.asyncio
    async def test_rejects_unknown_time(self):
        """Failure: invalid window raises before any request."""
        mock_request = AsyncMock()

        with pytest.raises(ValueError, match="time must be one of"):
            await get_transactions(mock_request, "btcusd", time="week")

        mock_request.assert_not_called()


class TestGetTicker:
    """Tests for get_ticker()"""

    @pytest.mark.asyncio
    async def test_fetches_ticker(self):
        mock_request = AsyncMock(return_value={"last": "100"})

        result = await get_ticker(mock_request, "btcusd")

        assert result == {"last": "100"}
        mock_request.assert_awaited_once_with("GET", "v2/ticker", {"pair": "btcusd"})


class TestGetOrderBook:
    """Tests for get_order_book()"""

    @pytest.mark.asyncio
    async def test_default_group_left_to_api(self):
        """Happy path: no group sends None (compacted away later)."""
        mock_request = AsyncMock(return_value={"bids": [], "asks": []})

        await get_order_book(mock_request, "btcusd")

        mock_request.assert_awaited_once_with("GET", "v2/order_book", {"pair": "btcusd", "group": None})

    @pytest.mark.asyncio
    async def test_group_zero_is_sent(self):
        """Edge case: ungrouped book (group=0) is a real value."""
        mock_request = AsyncMock(return_value={"bids": [], "asks": []})

        await get_order_book(mock_request, "btcusd", group=0)

        assert mock_request.call_args[0][2]["group"] == 0


class TestGetEurUsd:
    """Tests for get_eur_usd()"""

    @pytest.mark.asyncio
    async def test_fetches_rate_without_arguments(self):
        mock_request = AsyncMock(return_value={"buy": "1.1", "sell": "1.09"})

        result = await get_eur_usd(mock_request)

        assert result["buy"] == "1.1"
        mock_request.assert_awaited_once_with("GET", "eur_usd")
