"""
Public (unauthenticated) Bitstamp market data API.

These endpoints require NO API credentials.

Public endpoints used:
  GET /api/v2/transactions/{pair}/
  GET /api/v2/ticker/{pair}/
  GET /api/v2/order_book/{pair}/
  GET /api/eur_usd/
"""

import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

# Accepted values for the transactions "time" filter
TRANSACTION_INTERVALS = ("minute", "hour", "day")


async def get_transactions(
    request_func: Callable,
    pair: str,
    time: Optional[str] = None,
    **params: Any,
) -> List[Dict[str, Any]]:
    """
    Fetch recent trades for a pair

    Args:
        request_func: Request callable (method, action, params)
        pair: Trading pair, e.g. "btcusd"
        time: Look-back window, one of "minute", "hour" or "day" (API default: hour)
        **params: Any other query filters, passed through as given
    """
    if time is not None and time not in TRANSACTION_INTERVALS:
        raise ValueError(f"time must be one of {TRANSACTION_INTERVALS}, got {time!r}")

    return await request_func("GET", "v2/transactions", {**params, "pair": pair, "time": time})


async def get_ticker(request_func: Callable, pair: str) -> Dict[str, Any]:
    """Fetch last price, bid/ask, 24h high/low and volume for a pair."""
    return await request_func("GET", "v2/ticker", {"pair": pair})


async def get_order_book(
    request_func: Callable,
    pair: str,
    group: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Fetch the order book for a pair

    Args:
        group: 0 for ungrouped orders, 1 to group by price (API default),
            2 for orders with their ids
    """
    return await request_func("GET", "v2/order_book", {"pair": pair, "group": group})


async def get_eur_usd(request_func: Callable) -> Dict[str, Any]:
    """EUR/USD conversion rate (buy and sell)."""
    return await request_func("GET", "eur_usd")
