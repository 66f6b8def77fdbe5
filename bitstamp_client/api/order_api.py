"""
Order operations for Bitstamp API
Handles limit order placement, status lookups and cancellation
"""

import logging
from typing import Any, Callable, Dict, List, Union

from bitstamp_client.api.auth import Number

logger = logging.getLogger(__name__)


async def get_order_status(request_func: Callable, order_id: Union[int, str]) -> Dict[str, Any]:
    """Status and fills of a single order"""
    return await request_func("POST", "order_status", {"id": order_id})


async def get_open_orders(request_func: Callable) -> List[Dict[str, Any]]:
    """All open orders on the account"""
    return await request_func("POST", "v2/open_orders")


async def cancel_order(request_func: Callable, order_id: Union[int, str]) -> Any:
    """Cancel an open order by id"""
    logger.info(f"Cancelling order {order_id}")
    return await request_func("POST", "cancel_order", {"id": order_id})


async def create_limit_order(
    request_func: Callable,
    side: str,  # "buy" or "sell"
    amount: Number,
    price: Number,
    pair: str,
) -> Dict[str, Any]:
    """
    Place a limit order

    Args:
        request_func: Request callable (method, action, params)
        side: "buy" or "sell"
        amount: Amount of base currency
        price: Limit price in quote currency
        pair: Trading pair, e.g. "btcusd"

    Returns:
        Order dict (id, datetime, type, price, amount)
    """
    if side not in ("buy", "sell"):
        raise ValueError(f"side must be 'buy' or 'sell', got {side!r}")

    logger.info(f"Placing {side} limit order: {amount} @ {price} on {pair}")
    return await request_func(
        "POST",
        f"v2/{side}",
        {"amount": amount, "price": price, "pair": pair},
    )


async def buy(request_func: Callable, amount: Number, price: Number, pair: str) -> Dict[str, Any]:
    return await create_limit_order(request_func, "buy", amount, price, pair)


async def sell(request_func: Callable, amount: Number, price: Number, pair: str) -> Dict[str, Any]:
    return await create_limit_order(request_func, "sell", amount, price, pair)
