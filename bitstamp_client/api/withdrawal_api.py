"""
Withdrawal and deposit address operations for Bitstamp API
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from bitstamp_client.api.auth import Number

logger = logging.getLogger(__name__)


async def get_withdrawal_requests(request_func: Callable) -> List[Dict[str, Any]]:
    """Withdrawal requests on the account with their status"""
    return await request_func("POST", "withdrawal_requests")


async def bitcoin_withdrawal(request_func: Callable, amount: Number, address: str) -> Dict[str, Any]:
    """
    Withdraw bitcoin to an address

    Returns:
        Dict with the withdrawal request id
    """
    logger.info(f"Requesting bitcoin withdrawal of {amount} to {address}")
    return await request_func("POST", "bitcoin_withdrawal", {"amount": amount, "address": address})


async def ripple_withdrawal(
    request_func: Callable,
    amount: Number,
    address: str,
    currency: Optional[str] = None,
) -> Any:
    """
    Withdraw over the Ripple network

    Args:
        amount: Amount to send
        address: Ripple destination address
        currency: Currency to withdraw (e.g. "USD", "BTC")
    """
    logger.info(f"Requesting ripple withdrawal of {amount} {currency or ''} to {address}")
    return await request_func(
        "POST",
        "ripple_withdrawal",
        {"amount": amount, "address": address, "currency": currency},
    )


async def get_bitcoin_deposit_address(request_func: Callable) -> Any:
    return await request_func("POST", "bitcoin_deposit_address")


async def get_ripple_address(request_func: Callable) -> Any:
    return await request_func("POST", "ripple_address")
