"""
Account balance operations for Bitstamp API
"""

import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)


async def get_balance(request_func: Callable) -> Dict[str, Any]:
    """Balances, reserved amounts and fee for every currency on the account"""
    result = await request_func("POST", "balance")
    logger.debug(f"Fetched balance ({len(result)} fields)")
    return result


async def get_unconfirmed_btc(request_func: Callable) -> Any:
    """Bitcoin deposits that have not reached the required confirmations yet"""
    return await request_func("POST", "unconfirmed_btc")
