"""
User transaction history for Bitstamp API.

Covers deposits, withdrawals and trades on the account, newest first by
default.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

MAX_TRANSACTIONS_LIMIT = 1000


async def get_user_transactions(
    request_func: Callable,
    pair: str,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
    sort: Optional[str] = None,
    **params: Any,
) -> List[Dict[str, Any]]:
    """
    Fetch the account's transactions

    Args:
        request_func: Request callable (method, action, params)
        pair: Trading pair the history is scoped to
        offset: Skip that many transactions (API default: 0)
        limit: Max results, up to 1000 (API default: 100)
        sort: "asc" or "desc" (API default: desc)
        **params: Other filters (e.g. since_timestamp, until_timestamp, since_id),
            passed through as given

    Returns:
        List of transaction dicts
    """
    if limit is not None and not 0 < limit <= MAX_TRANSACTIONS_LIMIT:
        raise ValueError(f"limit must be between 1 and {MAX_TRANSACTIONS_LIMIT}, got {limit}")
    if sort is not None and sort not in ("asc", "desc"):
        raise ValueError(f"sort must be 'asc' or 'desc', got {sort!r}")

    params = {
        **params,
        "offset": offset,
        "limit": limit,
        "sort": sort,
        "pair": pair,
    }
    transactions = await request_func("POST", "user_transactions", params)
    logger.debug(f"Fetched {len(transactions)} user transactions for {pair}")
    return transactions
