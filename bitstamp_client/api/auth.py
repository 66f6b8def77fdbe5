"""
Authentication utilities for Bitstamp private API calls

Private endpoints are authenticated by three form fields merged into the
request body: the API key, a nonce and an HMAC-SHA256 signature over
nonce + client_id + key.
"""

import hashlib
import hmac
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

logger = logging.getLogger(__name__)

# Width of the zero-padded per-millisecond counter appended to the timestamp
NONCE_COUNTER_WIDTH = 4

# Nonces stay ordered for up to this many calls within one millisecond
MAX_NONCES_PER_MS = 10**NONCE_COUNTER_WIDTH

NonceFunc = Callable[[], Union[int, str]]

Number = Union[int, float, str]


@dataclass(frozen=True)
class Credentials:
    """API key, secret and client (customer) id for one Bitstamp account"""

    key: str = ""
    secret: str = field(default="", repr=False)
    client_id: str = ""

    def is_complete(self) -> bool:
        return bool(self.key and self.secret and self.client_id)


class NonceGenerator:
    """
    Strictly increasing nonces for one set of credentials.

    Each nonce is the current time in milliseconds followed by a 4-digit
    counter that resets whenever the millisecond changes, so calls landing
    in the same millisecond still get distinct, increasing values:

        1700000000000 -> "17000000000000000"
        1700000000000 -> "17000000000000001"
        1700000000001 -> "17000000000010000"

    If the wall clock steps backwards the last timestamp is kept and the
    counter carries on, so the sequence never decreases or repeats.

    The read-modify-write runs under a lock, so concurrent callers on one
    instance never see a repeated or decreasing value. Past MAX_NONCES_PER_MS
    calls in a single millisecond the counter overflows its padding and
    ordering is lost.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last_timestamp: Optional[int] = None
        self._increment = 0

    def next(self) -> str:
        with self._lock:
            now = time.time_ns() // 1_000_000
            # A clock stepping back counts as the last tick
            if self._last_timestamp is not None:
                now = max(now, self._last_timestamp)
            if now != self._last_timestamp:
                self._increment = 0
            else:
                self._increment += 1
            self._last_timestamp = now
            increment = self._increment

        if increment == MAX_NONCES_PER_MS:
            logger.warning(
                f"More than {MAX_NONCES_PER_MS} nonces requested in one millisecond, ordering no longer guaranteed"
            )

        return f"{now}{increment:0{NONCE_COUNTER_WIDTH}d}"

    def __call__(self) -> str:
        return self.next()


def generate_signature(nonce: Union[int, str], client_id: str, key: str, secret: str) -> str:
    """
    Generate the HMAC-SHA256 signature for a private API request

    Args:
        nonce: Nonce sent with the same request
        client_id: Bitstamp customer id
        key: API key
        secret: API secret (used as raw UTF-8 bytes)

    Returns:
        Upper-case hex digest (64 characters)
    """
    message = f"{nonce}{client_id}{key}"
    signature = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()
    return signature.upper()


def compact(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a copy of params without the entries whose value is None."""
    if not params:
        return {}
    return {name: value for name, value in params.items() if value is not None}


def sign_request(
    credentials: Credentials,
    nonce: Union[int, str],
    params: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the form fields for a private request

    The key, nonce and signature are added first, then the caller's params
    (which win on a name clash). None values are dropped. The params dict
    passed in is left untouched.

    Args:
        credentials: Account credentials
        nonce: Fresh nonce for this request
        params: Endpoint arguments

    Returns:
        New dict ready to be form-encoded
    """
    nonce = str(nonce)
    signature = generate_signature(nonce, credentials.client_id, credentials.key, credentials.secret)

    fields: Dict[str, Any] = {
        "key": credentials.key,
        "signature": signature,
        "nonce": nonce,
    }
    fields.update(params or {})
    return compact(fields)
