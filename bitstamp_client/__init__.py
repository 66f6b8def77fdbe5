"""
Bitstamp API client

Async client for the Bitstamp exchange REST API:
- Signed private calls (nonce + HMAC-SHA256)
- Unauthenticated market data
"""

from bitstamp_client.api.auth import Credentials, NonceGenerator, compact, generate_signature, sign_request
from bitstamp_client.client import BitstampClient
from bitstamp_client.exceptions import (
    APIError,
    BitstampError,
    ConfigurationError,
    HTTPError,
    ParseError,
    RequestTimeoutError,
    TransportError,
)

__all__ = [
    "APIError",
    "BitstampClient",
    "BitstampError",
    "ConfigurationError",
    "Credentials",
    "HTTPError",
    "NonceGenerator",
    "ParseError",
    "RequestTimeoutError",
    "TransportError",
    "compact",
    "generate_signature",
    "sign_request",
]
