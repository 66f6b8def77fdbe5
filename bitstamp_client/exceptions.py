"""
Exceptions raised by the Bitstamp client.

Every failed call raises exactly one of these. Nothing is retried; the
caller decides what to do with the failure.
"""

from typing import Any, Dict, Optional


class BitstampError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(BitstampError):
    """Client is missing configuration the call needs. No request was sent."""


class TransportError(BitstampError):
    """Connection-level failure, no HTTP response was received."""


class RequestTimeoutError(TransportError):
    """Request aborted after the connection stayed idle past the timeout."""

    def __init__(self, message: str = "Request timed out", timeout: Optional[float] = None):
        self.timeout = timeout
        super().__init__(message)


class HTTPError(BitstampError):
    """Non-200 response. Carries the status code and the raw body."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Bitstamp error {status_code}: {body}")


class ParseError(BitstampError):
    """Response body is not valid JSON."""

    def __init__(self, body: str, message: str = "Bitstamp response is not valid JSON"):
        self.body = body
        super().__init__(message)


class APIError(BitstampError):
    """Well-formed response that flags an error, even under HTTP 200."""

    def __init__(self, payload: Dict[str, Any], body: str = ""):
        self.payload = payload
        self.body = body
        reason = payload.get("error") or payload.get("reason")
        super().__init__(f"Bitstamp API error: {reason}")
