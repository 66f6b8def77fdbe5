"""
Client Constants

Defaults for the Bitstamp host, trading pair and request limits.
"""

# Production REST host (no scheme; requests always go over HTTPS)
DEFAULT_API_HOST = "www.bitstamp.net"

# Market used by pair-scoped endpoints when none is configured
DEFAULT_PAIR = "btcusd"

# Abort a request once the connection has been idle this long (seconds)
REQUEST_TIMEOUT_SECONDS = 5.0

USER_AGENT = "Mozilla/4.0 (compatible; Bitstamp python client)"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
