"""
HTTP dispatch for Bitstamp REST calls

Builds request paths and form bodies, sends them with httpx and maps the
response onto either the parsed JSON value or one of the exceptions in
bitstamp_client.exceptions.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from bitstamp_client.api.auth import compact
from bitstamp_client.constants import FORM_CONTENT_TYPE, REQUEST_TIMEOUT_SECONDS, USER_AGENT
from bitstamp_client.exceptions import APIError, HTTPError, ParseError, RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)


def encode_params(params: Optional[Dict[str, Any]]) -> str:
    """Form/query encode params, skipping None values"""
    return urlencode(compact(params), doseq=True)


def build_get_path(action: str, params: Optional[Dict[str, Any]] = None) -> str:
    """
    Build the path for a public GET request

    The pair becomes a path segment; the remaining arguments go into the
    query string. With no arguments left the path just ends in a slash.

    Examples:
        ("v2/ticker", {"pair": "btcusd"})           -> /api/v2/ticker/btcusd/
        ("v2/order_book", {"pair": "btcusd", "group": 1})
                                                    -> /api/v2/order_book/btcusd/?group=1
        ("eur_usd", None)                           -> /api/eur_usd/
    """
    args = compact(params)
    path = f"/api/{action}"

    pair = args.pop("pair", None)
    if pair:
        path += f"/{pair}"

    query = urlencode(args, doseq=True)
    if not query:
        return f"{path}/"
    return f"{path}/?{query}"


def build_post_path(action: str, pair: Optional[str] = None) -> str:
    """Build the path for a private POST request, e.g. /api/v2/buy/btcusd/"""
    path = f"/api/{action}/"
    if pair:
        path += f"{pair}/"
    return path


def parse_response(response: httpx.Response) -> Any:
    """
    Turn an HTTP response into the decoded JSON payload

    Raises:
        HTTPError: status code is not 200
        ParseError: body is not JSON
        APIError: JSON object carries an error flag
    """
    body = response.text

    if response.status_code != 200:
        logger.error(f"Bitstamp HTTP {response.status_code}: {body[:200]}")
        raise HTTPError(response.status_code, body)

    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.error(f"Bitstamp returned invalid JSON: {body[:200]}")
        raise ParseError(body) from e

    if isinstance(payload, dict) and (payload.get("error") or payload.get("status") == "error"):
        logger.warning(f"Bitstamp API error: {payload}")
        raise APIError(payload, body)

    return payload


async def send_request(
    method: str,
    host: str,
    path: str,
    body: Optional[str] = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
    proxy_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """
    Send one request to the Bitstamp API over HTTPS

    Args:
        method: "GET" or "POST"
        host: API host name, e.g. www.bitstamp.net
        path: Request path including any query string
        body: Form-encoded body (POST only)
        timeout: Seconds without connection activity before the request is aborted
        proxy_url: Optional forward proxy
        transport: Optional httpx transport (used by tests)

    Returns:
        Decoded JSON payload
    """
    url = f"https://{host}{path}"
    headers = {"User-Agent": USER_AGENT}
    content = None

    if method == "POST":
        content = (body or "").encode("utf-8")
        headers["Content-Length"] = str(len(content))
        headers["Content-Type"] = FORM_CONTENT_TYPE

    client_kwargs: Dict[str, Any] = {"timeout": httpx.Timeout(timeout)}
    if proxy_url:
        client_kwargs["proxy"] = proxy_url
    if transport is not None:
        client_kwargs["transport"] = transport

    logger.debug(f"{method} {path}")

    try:
        async with httpx.AsyncClient(**client_kwargs) as client:
            response = await client.request(method, url, headers=headers, content=content)
    except httpx.TimeoutException as e:
        logger.warning(f"Bitstamp request timed out after {timeout}s: {method} {path}")
        raise RequestTimeoutError(f"{method} {path} timed out after {timeout}s", timeout=timeout) from e
    except httpx.RequestError as e:
        logger.error(f"Bitstamp request failed: {method} {path}: {e}")
        raise TransportError(f"{method} {path} failed: {e}") from e

    return parse_response(response)
