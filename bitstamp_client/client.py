"""
Bitstamp REST API Client

One method per API operation. Public market data needs no credentials;
private calls are signed with key, nonce and HMAC signature and fail with
ConfigurationError before any request is sent if key, secret or client id
is missing.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from bitstamp_client.api import (
    account_balance_api,
    order_api,
    public_market_data,
    transaction_api,
    withdrawal_api,
)
from bitstamp_client.api.auth import Credentials, NonceFunc, NonceGenerator, Number, sign_request
from bitstamp_client.api.request import build_get_path, build_post_path, encode_params, send_request
from bitstamp_client.config import normalize_pair, settings
from bitstamp_client.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class BitstampClient:
    """
    Async Bitstamp API client

    Every argument falls back to the matching BITSTAMP_* setting when not
    given.

    Args:
        key: API key
        secret: API secret
        client_id: Bitstamp customer id
        nonce_generator: Callable returning a fresh nonce per private call.
            Replaces the built-in NonceGenerator; the caller is then
            responsible for values being unique and increasing.
        pair: Market for pair-scoped endpoints, e.g. "btcusd"
        api_host: Alternate API host
        proxy_url: Forward proxy for all requests
        timeout: Inactivity timeout in seconds
        transport: httpx transport override (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        client_id: Optional[str] = None,
        nonce_generator: Optional[NonceFunc] = None,
        pair: Optional[str] = None,
        api_host: Optional[str] = None,
        proxy_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.credentials = Credentials(
            key=key if key is not None else settings.api_key,
            secret=secret if secret is not None else settings.api_secret,
            client_id=client_id if client_id is not None else settings.client_id,
        )
        self.nonce_generator: NonceFunc = nonce_generator or NonceGenerator()
        self.pair = normalize_pair(pair) if pair else settings.pair
        self.api_host = api_host or settings.api_host
        self.proxy_url = proxy_url or settings.proxy_url or None
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

        if self.proxy_url:
            logger.info(f"Routing Bitstamp requests through proxy for {self.api_host}")

    # ===== Request plumbing =====

    async def _get(self, action: str, params: Optional[Dict[str, Any]] = None) -> Any:
        path = build_get_path(action, params)
        return await self._send("GET", path)

    async def _post(self, action: str, params: Optional[Dict[str, Any]] = None) -> Any:
        if not self.credentials.is_complete():
            raise ConfigurationError("Must provide key, secret and client ID to make this API request.")

        params = params or {}
        path = build_post_path(action, params.get("pair"))
        fields = sign_request(self.credentials, self.nonce_generator(), params)
        return await self._send("POST", path, encode_params(fields))

    async def _send(self, method: str, path: str, body: Optional[str] = None) -> Any:
        return await send_request(
            method,
            self.api_host,
            path,
            body=body,
            timeout=self.timeout,
            proxy_url=self.proxy_url,
            transport=self._transport,
        )

    async def _request(self, method: str, action: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Request callable handed to the bitstamp_client.api endpoint modules"""
        if method == "GET":
            return await self._get(action, params)
        elif method == "POST":
            return await self._post(action, params)
        else:
            raise ValueError(f"Unsupported method: {method}")

    # ===== Public API =====

    async def transactions(self, time: Optional[str] = None, **params: Any) -> List[Dict[str, Any]]:
        return await public_market_data.get_transactions(self._request, self.pair, time=time, **params)

    async def ticker(self) -> Dict[str, Any]:
        return await public_market_data.get_ticker(self._request, self.pair)

    async def order_book(self, group: Optional[int] = None) -> Dict[str, Any]:
        return await public_market_data.get_order_book(self._request, self.pair, group=group)

    async def eur_usd(self) -> Dict[str, Any]:
        return await public_market_data.get_eur_usd(self._request)

    # ===== Private API (key, secret and client id required) =====

    async def balance(self) -> Dict[str, Any]:
        return await account_balance_api.get_balance(self._request)

    async def unconfirmed_btc(self) -> Any:
        return await account_balance_api.get_unconfirmed_btc(self._request)

    async def order_status(self, order_id: Union[int, str]) -> Dict[str, Any]:
        return await order_api.get_order_status(self._request, order_id)

    async def user_transactions(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
        **params: Any,
    ) -> List[Dict[str, Any]]:
        return await transaction_api.get_user_transactions(
            self._request, self.pair, offset=offset, limit=limit, sort=sort, **params
        )

    async def open_orders(self) -> List[Dict[str, Any]]:
        return await order_api.get_open_orders(self._request)

    async def cancel_order(self, order_id: Union[int, str]) -> Any:
        return await order_api.cancel_order(self._request, order_id)

    async def buy(self, amount: Number, price: Number) -> Dict[str, Any]:
        return await order_api.buy(self._request, amount, price, self.pair)

    async def sell(self, amount: Number, price: Number) -> Dict[str, Any]:
        return await order_api.sell(self._request, amount, price, self.pair)

    async def withdrawal_requests(self) -> List[Dict[str, Any]]:
        return await withdrawal_api.get_withdrawal_requests(self._request)

    async def bitcoin_withdrawal(self, amount: Number, address: str) -> Dict[str, Any]:
        return await withdrawal_api.bitcoin_withdrawal(self._request, amount, address)

    async def ripple_withdrawal(self, amount: Number, address: str, currency: Optional[str] = None) -> Any:
        return await withdrawal_api.ripple_withdrawal(self._request, amount, address, currency)

    async def bitcoin_deposit_address(self) -> Any:
        return await withdrawal_api.get_bitcoin_deposit_address(self._request)

    async def ripple_address(self) -> Any:
        return await withdrawal_api.get_ripple_address(self._request)
