"""
ERP REST API Connector
Handles all HTTP interactions with the ERP backend

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from erp_console.core.config import settings
from erp_console.core.errors import ErpApiError, SessionExpiredError
from erp_console.core.token_store import MemoryTokenStore, TokenStore

logger = logging.getLogger(__name__)


class ErpConnector:
    """
    Connector for the ERP REST API

    Handles:
    - Bearer token injection from the token store
    - Session expiry (401): clears the token and reports the login path
    - JSON request/response decoding

    There is no retry, backoff or request queue: every call is one request.
    """

    def __init__(self, base_url: str = None, token_store: TokenStore = None,
                 timeout: float = None, transport: httpx.AsyncBaseTransport = None,
                 on_unauthorized: Callable[[str], None] = None, login_path: str = None):
        """
        Initialize ERP connector

        Args:
            base_url: Backend base URL (defaults to ERP_API_URL)
            token_store: Where the bearer token lives (defaults to in-memory)
            timeout: Seconds per request (defaults to ERP_REQUEST_TIMEOUT)
            transport: Optional httpx transport (used by tests)
            on_unauthorized: Called with the login path after a 401
            login_path: Where an expired session is sent (defaults to ERP_LOGIN_PATH)
        """
        self.base_url = (base_url or settings.ERP_API_URL).rstrip('/')
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self.timeout = timeout if timeout is not None else settings.ERP_REQUEST_TIMEOUT
        self.transport = transport
        self.on_unauthorized = on_unauthorized
        self.login_path = login_path or settings.ERP_LOGIN_PATH
        self.api_calls = 0

    def _headers(self) -> Dict[str, str]:
        headers = {
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        token = self.token_store.get()
        if token:
            headers['Authorization'] = f'Bearer {token}'
        return headers

    def _handle_unauthorized(self, payload: Any) -> SessionExpiredError:
        logger.warning("Session expired (401), clearing stored token")
        self.token_store.clear()
        if self.on_unauthorized:
            self.on_unauthorized(self.login_path)
        return SessionExpiredError(redirect_to=self.login_path, payload=payload)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    async def request(self, method: str, path: str, params: Optional[Dict] = None,
                      json: Any = None) -> Any:
        """
        Make an authenticated request to the ERP API

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (e.g., '/api/v1/inventory/products')
            params: Query parameters; None values are dropped
            json: JSON body

        Returns:
            Decoded JSON body, or None for an empty response

        Raises:
            SessionExpiredError: backend answered 401
            ErpApiError: any other failure
        """
        url = f"{self.base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug(f"{method} {path} {query or ''}")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.request(
                    method,
                    url,
                    params=query or None,
                    json=json,
                    headers=self._headers(),
                )
            except httpx.HTTPError as e:
                logger.error(f"API request error: {method} {path}: {e}")
                raise ErpApiError(f"Request failed: {e}") from e

        self.api_calls += 1
        payload = self._decode(response)

        if response.status_code == 401:
            raise self._handle_unauthorized(payload)

        if response.is_error:
            logger.error(f"API request failed: {method} {path} -> {response.status_code}")
            raise ErpApiError(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                payload=payload,
            )

        return payload

    async def get(self, path: str, params: Optional[Dict] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, params: Optional[Dict] = None) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
