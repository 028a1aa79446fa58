"""
Module: gateway.

Every outbound API call goes through ``ApiGateway.request``. It adds the JSON
content type and the bearer token, and turns any failure (an HTTP error
status or a transport problem) into a single ``ApiRequestError`` so callers
handle one exception type.
"""

import logging
from typing import Any, Literal

import httpx

from vetclinic.client.config import ClientSettings
from vetclinic.client.token_store import TokenStore

logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT", "DELETE"]


class ApiRequestError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(response: httpx.Response) -> str:
    fallback = f"HTTP error {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return f"{fallback}: {response.reason_phrase}"
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return fallback


class ApiGateway:
    def __init__(
        self,
        settings: ClientSettings | None = None,
        token_store: TokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or ClientSettings()
        self.token_store = token_store or TokenStore(self.settings.token_file)
        # Tests pass an httpx.MockTransport here.
        self._transport = transport

    def _headers(self, token: str | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = token or self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        endpoint: str,
        method: Method = "GET",
        body: Any = None,
        token: str | None = None,
    ) -> Any:
        url = f"{self.settings.api_base_url.rstrip('/')}{endpoint}"
        kwargs: dict[str, Any] = {"headers": self._headers(token)}
        if body is not None and method != "GET":
            kwargs["json"] = body

        logger.debug("API request: %s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self._transport) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("API error (%s): %s", endpoint, exc)
            raise ApiRequestError(f"Request to {endpoint} failed: {exc}") from exc

        if not response.is_success:
            message = _error_message(response)
            logger.error("API error (%s): %s", endpoint, message)
            raise ApiRequestError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiRequestError(f"Invalid JSON in response from {endpoint}", status_code=response.status_code) from exc
