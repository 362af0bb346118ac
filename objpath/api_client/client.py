"""Async JSON API client with named endpoints."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Self

import httpx

from .endpoints import Endpoint, build_endpoint_url, flatten_endpoints


if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType


logger = logging.getLogger(__name__)


class APIClientError(Exception):
    """Raised when an API responds with an error status."""

    def __init__(self, message: str, status_code: int, response: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class APIClient:
    """Small helper to call a JSON API through named endpoints."""

    def __init__(
        self,
        url: str,
        endpoints: Mapping[str, Any],
        *,
        client: httpx.AsyncClient | None = None,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        """Without ``client``, an ``httpx.AsyncClient`` is created here and closed by ``close``."""
        super().__init__()
        self.url = url
        self.endpoints: dict[str, Endpoint] = flatten_endpoints(endpoints)
        self.default_headers: dict[str, str] = dict(default_headers or {})
        self.authorization_token = ""
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    def set_authorization_token(self, token: str = "") -> None:
        """Set the bearer token for the next requests; an empty token removes it."""
        self.authorization_token = token

    def set_default_headers(self, headers: Mapping[str, str] | None = None, overwrite: bool = True) -> None:
        """Replace, or extend when ``overwrite`` is False, the default headers."""
        base = {} if overwrite else self.default_headers
        self.default_headers = {**base, **(headers or {})}

    def endpoint(self, name: str, parameters: Mapping[str, Any] | None = None) -> str:
        """Generate the URL of a named endpoint."""
        if name not in self.endpoints:
            msg = f"Trying to request unknown endpoint: {name}"
            raise KeyError(msg)
        return build_endpoint_url(self.url, self.endpoints[name], parameters)

    def headers(self, overwrites: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return the headers for a request: defaults, authorization and overwrites."""
        headers = dict(self.default_headers)
        if self.authorization_token:
            headers["Authorization"] = f"Bearer {self.authorization_token}"
        return {**headers, **(overwrites or {})}

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> Any:
        """Make a GET request."""
        return await self.fetch(url, headers=headers)

    async def post(self, url: str, body: Any, *, headers: Mapping[str, str] | None = None) -> Any:
        """Make a POST request with a JSON body."""
        return await self.fetch(url, method="POST", body=body, headers=headers)

    async def put(self, url: str, body: Any, *, headers: Mapping[str, str] | None = None) -> Any:
        """Make a PUT request with a JSON body."""
        return await self.fetch(url, method="PUT", body=body, headers=headers)

    async def delete(self, url: str, body: Any = None, *, headers: Mapping[str, str] | None = None) -> Any:
        """Make a DELETE request, optionally with a JSON body."""
        return await self.fetch(url, method="DELETE", body=body, headers=headers)

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return its decoded response.

        Raises ``APIClientError`` for 4xx and 5xx statuses.
        """
        method = method.upper()
        request_headers = self.headers(headers)
        content: str | None = None
        if body:
            content = json.dumps(body)
            request_headers["Content-Type"] = "application/json"

        logger.debug("%s %s", method, url)
        response = await self._client.request(method, url, headers=request_headers or None, content=content)
        data = _decode(response)
        if response.status_code >= httpx.codes.BAD_REQUEST:
            logger.debug("%s %s failed with status %d", method, url, response.status_code)
            raise self.error(data, response.status_code)
        return data

    def error(self, response: Any, status_code: int) -> APIClientError:
        """Build the error raised for an unsuccessful response."""
        if isinstance(response, dict) and "error" in response:
            message = str(response["error"])
        else:
            message = httpx.codes.get_reason_phrase(status_code) or f"HTTP {status_code}"
        return APIClientError(message, status_code, response)

    async def close(self) -> None:
        """Close the HTTP client when it was created by this instance."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
