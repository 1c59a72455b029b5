"""Asyncio adapter built on :class:`httpx.AsyncClient`."""

import logging
from typing import Any, Optional

import httpx

from telbot.base import FileMethod, JsonMethod
from telbot.exceptions import TransportError
from telbot.response import decode_response
from telbot.transport import (
    DEFAULT_BASE_URL,
    JSON_HEADERS,
    AsyncTransport,
    bot_url,
    multipart_parts,
    require_file,
    require_json,
)

logger = logging.getLogger("telbot.adapters.httpx")


class HttpxApi(AsyncTransport):
    """Non-blocking Bot API client.

    A private :class:`httpx.AsyncClient` is created unless one is passed
    in.  :meth:`aclose` closes only that private client; use the instance
    as an async context manager::

        async with HttpxApi(token) as api:
            updates = await api.send_json(GetUpdates(timeout=30))
    """

    _DEFAULT_TIMEOUT: float = 10

    def __init__(
        self,
        token: str,
        timeout: float = _DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._base_url = bot_url(token, base_url)
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    async def send_json(self, request: JsonMethod) -> Any:
        request = require_json(request)
        logger.debug("Sending JSON request", extra={"api_method": request.name(), "content_type": "json"})
        response = await self._post(request.name(), content=request.to_json(), headers=JSON_HEADERS)
        return decode_response(request, response.content, response.status_code)

    async def send_file(self, request: FileMethod) -> Any:
        request = require_file(request)
        parts = multipart_parts(request)
        logger.debug(
            "Sending multipart request",
            extra={"api_method": request.name(), "content_type": "multipart", "uploads": sorted(request.files())},
        )
        response = await self._post(request.name(), files=parts)
        return decode_response(request, response.content, response.status_code)

    async def _post(self, method: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.post(f"{self._base_url}{method}", timeout=self._timeout, **kwargs)
        except httpx.HTTPError as exc:
            # httpx errors carry the request URL, and with it the token.
            logger.error("Request failed", extra={"api_method": method, "error": type(exc).__name__})
            raise TransportError(method, type(exc).__name__) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxApi":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
