"""JSON-only adapter for runtimes without multipart support.

Serverless and edge runtimes often expose nothing but a ``fetch``-style
JSON client.  :class:`JsonOnlyApi` sends *every* request as JSON, including
file-bearing ones whose files are all references (file ids or URLs).  A
request that actually uploads bytes is refused up front with
:class:`~telbot.exceptions.UploadNotSupportedError`.
"""

import logging
from typing import Any, Optional

import httpx

from telbot.base import FileMethod, JsonMethod, TelegramMethod
from telbot.exceptions import TransportError, UploadNotSupportedError
from telbot.response import decode_response
from telbot.transport import DEFAULT_BASE_URL, JSON_HEADERS, AsyncTransport, bot_url, require_file, require_json

logger = logging.getLogger("telbot.adapters.json_only")


class JsonOnlyApi(AsyncTransport):
    """Asyncio client that never builds multipart bodies."""

    def __init__(
        self,
        token: str,
        timeout: float = 10,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._base_url = bot_url(token, base_url)
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    async def send_json(self, request: JsonMethod) -> Any:
        return await self._send(require_json(request))

    async def send_file(self, request: FileMethod) -> Any:
        request = require_file(request)
        uploads = request.files()
        if uploads:
            raise UploadNotSupportedError(request.name(), sorted(uploads))
        return await self._send(request)

    async def _send(self, request: TelegramMethod) -> Any:
        method = request.name()
        logger.debug("Sending JSON request", extra={"api_method": method, "content_type": "json"})
        try:
            response = await self._client.post(
                f"{self._base_url}{method}",
                content=request.to_json(),
                headers=JSON_HEADERS,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            logger.error("Request failed", extra={"api_method": method, "error": type(exc).__name__})
            raise TransportError(method, type(exc).__name__) from exc
        return decode_response(request, response.content, response.status_code)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "JsonOnlyApi":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
