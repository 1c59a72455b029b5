"""Blocking adapter built on :mod:`requests`."""

import logging
from typing import Any, Optional

import requests

from telbot.base import FileMethod, JsonMethod
from telbot.exceptions import TransportError
from telbot.response import decode_response
from telbot.transport import (
    DEFAULT_BASE_URL,
    JSON_HEADERS,
    Transport,
    bot_url,
    multipart_parts,
    require_file,
    require_json,
)

logger = logging.getLogger("telbot.adapters.requests")


class RequestsApi(Transport):
    """Bot API client over a :class:`requests.Session`.

    Usage::

        with RequestsApi(token) as api:
            me = api.send_json(GetMe())
            api.send_file(SendPhoto(chat_id=me.id, photo=InputFile.from_path("kiwi.jpg")))
    """

    _DEFAULT_TIMEOUT: float = 10

    def __init__(
        self,
        token: str,
        timeout: float = _DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        """Create a client for the bot identified by *token*.

        Args:
            token: Bot token issued by @BotFather.
            timeout: Per-request timeout in seconds, handed to ``requests``.
            session: Session to reuse; a private one is created otherwise.
            base_url: API root, overridable for a local Bot API server.
        """
        self._base_url = bot_url(token, base_url)
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()

    def send_json(self, request: JsonMethod) -> Any:
        request = require_json(request)
        logger.debug("Sending JSON request", extra={"api_method": request.name(), "content_type": "json"})
        response = self._post(request.name(), data=request.to_json(), headers=JSON_HEADERS)
        return decode_response(request, response.content, response.status_code)

    def send_file(self, request: FileMethod) -> Any:
        request = require_file(request)
        parts = multipart_parts(request)
        logger.debug(
            "Sending multipart request",
            extra={"api_method": request.name(), "content_type": "multipart", "uploads": sorted(request.files())},
        )
        response = self._post(request.name(), files=parts)
        return decode_response(request, response.content, response.status_code)

    def _post(self, method: str, **kwargs: Any) -> requests.Response:
        """POST to *method*; any ``requests`` failure becomes :class:`TransportError`."""
        try:
            return self._session.post(f"{self._base_url}{method}", timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            # str(exc) usually embeds the URL, and with it the token.
            logger.error("Request failed", extra={"api_method": method, "error": type(exc).__name__})
            raise TransportError(method, type(exc).__name__) from exc

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "RequestsApi":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
