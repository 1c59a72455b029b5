"""The transport contract every HTTP adapter implements.

An adapter becomes a usable Bot API client by implementing two operations:

* ``send_json(request)`` for :class:`~telbot.base.JsonMethod` requests, and
* ``send_file(request)`` for :class:`~telbot.base.FileMethod` requests.

:class:`Transport` is the blocking flavour, :class:`AsyncTransport` the
asyncio one.  Neither holds state; the helpers below are shared by the
adapters so the URL, the JSON body and the multipart form are built the
same way everywhere.
"""

import abc
from typing import Any, List, Optional, Tuple, Union

from telbot.base import FileMethod, JsonMethod, TelegramMethod

DEFAULT_BASE_URL = "https://api.telegram.org"

JSON_HEADERS = {"Content-Type": "application/json"}

# (field name, (file name or None, content, MIME type or None))
FormPart = Tuple[str, Tuple[Optional[str], Union[str, bytes], Optional[str]]]


def bot_url(token: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """Return ``<base_url>/bot<token>/``, the prefix of every method URL."""
    return f"{base_url.rstrip('/')}/bot{token}/"


def require_json(request: Any) -> JsonMethod:
    if not isinstance(request, JsonMethod):
        raise TypeError(f"send_json expects a JsonMethod, got {type(request).__name__}")
    return request


def require_file(request: Any) -> FileMethod:
    if not isinstance(request, FileMethod):
        raise TypeError(f"send_file expects a FileMethod, got {type(request).__name__}")
    return request


def multipart_parts(request: FileMethod) -> List[FormPart]:
    """Build the multipart form of *request*.

    Scalar fields (including file ids / URLs) become parts without a file
    name; every upload returned by :meth:`FileMethod.files` becomes a
    binary part carrying its file name and MIME type.  The list form is
    understood by both ``requests`` and ``httpx`` and always produces a
    ``multipart/form-data`` body, even when nothing is uploaded.

    Raises:
        FileReadError: If a path-backed upload cannot be read.
    """
    parts: List[FormPart] = [(key, (None, value, None)) for key, value in request.form_fields().items()]
    for key, upload in request.files().items():
        parts.append((key, (upload.name, upload.read(), upload.mime)))
    return parts


class Transport(abc.ABC):
    """Blocking transport contract."""

    @abc.abstractmethod
    def send_json(self, request: JsonMethod) -> Any:
        """Send *request* as a JSON document and return its decoded result."""

    @abc.abstractmethod
    def send_file(self, request: FileMethod) -> Any:
        """Send *request* as a multipart form and return its decoded result."""

    def send(self, request: TelegramMethod) -> Any:
        """Route *request* to :meth:`send_file` or :meth:`send_json` by its marker."""
        if isinstance(request, FileMethod):
            return self.send_file(request)
        return self.send_json(require_json(request))


class AsyncTransport(abc.ABC):
    """Asyncio transport contract."""

    @abc.abstractmethod
    async def send_json(self, request: JsonMethod) -> Any:
        """Send *request* as a JSON document and return its decoded result."""

    @abc.abstractmethod
    async def send_file(self, request: FileMethod) -> Any:
        """Send *request* as a multipart form and return its decoded result."""

    async def send(self, request: TelegramMethod) -> Any:
        """Route *request* to :meth:`send_file` or :meth:`send_json` by its marker."""
        if isinstance(request, FileMethod):
            return await self.send_file(request)
        return await self.send_json(require_json(request))
