"""Typed Telegram Bot API client: request models, transports and adapters.

Requests are frozen pydantic models.  JSON-only requests derive from
:class:`JsonMethod`; requests that may upload files derive from
:class:`FileMethod`.  Any object implementing ``send_json`` / ``send_file``
(see :mod:`telbot.transport`) can send them; three adapters ship with the
package.

Usage::

    from telbot import RequestsApi, InputFile
    from telbot.methods import GetMe, SendPhoto

    with RequestsApi(token) as api:
        me = api.send_json(GetMe())
        api.send_file(SendPhoto(chat_id=42, photo=InputFile.from_path("kiwi.jpg")))
"""

from telbot.adapters import HttpxApi, JsonOnlyApi, RequestsApi
from telbot.base import FileMethod, JsonMethod, TelegramMethod
from telbot.exceptions import (
    DecodeError,
    FileReadError,
    TelbotError,
    TelegramAPIError,
    TransportError,
    UploadNotSupportedError,
)
from telbot.files import InputFile
from telbot.polling import AsyncPolling, Polling
from telbot.transport import AsyncTransport, Transport
from telbot.webhook import parse_update, webhook_reply

__all__ = [
    "AsyncPolling",
    "AsyncTransport",
    "DecodeError",
    "FileMethod",
    "FileReadError",
    "HttpxApi",
    "InputFile",
    "JsonMethod",
    "JsonOnlyApi",
    "Polling",
    "RequestsApi",
    "TelbotError",
    "TelegramAPIError",
    "TelegramMethod",
    "Transport",
    "TransportError",
    "UploadNotSupportedError",
    "parse_update",
    "webhook_reply",
]
