"""Helpers for bots that receive updates through a webhook.

Telegram POSTs one :class:`~telbot.types.Update` per request to the URL
registered with ``setWebhook``.  The bot may answer that request with a
single Bot API call of its own by returning a JSON object that names the
method alongside its fields; :func:`webhook_reply` builds that object.
"""

import json
import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from telbot.base import FileMethod, TelegramMethod
from telbot.exceptions import DecodeError, UploadNotSupportedError
from telbot.types import Update

logger = logging.getLogger("telbot.webhook")


def parse_update(body: Union[bytes, str, Dict[str, Any]]) -> Update:
    """Decode one webhook delivery into an :class:`Update`.

    Raises:
        DecodeError: If *body* is not JSON or not an update.
    """
    if isinstance(body, (bytes, str)):
        try:
            body = json.loads(body)
        except ValueError as exc:
            raise DecodeError("webhook: body is not JSON") from exc
    try:
        return Update.model_validate(body)
    except ValidationError as exc:
        raise DecodeError(f"webhook: not an update: {exc.error_count()} error(s)", body=body) from exc


def webhook_reply(request: TelegramMethod) -> Dict[str, Any]:
    """Return the JSON object answering a webhook delivery with *request*.

    Replies travel as plain JSON, so file-bearing requests are accepted only
    when every file field is a reference (file id or URL).

    Raises:
        UploadNotSupportedError: If *request* carries raw file data.
    """
    if isinstance(request, FileMethod):
        uploads = request.files()
        if uploads:
            raise UploadNotSupportedError(request.name(), sorted(uploads))
    reply = {"method": request.name()}
    reply.update(request.payload())
    logger.debug("Built webhook reply", extra={"api_method": request.name()})
    return reply
