"""Decoding of Bot API response bodies.

Every Bot API reply is a JSON object with a boolean ``ok``.  On success the
payload sits under ``result``; on failure ``description`` (and optionally
``error_code`` / ``parameters``) explain why.  ``ok`` alone decides which
path is taken, so a failed reply that also carries a ``result`` is still an
error.
"""

import json
import logging
from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError

from telbot.base import TelegramMethod
from telbot.exceptions import DecodeError, TelegramAPIError
from telbot.types import ResponseParameters

logger = logging.getLogger("telbot.response")

# Bodies attached to DecodeError are cut to this many characters.
_BODY_PREVIEW = 500


class ApiResponse(BaseModel):
    """The successful response envelope shared by every Bot API method."""

    ok: StrictBool
    result: Any = None

    model_config = ConfigDict(extra="ignore")


def _preview(body: Union[bytes, str]) -> str:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return body[:_BODY_PREVIEW]


def _int_or_none(value: Any) -> Optional[int]:
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def _api_error(method: str, payload: Dict[str, Any], status_code: Optional[int]) -> TelegramAPIError:
    """Build the error for an ``"ok": false`` envelope.

    Members are read leniently: a failed reply is reported as a failure even
    when its ``description`` or ``parameters`` have an unexpected shape.
    """
    description = payload.get("description")
    if description is None or description == "":
        description = "Unknown error"
    elif not isinstance(description, str):
        description = str(description)
    error_code = _int_or_none(payload.get("error_code"))

    parameters = None
    raw_parameters = payload.get("parameters")
    if isinstance(raw_parameters, dict):
        parameters = {
            name: raw_parameters[name]
            for name in ResponseParameters.model_fields
            if _int_or_none(raw_parameters.get(name)) is not None
        }

    logger.warning(
        "Telegram API error",
        extra={
            "api_method": method,
            "error_code": error_code,
            "description": description,
            "status_code": status_code,
        },
    )
    return TelegramAPIError(description, error_code, parameters, status_code)


def decode_response(
    request: Union[TelegramMethod, Type[TelegramMethod]],
    body: Union[bytes, str],
    status_code: Optional[int] = None,
) -> Any:
    """Decode *body* as the response to *request* and return its result.

    The HTTP status is informational only: Telegram sends its error JSON
    with 4xx/5xx statuses, so the body is decoded regardless.

    Raises:
        DecodeError: If the body is not JSON, not a Bot API envelope, or the
            ``result`` does not match the request's result type.
        TelegramAPIError: If the envelope says ``"ok": false``.
    """
    method = request.name()
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise DecodeError(f"{method}: response body is not JSON", status_code, _preview(body)) from exc

    if isinstance(payload, dict) and payload.get("ok") is False:
        raise _api_error(method, payload, status_code)

    try:
        envelope = ApiResponse.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"{method}: response is not a Bot API envelope", status_code, payload) from exc

    if "result" not in payload:
        raise DecodeError(f"{method}: successful response has no result", status_code, payload)

    try:
        return request.parse_result(envelope.result)
    except ValidationError as exc:
        raise DecodeError(f"{method}: unexpected result shape: {exc.error_count()} error(s)", status_code, payload) from exc
