"""Tests for response decoding."""

import json
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot.exceptions import DecodeError, TelegramAPIError
from telbot.methods import GetMe, GetUpdates, SendMessage
from telbot.response import decode_response
from telbot.types import User


def _body(payload: dict) -> bytes:
    return json.dumps(payload).encode("utf-8")


class TestSuccess:

    def test_get_me(self) -> None:
        body = b'{"ok":true,"result":{"id":1,"is_bot":true,"first_name":"X"}}'
        user = decode_response(GetMe(), body, 200)
        assert isinstance(user, User)
        assert user.id == 1
        assert user == User(id=1, is_bot=True, first_name="X")

    def test_accepts_request_class(self) -> None:
        assert decode_response(GetUpdates, _body({"ok": True, "result": []})) == []

    def test_accepts_str_body(self) -> None:
        assert decode_response(GetUpdates(), '{"ok": true, "result": [{"update_id": 3}]}')[0].update_id == 3

    def test_unknown_envelope_members_ignored(self) -> None:
        body = _body({"ok": True, "result": {"id": 1, "is_bot": True, "first_name": "X"}, "extra": 1})
        assert decode_response(GetMe(), body).id == 1


class TestApiError:

    def test_unauthorized(self) -> None:
        with pytest.raises(TelegramAPIError) as exc_info:
            decode_response(GetMe(), b'{"ok":false,"description":"Unauthorized"}', 401)
        exc = exc_info.value
        assert exc.description == "Unauthorized"
        assert exc.status_code == 401
        assert exc.error_code is None

    def test_ok_false_wins_over_result(self) -> None:
        body = _body({"ok": False, "result": {"id": 1, "is_bot": True, "first_name": "X"}, "description": "nope"})
        with pytest.raises(TelegramAPIError):
            decode_response(GetMe(), body, 200)

    def test_missing_description(self) -> None:
        with pytest.raises(TelegramAPIError) as exc_info:
            decode_response(GetMe(), b'{"ok":false,"error_code":500}', 500)
        assert exc_info.value.description == "Unknown error"
        assert exc_info.value.error_code == 500

    def test_parameters(self) -> None:
        body = _body({
            "ok": False,
            "error_code": 429,
            "description": "Too Many Requests: retry after 3",
            "parameters": {"retry_after": 3},
        })
        with pytest.raises(TelegramAPIError) as exc_info:
            decode_response(SendMessage(chat_id=1, text="x"), body, 429)
        assert exc_info.value.retry_after == 3
        assert exc_info.value.parameters == {"retry_after": 3}

    def test_non_string_description(self) -> None:
        with pytest.raises(TelegramAPIError) as exc_info:
            decode_response(GetMe(), b'{"ok":false,"description":5}', 400)
        assert exc_info.value.description == "5"
        assert exc_info.value.status_code == 400

    def test_malformed_parameters_dropped(self) -> None:
        body = _body({
            "ok": False,
            "error_code": "429",
            "description": "Too Many Requests",
            "parameters": {"retry_after": "soon", "migrate_to_chat_id": -100123},
        })
        with pytest.raises(TelegramAPIError) as exc_info:
            decode_response(SendMessage(chat_id=1, text="x"), body, 429)
        exc = exc_info.value
        assert exc.error_code is None
        assert exc.retry_after is None
        assert exc.migrate_to_chat_id == -100123

    def test_parameters_not_an_object(self) -> None:
        body = _body({"ok": False, "description": "Bad Request", "parameters": [1, 2]})
        with pytest.raises(TelegramAPIError) as exc_info:
            decode_response(GetMe(), body, 400)
        assert exc_info.value.parameters == {}

    def test_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="telbot.response"):
            with pytest.raises(TelegramAPIError):
                decode_response(GetMe(), b'{"ok":false,"error_code":401,"description":"Unauthorized"}', 401)
        record = next(r for r in caplog.records if r.name == "telbot.response")
        assert record.levelno == logging.WARNING
        assert record.api_method == "getMe"
        assert record.error_code == 401


class TestDecodeError:

    def test_not_json(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_response(GetMe(), b"<html>502 Bad Gateway</html>", 502)
        assert exc_info.value.status_code == 502
        assert exc_info.value.body.startswith("<html>")

    def test_empty_body(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(GetMe(), b"", 200)

    def test_not_an_object(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(GetMe(), b"[1, 2, 3]", 200)

    def test_missing_ok(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(GetMe(), b'{"result":{"id":1,"is_bot":true,"first_name":"X"}}', 200)

    def test_ok_must_be_boolean(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(GetMe(), b'{"ok":"true","result":{"id":1,"is_bot":true,"first_name":"X"}}', 200)

    def test_missing_result(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(GetMe(), b'{"ok":true}', 200)

    def test_result_shape_mismatch(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_response(GetMe(), b'{"ok":true,"result":true}', 200)
        assert "getMe" in str(exc_info.value)

    def test_body_preview_truncated(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_response(GetMe(), b"x" * 5000)
        assert len(exc_info.value.body) == 500
