"""Tests for the telbot exception hierarchy."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot.exceptions import (
    DecodeError,
    FileReadError,
    TelbotError,
    TelegramAPIError,
    TransportError,
    UploadNotSupportedError,
)


class TestHierarchy:
    """Every error derives from TelbotError."""

    @pytest.mark.parametrize(
        "exc_type",
        [TransportError, DecodeError, TelegramAPIError, FileReadError, UploadNotSupportedError],
    )
    def test_subclass(self, exc_type: type) -> None:
        assert issubclass(exc_type, TelbotError)

    def test_base_is_exception(self) -> None:
        assert issubclass(TelbotError, Exception)


class TestTelegramAPIError:
    """Validate the remote error carrier."""

    def test_attributes(self) -> None:
        exc = TelegramAPIError("Forbidden: bot was blocked by the user", 403, status_code=403)
        assert exc.description == "Forbidden: bot was blocked by the user"
        assert exc.error_code == 403
        assert exc.status_code == 403
        assert exc.parameters == {}
        assert "403" in str(exc)
        assert "blocked" in str(exc)

    def test_without_code(self) -> None:
        exc = TelegramAPIError("Unauthorized")
        assert str(exc) == "Telegram API error: Unauthorized"

    def test_retry_after(self) -> None:
        exc = TelegramAPIError("Too Many Requests: retry after 7", 429, {"retry_after": 7})
        assert exc.retry_after == 7
        assert exc.migrate_to_chat_id is None

    def test_migrate_to_chat_id(self) -> None:
        exc = TelegramAPIError("Bad Request: group chat was upgraded", 400, {"migrate_to_chat_id": -100123})
        assert exc.migrate_to_chat_id == -100123
        assert exc.retry_after is None


class TestOtherErrors:

    def test_transport_error(self) -> None:
        exc = TransportError("getMe", "ConnectTimeout")
        assert exc.method == "getMe"
        assert str(exc) == "getMe: transport failure: ConnectTimeout"

    def test_decode_error_with_status(self) -> None:
        exc = DecodeError("getMe: response body is not JSON", 502, "<html>")
        assert exc.status_code == 502
        assert exc.body == "<html>"
        assert str(exc).endswith("(HTTP 502)")

    def test_decode_error_without_status(self) -> None:
        exc = DecodeError("webhook: body is not JSON")
        assert exc.status_code is None
        assert str(exc) == "webhook: body is not JSON"

    def test_file_read_error(self) -> None:
        exc = FileReadError("/nope/kiwi.jpg", "No such file or directory")
        assert exc.path == "/nope/kiwi.jpg"
        assert "kiwi.jpg" in str(exc)

    def test_upload_not_supported(self) -> None:
        exc = UploadNotSupportedError("sendAudio", ["audio", "thumb"])
        assert exc.method == "sendAudio"
        assert exc.fields == ["audio", "thumb"]
        assert "audio, thumb" in str(exc)
