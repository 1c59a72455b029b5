"""Tests for the command registry, handlers and update dispatcher."""

import sys
import os
from unittest.mock import AsyncMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import config
from bot.dispatcher import process_update, publish_commands, run
from bot.handlers import START_FALLBACK_TEXT
from bot.registry import CommandRegistry, command_of, registry
from telbot.exceptions import TelegramAPIError, TransportError
from telbot.methods import SendMessage, SendPhoto, SetMyCommands
from telbot.types import CallbackQuery, Chat, Message, PhotoSize, Update, User


# ── Fixtures ─────────────────────────────────────────────────────────────────


def _make_message(text: str | None, chat_id: int = 1000, message_id: int = 7, **extra) -> Message:
    """Build a minimal Message model for handler tests."""
    return Message(
        message_id=message_id,
        date=0,
        chat=Chat(id=chat_id, type="private"),
        from_user=User(id=42, is_bot=False, first_name="Ada"),
        text=text,
        **extra,
    )


def _make_update(text: str | None, **extra) -> Update:
    return Update(update_id=1, message=_make_message(text, **extra))


@pytest.fixture()
def api() -> AsyncMock:
    return AsyncMock()


# ── Registry ─────────────────────────────────────────────────────────────────


class TestRegistry:

    def test_singleton(self) -> None:
        assert CommandRegistry() is registry

    def test_handlers_registered(self) -> None:
        assert set(registry.entries()) >= {"/start", "/help"}
        assert registry.get("/start").description

    def test_unknown_command(self) -> None:
        assert registry.get("/nope") is None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("/start", "/start"),
            ("/start@telbot_echo_bot", "/start"),
            ("/help me please", "/help"),
            ("hello /start", ""),
            ("", ""),
        ],
    )
    def test_command_of(self, text: str, expected: str) -> None:
        assert command_of(text) == expected


# ── Echo ─────────────────────────────────────────────────────────────────────


class TestEcho:

    @pytest.mark.asyncio
    async def test_text_is_echoed_as_reply(self, api: AsyncMock) -> None:
        await process_update(api, _make_update("hello"))
        api.send_json.assert_awaited_once_with(SendMessage(chat_id=1000, text="hello", reply_to_message_id=7))
        api.send_file.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_command_is_echoed(self, api: AsyncMock) -> None:
        await process_update(api, _make_update("/unknown"))
        api.send_json.assert_awaited_once()
        assert api.send_json.await_args.args[0].text == "/unknown"

    @pytest.mark.asyncio
    async def test_photo_without_text_ignored(self, api: AsyncMock) -> None:
        photo = [PhotoSize(file_id="A", file_unique_id="a", width=1, height=1)]
        await process_update(api, _make_update(None, photo=photo, caption="nice"))
        api.send_json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_edited_message_echoed(self, api: AsyncMock) -> None:
        await process_update(api, Update(update_id=2, edited_message=_make_message("fixed")))
        assert api.send_json.await_args.args[0].text == "fixed"

    @pytest.mark.asyncio
    async def test_non_message_update_skipped(self, api: AsyncMock) -> None:
        query = CallbackQuery(id="cb", from_user=User(id=42, is_bot=False, first_name="Ada"), chat_instance="ci")
        await process_update(api, Update(update_id=3, callback_query=query))
        api.send_json.assert_not_awaited()
        api.send_file.assert_not_awaited()


# ── /start and /help ─────────────────────────────────────────────────────────


class TestStart:

    @pytest.mark.asyncio
    async def test_photo_uploaded(self, api: AsyncMock, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        photo_path = tmp_path / "kiwi.jpg"
        photo_path.write_bytes(b"\xff\xd8kiwi")
        monkeypatch.setattr(config, "START_PHOTO_PATH", str(photo_path))

        await process_update(api, _make_update("/start"))

        api.send_file.assert_awaited_once()
        request = api.send_file.await_args.args[0]
        assert isinstance(request, SendPhoto)
        assert request.chat_id == 1000
        assert request.reply_to_message_id == 7
        assert request.files()["photo"].name == "kiwi.jpg"
        assert request.files()["photo"].read() == b"\xff\xd8kiwi"

    @pytest.mark.asyncio
    async def test_text_fallback(self, api: AsyncMock, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "START_PHOTO_PATH", None)
        await process_update(api, _make_update("/start@telbot_echo_bot"))
        api.send_file.assert_not_awaited()
        api.send_json.assert_awaited_once_with(
            SendMessage(chat_id=1000, text=START_FALLBACK_TEXT, reply_to_message_id=7)
        )


class TestHelp:

    @pytest.mark.asyncio
    async def test_lists_commands(self, api: AsyncMock) -> None:
        await process_update(api, _make_update("/help"))
        text = api.send_json.await_args.args[0].text
        assert "/start" in text
        assert "/help" in text


# ── Error handling ───────────────────────────────────────────────────────────


class TestErrors:

    @pytest.mark.asyncio
    async def test_api_error_swallowed(self, api: AsyncMock) -> None:
        api.send_json.side_effect = TelegramAPIError("Forbidden: bot was blocked by the user", 403)
        await process_update(api, _make_update("hello"))
        api.send_json.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_transport_error_swallowed(self, api: AsyncMock) -> None:
        api.send_json.side_effect = TransportError("sendMessage", "ConnectError")
        await process_update(api, _make_update("hello"))

    @pytest.mark.asyncio
    async def test_programming_errors_propagate(self, api: AsyncMock) -> None:
        api.send_json.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            await process_update(api, _make_update("hello"))


# ── Startup ──────────────────────────────────────────────────────────────────


class TestStartup:

    @pytest.mark.asyncio
    async def test_publish_commands(self, api: AsyncMock) -> None:
        await publish_commands(api)
        request = api.send_json.await_args.args[0]
        assert isinstance(request, SetMyCommands)
        assert {c.command for c in request.commands} >= {"start", "help"}

    @pytest.mark.asyncio
    async def test_run_requires_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "BOT_TOKEN", None)
        with pytest.raises(EnvironmentError):
            await run()
