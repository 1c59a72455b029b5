"""Tests for the httpx-based asyncio adapters (HttpxApi and JsonOnlyApi)."""

import json
import sys
import os
from typing import Callable, List

import httpx
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot.adapters import HttpxApi, JsonOnlyApi
from telbot.exceptions import DecodeError, TelegramAPIError, TransportError, UploadNotSupportedError
from telbot.files import InputFile
from telbot.methods import GetMe, SendMessage, SendPhoto, SetWebhook
from telbot.types import Message, User

TOKEN = "123456:ABC-DEF"
ME = {"id": 1, "is_bot": True, "first_name": "X"}
SENT = {"message_id": 5, "date": 0, "chat": {"id": 42, "type": "private"}}
KIWI = InputFile(name="kiwi.jpg", data=b"\xff\xd8kiwi", mime="image/jpeg")


def _client(seen: List[httpx.Request], reply: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """AsyncClient whose transport records every request and answers with *reply*."""

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return reply(request)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _ok(result) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(200, json={"ok": True, "result": result})


# ── HttpxApi ─────────────────────────────────────────────────────────────────


class TestHttpxSendJson:

    @pytest.mark.asyncio
    async def test_get_me(self) -> None:
        seen: List[httpx.Request] = []
        async with HttpxApi(TOKEN, client=_client(seen, _ok(ME))) as api:
            user = await api.send_json(GetMe())

        assert user == User(**ME)
        assert len(seen) == 1
        assert str(seen[0].url) == f"https://api.telegram.org/bot{TOKEN}/getMe"
        assert seen[0].method == "POST"
        assert seen[0].headers["content-type"] == "application/json"
        assert seen[0].content == b"{}"

    @pytest.mark.asyncio
    async def test_body_is_canonical_json(self) -> None:
        seen: List[httpx.Request] = []
        request = SendMessage(chat_id=42, text="grüß dich")
        async with HttpxApi(TOKEN, client=_client(seen, _ok(SENT))) as api:
            message = await api.send_json(request)

        assert isinstance(message, Message)
        assert seen[0].content == request.to_json()

    @pytest.mark.asyncio
    async def test_api_error(self) -> None:
        seen: List[httpx.Request] = []
        reply = lambda request: httpx.Response(403, json={"ok": False, "error_code": 403, "description": "Forbidden"})  # noqa: E731
        async with HttpxApi(TOKEN, client=_client(seen, reply)) as api:
            with pytest.raises(TelegramAPIError) as exc_info:
                await api.send_json(SendMessage(chat_id=42, text="x"))
        assert exc_info.value.error_code == 403
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_gateway_error_page(self) -> None:
        seen: List[httpx.Request] = []
        reply = lambda request: httpx.Response(502, text="<html>Bad Gateway</html>")  # noqa: E731
        async with HttpxApi(TOKEN, client=_client(seen, reply)) as api:
            with pytest.raises(DecodeError) as exc_info:
                await api.send_json(GetMe())
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(f"cannot reach {request.url}", request=request)

        async with HttpxApi(TOKEN, client=httpx.AsyncClient(transport=httpx.MockTransport(handler))) as api:
            with pytest.raises(TransportError) as exc_info:
                await api.send_json(GetMe())
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert TOKEN not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_rejects_file_method(self) -> None:
        seen: List[httpx.Request] = []
        async with HttpxApi(TOKEN, client=_client(seen, _ok(SENT))) as api:
            with pytest.raises(TypeError):
                await api.send_json(SendPhoto(chat_id=1, photo=KIWI))
        assert seen == []


class TestHttpxSendFile:

    @pytest.mark.asyncio
    async def test_multipart_upload(self) -> None:
        seen: List[httpx.Request] = []
        async with HttpxApi(TOKEN, client=_client(seen, _ok(SENT))) as api:
            await api.send_file(SendPhoto(chat_id=42, photo=KIWI, caption="fresh"))

        request = seen[0]
        assert str(request.url).endswith("/sendPhoto")
        assert request.headers["content-type"].startswith("multipart/form-data")
        body = request.content
        assert b'name="photo"; filename="kiwi.jpg"' in body
        assert b"\xff\xd8kiwi" in body
        assert b'name="chat_id"' in body
        assert b'name="caption"' in body

    @pytest.mark.asyncio
    async def test_without_uploads_still_multipart(self) -> None:
        seen: List[httpx.Request] = []
        async with HttpxApi(TOKEN, client=_client(seen, _ok(True))) as api:
            assert await api.send_file(SetWebhook(url="https://example.com/hook")) is True
        assert seen[0].headers["content-type"].startswith("multipart/form-data")
        assert b"https://example.com/hook" in seen[0].content

    @pytest.mark.asyncio
    async def test_send_dispatches_by_marker(self) -> None:
        seen: List[httpx.Request] = []
        async with HttpxApi(TOKEN, client=_client(seen, _ok(SENT))) as api:
            await api.send(SendMessage(chat_id=42, text="x"))
            await api.send(SendPhoto(chat_id=42, photo=KIWI))
        assert seen[0].headers["content-type"] == "application/json"
        assert seen[1].headers["content-type"].startswith("multipart/form-data")

    @pytest.mark.asyncio
    async def test_context_manager_keeps_caller_client(self) -> None:
        client = _client([], _ok(ME))
        async with HttpxApi(TOKEN, client=client):
            pass
        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_own_client(self) -> None:
        api = HttpxApi(TOKEN)
        async with api:
            pass
        assert api._client.is_closed


# ── JsonOnlyApi ──────────────────────────────────────────────────────────────


class TestJsonOnlyApi:

    @pytest.mark.asyncio
    async def test_send_json(self) -> None:
        seen: List[httpx.Request] = []
        api = JsonOnlyApi(TOKEN, client=_client(seen, _ok(ME)))
        assert (await api.send_json(GetMe())).id == 1
        assert seen[0].content == b"{}"
        await api.aclose()

    @pytest.mark.asyncio
    async def test_file_reference_sent_as_json(self) -> None:
        seen: List[httpx.Request] = []
        api = JsonOnlyApi(TOKEN, client=_client(seen, _ok(SENT)))
        request = SendPhoto(chat_id=42, photo="AgADBAAD", caption="again")
        await api.send_file(request)
        await api.aclose()

        assert seen[0].headers["content-type"] == "application/json"
        assert json.loads(seen[0].content) == {"chat_id": 42, "photo": "AgADBAAD", "caption": "again"}
        assert seen[0].content == request.to_json()

    @pytest.mark.asyncio
    async def test_upload_refused(self) -> None:
        seen: List[httpx.Request] = []
        api = JsonOnlyApi(TOKEN, client=_client(seen, _ok(SENT)))
        with pytest.raises(UploadNotSupportedError) as exc_info:
            await api.send_file(SendPhoto(chat_id=42, photo=KIWI))
        await api.aclose()
        assert exc_info.value.fields == ["photo"]
        assert seen == []

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        api = JsonOnlyApi(TOKEN, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        with pytest.raises(TransportError):
            await api.send_json(GetMe())
        await api.aclose()

    @pytest.mark.asyncio
    async def test_aclose_respects_client_ownership(self) -> None:
        client = _client([], _ok(ME))
        async with JsonOnlyApi(TOKEN, client=client):
            pass
        assert not client.is_closed
        await client.aclose()

        own = JsonOnlyApi(TOKEN)
        await own.aclose()
        assert own._client.is_closed
