"""Telegram webhook endpoint for receiving updates.

Mount :data:`router` on any FastAPI application (or serve :func:`create_app`
with an ASGI server) and register the public URL with ``setWebhook``.
Each delivery is parsed with :func:`telbot.webhook.parse_update` and handed
to the same dispatcher the polling loop uses.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, FastAPI, HTTPException, Request, status

import config
from core.logger import TelbotLogger
from bot.dispatcher import process_update
from telbot.adapters import HttpxApi
from telbot.exceptions import DecodeError
from telbot.transport import AsyncTransport
from telbot.webhook import parse_update

logger = TelbotLogger.get_logger()

router = APIRouter(tags=["telegram"])

# Created on the first delivery, then reused.
_api: Optional[HttpxApi] = None


def get_api() -> AsyncTransport:
    """Return the shared :class:`HttpxApi` (lazy initialization).

    Raises:
        HTTPException: 503 if ``BOT_TOKEN`` is not configured.
    """
    global _api

    if _api is None:
        if not config.BOT_TOKEN:
            logger.error("Webhook delivery received but BOT_TOKEN is not set")
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Bot is not configured")
        _api = HttpxApi(config.BOT_TOKEN, timeout=config.REQUEST_TIMEOUT, base_url=config.API_BASE_URL)
        logger.info("Webhook API client initialized")
    return _api


@router.post("/webhook")
async def telegram_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    api: AsyncTransport = Depends(get_api),
) -> dict:
    """Receive one update from Telegram.

    Answers 200 immediately and processes the update in the background, so
    Telegram never waits on the bot's own API calls.  A body that is not an
    update is rejected with 400.
    """
    try:
        update = parse_update(await request.body())
    except DecodeError as exc:
        logger.warning("Rejected webhook delivery", extra={"error": str(exc)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid update") from exc

    logger.info("Received update", extra={"update_id": update.update_id, "kind": update.kind})
    background_tasks.add_task(process_update, api, update)
    return {"ok": True}


async def close_api() -> None:
    """Close the shared client, if one was created."""
    global _api

    if _api is not None:
        await _api.aclose()
        _api = None
        logger.info("Webhook API client closed")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the shared Bot API client when the application shuts down."""
    yield
    await close_api()


def create_app() -> FastAPI:
    """Return a FastAPI application serving :data:`router`."""
    app = FastAPI(title="telbot echo bot", lifespan=lifespan)
    app.include_router(router)
    return app
