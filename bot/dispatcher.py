"""Update dispatcher and main polling loop.

Routes each incoming update to the handler registered in
:mod:`bot.handlers`.  The loop uses ``asyncio`` to process updates
concurrently, so a slow upload never blocks the bot from receiving new
messages.
"""

import asyncio

import config
from core.logger import TelbotLogger
from bot.registry import registry
from telbot.adapters import HttpxApi
from telbot.exceptions import TelbotError, TelegramAPIError
from telbot.methods import SetMyCommands
from telbot.polling import AsyncPolling
from telbot.transport import AsyncTransport
from telbot.types import BotCommand, Update

# Import handlers module so @registry.register decorators execute.
import bot.handlers as _handlers  # noqa: F401

logger = TelbotLogger.get_logger()

# Pause before polling again after getUpdates failed.
_RETRY_DELAY = 5


async def process_update(api: AsyncTransport, update: Update) -> None:
    """Dispatch a single update to the appropriate handler.

    Errors raised while answering are logged and swallowed so one bad
    update cannot stop the bot.
    """
    message = update.message_like()
    if message is None:
        logger.debug("Update has no message — skipping", extra={"update_id": update.update_id, "kind": update.kind})
        return

    logger.debug("Processing update", extra={"update_id": update.update_id, "chat_id": message.chat.id})
    try:
        handled = await registry.dispatch(api, message)
    except TelbotError as exc:
        logger.error(
            "Handler failed",
            extra={"update_id": update.update_id, "error": type(exc).__name__, "detail": str(exc)},
        )
        return
    if not handled:
        logger.debug("No handler matched", extra={"update_id": update.update_id})


async def publish_commands(api: AsyncTransport) -> None:
    """Register the bot's commands with Telegram so clients show a menu."""
    commands = [
        BotCommand(command=cmd.lstrip("/"), description=entry.description)
        for cmd, entry in registry.entries().items()
    ]
    await api.send_json(SetMyCommands(commands=commands))
    logger.info("Published bot commands", extra={"count": len(commands)})


async def run() -> None:
    """Start the async long-polling loop.

    Each update is spawned as an independent :func:`asyncio.create_task` so
    the loop immediately proceeds to fetch the next batch.

    Raises:
        EnvironmentError: If ``BOT_TOKEN`` is not set.
    """
    if not config.BOT_TOKEN:
        raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")

    # The HTTP timeout has to outlast the long-poll timeout.
    timeout = config.REQUEST_TIMEOUT + config.POLL_TIMEOUT
    tasks: set[asyncio.Task] = set()

    async with HttpxApi(config.BOT_TOKEN, timeout=timeout, base_url=config.API_BASE_URL) as api:
        try:
            await publish_commands(api)
        except TelbotError as exc:
            logger.warning("Could not publish bot commands", extra={"error": type(exc).__name__})

        polling = AsyncPolling(api, timeout=config.POLL_TIMEOUT)
        logger.info("Bot is running. Polling for updates (async)...")
        while True:
            try:
                update = await anext(polling)
            except TelbotError as exc:
                delay = exc.retry_after if isinstance(exc, TelegramAPIError) and exc.retry_after else _RETRY_DELAY
                logger.warning(
                    "getUpdates failed, retrying",
                    extra={"api_method": "getUpdates", "error": type(exc).__name__, "retry_in": delay},
                )
                await asyncio.sleep(delay)
                continue

            task = asyncio.create_task(process_update(api, update))
            tasks.add(task)
            task.add_done_callback(tasks.discard)
