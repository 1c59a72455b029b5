"""Command handlers for the example bot.

Each handler answers a single slash-command (or, for :func:`handle_echo`,
any other text) and is invoked by the dispatcher in :mod:`bot.dispatcher`
through :data:`bot.registry.registry`.
"""

import config
from core.logger import TelbotLogger
from bot.registry import registry
from telbot.files import InputFile
from telbot.methods import SendPhoto
from telbot.transport import AsyncTransport
from telbot.types import Message

logger = TelbotLogger.get_logger()

START_FALLBACK_TEXT = "👋 Hi! Send me any text and I will echo it back."


@registry.register("/start", description="Say hello with a photo")
async def handle_start(api: AsyncTransport, message: Message) -> None:
    """Handle /start — upload the configured photo, or greet in text."""
    chat_id = message.chat.id
    logger.info("User invoked /start", extra={"chat_id": chat_id, "command": "/start"})

    if not config.START_PHOTO_PATH:
        await api.send_json(message.reply_text(START_FALLBACK_TEXT))
        return

    photo = InputFile.from_path(config.START_PHOTO_PATH)
    await api.send_file(SendPhoto(chat_id=chat_id, photo=photo).reply_to(message.message_id))
    logger.info("Sent start photo", extra={"chat_id": chat_id, "file_name": photo.name})


@registry.register("/help", description="Show available commands")
async def handle_help(api: AsyncTransport, message: Message) -> None:
    """Handle /help — list the registered commands."""
    logger.info("User invoked /help", extra={"chat_id": message.chat.id, "command": "/help"})
    lines = [f"{cmd} — {entry.description}" for cmd, entry in registry.entries().items()]
    await api.send_json(message.reply_text("📖 Available commands:\n" + "\n".join(lines)))


@registry.fallback
async def handle_echo(api: AsyncTransport, message: Message) -> None:
    """Reply to a text message with the same text."""
    if message.text is None:
        logger.debug("Non-text message, nothing to echo", extra={"chat_id": message.chat.id})
        return
    await api.send_json(message.reply_text(message.text))
    logger.debug("Echoed message", extra={"chat_id": message.chat.id, "message_id": message.message_id})
