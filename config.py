"""Application configuration — environment variables and derived constants.

Loads ``BOT_TOKEN``, ``API_BASE_URL``, ``REQUEST_TIMEOUT``, ``POLL_TIMEOUT``,
``START_PHOTO_PATH`` and ``LOG_LEVEL`` from the environment via
``python-dotenv``.  All values are resolved at import time so the bot
modules can ``from config import …`` without repeated lookups.

Only the example bot reads this module; the :mod:`telbot` library takes
its settings as constructor arguments.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import TelbotLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

# ── Defaults ─────────────────────────────────────────────────────────────────
DEFAULT_API_BASE_URL = "https://api.telegram.org"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_POLL_TIMEOUT = 30
DEFAULT_LOG_LEVEL = "INFO"


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_log_level(raw: str | None) -> tuple[str, bool]:
    """Return ``(level_name, valid)`` for a ``LOG_LEVEL`` value.

    Unknown names fall back to :data:`DEFAULT_LOG_LEVEL`.
    """
    if not raw:
        return DEFAULT_LOG_LEVEL, True
    name = raw.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name, True
    return DEFAULT_LOG_LEVEL, False


def _parse_positive_number(name: str, raw: str | None, default: float) -> float:
    """Parse *raw* as a positive number, falling back to *default*.

    An unset variable yields *default* silently; a malformed or
    non-positive value yields *default* and a warning naming *name*.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid numeric setting, using default", extra={"setting": name, "default": default})
        return default
    if value <= 0:
        logger.warning("Non-positive numeric setting, using default", extra={"setting": name, "default": default})
        return default
    return value


# ── Logger (used for startup diagnostics and the parsers above) ──────────────

LOG_LEVEL, _log_level_valid = _parse_log_level(os.environ.get("LOG_LEVEL"))
logger = TelbotLogger.get_logger(LOG_LEVEL)

if not _log_level_valid:
    logger.warning("Unknown LOG_LEVEL, using default", extra={"default": DEFAULT_LOG_LEVEL})


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_BASE_URL: str = os.environ.get("API_BASE_URL") or DEFAULT_API_BASE_URL
REQUEST_TIMEOUT: float = _parse_positive_number(
    "REQUEST_TIMEOUT", os.environ.get("REQUEST_TIMEOUT"), DEFAULT_REQUEST_TIMEOUT
)
POLL_TIMEOUT: int = int(
    _parse_positive_number("POLL_TIMEOUT", os.environ.get("POLL_TIMEOUT"), DEFAULT_POLL_TIMEOUT)
)
START_PHOTO_PATH: str | None = os.environ.get("START_PHOTO_PATH") or None


# ── Startup diagnostics ─────────────────────────────────────────────────────

# The token itself is never logged, only whether it is present.
if BOT_TOKEN:
    logger.info("Config loaded — BOT_TOKEN is set")
else:
    logger.warning("Config loaded — BOT_TOKEN is NOT set")

logger.info(
    "API settings resolved",
    extra={"api_base_url": API_BASE_URL, "request_timeout": REQUEST_TIMEOUT, "poll_timeout": POLL_TIMEOUT},
)

if START_PHOTO_PATH:
    logger.info("START_PHOTO_PATH configured", extra={"start_photo_path": START_PHOTO_PATH})
else:
    logger.info("No START_PHOTO_PATH configured, /start will answer with text")
