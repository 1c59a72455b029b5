"""TelbotLogger: the JSON log sink for the example bot and the telbot library.

The library modules log through child loggers (``telbot.adapters.httpx``,
``telbot.response``, …) and never attach handlers themselves.  The first
call to :meth:`TelbotLogger.get_logger` hangs a console and a rotating file
handler (``logs/telbot.log``) on the ``telbot`` logger, so every library
record comes out as one JSON line without further setup.

Bot tokens are masked in every line written, whatever logger produced it.
"""

import json
import logging
import os
import re
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

# ``bot<id>:<secret>`` as it appears in Bot API URLs.
_TOKEN_PATTERN = re.compile(r"bot\d+:[A-Za-z0-9_-]+")
_TOKEN_MASK = "bot<token>"


def mask_tokens(text: str) -> str:
    """Replace every ``bot<id>:<secret>`` in *text* with ``bot<token>``."""
    return _TOKEN_PATTERN.sub(_TOKEN_MASK, text)


class _JsonFormatter(logging.Formatter):
    """Render a record as one JSON object per line.

    ``extra`` values become top-level keys next to the standard ones, e.g.::

        logger.warning(
            "getUpdates failed, retrying",
            extra={"api_method": "getUpdates", "error": "ConnectTimeout", "retry_in": 5},
        )

    becomes::

        {"timestamp": "…", "level": "WARNING", "logger": "telbot", …,
         "api_method": "getUpdates", "error": "ConnectTimeout", "retry_in": 5}
    """

    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        log_entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in self._BUILTIN_ATTRS and key not in log_entry
        )
        if record.exc_info:
            # HTTP client tracebacks quote the request URL.
            log_entry["exc_info"] = self.formatException(record.exc_info)

        return mask_tokens(json.dumps(log_entry, ensure_ascii=False, default=str))


class TelbotLogger:
    """Process-wide owner of the ``telbot`` logger's handlers.

    Usage::

        import config
        from core.logger import TelbotLogger

        logger = TelbotLogger.get_logger(config.LOG_LEVEL)
        logger.info("Bot is running", extra={"poll_timeout": config.POLL_TIMEOUT})
    """

    _instance: Optional["TelbotLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "telbot"

    _LOG_DIR: str = "logs"
    _LOG_FILE: str = "telbot.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: Union[int, str] = logging.INFO) -> "TelbotLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level)
        return cls._instance

    def _init_logger(self, level: Union[int, str]) -> None:
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        # httpx logs each request URL, token included, at INFO.
        logging.getLogger("httpx").setLevel(logging.WARNING)

        # A reloaded module must not stack a second pair of handlers.
        if self._logger.handlers:
            return

        os.makedirs(self._LOG_DIR, exist_ok=True)
        handlers = [
            logging.StreamHandler(),
            RotatingFileHandler(
                os.path.join(self._LOG_DIR, self._LOG_FILE),
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            ),
        ]
        formatter = _JsonFormatter()
        for handler in handlers:
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    @staticmethod
    def get_logger(level: Union[int, str] = logging.INFO) -> logging.Logger:
        """Return the ``telbot`` logger, configuring it on the first call.

        *level* only takes effect on that first call.
        """
        instance = TelbotLogger(level)
        assert instance._logger is not None
        return instance._logger

    def cleanup(self) -> None:
        """Flush, close and detach every handler."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

    def __del__(self) -> None:
        self.cleanup()
