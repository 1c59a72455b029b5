"""Exception hierarchy for the telbot Bot API client."""

from typing import Any, Dict, List, Optional


class TelbotError(Exception):
    """Base class for every error raised by telbot."""


class TransportError(TelbotError):
    """The underlying HTTP client failed before a response was received.

    The original client exception is chained as ``__cause__``.
    """

    def __init__(self, method: str, message: str) -> None:
        self.method = method
        super().__init__(f"{method}: transport failure: {message}")


class DecodeError(TelbotError):
    """The response body is not a Bot API response of the expected shape.

    Attributes:
        status_code: HTTP status of the response, when one was received.
        body: Raw response body (possibly truncated by the caller).
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        suffix = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"{message}{suffix}")


class TelegramAPIError(TelbotError):
    """The Bot API answered with ``"ok": false``.

    Attributes:
        description: Human-readable description supplied by Telegram.
        error_code: Numeric error code, when present.
        parameters: Raw ``parameters`` object (``retry_after``,
            ``migrate_to_chat_id``), when present.
        status_code: HTTP status of the response.
    """

    def __init__(
        self,
        description: str,
        error_code: Optional[int] = None,
        parameters: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.description = description
        self.error_code = error_code
        self.parameters = parameters or {}
        self.status_code = status_code
        if error_code is not None:
            super().__init__(f"Telegram API error {error_code}: {description}")
        else:
            super().__init__(f"Telegram API error: {description}")

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating the request, if Telegram said so."""
        return self.parameters.get("retry_after")

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        """New supergroup id when the target group was migrated."""
        return self.parameters.get("migrate_to_chat_id")


class FileReadError(TelbotError):
    """A path-backed :class:`~telbot.files.InputFile` could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"cannot read upload {path!r}: {reason}")


class UploadNotSupportedError(TelbotError):
    """The transport cannot send multipart uploads."""

    def __init__(self, method: str, fields: List[str]) -> None:
        self.method = method
        self.fields = fields
        super().__init__(
            f"{method}: this transport cannot upload files (fields: {', '.join(fields)})"
        )
