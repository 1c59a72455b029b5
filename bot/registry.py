"""Command registry — single source of truth for command → handler mapping.

Handlers are declared once in :mod:`bot.handlers` with ``@registry.register``
and looked up by :mod:`bot.dispatcher`, which therefore never grows an
if/elif chain.

Design:
- ``CommandHandler`` is a :class:`Protocol` describing the handler
  signature: the async transport plus the incoming message.
- ``CommandRegistry`` is a singleton that stores ``CommandEntry`` metadata
  and exposes lookup / iteration helpers.
- A fallback handler (``@registry.fallback``) receives every text message
  that is not a registered command.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Protocol, runtime_checkable

from telbot.transport import AsyncTransport
from telbot.types import Message

# ── Handler protocol ─────────────────────────────────────────────────────────


@runtime_checkable
class CommandHandler(Protocol):
    """Async handler answering *message* through *api*."""
    async def __call__(self, api: AsyncTransport, message: Message) -> None: ...  # noqa: E704


# ── Registry entry ───────────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True, slots=True)
class CommandEntry:
    """Metadata for a single registered slash-command."""
    command: str              # e.g. "/start"
    description: str          # published with setMyCommands
    handler: CommandHandler   # the async callable


def command_of(text: str) -> str:
    """Return the slash-command at the start of *text*, without ``@botname``.

    ``"/start@my_bot hello"`` → ``"/start"``; plain text → ``""``.
    """
    if not text.startswith("/"):
        return ""
    return text.split()[0].split("@")[0]


# ── Registry ─────────────────────────────────────────────────────────────────


class CommandRegistry:
    """Singleton command registry.

    Usage::

        registry = CommandRegistry()

        @registry.register("/ping", description="Ping")
        async def handle_ping(api, message): ...

        # In the dispatcher:
        await registry.dispatch(api, message)
    """

    _instance: CommandRegistry | None = None
    _entries: dict[str, CommandEntry]
    _fallback: CommandHandler | None

    def __new__(cls) -> CommandRegistry:
        if cls._instance is None:
            inst = super().__new__(cls)
            inst._entries = {}
            inst._fallback = None
            cls._instance = inst
        return cls._instance

    # ── decorators ───────────────────────────────────────────────────────

    def register(self, command: str, *, description: str) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator that registers *handler* for *command*.

        Example::

            @registry.register("/start", description="Say hello with a photo")
            async def handle_start(api, message): ...
        """
        def decorator(func: CommandHandler) -> CommandHandler:
            self._entries[command] = CommandEntry(command=command, description=description, handler=func)
            return func
        return decorator

    def fallback(self, func: CommandHandler) -> CommandHandler:
        """Decorator that registers the handler for non-command text."""
        self._fallback = func
        return func

    # ── lookup helpers ───────────────────────────────────────────────────

    def get(self, command: str) -> CommandEntry | None:
        """Return the entry for *command*, or ``None``."""
        return self._entries.get(command)

    def entries(self) -> dict[str, CommandEntry]:
        """Return a copy of all registered commands."""
        return dict(self._entries)

    async def dispatch(self, api: AsyncTransport, message: Message) -> bool:
        """Route *message* to its command handler or to the fallback.

        Returns ``True`` if a handler was found and called, ``False`` otherwise.
        """
        text = message.text_content() or ""
        entry = self._entries.get(command_of(text))
        handler: Any = entry.handler if entry is not None else self._fallback
        if handler is None:
            return False
        await handler(api, message)
        return True


# Module-level singleton, import this everywhere.
registry: CommandRegistry = CommandRegistry()
