"""Example echo bot — polling loop, webhook router and command handlers.

This package may import from ``telbot/``, ``core/`` and ``config`` only.
"""

from bot.dispatcher import process_update, publish_commands, run
from bot.handlers import handle_echo, handle_help, handle_start
from bot.registry import registry

__all__ = [
    # Dispatcher
    "run",
    "process_update",
    "publish_commands",
    # Command handlers
    "handle_start",
    "handle_help",
    "handle_echo",
    # Registry
    "registry",
]
