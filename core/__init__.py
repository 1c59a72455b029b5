"""Core services shared by the example bot: structured logging.

This package is framework-agnostic. It must NEVER import from ``bot/``.
"""

from core.logger import TelbotLogger, mask_tokens

__all__ = [
    "TelbotLogger",
    "mask_tokens",
]
