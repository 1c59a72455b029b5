"""HTTP adapters implementing the transport contract.

- :class:`RequestsApi` — blocking, ``requests``.
- :class:`HttpxApi` — asyncio, ``httpx``.
- :class:`JsonOnlyApi` — asyncio, ``httpx``, JSON bodies only.
"""

from telbot.adapters.httpx_api import HttpxApi
from telbot.adapters.json_only import JsonOnlyApi
from telbot.adapters.requests_api import RequestsApi

__all__ = [
    "HttpxApi",
    "JsonOnlyApi",
    "RequestsApi",
]
