"""Long-polling iterators over ``getUpdates``.

Both iterators keep the offset one past the highest ``update_id`` seen, so
every update is delivered once.  Errors raised by the transport propagate
to the consumer unchanged; the iterator can be resumed afterwards.

Usage::

    for update in Polling(api, timeout=30):
        ...

    async for update in AsyncPolling(async_api, timeout=30):
        ...
"""

import collections
import logging
from typing import AsyncIterator, Deque, Iterator, List, Optional

from telbot.methods import GetUpdates
from telbot.transport import AsyncTransport, Transport
from telbot.types import Update

logger = logging.getLogger("telbot.polling")

_DEFAULT_TIMEOUT = 1


class _PollingState:
    """Offset bookkeeping shared by the blocking and async iterators."""

    def __init__(self, timeout: int, limit: Optional[int], allowed_updates: Optional[List[str]]) -> None:
        self.offset = 0
        self.timeout = timeout
        self.limit = limit
        self.allowed_updates = allowed_updates
        self.queue: Deque[Update] = collections.deque()

    def request(self) -> GetUpdates:
        return GetUpdates(
            offset=self.offset,
            timeout=self.timeout,
            limit=self.limit,
            allowed_updates=self.allowed_updates,
        )

    def accept(self, updates: List[Update]) -> None:
        if updates:
            logger.debug("Received updates", extra={"count": len(updates), "offset": self.offset})
        self.queue.extend(updates)
        self.offset = max([self.offset] + [update.update_id + 1 for update in updates])


class Polling(Iterator[Update]):
    """Blocking iterator yielding updates in the order Telegram sent them."""

    def __init__(
        self,
        api: Transport,
        timeout: int = _DEFAULT_TIMEOUT,
        limit: Optional[int] = None,
        allowed_updates: Optional[List[str]] = None,
    ) -> None:
        self._api = api
        self._state = _PollingState(timeout, limit, allowed_updates)

    @property
    def offset(self) -> int:
        return self._state.offset

    def __iter__(self) -> "Polling":
        return self

    def __next__(self) -> Update:
        while not self._state.queue:
            self._state.accept(self._api.send_json(self._state.request()))
        return self._state.queue.popleft()


class AsyncPolling(AsyncIterator[Update]):
    """Async twin of :class:`Polling` for :class:`AsyncTransport` adapters."""

    def __init__(
        self,
        api: AsyncTransport,
        timeout: int = _DEFAULT_TIMEOUT,
        limit: Optional[int] = None,
        allowed_updates: Optional[List[str]] = None,
    ) -> None:
        self._api = api
        self._state = _PollingState(timeout, limit, allowed_updates)

    @property
    def offset(self) -> int:
        return self._state.offset

    def __aiter__(self) -> "AsyncPolling":
        return self

    async def __anext__(self) -> Update:
        while not self._state.queue:
            self._state.accept(await self._api.send_json(self._state.request()))
        return self._state.queue.popleft()
