"""
Channel traversal: an asyncio producer task walking a Red-Black Tree in order
and handing entries to the consumer one at a time.
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from typing import Any

from rbtree.models.node import NIL, NodeArena

logger = logging.getLogger(__name__)

_CLOSED = object()


class _ProducerFailure:
    """Carries an exception raised by the producer over to the consumer."""

    def __init__(self, error: BaseException) -> None:
        self.error = error


class TreeChannel(AsyncIterator[tuple[Any, Any]]):
    """
    Async iterator fed by a dedicated producer task.

    The producer starts on the first __anext__ and, with queue_size=0,
    suspends after every handoff until the consumer has taken the entry.
    The channel closes exactly once, after the last entry. Consumers that
    stop early must call aclose() (or use ``async with``) so the producer is
    cancelled instead of staying suspended forever.

    >>> async with tree.iter_channel() as channel:
    ...     async for key, value in channel:
    ...         ...
    """

    def __init__(self, arena: NodeArena, root: int, queue_size: int = 0) -> None:
        self._arena = arena
        self._root = root
        self._queue_size = queue_size
        self._queue: asyncio.Queue | None = None
        self._producer: asyncio.Task | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def running(self) -> bool:
        """True while a producer task exists and has not finished."""
        return self._producer is not None and not self._producer.done()

    def _start(self) -> None:
        if self._root == NIL:
            self._close()
            return
        self._queue = asyncio.Queue(maxsize=max(1, self._queue_size))
        self._producer = asyncio.get_running_loop().create_task(self._produce())
        logger.debug("Channel producer started")

    def _close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug("Channel closed")

    async def _produce(self) -> None:
        stack: list[int] = []
        cursor = self._root
        try:
            while stack or cursor != NIL:
                if cursor != NIL:
                    stack.append(cursor)
                    cursor = self._arena[cursor].left
                else:
                    node = self._arena[stack.pop()]
                    await self._handoff((node.key, node.value))
                    cursor = node.right
        except Exception as e:
            await self._queue.put(_ProducerFailure(e))
            return
        await self._queue.put(_CLOSED)

    async def _handoff(self, item: tuple[Any, Any]) -> None:
        await self._queue.put(item)
        if self._queue_size == 0:
            # Rendezvous: wait until the consumer has taken the entry
            await self._queue.join()

    def __aiter__(self) -> "TreeChannel":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        if self._closed:
            raise StopAsyncIteration
        if self._producer is None:
            self._start()
            if self._closed:
                raise StopAsyncIteration

        item = await self._queue.get()
        self._queue.task_done()

        if item is _CLOSED:
            self._close()
            raise StopAsyncIteration
        if isinstance(item, _ProducerFailure):
            self._close()
            raise item.error
        return item

    async def aclose(self) -> None:
        """Cancel an in-flight producer and close the channel."""
        if self.running:
            self._producer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._producer
            logger.debug("Channel producer cancelled")
        if self._queue is not None and not self._queue.full():
            # Wake a consumer already waiting in __anext__
            self._queue.put_nowait(_CLOSED)
        self._close()

    async def __aenter__(self) -> "TreeChannel":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
