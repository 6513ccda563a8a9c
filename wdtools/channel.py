"""A bounded asynchronous channel with explicit closing."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Any, AsyncIterator, Generic, Optional, TypeVar

T = TypeVar("T")


class SendError(Exception):
    """Sending failed; the rejected item is kept in ``value``."""

    default_message = "ChannelUnknown error"

    def __init__(self, value: Any, message: Optional[str] = None) -> None:
        self.value = value
        super().__init__(message or self.default_message)


class SendClosedError(SendError):
    """The channel was closed."""

    default_message = "ChannelClose"


class SendFullError(SendError):
    """The channel holds as many items as it may."""

    default_message = "ChannelFull"


class RecvError(Exception):
    """Receiving failed."""

    default_message = "ChannelUnknown error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class RecvClosedError(RecvError):
    """The channel is closed and has nothing left."""

    default_message = "ChannelClose"


class RecvEmptyError(RecvError):
    """The channel has nothing to receive right now."""

    default_message = "ChannelEmpty"


def _wake_one(waiters: deque[asyncio.Future[None]]) -> None:
    while waiters:
        waiter = waiters.popleft()
        if not waiter.done():
            waiter.set_result(None)
            return


def _wake_all(waiters: deque[asyncio.Future[None]]) -> None:
    while waiters:
        waiter = waiters.popleft()
        if not waiter.done():
            waiter.set_result(None)


class Channel(Generic[T]):
    """A FIFO queue of at most ``cap`` items shared by senders and receivers.

    A capacity below one is raised to one. Once closed, sending fails while
    receivers may still drain what is queued.
    """

    def __init__(self, cap: int = 1) -> None:
        self._cap = max(cap, 1)
        self._queue: deque[T] = deque()
        self._senders: deque[asyncio.Future[None]] = deque()
        self._receivers: deque[asyncio.Future[None]] = deque()
        self._closed = False

    @property
    def cap(self) -> int:
        return self._cap

    def __len__(self) -> int:
        return len(self._queue)

    def _push(self, data: T) -> None:
        self._queue.append(data)
        _wake_one(self._receivers)

    def _pop(self) -> T:
        item = self._queue.popleft()
        _wake_one(self._senders)
        return item

    async def _park(self, waiters: deque[asyncio.Future[None]]) -> None:
        waiter = asyncio.get_running_loop().create_future()
        waiters.append(waiter)
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.done() and not waiter.cancelled():
                # Woken but cancelled: hand the wake-up to someone else.
                _wake_one(waiters)
            else:
                try:
                    waiters.remove(waiter)
                except ValueError:
                    pass
            raise

    def try_send(self, data: T) -> None:
        """Queue ``data`` at once; raises SendClosedError or SendFullError."""
        if self._closed:
            raise SendClosedError(data)
        if len(self._queue) >= self._cap:
            raise SendFullError(data)
        self._push(data)

    async def send(self, value: T) -> None:
        """Queue ``value``, waiting for room; raises SendClosedError once closed."""
        while True:
            if self._closed:
                raise SendClosedError(value)
            if len(self._queue) < self._cap:
                self._push(value)
                return
            await self._park(self._senders)

    def try_recv(self) -> T:
        """Take the oldest item at once; raises RecvEmptyError or RecvClosedError."""
        if self._queue:
            return self._pop()
        if self._closed:
            raise RecvClosedError()
        raise RecvEmptyError()

    async def recv(self) -> T:
        """Take the oldest item, waiting for one; raises RecvClosedError when drained and closed."""
        while True:
            if self._queue:
                return self._pop()
            if self._closed:
                raise RecvClosedError()
            await self._park(self._receivers)

    def close(self) -> None:
        """Close the channel and wake everyone waiting on it."""
        self._closed = True
        _wake_all(self._receivers)
        _wake_all(self._senders)

    def is_closed(self) -> bool:
        return self._closed


class Sender(Generic[T]):
    """The sending end of a channel."""

    def __init__(self, channel: Channel[T]) -> None:
        self._channel = channel

    def try_send(self, data: T) -> None:
        self._channel.try_send(data)

    async def send(self, value: T) -> None:
        await self._channel.send(value)

    def close(self) -> None:
        self._channel.close()

    def is_closed(self) -> bool:
        return self._channel.is_closed()


class Receiver(Generic[T]):
    """The receiving end of a channel; iterating it yields items until it is closed and drained."""

    def __init__(self, channel: Channel[T]) -> None:
        self._channel = channel

    def try_recv(self) -> T:
        return self._channel.try_recv()

    async def recv(self) -> T:
        return await self._channel.recv()

    def close(self) -> None:
        self._channel.close()

    def is_closed(self) -> bool:
        return self._channel.is_closed()

    async def __aiter__(self) -> AsyncIterator[T]:
        while True:
            try:
                yield await self._channel.recv()
            except RecvClosedError:
                return


def open_channel(cap: int) -> tuple[Sender[Any], Receiver[Any]]:
    """Create a channel of capacity ``cap`` and return its two ends."""
    channel: Channel[Any] = Channel(cap)
    return Sender(channel), Receiver(channel)