"""Thread-safe channels and helpers to split, merge and batch their streams."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, Optional, TypeVar

from .find import max_by, min_by

T = TypeVar("T")

DispatchingStrategy = Callable[[Any, int, Sequence["Channel[Any]"]], int]

__all__ = [
    "ChannelClosedError",
    "Channel",
    "channel_dispatcher",
    "dispatching_strategy_round_robin",
    "dispatching_strategy_random",
    "dispatching_strategy_weighted_random",
    "dispatching_strategy_first",
    "dispatching_strategy_least",
    "dispatching_strategy_most",
    "slice_to_channel",
    "channel_to_slice",
    "generator",
    "buffer",
    "buffer_with_context",
    "buffer_with_timeout",
    "fan_in",
    "fan_out",
]

_BACKOFF = 10e-6
_POLL = 0.001


class ChannelClosedError(Exception):
    """Raised when sending on, or closing, a channel that is already closed."""


class Channel(Generic[T]):
    """A FIFO channel shared between threads.

    With ``capacity`` 0 the channel is unbuffered: a send returns only once
    a receiver has taken the item.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()
        self._sent = 0
        self._received = 0

    @property
    def capacity(self) -> int:
        """Number of items the channel buffers."""
        return self._capacity

    @property
    def closed(self) -> bool:
        """Whether the channel has been closed."""
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items) if self._capacity else 0

    def send(self, item: T) -> None:
        """Put ``item`` on the channel, blocking while it is full."""
        with self._cond:
            limit = max(self._capacity, 1)
            while not self._closed and len(self._items) >= limit:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            self._items.append(item)
            ticket = self._sent
            self._sent += 1
            self._cond.notify_all()
            if self._capacity == 0:
                while self._received <= ticket and not self._closed:
                    self._cond.wait()

    def receive(self, timeout: Optional[float] = None) -> tuple[Optional[T], bool]:
        """Take the next item.

        Returns ``(item, True)``, or ``(None, False)`` once the channel is
        closed and drained. Raises TimeoutError if ``timeout`` seconds pass
        with nothing to take.
        """
        with self._cond:
            ready = self._cond.wait_for(
                lambda: bool(self._items) or self._closed, timeout
            )
            if not ready:
                raise TimeoutError("no item received in time")
            if self._items:
                item = self._items.popleft()
                self._received += 1
                self._cond.notify_all()
                return item, True
            return None, False

    def close(self) -> None:
        """Close the channel; pending items can still be received."""
        with self._cond:
            if self._closed:
                raise ChannelClosedError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            item, ok = self.receive()
            if not ok:
                return
            yield item  # type: ignore[misc]


def _start(target: Callable[[], None]) -> threading.Thread:
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


def _create_channels(count: int, capacity: int) -> list[Channel[Any]]:
    return [Channel(capacity) for _ in range(count)]


def _close_all(channels: Iterable[Channel[Any]]) -> None:
    for channel in channels:
        channel.close()


def _is_not_full(channel: Channel[Any]) -> bool:
    return channel.capacity == 0 or len(channel) < channel.capacity


def channel_dispatcher(
    stream: Channel[T],
    count: int,
    channel_buffer_cap: int,
    strategy: DispatchingStrategy,
) -> list[Channel[T]]:
    """Distribute the items of ``stream`` over ``count`` new channels.

    ``strategy(msg, index, channels)`` picks the destination. Closing
    ``stream`` closes every child.
    """
    children = _create_channels(count, channel_buffer_cap)

    def run() -> None:
        try:
            for index, msg in enumerate(stream):
                destination = strategy(msg, index, children) % count
                children[destination].send(msg)
        finally:
            _close_all(children)

    _start(run)
    return children


def dispatching_strategy_round_robin(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Rotate over the channels, skipping full ones."""
    while True:
        i = index % len(channels)
        if _is_not_full(channels[i]):
            return i
        index += 1
        time.sleep(_BACKOFF)


def dispatching_strategy_random(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick a random channel that is not full."""
    while True:
        i = random.randrange(len(channels))
        if _is_not_full(channels[i]):
            return i
        time.sleep(_BACKOFF)


def dispatching_strategy_weighted_random(
    weights: Sequence[int],
) -> DispatchingStrategy:
    """Strategy picking channel ``i`` with probability proportional to ``weights[i]``."""
    seq = [i for i, weight in enumerate(weights) for _ in range(weight)]

    def strategy(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
        while True:
            i = seq[random.randrange(len(seq))]
            if _is_not_full(channels[i]):
                return i
            time.sleep(_BACKOFF)

    return strategy


def dispatching_strategy_first(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the first channel that is not full."""
    while True:
        for i, channel in enumerate(channels):
            if _is_not_full(channel):
                return i
        time.sleep(_BACKOFF)


def dispatching_strategy_least(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the emptiest channel."""
    return min_by(
        list(range(len(channels))),
        lambda item, best: len(channels[item]) < len(channels[best]),
    )


def dispatching_strategy_most(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the fullest channel that still has room."""
    return max_by(
        list(range(len(channels))),
        lambda item, best: len(channels[item]) > len(channels[best])
        and _is_not_full(channels[item]),
    )


def slice_to_channel(buffer_size: int, collection: Iterable[T]) -> Channel[T]:
    """A channel yielding the items of ``collection``, then closed."""
    channel: Channel[T] = Channel(buffer_size)
    items = list(collection)

    def run() -> None:
        try:
            for item in items:
                channel.send(item)
        finally:
            channel.close()

    _start(run)
    return channel


def channel_to_slice(channel: Channel[T]) -> list[T]:
    """All items of ``channel``; blocks until it is closed."""
    return list(channel)


def generator(
    buffer_size: int, producer: Callable[[Callable[[T], None]], None]
) -> Channel[T]:
    """Run ``producer(emit)`` in a thread; emitted items go to the returned channel."""
    channel: Channel[T] = Channel(buffer_size)

    def run() -> None:
        try:
            producer(channel.send)
        finally:
            channel.close()

    _start(run)
    return channel


def _collect(
    channel: Channel[T],
    size: int,
    expired: Callable[[], bool],
    wait_slice: Callable[[], float],
) -> tuple[list[T], int, float, bool]:
    items: list[T] = []
    start = time.monotonic()
    while len(items) < size:
        if expired():
            return items, len(items), time.monotonic() - start, True
        try:
            item, ok = channel.receive(timeout=wait_slice())
        except TimeoutError:
            continue
        if not ok:
            return items, len(items), time.monotonic() - start, False
        items.append(item)  # type: ignore[arg-type]
    return items, size, time.monotonic() - start, True


def buffer(channel: Channel[T], size: int) -> tuple[list[T], int, float, bool]:
    """Read up to ``size`` items.

    Returns the items, their count, the seconds spent and False if the
    channel closed before ``size`` items were read.
    """
    return _collect(channel, size, lambda: False, lambda: None)  # type: ignore[arg-type, return-value]


def buffer_with_context(
    cancel_event: threading.Event, channel: Channel[T], size: int
) -> tuple[list[T], int, float, bool]:
    """Like :func:`buffer`, stopping early once ``cancel_event`` is set."""
    return _collect(channel, size, cancel_event.is_set, lambda: _POLL)


def buffer_with_timeout(
    channel: Channel[T], size: int, timeout: float
) -> tuple[list[T], int, float, bool]:
    """Like :func:`buffer`, stopping early after ``timeout`` seconds."""
    deadline = time.monotonic() + timeout
    return _collect(
        channel,
        size,
        lambda: time.monotonic() >= deadline,
        lambda: max(deadline - time.monotonic(), 0.0),
    )


def fan_in(channel_buffer_cap: int, *args: Channel[T]) -> Channel[T]:
    """Merge the given channels into one, closed once all of them are."""
    out: Channel[T] = Channel(channel_buffer_cap)

    def forward(upstream: Channel[T]) -> Callable[[], None]:
        def run() -> None:
            for item in upstream:
                out.send(item)

        return run

    workers = [_start(forward(upstream)) for upstream in args]

    def closer() -> None:
        for worker in workers:
            worker.join()
        out.close()

    _start(closer)
    return out


def fan_out(
    count: int, channels_buffer_cap: int, upstream: Channel[T]
) -> list[Channel[T]]:
    """Copy every item of ``upstream`` to ``count`` new channels."""
    downstreams = _create_channels(count, channels_buffer_cap)

    def run() -> None:
        try:
            for item in upstream:
                for downstream in downstreams:
                    downstream.send(item)
        finally:
            _close_all(downstreams)

    _start(run)
    return downstreams