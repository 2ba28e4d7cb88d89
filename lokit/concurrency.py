"""Locking, background calls and polling until a condition holds."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Any, Optional, TypeVar

from .channel import Channel
from .errors import try_call

T = TypeVar("T")

__all__ = [
    "Synchronizer",
    "synchronize",
    "run_async",
    "wait_for",
    "wait_for_with_context",
]


class Synchronizer:
    """Runs callbacks one at a time under a lock."""

    def __init__(self, lock: Optional[Any] = None) -> None:
        self.lock = lock if lock is not None else threading.Lock()

    def do(self, callback: Callable[[], Any]) -> None:
        """Call ``callback`` holding the lock; exceptions it raises are swallowed."""
        with self.lock:
            try_call(callback)


def synchronize(*args: Any) -> Synchronizer:
    """A Synchronizer using the given lock, or a new one.

    Raises TypeError when more than one lock is given.
    """
    if len(args) > 1:
        raise TypeError("unexpected arguments")
    return Synchronizer(args[0] if args else None)


def run_async(func: Callable[[], T]) -> Channel[T]:
    """Call ``func`` in a thread; its result is sent on the returned channel.

    If ``func`` raises, the channel is closed without a value.
    """
    channel: Channel[T] = Channel(1)

    def run() -> None:
        try:
            result = func()
        except BaseException:
            channel.close()
            raise
        channel.send(result)

    threading.Thread(target=run, daemon=True).start()
    return channel


def wait_for(
    condition: Callable[[int], bool], timeout: float, heartbeat_delay: float
) -> tuple[int, float, bool]:
    """Check ``condition(iteration)`` every ``heartbeat_delay`` seconds.

    Returns the number of checks, the seconds elapsed and whether the
    condition held before ``timeout`` seconds passed.
    """
    return wait_for_with_context(
        threading.Event(),
        lambda _event, iteration: condition(iteration),
        timeout,
        heartbeat_delay,
    )


def wait_for_with_context(
    cancel_event: threading.Event,
    condition: Callable[[threading.Event, int], bool],
    timeout: float,
    heartbeat_delay: float,
) -> tuple[int, float, bool]:
    """Like :func:`wait_for`, also stopping once ``cancel_event`` is set.

    ``condition`` receives the event and the iteration number.
    """
    start = time.monotonic()
    iterations = 0
    if cancel_event.is_set():
        return iterations, time.monotonic() - start, False

    deadline = start + timeout
    next_tick = start + heartbeat_delay
    while True:
        wake_at = min(next_tick, deadline)
        if cancel_event.wait(max(wake_at - time.monotonic(), 0.0)):
            return iterations, time.monotonic() - start, False
        if next_tick > deadline:
            return iterations, time.monotonic() - start, False
        iterations += 1
        if condition(cancel_event, iterations - 1):
            return iterations, time.monotonic() - start, True
        next_tick += heartbeat_delay