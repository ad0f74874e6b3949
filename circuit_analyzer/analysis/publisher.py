"""Synchronous observer registry with per-subscriber fault isolation.

Contract:

* ``publish`` calls every subscriber registered when the call starts, in
  registration order, on the caller's thread, and returns only after all of
  them have returned.
* A subscriber that raises ``Exception`` is logged and skipped; delivery to
  the remaining subscribers continues and the exception never reaches the
  publisher's caller.
* Subscribing or unsubscribing from inside a callback takes effect from the
  next ``publish``; the delivery in progress neither skips nor repeats anyone.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Disposable handle returned by ``subscribe``; calling it unsubscribes."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self) -> None:
        """Remove the subscriber. Safe to call more than once."""
        release, self._release = self._release, None
        if release is not None:
            release()

    def __call__(self) -> None:
        self.unsubscribe()


class ResultPublisher(Generic[T]):
    """Ordered list of callbacks receiving each published value."""

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], object]] = []

    def subscribe(self, fn: Callable[[T], object]) -> Subscription:
        self._subscribers.append(fn)
        return Subscription(lambda: self._remove(fn))

    def _remove(self, fn: Callable[[T], object]) -> None:
        for i, existing in enumerate(self._subscribers):
            if existing is fn:
                del self._subscribers[i]
                return

    def publish(self, value: T) -> None:
        for fn in list(self._subscribers):
            try:
                fn(value)
            except Exception:
                logger.exception("Subscriber %r raised during publish; continuing", fn)

    def clear(self) -> None:
        self._subscribers.clear()

    def __len__(self) -> int:
        return len(self._subscribers)
