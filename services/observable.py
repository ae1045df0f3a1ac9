"""Latest-value container with change notifications."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Dict, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]

logger = logging.getLogger(__name__)


class Observable(Generic[T]):
    """Holds the latest value and calls subscribers whenever it changes."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: Dict[int, Subscriber] = {}
        self._next_token = 0
        self._lock = Lock()

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Subscriber, *, replay: bool = False) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it.

        With ``replay`` the callback is invoked once immediately with the
        current value, mirroring how a collector of a state stream sees the
        latest value on subscription.
        """
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._subscribers[token] = callback

        if replay:
            self._deliver(callback, self._value)

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(token, None)

        return unsubscribe

    def set(self, value: T) -> bool:
        """Store ``value``; notify subscribers and return True if it changed."""
        with self._lock:
            if value == self._value:
                return False
            self._value = value
            callbacks = list(self._subscribers.values())

        for callback in callbacks:
            self._deliver(callback, value)
        return True

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    @staticmethod
    def _deliver(callback: Subscriber, value: T) -> None:
        try:
            callback(value)
        except Exception:  # noqa: BLE001 - one failing subscriber must not starve the rest
            logger.exception(
                "Observable subscriber raised",
                extra={"subscriber": getattr(callback, "__qualname__", repr(callback))},
            )
