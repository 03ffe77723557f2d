"""Synchronous publish/subscribe primitive used for reset notifications."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Callback = Callable[[T], object]


class EventDispatcher(Generic[T]):
    """An ordered, deduplicated set of callbacks notified with one payload.

    Callbacks run synchronously in subscription order. An exception raised
    by a callback propagates out of ``notify`` and the remaining callbacks
    of that pass are skipped.
    """

    def __init__(self) -> None:
        # list rather than set: callables need not be hashable
        self._subscribers: list[Callback[T]] = []

    def subscribe(self, callback: Callback[T]) -> None:
        if not callable(callback):
            raise TypeError(
                f"Callback must be callable, got {type(callback).__name__}"
            )
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Callback[T]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def notify(self, payload: T) -> None:
        """Call every subscriber with ``payload``.

        The pass runs over the subscribers present when it started; changes
        made by a callback take effect on the next ``notify``.
        """
        for callback in tuple(self._subscribers):
            callback(payload)

    def count(self) -> int:
        return len(self._subscribers)

    def clear(self) -> None:
        self._subscribers.clear()
