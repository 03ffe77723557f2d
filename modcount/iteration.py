"""Lazy iteration over a counter until its next reset.

A ``ResetIteration`` is a three-state machine:

- START: nothing subscribed yet; the first pull subscribes a reset flag on
  the source and yields ``source.current()``.
- YIELDING: each pull advances the source once and yields the new value,
  unless that advance (or an earlier one) wrapped the source.
- DONE: the reset flag is unsubscribed and every further pull stops.

The subscription is released on every way into DONE: natural exhaustion,
an explicit ``close()``, leaving a ``with`` block, an exception raised by
``advance()``, or the iteration object being garbage collected after the
consumer abandons it.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from types import TracebackType

    from .counter import ResetCounter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IterState(Enum):
    START = "start"
    YIELDING = "yielding"
    DONE = "done"


class _ResetFlag:
    """Subscriber that records whether a reset was seen.

    Kept separate from the iteration so the source's dispatcher never holds
    a reference back to the iteration object.
    """

    __slots__ = ("seen",)

    def __init__(self) -> None:
        self.seen = False

    def __call__(self, _payload: object) -> None:
        self.seen = True


class ResetIteration(Generic[T]):
    """Iterator yielding ``source.current()`` after each advance until a wrap."""

    def __init__(self, source: ResetCounter[T]) -> None:
        self._source = source
        self._state = IterState.START
        self._flag = _ResetFlag()

    @property
    def state(self) -> IterState:
        return self._state

    def __iter__(self) -> ResetIteration[T]:
        return self

    def __next__(self) -> T:
        match self._state:
            case IterState.START:
                self._source.subscribe_on_reset(self._flag)
                self._state = IterState.YIELDING
                return self._source.current()
            case IterState.YIELDING:
                if not self._flag.seen:
                    try:
                        self._source.advance()
                    except BaseException:
                        self.close()
                        raise
                    if not self._flag.seen:
                        return self._source.current()
                self.close()
                raise StopIteration
            case IterState.DONE:
                raise StopIteration

    def close(self) -> None:
        """Move to DONE, releasing the reset subscription if one is held."""
        if self._state is IterState.YIELDING:
            self._source.unsubscribe_on_reset(self._flag)
            logger.debug("Released reset subscription on %r", self._source)
        self._state = IterState.DONE

    def __enter__(self) -> ResetIteration[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        # __init__ may not have finished if construction failed
        if getattr(self, "_state", IterState.DONE) is IterState.YIELDING:
            self.close()
