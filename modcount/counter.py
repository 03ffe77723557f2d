"""Bounded wrap-around counters.

A ``BoundedCounter`` cycles through the half-open range
``[lower_bound, upper_bound)``. Stepping past the last value wraps back to
``lower_bound`` and raises a reset notification carrying the wrapped value:

    >>> c = BoundedCounter(3)
    >>> c.subscribe_on_reset(print).current()
    0
    >>> c.advance(); c.advance(); c.advance()
    0
    >>> c.current()
    0

``ResetCounter`` is the shape shared by single counters and chains of them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, Self, TypeVar, runtime_checkable

from .events import EventDispatcher
from .iteration import ResetIteration

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ResetCounter(Protocol[T_co]):
    """Anything that advances one step at a time and announces its wraps."""

    def current(self) -> T_co: ...

    def advance(self) -> None: ...

    def subscribe_on_reset(self, callback: Callable[..., object]) -> Self: ...

    def unsubscribe_on_reset(self, callback: Callable[..., object]) -> Self: ...

    def iterate_until_reset(self) -> ResetIteration[T_co]: ...


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class BoundedCounter:
    """A counter over ``[lower_bound, upper_bound)`` that wraps on overflow."""

    def __init__(
        self,
        upper_bound: int,
        lower_bound: int = 0,
        start_value: int | None = None,
    ) -> None:
        """
        Args:
            upper_bound: exclusive upper end of the range.
            lower_bound: inclusive lower end of the range (default 0).
            start_value: initial value (default ``lower_bound``).

        Raises:
            TypeError: if a bound or the start value is not an int.
            ValueError: if the range is empty or the start value lies
                outside it.
        """
        _require_int("upper_bound", upper_bound)
        _require_int("lower_bound", lower_bound)
        if start_value is None:
            start_value = lower_bound
        _require_int("start_value", start_value)

        if upper_bound <= lower_bound:
            raise ValueError(
                f"Upper bound must be greater than lower bound "
                f"(got upper_bound={upper_bound}, lower_bound={lower_bound})"
            )
        if not lower_bound <= start_value < upper_bound:
            raise ValueError(
                f"Starting value must be in range [{lower_bound}, {upper_bound}), "
                f"got {start_value}"
            )

        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        self._value = start_value
        self._on_reset: EventDispatcher[int] = EventDispatcher()

    @property
    def lower_bound(self) -> int:
        return self._lower_bound

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    @property
    def radix(self) -> int:
        """Number of distinct values the counter cycles through."""
        return self._upper_bound - self._lower_bound

    def current(self) -> int:
        return self._value

    def advance(self) -> None:
        """Step by one, wrapping to ``lower_bound`` and notifying on overflow."""
        self._value += 1
        if self._value >= self._upper_bound:
            self._value = self._lower_bound
            self._on_reset.notify(self._value)

    def subscribe_on_reset(self, callback: Callable[[int], object]) -> Self:
        self._on_reset.subscribe(callback)
        return self

    def unsubscribe_on_reset(self, callback: Callable[[int], object]) -> Self:
        self._on_reset.unsubscribe(callback)
        return self

    def reset_subscriber_count(self) -> int:
        return self._on_reset.count()

    def iterate_until_reset(self) -> ResetIteration[int]:
        """Yield the current value, then one value per advance until a wrap."""
        return ResetIteration(self)

    def __repr__(self) -> str:
        return (
            f"BoundedCounter(upper_bound={self._upper_bound}, "
            f"lower_bound={self._lower_bound}, value={self._value})"
        )
