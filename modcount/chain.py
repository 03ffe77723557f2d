"""Chains of bounded counters forming a mixed-radix "odometer".

Digits are ordered least significant first. Digit ``i`` wrapping advances
digit ``i + 1``, which is exactly mixed-radix carry: one ``advance()`` on the
chain is one increment of the number whose place values are the digit
radixes. The chain raises its own reset notification only when the last
digit wraps, i.e. once every ``combinations`` advances.

Example: seconds, minutes, hours of a 24h clock

    >>> clock = CounterChain(BoundedCounter(60), BoundedCounter(60), BoundedCounter(24))
    >>> clock.combinations
    86400
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Sequence
from typing import Self

from .counter import BoundedCounter
from .events import EventDispatcher
from .iteration import ResetIteration

logger = logging.getLogger(__name__)


def _flatten_one_level(
    counters: tuple[BoundedCounter | Sequence[BoundedCounter], ...],
) -> list[object]:
    flat: list[object] = []
    for item in counters:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


class CounterChain:
    """An ordered, fixed composition of ``BoundedCounter`` digits with carry.

    Digits must be plain ``BoundedCounter`` instances: a ``CounterChain`` is
    not accepted as a digit of another chain. To widen a chain, pass all the
    digits to a single ``CounterChain`` instead.
    """

    def __init__(
        self, *counters: BoundedCounter | Sequence[BoundedCounter]
    ) -> None:
        """
        Accepts digits as separate arguments or as one list/tuple of digits.

        Raises:
            ValueError: if no digits are supplied.
            TypeError: if any digit is not a ``BoundedCounter``.
        """
        digits = _flatten_one_level(counters)
        if not digits:
            raise ValueError("At least one counter must be provided")
        for position, item in enumerate(digits):
            if not isinstance(item, BoundedCounter):
                raise TypeError(
                    f"All counters must be BoundedCounter instances, "
                    f"got {type(item).__name__} at position {position}"
                )

        self._digits: tuple[BoundedCounter, ...] = tuple(digits)  # type: ignore[arg-type]
        self._on_reset: EventDispatcher[tuple[int, ...]] = EventDispatcher()

        for lower, upper in zip(self._digits, self._digits[1:]):
            lower.subscribe_on_reset(_carry_into(upper))
        self._digits[-1].subscribe_on_reset(self._last_digit_reset)

        logger.debug(
            "Wired chain of %d digits with radixes %s",
            len(self._digits),
            [d.radix for d in self._digits],
        )

    @property
    def digits(self) -> tuple[BoundedCounter, ...]:
        return self._digits

    @property
    def combinations(self) -> int:
        """Number of advances between two chain resets."""
        return math.prod(d.radix for d in self._digits)

    def current(self) -> Iterator[int]:
        """Lazily read each digit's value, least significant first.

        The values are read as the generator is consumed, so drain it before
        the next ``advance()`` if a consistent reading is needed (or use
        ``snapshot()``).
        """
        for d in self._digits:
            yield d.current()

    def snapshot(self) -> tuple[int, ...]:
        return tuple(d.current() for d in self._digits)

    def advance(self) -> None:
        """Advance the least significant digit; carries follow by notification."""
        self._digits[0].advance()

    def subscribe_on_reset(
        self, callback: Callable[[tuple[int, ...]], object]
    ) -> Self:
        self._on_reset.subscribe(callback)
        return self

    def unsubscribe_on_reset(
        self, callback: Callable[[tuple[int, ...]], object]
    ) -> Self:
        self._on_reset.unsubscribe(callback)
        return self

    def reset_subscriber_count(self) -> int:
        return self._on_reset.count()

    def iterate_until_reset(self) -> ResetIteration[Iterator[int]]:
        """Yield a live ``current()`` reader per step until the chain wraps.

        Each element must be drained before pulling the next one.
        """
        return ResetIteration(self)

    def _last_digit_reset(self, _value: int) -> None:
        snapshot = self.snapshot()
        logger.debug("Chain wrapped to %s", snapshot)
        self._on_reset.notify(snapshot)

    def __len__(self) -> int:
        return len(self._digits)

    def __repr__(self) -> str:
        return f"CounterChain({list(self.snapshot())}, radixes={[d.radix for d in self._digits]})"


def _carry_into(digit: BoundedCounter) -> Callable[[int], None]:
    def carry(_value: int) -> None:
        digit.advance()

    return carry
