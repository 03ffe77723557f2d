"""A 24-hour clock built from a seconds/minutes/hours counter chain."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .chain import CounterChain
from .counter import BoundedCounter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockTime:
    hours: int
    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


class Clock:
    """Seconds (60) carry into minutes (60), which carry into hours (24)."""

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        self._chain = CounterChain(
            BoundedCounter(60, start_value=seconds),
            BoundedCounter(60, start_value=minutes),
            BoundedCounter(24, start_value=hours),
        )

    def tick(self) -> None:
        self._chain.advance()

    def time(self) -> ClockTime:
        seconds, minutes, hours = self._chain.snapshot()
        return ClockTime(hours=hours, minutes=minutes, seconds=seconds)

    def subscribe_on_midnight(
        self, callback: Callable[[tuple[int, ...]], object]
    ) -> Clock:
        self._chain.subscribe_on_reset(callback)
        return self

    def unsubscribe_on_midnight(
        self, callback: Callable[[tuple[int, ...]], object]
    ) -> Clock:
        self._chain.unsubscribe_on_reset(callback)
        return self


def simulate(
    clock: Clock, total_seconds: int, report_every: int
) -> Iterator[ClockTime]:
    """Tick ``clock`` ``total_seconds`` times, yielding its time every
    ``report_every`` ticks.

    Reports are driven by a separate ``report_every``-wide counter ticked in
    step with the clock; each of its wraps produces one report.
    """
    if total_seconds < 0:
        raise ValueError(f"total_seconds must be non-negative, got {total_seconds}")

    due: list[ClockTime] = []
    printer = BoundedCounter(report_every).subscribe_on_reset(
        lambda _value: due.append(clock.time())
    )
    logger.debug(
        "Simulating %d seconds from %s, reporting every %d",
        total_seconds,
        clock.time(),
        report_every,
    )
    for _ in range(total_seconds):
        clock.tick()
        printer.advance()
        if due:
            yield due.pop()
