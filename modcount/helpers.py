"""Builder helpers for common digit layouts.

These are shortcuts over constructing ``BoundedCounter`` / ``CounterChain``
directly; the clock and powerset modules are written in terms of them.
"""

from modcount.chain import CounterChain
from modcount.counter import BoundedCounter


def digit(radix: int, offset: int = 0) -> BoundedCounter:
    """A digit taking ``radix`` values starting at ``offset``."""
    return BoundedCounter(offset + radix, offset)


def binary_digits(width: int) -> list[BoundedCounter]:
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")
    return [digit(2) for _ in range(width)]


def mixed_radix(*radixes: int) -> CounterChain:
    """A zero-based chain, ``radixes[0]`` being the least significant digit."""
    return CounterChain([digit(r) for r in radixes])
