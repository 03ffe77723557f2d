"""Combinatorial enumeration on top of counter chains."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from .helpers import binary_digits, mixed_radix
from .chain import CounterChain

T = TypeVar("T")


def generate_powerset(items: Sequence[T]) -> Iterator[list[T]]:
    """Lazily yield every subset of ``items``.

    One binary digit per item (1 = included), counted from all-zeros, so
    the first subset is empty and the last is ``list(items)``. Digit 0 is
    the least significant, hence ``[a]`` comes before ``[b]``.
    """
    if len(items) == 0:
        raise ValueError("Input must be a non-empty sequence")

    chain = CounterChain(binary_digits(len(items)))
    with chain.iterate_until_reset() as combinations:
        for bits in combinations:
            yield [item for item, bit in zip(items, bits) if bit == 1]


def enumerate_product(radixes: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield every digit tuple of a zero-based mixed-radix counter.

    Tuples are least significant first; there are ``prod(radixes)`` of them.
    """
    chain = mixed_radix(*radixes)
    with chain.iterate_until_reset() as combinations:
        for digits in combinations:
            yield tuple(digits)
