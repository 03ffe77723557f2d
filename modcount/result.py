"""Ok/Err values for loaders that report failure without raising."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeAlias, TypeVar, Generic

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]


def collect(results: Iterable[Result[Any, E]]) -> Result[tuple[Any, ...], E]:
    """Gather the values of several results, stopping at the first ``Err``."""
    values: list[Any] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err():
                return result
    return Ok(tuple(values))
