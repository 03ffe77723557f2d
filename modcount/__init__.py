"""modcount: bounded wrap-around counters and odometer-style counter chains."""

from .events import EventDispatcher
from .iteration import IterState, ResetIteration
from .counter import BoundedCounter, ResetCounter
from .chain import CounterChain
from .helpers import binary_digits, digit, mixed_radix
from .powerset import enumerate_product, generate_powerset
from .clock import Clock, ClockTime, simulate
from .result import Ok, Err, Result

__all__ = [
    # Events
    "EventDispatcher",
    # Counters
    "BoundedCounter", "ResetCounter", "CounterChain",
    # Iteration
    "IterState", "ResetIteration",
    # Helpers
    "binary_digits", "digit", "mixed_radix",
    # Applications
    "enumerate_product", "generate_powerset", "Clock", "ClockTime", "simulate",
    # Result
    "Ok", "Err", "Result",
]
