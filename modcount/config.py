"""Environment-driven settings for the command-line tools.

Values come from the process environment, optionally seeded from a ``.env``
file in the working directory:

- ``MODCOUNT_CLOCK_SECONDS``: seconds simulated by ``modcount clock``.
- ``MODCOUNT_CLOCK_REPORT_EVERY``: seconds between two clock reports.
- ``MODCOUNT_LOG_LEVEL``: logging level name for the CLI.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from modcount.result import Err, Ok, Result, collect

DEFAULT_CLOCK_SECONDS = 100_000
DEFAULT_REPORT_EVERY = 3600
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    clock_seconds: int = DEFAULT_CLOCK_SECONDS
    report_every: int = DEFAULT_REPORT_EVERY
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Result["Settings", ValueError]:
        """Build settings from the environment (after loading ``.env``)."""
        load_dotenv()

        loaded = collect(
            (
                _positive_int("MODCOUNT_CLOCK_SECONDS", DEFAULT_CLOCK_SECONDS),
                _positive_int("MODCOUNT_CLOCK_REPORT_EVERY", DEFAULT_REPORT_EVERY),
                parse_log_level(os.getenv("MODCOUNT_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
            )
        )
        match loaded:
            case Ok((clock_seconds, report_every, log_level)):
                return Ok(
                    cls(
                        clock_seconds=clock_seconds,
                        report_every=report_every,
                        log_level=log_level,
                    )
                )
            case Err():
                return loaded


def parse_log_level(raw: str) -> Result[str, ValueError]:
    name = raw.strip().upper()
    match logging.getLevelNamesMapping().get(name):
        case int():
            return Ok(name)
        case None:
            return Err(ValueError(f"Unknown log level: {raw!r}"))


def _positive_int(var: str, default: int) -> Result[int, ValueError]:
    raw = os.getenv(var)
    match raw:
        case None:
            return Ok(default)
        case str(text) if text.strip().isdecimal() and int(text) > 0:
            return Ok(int(text))
        case _:
            return Err(ValueError(f"{var} must be a positive integer, got {raw!r}"))
