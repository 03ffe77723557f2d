import argparse
import logging
import math
import sys
from collections.abc import Sequence

from modcount.clock import Clock, simulate
from modcount.config import Settings, parse_log_level
from modcount.powerset import enumerate_product, generate_powerset
from modcount.render import render
from modcount.result import Err, Ok

logger = logging.getLogger(__name__)


def handle_clock(seconds: int, report_every: int) -> int:
    """Run the clock for ``seconds`` ticks and print a line per report."""
    reports = simulate(Clock(), total_seconds=seconds, report_every=report_every)
    sys.stdout.write(render("clock.j2", reports=reports))
    return 0


def handle_powerset(items: Sequence[str]) -> int:
    sys.stdout.write(
        render("powerset.j2", items=list(items), subsets=generate_powerset(items))
    )
    return 0


def handle_product(radixes: Sequence[int]) -> int:
    sys.stdout.write(
        render(
            "product.j2",
            radixes=radixes,
            combinations=math.prod(radixes),
            tuples=enumerate_product(radixes),
        )
    )
    return 0


def _positive(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modcount",
        description="Bounded wrap-around counters and odometer-style chains.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level name (default: {settings.log_level}, "
        "from MODCOUNT_LOG_LEVEL).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: clock
    clock_parser = subparsers.add_parser(
        "clock",
        help="Simulate a 24h clock built from chained seconds/minutes/hours digits.",
    )
    clock_parser.add_argument(
        "--seconds",
        type=_positive,
        default=settings.clock_seconds,
        help=f"Seconds to simulate (default: {settings.clock_seconds}).",
    )
    clock_parser.add_argument(
        "--report-every",
        type=_positive,
        default=settings.report_every,
        metavar="N",
        help=f"Print the time every N seconds (default: {settings.report_every}).",
    )

    # Command: powerset
    powerset_parser = subparsers.add_parser(
        "powerset",
        help="Print every subset of the given items, using a chain of binary digits.",
    )
    powerset_parser.add_argument("items", nargs="+", metavar="ITEM")

    # Command: product
    product_parser = subparsers.add_parser(
        "product",
        help="Print every digit tuple of a mixed-radix counter (least significant first).",
    )
    product_parser.add_argument("radixes", nargs="+", type=_positive, metavar="RADIX")

    return parser


def run(argv: Sequence[str] | None = None) -> int:
    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            print(f"Configuration error: {e}", file=sys.stderr)
            return 2

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    match parse_log_level(args.log_level):
        case Ok(level):
            logging.basicConfig(level=level)
        case Err(e):
            print(f"Configuration error: {e}", file=sys.stderr)
            return 2

    logger.debug("Running command %r", args.command)

    match args.command:
        case "clock":
            return handle_clock(args.seconds, args.report_every)
        case "powerset":
            return handle_powerset(args.items)
        case "product":
            return handle_product(args.radixes)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def main() -> int:
    """Synchronous entry point for the console script."""
    try:
        return run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
