"""Command line entry point for the LPT GPU scheduler."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable

from lptsched.report import render_report
from lptsched.scheduler import NUM_GPUS, TASK_NAMES, TICK_MS, simulate

DEFAULT_DURATIONS = (70, 200, 190, 250, 300)


def _parse_one(value: str) -> int:
    number = int(value.strip())
    if number < 0:
        raise ValueError(f"duration must be non-negative, got {number}")
    return number


def parse_durations(values: Iterable[str]) -> list[int]:
    """Turn text values into non-negative durations in ms."""
    durations = []
    for value in values:
        try:
            durations.append(_parse_one(value))
        except ValueError as error:
            raise ValueError(f"invalid duration {value!r}: {error}") from None
    return durations


def prompt_durations(
    read_line: Callable[[], str], write: Callable[[str], object]
) -> list[int]:
    """Ask for one duration per module, repeating until each is valid.

    Raises EOFError when input runs out.
    """
    write("Enter durations for each module (in ms):\n")
    durations = []
    for name in TASK_NAMES:
        write(f"  {name}: ")
        while True:
            line = read_line()
            if not line:
                raise EOFError("input ended before all durations were given")
            try:
                durations.append(_parse_one(line))
                break
            except ValueError:
                write(f"Please enter a valid non-negative integer for {name}: ")
    return durations


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lptsched",
        description="Simulate LPT scheduling of car modules onto GPUs.",
    )
    parser.add_argument("durations", nargs="*", help="module durations in ms")
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="ask for each duration"
    )
    parser.add_argument("--gpus", type=int, default=NUM_GPUS, help="number of GPUs")
    parser.add_argument("--tick", type=int, default=TICK_MS, help="tick length in ms")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        if args.durations:
            parser.error("durations cannot be given together with --interactive")
        try:
            durations = prompt_durations(sys.stdin.readline, sys.stdout.write)
        except EOFError as error:
            print(f"lptsched: {error}", file=sys.stderr)
            return 1
        sys.stdout.write("\n")
    elif args.durations:
        try:
            durations = parse_durations(args.durations)
        except ValueError as error:
            parser.error(str(error))
    else:
        durations = list(DEFAULT_DURATIONS)

    try:
        simulation = simulate(durations, args.gpus, args.tick)
    except ValueError as error:
        parser.error(str(error))
    sys.stdout.write(render_report(simulation))
    return 0


if __name__ == "__main__":
    sys.exit(main())