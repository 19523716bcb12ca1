"""CLI entrypoint: validate the run count, run every variant, print the summary."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from collections.abc import Sequence
from dataclasses import replace

import structlog

from iteration_bench.benchmarks import generate_numbers, run_benchmarks
from iteration_bench.shared import (
    BenchConfig,
    NonPositiveRunCountError,
    RunCountFormatError,
    configure_logging,
    parse_run_count,
)


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="iteration-bench",
        description="Compare for loops, for-in loops and parallel lambdas by timing even/odd map population.",
    )
    parser.add_argument(
        "runs",
        nargs="?",
        help="Number of timed iterations per variant (default: 1000)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed logs on stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None, *, config: BenchConfig | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)
    logger = structlog.get_logger(__name__)

    config = config or BenchConfig.default()

    if args.runs is not None:
        try:
            config = replace(config, runs=parse_run_count(args.runs))
        except NonPositiveRunCountError as exc:
            logger.debug("run-count-not-positive", error=str(exc))
            print("Number of runs must be greater than 0!")
            return 0
        except RunCountFormatError as exc:
            logger.debug("run-count-invalid", error=str(exc), fallback=config.runs)
            print(f"Invalid number entered, using default {config.runs}.")
            print("-" * 43)

    numbers = generate_numbers(config.sample_size, upper=config.max_value)
    logger.debug("numbers-generated", count=len(numbers), upper=config.max_value)

    report = run_benchmarks(numbers, runs=config.runs, workers=config.workers)
    print(report.to_text(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
