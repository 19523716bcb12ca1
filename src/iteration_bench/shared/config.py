"""Benchmark configuration and run-count parsing."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

ONE_MILLION = 1_000_000
DEFAULT_RUNS = 1000

# Signed 32-bit bounds; larger values are rejected as unparseable.
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
# `\d` and `int()` both accept any Unicode decimal digit.
_INTEGER_RE = re.compile(r"[+-]?\d+")


class RunCountError(ValueError):
    """Base error for an invalid run-count argument."""


class RunCountFormatError(RunCountError):
    """The argument is not an integer."""


class NonPositiveRunCountError(RunCountError):
    """The argument is an integer, but not greater than zero."""


def default_workers() -> int:
    """Number of CPUs this process may run on."""

    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0)) or 1
    return os.cpu_count() or 1


@dataclass(frozen=True, slots=True)
class BenchConfig:
    """Benchmark parameters.

    Only `runs` is exposed on the command line; the remaining fields let the
    library API run the same code on smaller inputs.
    """

    runs: int = DEFAULT_RUNS
    sample_size: int = ONE_MILLION
    max_value: int = ONE_MILLION
    workers: int = field(default_factory=default_workers)

    @classmethod
    def default(cls) -> "BenchConfig":
        return cls()


def parse_run_count(raw: str) -> int:
    """Parses a run count the way the command line accepts it.

    Accepts an optional sign followed by decimal digits of any script
    (`"٥"` is 5). Anything else, or a value outside the signed 32-bit
    range, raises `RunCountFormatError`. Values <= 0 raise
    `NonPositiveRunCountError`.
    """

    if not _INTEGER_RE.fullmatch(raw):
        raise RunCountFormatError(f"not an integer: {raw!r}")
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise RunCountFormatError(f"out of range: {raw!r}")
    if value <= 0:
        raise NonPositiveRunCountError(f"run count must be greater than 0, got {value}")
    return value
