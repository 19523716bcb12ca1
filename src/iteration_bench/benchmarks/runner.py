"""Timed runner and summary report."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import asdict, dataclass

import structlog

from .variants import DEFAULT_VARIANTS, Variant

NS_TO_SECONDS = 1.0e-9
SUMMARY_FOOTER = "-" * 26


@dataclass(frozen=True, slots=True)
class VariantTiming:
    name: str
    label: str
    separator: str
    runs: int
    grand_total_ns: int
    operation_total_ns: int

    @property
    def grand_total_seconds(self) -> float:
        return NS_TO_SECONDS * self.grand_total_ns

    @property
    def operation_total_seconds(self) -> float:
        return NS_TO_SECONDS * self.operation_total_ns

    @property
    def average_iteration_seconds(self) -> float:
        return self.operation_total_seconds / self.runs

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["grand_total_seconds"] = self.grand_total_seconds
        payload["operation_total_seconds"] = self.operation_total_seconds
        payload["average_iteration_seconds"] = self.average_iteration_seconds
        return payload


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    runs: int
    timings: tuple[VariantTiming, ...]

    def to_text(self) -> str:
        lines: list[str] = [f"Summary of {self.runs} Iterations"]
        for timing in self.timings:
            lines.append(f"--{timing.label}--")
            lines.append(f"Grand Total: {timing.grand_total_seconds:.8f}s")
            lines.append(f"Operation Total: {timing.operation_total_seconds:.8f}s")
            lines.append(f"Average Iteration: {timing.average_iteration_seconds:.8f}s")
            lines.append(timing.separator)
        lines.append(SUMMARY_FOOTER)
        return "\n".join(lines) + "\n"


def time_variant(
    variant: Variant,
    numbers: Sequence[int],
    *,
    runs: int,
    workers: int = 1,
    clock: Callable[[], int] = time.perf_counter_ns,
) -> VariantTiming:
    """Fills and clears the variant's map `runs` times and measures it.

    The grand total spans the whole loop including map clearing; the
    operation total sums only the fill calls.
    """

    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")

    target = variant.make_map(workers)
    with variant.open_fill(workers) as fill:
        operation_total = 0
        total_start = clock()
        for _ in range(runs):
            start = clock()
            fill(numbers, target)
            operation_total += clock() - start
            target.clear()
        total_end = clock()

    return VariantTiming(
        name=variant.name,
        label=variant.label,
        separator=variant.separator,
        runs=runs,
        grand_total_ns=total_end - total_start,
        operation_total_ns=operation_total,
    )


def run_benchmarks(
    numbers: Sequence[int],
    *,
    runs: int,
    workers: int = 1,
    variants: Sequence[Variant] = DEFAULT_VARIANTS,
) -> BenchmarkReport:
    logger = structlog.get_logger(__name__)
    timings: list[VariantTiming] = []

    for variant in variants:
        logger.debug("variant-started", variant=variant.name, runs=runs, workers=workers)
        timing = time_variant(variant, numbers, runs=runs, workers=workers)
        logger.info(
            "variant-finished",
            variant=variant.name,
            grand_total_s=round(timing.grand_total_seconds, 8),
            operation_total_s=round(timing.operation_total_seconds, 8),
        )
        timings.append(timing)

    return BenchmarkReport(runs=runs, timings=tuple(timings))
