"""The three fill strategies being compared.

Each strategy writes every element of the input sequence into a map as
`n -> n % 2 == 0`. They differ only in how they iterate and which map they
write into.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableMapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import AbstractContextManager, contextmanager, nullcontext
from dataclasses import dataclass
from typing import TypeVar

from .striped import DEFAULT_STRIPES, StripedDict

T = TypeVar("T")

EvenOddMap = MutableMapping[int, bool]
FillFn = Callable[[Sequence[int], EvenOddMap], None]


def fill_indexed(numbers: Sequence[int], target: EvenOddMap) -> None:
    for i in range(len(numbers)):
        target[numbers[i]] = numbers[i] % 2 == 0


def fill_elements(numbers: Sequence[int], target: EvenOddMap) -> None:
    for n in numbers:
        target[n] = n % 2 == 0


def partition_bounds(length: int, partitions: int) -> list[tuple[int, int]]:
    """Splits `range(length)` into at most `partitions` contiguous, non-empty slices."""

    if partitions < 1:
        raise ValueError(f"partitions must be >= 1, got {partitions}")
    if length <= 0:
        return []

    partitions = min(partitions, length)
    base, extra = divmod(length, partitions)
    bounds: list[tuple[int, int]] = []
    start = 0
    for i in range(partitions):
        stop = start + base + (1 if i < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


def _apply(items: Sequence[T], action: Callable[[T], object]) -> None:
    for item in items:
        action(item)


def parallel_for_each(
    pool: ThreadPoolExecutor,
    items: Sequence[T],
    action: Callable[[T], object],
    *,
    partitions: int,
) -> None:
    """Runs `action` on every item, fanned out over `pool`.

    Returns only after every task has finished. The first worker exception is
    re-raised here.
    """

    futures = [
        pool.submit(_apply, items[start:stop], action)
        for start, stop in partition_bounds(len(items), partitions)
    ]
    for future in futures:
        future.result()


def fill_parallel(numbers: Sequence[int], target: StripedDict[int, bool], *, pool: ThreadPoolExecutor, partitions: int) -> None:
    parallel_for_each(pool, numbers, lambda n: target.put(n, n % 2 == 0), partitions=partitions)


@contextmanager
def _parallel_fill(workers: int) -> Iterator[FillFn]:
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="lambda-fill") as pool:

        def fill(numbers: Sequence[int], target: EvenOddMap) -> None:
            fill_parallel(numbers, target, pool=pool, partitions=workers)  # type: ignore[arg-type]

        yield fill


@dataclass(frozen=True, slots=True)
class Variant:
    """One benchmarked iteration strategy and the map it writes into."""

    name: str
    label: str
    separator: str
    make_map: Callable[[int], EvenOddMap]
    open_fill: Callable[[int], AbstractContextManager[FillFn]]


INDEXED_LOOP = Variant(
    name="for",
    label="FOR",
    separator="-" * 7,
    make_map=lambda _workers: {},
    open_fill=lambda _workers: nullcontext(fill_indexed),
)

ELEMENT_LOOP = Variant(
    name="for_in",
    label="FOR-IN",
    separator="-" * 10,
    make_map=lambda _workers: {},
    open_fill=lambda _workers: nullcontext(fill_elements),
)

PARALLEL_LAMBDA = Variant(
    name="lambda",
    label="LAMBDA",
    separator="-" * 13,
    make_map=lambda _workers: StripedDict(stripes=DEFAULT_STRIPES),
    open_fill=_parallel_fill,
)

DEFAULT_VARIANTS: tuple[Variant, ...] = (INDEXED_LOOP, ELEMENT_LOOP, PARALLEL_LAMBDA)
