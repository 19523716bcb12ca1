"""Tests for the lock-striped map used by the parallel variant."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from iteration_bench.benchmarks.striped import StripedDict


def test_basic_mapping_operations() -> None:
    m: StripedDict[int, bool] = StripedDict(stripes=4)
    m.put(1, False)
    m[2] = True

    assert m[1] is False
    assert m[2] is True
    assert 2 in m
    assert 3 not in m
    assert [] not in m
    assert len(m) == 2
    assert sorted(m) == [1, 2]
    assert m.snapshot() == {1: False, 2: True}

    del m[1]
    assert 1 not in m
    with pytest.raises(KeyError):
        m[1]


def test_put_overwrites_existing_key() -> None:
    m: StripedDict[int, bool] = StripedDict()
    m.put(4, False)
    m.put(4, True)
    assert len(m) == 1
    assert m[4] is True


def test_clear_empties_every_stripe() -> None:
    m: StripedDict[int, bool] = StripedDict(stripes=3)
    for n in range(100):
        m.put(n, n % 2 == 0)
    m.clear()
    assert len(m) == 0
    assert m.snapshot() == {}


def test_rejects_zero_stripes() -> None:
    with pytest.raises(ValueError):
        StripedDict(stripes=0)


def test_concurrent_writers_lose_no_updates() -> None:
    m: StripedDict[int, bool] = StripedDict(stripes=8)
    keys_per_writer = 5000
    writers = 8

    def write(offset: int) -> None:
        for n in range(offset * keys_per_writer, (offset + 1) * keys_per_writer):
            m.put(n, n % 2 == 0)

    with ThreadPoolExecutor(max_workers=writers) as pool:
        list(pool.map(write, range(writers)))

    snapshot = m.snapshot()
    assert len(snapshot) == writers * keys_per_writer
    assert snapshot == {n: n % 2 == 0 for n in range(writers * keys_per_writer)}
