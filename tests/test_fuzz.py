"""
Randomized tests for the fuzzy time series engine. These use seeded random series, universes and set counts to check output length, bounds, partition contiguity and determinism across a wide range of inputs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import random

import pytest

from engine.fts import fuzzify, partition_universe, song_chissom_forecast, song_chissom_trace


def random_case(seed):
    rng = random.Random(seed)
    lo = rng.uniform(-500, 500)
    hi = lo + rng.uniform(0.5, 1000)
    n = rng.randint(3, 15)
    length = rng.randint(2, 60)
    # roughly one in ten observations falls outside the universe
    span = hi - lo
    series = [rng.uniform(lo - 0.1 * span, hi + 0.1 * span) for _ in range(length)]
    steps = rng.randint(0, 8)
    return series, lo, hi, n, steps


@pytest.mark.parametrize("seed", range(25))
def test_fuzz_output_shape_and_bounds(seed):
    series, lo, hi, n, steps = random_case(seed)
    out = song_chissom_forecast(series, lo, hi, n, forecast_steps=steps)
    assert len(out) == len(series) - 1 + steps
    for v in out:
        assert lo <= v <= hi


@pytest.mark.parametrize("seed", range(25))
def test_fuzz_partition_and_edges(seed):
    _, lo, hi, n, _ = random_case(seed)
    intervals = partition_universe(lo, hi, n)
    for left, right in zip(intervals, intervals[1:]):
        assert left.max == right.min
        assert fuzzify(left.max, intervals) == left.id
    assert fuzzify(lo, intervals) == 1
    assert fuzzify(hi, intervals) == n


@pytest.mark.parametrize("seed", range(10))
def test_fuzz_determinism(seed):
    series, lo, hi, n, steps = random_case(seed)
    assert song_chissom_forecast(series, lo, hi, n, steps) == song_chissom_forecast(series, lo, hi, n, steps)


@pytest.mark.parametrize("seed", range(10))
def test_fuzz_groups_account_for_every_transition(seed):
    series, lo, hi, n, _ = random_case(seed)
    trace = song_chissom_trace(series, lo, hi, n)
    assert sum(len(t) for t in trace.groups.values()) == len(series) - 1
    assert set(trace.groups) == set(trace.fuzzified[:-1])
    assert all(1 <= s <= n for s in trace.fuzzified)
