"""
Fuzzification of crisp observations into interval ids over a partitioned universe of discourse.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from engine.fts.partition import FuzzyInterval


def fuzzify(value: float, intervals: Sequence[FuzzyInterval]) -> int:
    """Return the id of the interval covering ``value``.

    Bounds are inclusive and intervals are scanned in ascending order, so a
    value sitting on a shared edge belongs to the lower interval. Values
    outside the universe clamp to the first or last set; NaN fails every
    comparison and lands in the last set.
    """
    for interval in intervals:
        if interval.min <= value <= interval.max:
            return interval.id
    return intervals[0].id if value < intervals[0].min else intervals[-1].id


def fuzzify_series(values: Iterable[float], intervals: Sequence[FuzzyInterval]) -> List[int]:
    return [fuzzify(v, intervals) for v in values]
