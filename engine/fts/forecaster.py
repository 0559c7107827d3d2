"""
Defuzzified forecasting over fuzzy relationship groups, covering one-step-ahead predictions for every historical step and recursive extrapolation beyond the end of the series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

from engine.fts.fuzzify import fuzzify
from engine.fts.partition import FuzzyInterval
from engine.fts.relationships import RelationshipGroups


def defuzzify(
    state: int,
    groups: RelationshipGroups,
    intervals: Sequence[FuzzyInterval],
) -> float:
    targets = groups.get(state)
    if targets:
        return sum(intervals[target - 1].mid for target in targets) / len(targets)
    # state never seen as a transition source
    return intervals[state - 1].mid


def forecast_history(
    fuzzified: Sequence[int],
    groups: RelationshipGroups,
    intervals: Sequence[FuzzyInterval],
) -> List[float]:
    # forecast[i - 1] predicts observation i from the state of observation i - 1
    return [defuzzify(fuzzified[i - 1], groups, intervals) for i in range(1, len(fuzzified))]


def extrapolate(
    last_value: float,
    steps: int,
    groups: RelationshipGroups,
    intervals: Sequence[FuzzyInterval],
) -> List[float]:
    """Continue the forecast ``steps`` points past the last observation.

    Every prediction is fed back through the fuzzifier to pick the next
    state. ``groups`` is the historical FLRG and is never extended with
    extrapolated transitions, so the output eventually cycles or settles on
    a fixed point.
    """
    out: List[float] = []
    state = fuzzify(last_value, intervals)
    for _ in range(steps):
        next_value = defuzzify(state, groups, intervals)
        out.append(next_value)
        state = fuzzify(next_value, intervals)
    return out
