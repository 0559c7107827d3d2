"""
Fuzzy logical relationships (FLRs) between consecutive fuzzy states and their grouping by source state (FLRGs).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

# source id -> every target id reached from it, in order, duplicates kept
RelationshipGroups = Dict[int, List[int]]


@dataclass(frozen=True)
class FuzzyLogicalRelationship:
    source: int
    target: int


def build_relationships(fuzzified: Sequence[int]) -> List[FuzzyLogicalRelationship]:
    return [
        FuzzyLogicalRelationship(source=fuzzified[i - 1], target=fuzzified[i])
        for i in range(1, len(fuzzified))
    ]


def group_relationships(relationships: Iterable[FuzzyLogicalRelationship]) -> RelationshipGroups:
    groups: RelationshipGroups = {}
    for flr in relationships:
        groups.setdefault(flr.source, []).append(flr.target)
    return groups
