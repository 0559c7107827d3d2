#!/usr/bin/env python3

"""
Smoke test runner for a live Fuzzy Cast API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import argparse
import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict

import httpx

BASE_URL = os.getenv("FUZZYCAST_BASE_URL", "http://localhost:4322/api/v1")
HEADERS = {"Content-Type": "application/json"}

OIL = [47.12, 33.62, 41.6, 52.81, 50.17, 64.73, 68.76, 53.79, 58.58,
       51.56, 40.27, 52.2, 73.95, 86.49, 93.75, 79.17, 81.32, 75.71]


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""


def base(extra: Dict[str, Any] | None = None) -> Dict[str, Any]:
    d: Dict[str, Any] = {"universe_min": 30, "universe_max": 100, "num_fuzzy_sets": 7}
    if extra:
        d.update(extra)
    return d


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/health", section="Health"),
    Case("oil futures dataset", "GET", "/datasets/oil-futures", section="Health"),

    # ── Forecast ─────────────────────────────────────────
    Case("reference scenario", "POST", "/forecast", section="Forecast",
         body=base({"series": [47.12, 33.62, 41.6]})),
    Case("oil futures", "POST", "/forecast", section="Forecast",
         body=base({"series": OIL})),
    Case("oil futures with trace", "POST", "/forecast", section="Forecast",
         body=base({"series": OIL, "include_trace": True})),
    Case("three steps ahead", "POST", "/forecast", section="Forecast",
         body=base({"series": OIL, "forecast_steps": 3})),
    Case("fifteen sets", "POST", "/forecast", section="Forecast",
         body=base({"series": OIL, "num_fuzzy_sets": 15})),

    # ── Observations ─────────────────────────────────────
    Case("dated observations", "POST", "/forecast/observations", section="Observations",
         body=base({"observations": [
             {"date": "2023-07-01", "actual": 81.32},
             {"date": "2024-01-01", "actual": 75.71},
             {"date": "2023-01-01", "actual": 79.17},
         ]})),
    Case("no future rows", "POST", "/forecast/observations", section="Observations",
         body=base({"forecast_steps": 0, "observations": [
             {"date": "2023-01-01", "actual": 79.17},
             {"date": "2023-07-01", "actual": 81.32},
         ]})),

    # ── Sweep ─────────────────────────────────────────────
    Case("full range", "POST", "/forecast/sweep", section="Sweep",
         body={"series": OIL, "universe_min": 30, "universe_max": 100}),
    Case("narrow range", "POST", "/forecast/sweep", section="Sweep",
         body={"series": OIL, "universe_min": 30, "universe_max": 100, "min_sets": 5, "max_sets": 9}),

    # ── Validation ────────────────────────────────────────
    Case("single point", "POST", "/forecast", section="Validation",
         body=base({"series": [50]}), expect=422),
    Case("inverted universe", "POST", "/forecast", section="Validation",
         body=base({"series": OIL, "universe_min": 90, "universe_max": 80}), expect=422),
    Case("too few sets", "POST", "/forecast", section="Validation",
         body=base({"series": OIL, "num_fuzzy_sets": 2}), expect=422),
    Case("duplicate date", "POST", "/forecast/observations", section="Validation",
         body=base({"observations": [
             {"date": "2023-01-01", "actual": 79.17},
             {"date": "2023-01-01", "actual": 81.32},
         ]}), expect=422),
    Case("sweep bounds inverted", "POST", "/forecast/sweep", section="Validation",
         body={"series": OIL, "universe_min": 30, "universe_max": 100, "min_sets": 9, "max_sets": 5},
         expect=422),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    attempt = 0
    last_exc: Exception | None = None
    while attempt < 2:
        try:
            r = await client.request(case.method, case.path, json=case.body or None,
                                     params=case.params)
            ok = r.status_code == case.expect
            try:
                body: Any = r.json()
            except ValueError:
                body = r.text
            if ok:
                return True, "", body
            return False, f"{r.status_code} {r.reason_phrase}: {body}", body
        except httpx.TransportError as exc:
            last_exc = exc
            attempt += 1
            if attempt < 2:
                await asyncio.sleep(0.1)
                continue
            return False, f"transport error: {exc}", None
    return False, str(last_exc), None


async def main():
    parser = argparse.ArgumentParser(description="Run API smoke cases")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    args = parser.parse_args()
    selected: list[Case] = []
    for c in CASES:
        if args.section and c.section != args.section:
            continue
        if args.label and c.label != args.label:
            continue
        selected.append(c)
    if not selected:
        print("no matching cases (check --section or --label)")
        sys.exit(1)

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            pretty = json.dumps(body, indent=2) if body is not None else "<no response>"

            if ok:
                passed += 1
                print(f"  ✓ PASS  {case.method} {case.path} — {case.label}")
                print(f"         response:\n{pretty}")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} — {case.label} (expected {case.expect})")
                if detail:
                    print(f"         {detail}")
                print(f"         response:\n{pretty}")

    total = passed + failed
    print(f"\n{'━' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"  {'All cases passed ✓' if failed == 0 else f'{failed} case(s) failed ✗'}")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
