#!/usr/bin/env python3

"""
Regression and integration test runner for the ImpactWalk API.

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
from typing import Any, Callable, Dict, Optional

import httpx

BASE_URL = os.getenv("IMPACTWALK_BASE_URL", "http://localhost:4322/api/v1")
HEADERS = {"Content-Type": "application/json"}

FLAT = [0.0, 0.1, -0.1, 0.05, -0.05, 0.0, 0.1, -0.1, 0.0, 0.05]
ALTERNATING = [float(i % 2) for i in range(20)]


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""
    check: Optional[Callable[[Any], bool]] = None


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/health", section="Health",
         check=lambda b: b["status"] == "ok"),

    # ── Impact ────────────────────────────────────────────
    Case("jump up", "POST", "/impact", section="Impact",
         body={"series_before": FLAT, "series_candidate": [100.0] * 10, "iterations": 5000},
         check=lambda b: b["operator"] == "greater_than" and b["significant"]),
    Case("drop", "POST", "/impact", section="Impact",
         body={"series_before": FLAT, "series_candidate": [-100.0] * 10, "iterations": 5000},
         check=lambda b: b["operator"] == "less_than" and b["probability"] == 0.0),
    Case("flat tie", "POST", "/impact", section="Impact",
         body={"series_before": [5.0] * 6, "series_candidate": [5.0] * 4},
         check=lambda b: b["operator"] == "equals" and b["probability"] == 1.0),
    Case("continuation", "POST", "/impact", section="Impact",
         body={"series_before": ALTERNATING, "series_candidate": ALTERNATING[:10], "iterations": 20000},
         check=lambda b: b["probability"] > 0.1),
    Case("custom alpha", "POST", "/impact", section="Impact",
         body={"series_before": FLAT, "series_candidate": [100.0] * 10, "alpha": 0.001}),

    # ── Smooth ────────────────────────────────────────────
    Case("independent", "POST", "/smooth", section="Smooth",
         body={"series": [1, 2, 3, 4, 5]},
         check=lambda b: len(b["series"]) == 5 and b["candidate"] is None),
    Case("joint", "POST", "/smooth", section="Smooth",
         body={"series": [0, 0, 0, 0], "candidate": [10, 10, 10], "radius": 1},
         check=lambda b: len(b["series"]) == 4 and len(b["candidate"]) == 3),

    # ── Validation ────────────────────────────────────────
    Case("before too short", "POST", "/impact", section="Validation",
         body={"series_before": [1.0], "series_candidate": [1.0]}, expect=422),
    Case("empty candidate", "POST", "/impact", section="Validation",
         body={"series_before": [1.0, 2.0], "series_candidate": []}, expect=422),
    Case("zero iterations", "POST", "/impact", section="Validation",
         body={"series_before": [1.0, 2.0], "series_candidate": [3.0], "iterations": 0}, expect=422),
    Case("too many iterations", "POST", "/impact", section="Validation",
         body={"series_before": [1.0, 2.0], "series_candidate": [3.0], "iterations": 10_000_000}, expect=422),
    Case("negative radius", "POST", "/smooth", section="Validation",
         body={"series": [1.0], "radius": -1}, expect=422),
]



@dataclass
class Outcome:
    case: Case
    ok: bool
    status: Optional[int]
    body: Any
    detail: str = ""


def summarize(body: Any) -> str:
    """One-line rendering of an impact, smoothing or health payload."""
    if not isinstance(body, dict):
        return str(body)
    if "operator" in body:
        verdict = "significant" if body.get("significant") else "not significant"
        return (
            f"{body['operator']} p={body['probability']:.4f} "
            f"(p_lower={body['p_lower']:.4f}, p_upper={body['p_upper']:.4f}, "
            f"n={body['iterations']}) {verdict}"
        )
    if "series" in body:
        candidate = body.get("candidate")
        joint = f" + {len(candidate)} candidate" if candidate is not None else ""
        return f"smoothed {len(body['series'])} points{joint} (radius {body.get('radius')})"
    if "detail" in body:
        return f"detail: {body['detail']}"
    return ", ".join(f"{k}={v}" for k, v in body.items())


async def run_case(client: httpx.AsyncClient, case: Case) -> Outcome:
    try:
        r = await client.request(case.method, case.path, json=case.body or None)
    except httpx.TransportError as exc:
        return Outcome(case, False, None, None, f"transport error: {exc}")

    try:
        body: Any = r.json()
    except ValueError:
        body = r.text
    if r.status_code != case.expect:
        return Outcome(case, False, r.status_code, body, f"expected {case.expect}, got {r.status_code}")
    if case.check is not None and not case.check(body):
        return Outcome(case, False, r.status_code, body, "response did not satisfy check")
    return Outcome(case, True, r.status_code, body)


def select(section: Optional[str], label: Optional[str]) -> list[Case]:
    return [
        c for c in CASES
        if (not section or c.section == section) and (not label or c.label == label)
    ]


async def run_all(client: httpx.AsyncClient, cases: list[Case], verbose: bool = False) -> int:
    failed = 0
    current_section = ""
    for case in cases:
        if case.section != current_section:
            current_section = case.section
            print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

        outcome = await run_case(client, case)
        mark = "✓" if outcome.ok else "✗"
        print(f"  {mark} {case.label:<20} {outcome.status or '---'}  {summarize(outcome.body)}")
        if not outcome.ok:
            failed += 1
            print(f"      {outcome.detail}")
        if verbose and outcome.body is not None:
            print(json.dumps(outcome.body, indent=2))

    print(f"\n  {len(cases) - failed}/{len(cases)} cases passed")
    return failed


async def main():
    parser = argparse.ArgumentParser(description="Run ImpactWalk API cases against a live server")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    parser.add_argument("--base-url", default=BASE_URL)
    parser.add_argument("-v", "--verbose", action="store_true", help="print full response bodies")
    args = parser.parse_args()

    selected = select(args.section, args.label)
    if not selected:
        print("no matching cases (check --section or --label)")
        sys.exit(1)

    async with httpx.AsyncClient(base_url=args.base_url, headers=HEADERS, timeout=30) as client:
        failed = await run_all(client, selected, verbose=args.verbose)
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
