#!/usr/bin/env python3

"""
Regression and integration test runner for the asset dependency graph API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict

import httpx

BASE_URL = os.getenv("ASSETGRAPH_BASE_URL", "http://127.0.0.1:3001/api/v1")
HEADERS = {"Content-Type": "application/json"}
ROSTER = [
    "PlayerCharacterMesh",
    "PlayerSkinTexture",
    "PlayerMaterial",
    "MainMenuBackground",
    "UIShader",
    "UnusedSplashTexture",
]


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""


def edge(asset: str, dependency: str) -> Dict[str, str]:
    return {"asset": asset, "dependency": dependency}


CASES: list[Case] = [
    # ── Setup ─────────────────────────────────────────────
    Case("health", "GET", "/health", section="Setup"),
    Case("import map", "POST", "/dependencies/import", section="Setup", body={
        "dependencies": {
            "PlayerCharacterMesh": ["PlayerSkinTexture", "PlayerMaterial"],
            "MainMenuBackground": ["UIShader"],
        },
    }),
    Case("add edge", "POST", "/dependencies", section="Setup",
         body=edge("PlayerMaterial", "PlayerSkinTexture")),
    Case("add duplicate edge", "POST", "/dependencies", section="Setup",
         body=edge("PlayerMaterial", "PlayerSkinTexture")),
    Case("add cycle edge", "POST", "/dependencies", section="Setup",
         body=edge("PlayerSkinTexture", "PlayerCharacterMesh")),

    # ── Lookups ───────────────────────────────────────────
    Case("whole map", "GET", "/dependencies", section="Lookups"),
    Case("one asset", "GET", "/dependencies", section="Lookups",
         params={"asset_name": "PlayerCharacterMesh"}),
    Case("reverse", "GET", "/dependencies/PlayerSkinTexture/reverse", section="Lookups"),
    Case("closure", "GET", "/dependencies/PlayerCharacterMesh/all", section="Lookups"),
    Case("tree depth 3", "GET", "/dependencies/PlayerCharacterMesh/tree", section="Lookups",
         params={"max_depth": 3}),
    Case("tree depth 0", "GET", "/dependencies/PlayerCharacterMesh/tree", section="Lookups",
         params={"max_depth": 0}),

    # ── Analysis ──────────────────────────────────────────
    Case("cycles", "GET", "/dependencies/cycles", section="Analysis"),
    Case("validate", "GET", "/dependencies/validate", section="Analysis"),
    Case("most referenced", "GET", "/dependencies/most-referenced", section="Analysis",
         params={"limit": 3}),
    Case("orphans", "POST", "/dependencies/orphans", section="Analysis", body={"assets": ROSTER}),
    Case("statistics", "POST", "/dependencies/statistics", section="Analysis",
         body={"assets": ROSTER, "limit": 5}),
    Case("analyze", "POST", "/dependencies/analyze", section="Analysis",
         body={"asset": "PlayerCharacterMesh", "assets": ROSTER}),
    Case("report", "POST", "/dependencies/report", section="Analysis", body={"assets": ROSTER}),
    Case("filter", "POST", "/dependencies/filter", section="Analysis",
         body={"substrings": ["player"]}),

    # ── Export ────────────────────────────────────────────
    Case("json", "GET", "/dependencies/export", section="Export", params={"format": "json"}),
    Case("dot", "GET", "/dependencies/export", section="Export", params={"format": "DOT"}),
    Case("csv", "GET", "/dependencies/export", section="Export", params={"format": "csv"}),
    Case("yaml placeholder", "GET", "/dependencies/export", section="Export", params={"format": "yaml"}),

    # ── Normalization ─────────────────────────────────────
    Case("optimize", "POST", "/dependencies/optimize", section="Normalization"),
    Case("optimize again", "POST", "/dependencies/optimize", section="Normalization"),
    Case("remove cycle edge", "DELETE", "/dependencies", section="Normalization",
         body=edge("PlayerSkinTexture", "PlayerCharacterMesh")),
    Case("validate clean", "GET", "/dependencies/validate", section="Normalization"),

    # ── Validation ────────────────────────────────────────
    Case("unsupported export", "GET", "/dependencies/export", section="Validation",
         params={"format": "xml"}, expect=400),
    Case("empty asset name", "POST", "/dependencies", section="Validation",
         body=edge("", "X"), expect=422),
    Case("negative tree depth", "GET", "/dependencies/A/tree", section="Validation",
         params={"max_depth": -1}, expect=422),
    Case("empty filter", "POST", "/dependencies/filter", section="Validation",
         body={"substrings": []}, expect=422),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    attempt = 0
    last_exc: Exception | None = None
    while attempt < 2:
        try:
            if case.method == "GET":
                r = await client.get(case.path, params=case.params)
            else:
                r = await client.request(case.method, case.path, json=case.body or None,
                                         params=case.params)
            body: Any = None
            try:
                body = r.json()
            except ValueError:
                body = r.text
            if r.status_code == case.expect:
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
    import json
    import argparse

    parser = argparse.ArgumentParser(description="Run API test cases")
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
            if isinstance(body, (dict, list)):
                pretty = json.dumps(body, indent=2)
            elif body is not None:
                pretty = str(body)
            else:
                pretty = "<no response>"

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
    print(f"  {'All tests passed ✓' if failed == 0 else f'{failed} test(s) failed ✗'}")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
