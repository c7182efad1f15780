from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from status_checker.api_schemas import ResponseStats
from status_checker.checks.results import CheckResult


def summarize(results: Iterable[CheckResult]) -> ResponseStats | None:
    """Latency statistics over successful results only."""
    times = sorted(r.latency_ms for r in results if r.ok)
    if not times:
        return None
    return ResponseStats(
        count=len(times),
        min_ms=times[0],
        max_ms=times[-1],
        avg_ms=sum(times) / len(times),
    )


def serialize_results(results: Iterable[CheckResult]) -> list[dict[str, Any]]:
    return [r.to_dict() for r in results]


def results_to_json(results: Iterable[CheckResult]) -> str:
    return json.dumps(serialize_results(results), indent=2) + "\n"


def write_results(results: Iterable[CheckResult], path: str | Path) -> Path:
    p = Path(path).expanduser()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(results_to_json(results), encoding="utf-8")
    return p
