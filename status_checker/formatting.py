from __future__ import annotations

from status_checker.api_schemas import ResponseStats
from status_checker.checks.results import CheckResult, Success


def format_result_line(result: CheckResult) -> str:
    ts = result.completed_at.isoformat()
    if isinstance(result.outcome, Success):
        return (
            f"[SUCCESS] {result.url} - HTTP {result.outcome.status_code} "
            f"in {result.latency_ms} ms at {ts}"
        )
    return (
        f"[FAILURE] {result.url} - {result.outcome.message} "
        f"in {result.latency_ms} ms at {ts}"
    )


def format_summary(stats: ResponseStats | None) -> str:
    if stats is None:
        return "No successful responses to summarize."
    lines = [
        "Summary statistics for successful responses:",
        f"  Min: {stats.min_ms} ms",
        f"  Max: {stats.max_ms} ms",
        f"  Avg: {stats.avg_ms:.2f} ms",
    ]
    return "\n".join(lines)
