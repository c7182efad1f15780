from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Success:
    status_code: int


@dataclass(frozen=True)
class Failure:
    message: str


CheckOutcome = Success | Failure


@dataclass(frozen=True)
class AttemptResult:
    outcome: CheckOutcome
    latency_ms: int


@dataclass(frozen=True)
class CheckResult:
    url: str
    outcome: CheckOutcome
    latency_ms: int
    completed_at: datetime
    attempts: int = 1

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.outcome, Success):
            status: dict[str, Any] = {"Ok": self.outcome.status_code}
        else:
            status = {"Err": self.outcome.message}
        return {
            "url": self.url,
            "status": status,
            "response_time_ms": self.latency_ms,
            "timestamp": self.completed_at.isoformat(),
        }
