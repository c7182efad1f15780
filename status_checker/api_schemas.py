from __future__ import annotations

from typing import Any
from pydantic import BaseModel, Field

from status_checker.config import settings


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    workers: int = Field(ge=1)
    timeout_s: float = Field(gt=0)
    retries: int = Field(ge=0)
    retry_delay_ms: int = Field(ge=0)
    max_workers: int = Field(ge=1)
    max_urls: int = Field(ge=0)
    output_path: str


class ResponseStats(BaseModel):
    count: int = Field(ge=1, description="Number of successful responses")
    min_ms: int = Field(ge=0)
    max_ms: int = Field(ge=0)
    avg_ms: float = Field(ge=0)


class CheckRunRequest(BaseModel):
    urls: list[str] = Field(default_factory=list, max_length=settings.MAX_URLS)
    workers: int | None = Field(default=None, ge=1, le=settings.MAX_WORKERS)
    timeout_s: float | None = Field(default=None, gt=0)
    retries: int | None = Field(default=None, ge=0)


class CheckResultResponse(BaseModel):
    url: str
    status: dict[str, Any] = Field(
        description='{"Ok": <status code>} or {"Err": <message>}'
    )
    response_time_ms: int = Field(ge=0)
    timestamp: str


class CheckRunResponse(BaseModel):
    results: list[CheckResultResponse]
    summary: ResponseStats | None = None
    count: int
