from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from status_checker.checks.http_check import RETRY_DELAY_S


class RunConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    workers: int = Field(..., ge=1)
    timeout_s: float = Field(..., gt=0)
    max_retries: int = Field(default=0, ge=0)
    retry_delay_s: float = Field(default=RETRY_DELAY_S, ge=0)
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)
