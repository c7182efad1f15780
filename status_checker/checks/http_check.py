from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable

import requests

from status_checker.checks.results import AttemptResult, CheckResult, Failure, Success

logger = logging.getLogger(__name__)

RETRY_DELAY_S = 0.1

Attempt = Callable[..., AttemptResult]


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def run_http(
    url: str,
    timeout_s: float,
    connect_timeout_s: float | None = None,
    session: requests.Session | None = None,
) -> AttemptResult:
    get = session.get if session is not None else requests.get
    start = time.perf_counter()
    try:
        connect_timeout = timeout_s if connect_timeout_s is None else connect_timeout_s
        # Only the status line and headers are awaited, the body is never read.
        r = get(url, timeout=(connect_timeout, timeout_s), stream=True)
        latency_ms = int((time.perf_counter() - start) * 1000)
        r.close()
        # Any response counts, the server answered.
        return AttemptResult(outcome=Success(r.status_code), latency_ms=latency_ms)
    except (requests.RequestException, ValueError) as e:
        latency_ms = int((time.perf_counter() - start) * 1000)
        return AttemptResult(outcome=Failure(_describe(e)), latency_ms=latency_ms)


def run_http_with_retries(
    url: str,
    timeout_s: float,
    max_retries: int,
    retry_delay_s: float = RETRY_DELAY_S,
    *,
    attempt: Attempt = run_http,
    sleep: Callable[[float], None] = time.sleep,
) -> CheckResult:
    """Check ``url`` until it answers or ``max_retries + 1`` attempts are spent.

    The returned result carries the last attempt's outcome and latency.
    """
    total_attempts = max_retries + 1
    attempts = 0
    while True:
        attempts += 1
        res = attempt(url, timeout_s=timeout_s)
        if isinstance(res.outcome, Success) or attempts >= total_attempts:
            break
        logger.debug(
            "Attempt %d/%d for %s failed: %s",
            attempts,
            total_attempts,
            url,
            res.outcome.message,
        )
        sleep(retry_delay_s)

    if isinstance(res.outcome, Failure) and total_attempts > 1:
        logger.info("Giving up on %s after %d attempts", url, attempts)

    return CheckResult(
        url=url,
        outcome=res.outcome,
        latency_ms=res.latency_ms,
        completed_at=datetime.now(timezone.utc),
        attempts=attempts,
    )
