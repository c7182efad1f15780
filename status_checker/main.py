import logging

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from status_checker.api_schemas import (
    CheckRunRequest,
    CheckRunResponse,
    ConfigResponse,
    HealthResponse,
)
from status_checker.config import settings
from status_checker.models import RunConfig
from status_checker.reporting import serialize_results, summarize
from status_checker.runner import WorkerError, run_checks

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Status Checker",
    version="1.0.0",
    description=(
        "Checks the reachability of a list of URLs on a bounded pool of "
        "workers, with per-request timeouts and fixed-delay retries."
    ),
)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Returns the defaults applied to runs that do not override them.",
)
def config():
    return {
        "workers": settings.WORKERS,
        "timeout_s": settings.TIMEOUT_SECONDS,
        "retries": settings.RETRIES,
        "retry_delay_ms": settings.RETRY_DELAY_MS,
        "max_workers": settings.MAX_WORKERS,
        "max_urls": settings.MAX_URLS,
        "output_path": settings.OUTPUT_PATH,
    }


@app.post(
    "/api/checks",
    response_model=CheckRunResponse,
    tags=["checks"],
    summary="Run Checks",
    description=(
        "Checks every URL in the request (duplicates included) and returns one "
        "result per URL in completion order, plus latency statistics over the "
        "successful responses."
    ),
)
def checks_run(request: CheckRunRequest) -> CheckRunResponse:
    try:
        run_config = RunConfig(
            workers=request.workers or min(settings.WORKERS, settings.MAX_WORKERS),
            timeout_s=request.timeout_s or settings.TIMEOUT_SECONDS,
            max_retries=(
                settings.RETRIES if request.retries is None else request.retries
            ),
            retry_delay_s=settings.RETRY_DELAY_MS / 1000,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    try:
        results = run_checks(request.urls, run_config)
    except WorkerError as exc:
        logger.exception("Check run failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return CheckRunResponse(
        results=serialize_results(results),
        summary=summarize(results),
        count=len(results),
    )
