from __future__ import annotations

import functools
import logging
import queue
import threading
import time
from typing import Callable, Iterable

import requests

from status_checker.checks.http_check import Attempt, run_http, run_http_with_retries
from status_checker.checks.results import CheckResult
from status_checker.models import RunConfig

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CheckResult], None]

_STOP = object()


class WorkerError(RuntimeError):
    pass


class ResultCollector:
    """Lock-guarded sink shared by all workers of a run."""

    def __init__(self, on_result: ResultCallback | None = None) -> None:
        self._results: list[CheckResult] = []
        self._on_result = on_result
        self._lock = threading.Lock()

    def add(self, result: CheckResult) -> None:
        with self._lock:
            self._results.append(result)
            if self._on_result is not None:
                self._on_result(result)

    def results(self) -> list[CheckResult]:
        with self._lock:
            return list(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)


def _worker(
    work: queue.Queue,
    config: RunConfig,
    collector: ResultCollector,
    faults: list[BaseException],
    attempt: Attempt | None,
    sleep: Callable[[float], None],
) -> None:
    session: requests.Session | None = None
    if attempt is None:
        session = requests.Session()
        attempt = functools.partial(
            run_http, session=session, connect_timeout_s=config.connect_timeout_s
        )
    try:
        while True:
            url = work.get()
            if url is _STOP:
                return
            res = run_http_with_retries(
                url,
                timeout_s=config.timeout_s,
                max_retries=config.max_retries,
                retry_delay_s=config.retry_delay_s,
                attempt=attempt,
                sleep=sleep,
            )
            collector.add(res)
    except Exception as e:
        logger.exception("Worker %s crashed", threading.current_thread().name)
        faults.append(e)
    finally:
        if session is not None:
            session.close()


def run_checks(
    urls: Iterable[str],
    config: RunConfig,
    on_result: ResultCallback | None = None,
    *,
    attempt: Attempt | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[CheckResult]:
    """Check every URL on a pool of ``config.workers`` threads.

    Duplicates are checked once per occurrence. ``on_result`` is called once
    per result as it completes, never concurrently. Results come back in
    completion order.
    """
    urls = list(urls)
    if not urls:
        return []

    work: queue.Queue = queue.Queue()
    for url in urls:
        work.put(url)
    # One sentinel per worker closes the queue.
    for _ in range(config.workers):
        work.put(_STOP)

    collector = ResultCollector(on_result)
    faults: list[BaseException] = []

    logger.info("Checking %d URL(s) with %d worker(s)", len(urls), config.workers)
    start = time.perf_counter()

    threads = [
        threading.Thread(
            target=_worker,
            args=(work, config, collector, faults, attempt, sleep),
            name=f"status-worker-{i}",
            daemon=True,
        )
        for i in range(config.workers)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    if faults:
        raise WorkerError(
            f"{len(faults)} worker(s) failed; {len(collector)}/{len(urls)} URL(s) checked"
        ) from faults[0]

    elapsed_ms = int((time.perf_counter() - start) * 1000)
    logger.info("Checked %d URL(s) in %d ms", len(urls), elapsed_ms)
    return collector.results()
