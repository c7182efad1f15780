from __future__ import annotations

import logging
from typing import Optional, Sequence

import click
from pydantic import ValidationError

from status_checker.checks.results import CheckResult
from status_checker.config import settings
from status_checker.formatting import format_result_line, format_summary
from status_checker.models import RunConfig
from status_checker.reporting import summarize, write_results
from status_checker.runner import run_checks
from status_checker.sources import UrlSourceError, collect_urls

logger = logging.getLogger(__name__)


def _build_config(workers: int, timeout: float, retries: int) -> RunConfig:
    try:
        return RunConfig(
            workers=workers,
            timeout_s=timeout,
            max_retries=retries,
            retry_delay_s=settings.RETRY_DELAY_MS / 1000,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise click.UsageError(f"Invalid configuration: {problems}") from e


def _print_result(result: CheckResult) -> None:
    click.echo(format_result_line(result))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read URLs from a file (one per line, '#' comments, or YAML).",
)
@click.option(
    "--workers",
    type=int,
    default=settings.WORKERS,
    show_default=True,
    help="Number of concurrent worker threads.",
)
@click.option(
    "--timeout",
    type=float,
    default=settings.TIMEOUT_SECONDS,
    show_default=True,
    help="Per-request timeout in seconds.",
)
@click.option(
    "--retries",
    type=int,
    default=settings.RETRIES,
    show_default=True,
    help="Extra attempts for a URL whose request fails.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=settings.OUTPUT_PATH,
    show_default=True,
    help="Where to write the JSON results.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=settings.LOG_LEVEL,
    show_default=True,
)
@click.argument("urls", nargs=-1)
def main(
    file_path: Optional[str],
    workers: int,
    timeout: float,
    retries: int,
    output: str,
    log_level: str,
    urls: Sequence[str],
) -> None:
    """Check the reachability of URLs concurrently."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        all_urls = collect_urls(urls, file_path=file_path)
    except UrlSourceError as e:
        raise click.UsageError(str(e)) from e
    if not all_urls:
        raise click.UsageError("No URLs provided")

    config = _build_config(workers, timeout, retries)
    results = run_checks(all_urls, config, on_result=_print_result)

    click.echo("")
    click.echo(format_summary(summarize(results)))
    click.echo("")

    path = write_results(results, output)
    logger.info("Wrote %d result(s) to %s", len(results), path)
    click.echo(f"Results written to {output}")


if __name__ == "__main__":
    main()
