"""botview CLI — entry-point.

Usage:
    python cli/main.py --help

Commands:
    run         fetch every URL as each crawler and write the combined report
    identities  list the crawler identities and their user agents
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from botview.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import importlib.util
from typing import Optional

import typer

from botview.config import settings
from botview.errors import (
    DependencyMissingError,
    EmptyOrInvalidInputError,
    MissingInputError,
)
from botview.messages import MESSAGES, t
from cli.rendering import echo_banner, echo_progress

app = typer.Typer(
    name="botview",
    help="Compare canonical, title, description and robots as Googlebot and YandexBot see them.",
    no_args_is_help=True,
)


def require_http_client() -> None:
    """Raise :class:`DependencyMissingError` unless ``httpx`` is importable."""
    if importlib.util.find_spec("httpx") is None:
        raise DependencyMissingError("httpx")


def _check_language(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in MESSAGES:
        raise typer.BadParameter(f"unknown language {value!r}; use {' | '.join(MESSAGES)}")
    return value


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------
@app.command("run")
def run(
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="File with one URL per line."),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Directory for cached pages and the report."),
    lang: Optional[str] = typer.Option(
        None, "--lang", callback=_check_language, help="Console and report language: en | ru."
    ),
) -> None:
    """Check every URL as each crawler and write the combined report."""
    if input_file is not None:
        settings.input_file = input_file
    if output_dir is not None:
        settings.output_dir = output_dir
    if lang is not None:
        settings.language = lang

    try:
        require_http_client()
    except DependencyMissingError as exc:
        echo_progress("error", t("dependency_missing", package=exc.package))
        raise typer.Exit(1)

    from botview.inputs import load_urls, write_placeholder
    from botview.pipeline import run_checks
    from botview.report import write_report
    from botview.scraper import ResponseCache

    try:
        urls = list(load_urls(settings.input_file))
    except MissingInputError:
        write_placeholder(settings.input_file)
        echo_progress("warning", t("input_missing", path=settings.input_file))
        raise typer.Exit(0)
    except EmptyOrInvalidInputError:
        echo_progress("warning", t("input_invalid", path=settings.input_file))
        raise typer.Exit(0)

    settings.ensure_output_dir()
    cache = ResponseCache(settings.output_dir)
    summary = run_checks(urls, cache, notify=echo_progress)
    report_path = write_report(summary, settings.output_dir)

    typer.echo(t("totals", total=summary.total, successful=summary.successful, failed=summary.failed))
    echo_banner(t("report_ready", path=report_path.resolve()))
    if summary.failed:
        echo_banner(t("rerun_hint", failed=summary.failed), colour=typer.colors.YELLOW)


# ---------------------------------------------------------------------------
# identities
# ---------------------------------------------------------------------------
@app.command("identities")
def identities() -> None:
    """List the crawler identities used for every URL, in check order."""
    from botview.scraper import IDENTITIES

    for identity in IDENTITIES:
        typer.echo(f"  {identity.tag:<8} {identity.name:<10} {identity.user_agent}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
