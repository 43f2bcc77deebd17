"""Combined HTML report.

:func:`render_report` is pure: given the same results, failures and
timestamp it returns the same document byte for byte.  Every URL and every
value taken from a fetched page is passed through :func:`html.escape` before
it is embedded.
"""

from __future__ import annotations

from datetime import datetime
from html import escape
from pathlib import Path
from typing import List, Optional, Sequence

from botview.config import settings
from botview.messages import t
from botview.scraper.models import (
    ROBOTS_NOT_FOUND,
    CheckResult,
    FailureRecord,
    FieldCheck,
    RunSummary,
)

REPORT_FILENAME = "combined_report.html"

_STYLE = """\
body { font-family: Arial, Helvetica, sans-serif; color: #1e293b; background: #f8fafc; margin: 24px; }
h1 { font-size: 22px; }
.summary { background: #ffffff; border: 1px solid #e2e8f0; padding: 12px 16px; margin-bottom: 24px; }
.summary div { margin: 4px 0; }
.failed-count { color: #dc2626; font-weight: bold; }
table { border-collapse: collapse; width: 100%; background: #ffffff; margin-bottom: 24px; }
th, td { border: 1px solid #e2e8f0; padding: 6px 8px; text-align: left; vertical-align: top; font-size: 13px; }
th { background: #1e40af; color: #ffffff; }
tr.bot-google td:first-child { border-left: 4px solid #4285f4; }
tr.bot-yandex td:first-child { border-left: 4px solid #fc3f1d; }
.status { display: block; font-weight: bold; }
.correct, .present { color: #16a34a; }
.incorrect, .absent { color: #dc2626; }
.value { color: #64748b; word-break: break-all; }
.noindex { background: #fef08a; color: #b91c1c; font-weight: bold; }
.error { color: #dc2626; font-weight: bold; }
"""


# ---------------------------------------------------------------------------
# Cell helpers
# ---------------------------------------------------------------------------

def _field_cell(check: FieldCheck, lang: str | None) -> str:
    label = t(f"status_{check.status}", lang)
    return (
        f'<td><span class="status {escape(check.status)}">{escape(label)}</span>'
        f'<span class="value">{escape(check.value)}</span></td>'
    )


def _robots_cell(robots: str, lang: str | None) -> str:
    if robots == ROBOTS_NOT_FOUND:
        return f'<td><span class="error">{escape(t("robots_not_found", lang))}</span></td>'
    # "noindex" contains nothing escape() touches, so it survives verbatim.
    marked = escape(robots).replace("noindex", '<span class="noindex">noindex</span>')
    return f"<td>{marked}</td>"


def _link(url: str) -> str:
    safe = escape(url)
    return f'<a href="{safe}" rel="nofollow noopener">{safe}</a>'


def _result_row(result: CheckResult, lang: str | None) -> str:
    return (
        f'<tr class="bot-{escape(result.identity.tag)}">'
        f"<td>{_link(result.url)}</td>"
        f"<td>{escape(result.identity.name)}</td>"
        f"{_field_cell(result.canonical, lang)}"
        f"{_field_cell(result.title, lang)}"
        f"{_field_cell(result.description, lang)}"
        f"{_robots_cell(result.robots, lang)}"
        "</tr>"
    )


def _failure_row(failure: FailureRecord) -> str:
    return (
        f'<tr class="bot-{escape(failure.identity.tag)}">'
        f"<td>{_link(failure.url)}</td>"
        f"<td>{escape(failure.identity.name)}</td>"
        f"<td>{escape(failure.reason)}</td>"
        "</tr>"
    )


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _summary_block(successful: int, failed: int, generated_at: datetime, lang: str | None) -> str:
    failed_class = ' class="failed-count"' if failed > 0 else ""
    return (
        '<div class="summary">'
        f'<div>{escape(t("generated", lang))}: {generated_at:%Y-%m-%d %H:%M:%S}</div>'
        f'<div>{escape(t("total_checks", lang))}: {successful + failed}</div>'
        f'<div>{escape(t("successful_checks", lang))}: {successful}</div>'
        f'<div>{escape(t("failed_checks", lang))}: <span{failed_class}>{failed}</span></div>'
        "</div>"
    )


def _results_table(results: Sequence[CheckResult], lang: str | None) -> str:
    headers = ("col_url", "col_bot", "col_canonical", "col_title", "col_description", "col_robots")
    parts: List[str] = [f"<h2>{escape(t('results_heading', lang))}</h2>", "<table>", "<tr>"]
    parts.extend(f"<th>{escape(t(h, lang))}</th>" for h in headers)
    parts.append("</tr>")
    parts.extend(_result_row(r, lang) for r in results)
    parts.append("</table>")
    return "\n".join(parts)


def _failures_table(failures: Sequence[FailureRecord], lang: str | None) -> str:
    parts: List[str] = [f"<h2>{escape(t('failures_heading', lang))}</h2>", "<table>", "<tr>"]
    parts.extend(f"<th>{escape(t(h, lang))}</th>" for h in ("col_url", "col_bot", "col_reason"))
    parts.append("</tr>")
    parts.extend(_failure_row(f) for f in failures)
    parts.append("</table>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def render_report(
    results: Sequence[CheckResult],
    failures: Sequence[FailureRecord],
    successful: int,
    failed: int,
    *,
    generated_at: Optional[datetime] = None,
    lang: str | None = None,
) -> str:
    """Render the combined report as a standalone HTML document."""
    generated_at = generated_at or datetime.now()
    title = escape(t("report_title", lang))

    parts: List[str] = [
        "<!DOCTYPE html>",
        f'<html lang="{escape(lang or settings.language)}">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{title}</title>",
        f"<style>\n{_STYLE}</style>",
        "</head>",
        "<body>",
        f"<h1>{title}</h1>",
        _summary_block(successful, failed, generated_at, lang),
        _results_table(results, lang),
    ]
    if failures:
        parts.append(_failures_table(failures, lang))
    parts.append("</body></html>")
    return "\n".join(parts) + "\n"


def write_report(summary: RunSummary, output_dir: Path, *, lang: str | None = None) -> Path:
    """Render *summary* to ``combined_report.html`` inside *output_dir*."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    document = render_report(
        summary.results,
        summary.failures,
        summary.successful,
        summary.failed,
        generated_at=summary.generated_at,
        lang=lang,
    )
    path = output_dir / REPORT_FILENAME
    path.write_text(document, encoding="utf-8")
    return path
