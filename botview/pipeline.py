"""Run orchestration: URL × identity → cache → fetch → extract → summary.

Each pair goes through :func:`check_pair`, which takes the running
:class:`~botview.scraper.models.RunSummary`, records the outcome and hands it
back.  Per-pair problems never abort the run; they become failure records.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable, Sequence

from botview.errors import CacheInconsistencyError
from botview.messages import print_notify, t
from botview.scraper.cache import ResponseCache
from botview.scraper.extractor import extract_checks
from botview.scraper.fetcher import Notify, fetch_page
from botview.scraper.models import (
    IDENTITIES,
    REASON_CACHE_ERROR,
    REASON_FETCH_ERROR,
    REASON_NOT_A_FILE,
    FailureRecord,
    FetchOutcome,
    Identity,
    RunSummary,
)

Fetcher = Callable[..., FetchOutcome]


def check_pair(
    summary: RunSummary,
    url: str,
    identity: Identity,
    cache: ResponseCache,
    *,
    fetch: Fetcher = fetch_page,
    notify: Notify = print_notify,
) -> RunSummary:
    """Process one (URL, identity) pair and return the updated *summary*.

    Cache and filesystem problems are recorded as failures for this pair only.
    """
    notify("info", t("checking", url=url, bot=identity.name))
    path = cache.path_for(url, identity)

    try:
        lookup = cache.lookup(url, identity)
    except OSError as exc:
        notify("error", t("cache_error", path=path, error=exc))
        summary.add_failure(FailureRecord(url, identity, REASON_CACHE_ERROR))
        return summary

    if lookup.hit and not lookup.is_regular_file:
        notify("error", t("not_a_file", path=path))
        summary.add_failure(FailureRecord(url, identity, REASON_NOT_A_FILE))
        return summary

    if lookup.hit:
        try:
            body = cache.read(url, identity)
        except CacheInconsistencyError:
            # Replaced by a directory after the lookup.
            notify("error", t("not_a_file", path=path))
            summary.add_failure(FailureRecord(url, identity, REASON_NOT_A_FILE))
            return summary
        except OSError as exc:
            notify("error", t("cache_error", path=path, error=exc))
            summary.add_failure(FailureRecord(url, identity, REASON_CACHE_ERROR))
            return summary
        notify("cached", t("cached", bot=identity.name, path=path))
    else:
        outcome = fetch(url, identity, cache, notify=notify)
        if not outcome.success:
            summary.add_failure(FailureRecord(url, identity, REASON_FETCH_ERROR))
            return summary
        body = outcome.body or ""

    summary.add_result(extract_checks(body, url, identity))
    return summary


def run_checks(
    urls: Iterable[str],
    cache: ResponseCache,
    *,
    identities: Sequence[Identity] = IDENTITIES,
    fetch: Fetcher = fetch_page,
    notify: Notify = print_notify,
) -> RunSummary:
    """Check every URL with every identity, URLs outermost, in input order."""
    summary = RunSummary()
    for url in urls:
        for identity in identities:
            summary = check_pair(summary, url, identity, cache, fetch=fetch, notify=notify)
    summary.generated_at = datetime.now()
    return summary
