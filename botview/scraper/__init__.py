"""Scraper package — fetch, cache and SEO field extraction."""

from botview.scraper.cache import ResponseCache, sanitize_url
from botview.scraper.extractor import extract_checks
from botview.scraper.fetcher import fetch_page
from botview.scraper.models import (
    GOOGLEBOT,
    IDENTITIES,
    YANDEXBOT,
    CheckResult,
    FailureRecord,
    Identity,
    RunSummary,
)

__all__ = [
    "fetch_page",
    "extract_checks",
    "ResponseCache",
    "sanitize_url",
    "Identity",
    "GOOGLEBOT",
    "YANDEXBOT",
    "IDENTITIES",
    "CheckResult",
    "FailureRecord",
    "RunSummary",
]
