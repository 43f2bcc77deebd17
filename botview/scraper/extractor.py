"""SEO field extraction: turns a raw response body into a :class:`CheckResult`.

The patterns are deliberately literal.  Each one expects its attributes in a
fixed order inside a single tag on a single line (``rel`` before ``href``,
``name`` before ``content``) and is case-sensitive; pages that order the
attributes differently simply do not match.
"""

from __future__ import annotations

import re
from typing import Optional

from botview.scraper.models import (
    ABSENT,
    CORRECT,
    INCORRECT,
    PRESENT,
    ROBOTS_NOT_FOUND,
    CheckResult,
    FieldCheck,
    Identity,
)

# ---------------------------------------------------------------------------
# Fixed patterns (first match wins)
# ---------------------------------------------------------------------------
_CANONICAL_RE = re.compile(r'<link[^>\n]*rel="canonical"[^>\n]*href="([^"\n]*)"')
_DESCRIPTION_RE = re.compile(r'<meta[^>\n]*name="description"[^>\n]*content="([^"\n]*)"')
_TITLE_RE = re.compile(r"<title[^>\n]*>([^<\n]*)")
_ROBOTS_RE = re.compile(r'<meta[^>\n]*name="robots"[^>\n]*content="([^"\n]*)"')


def _first(pattern: re.Pattern[str], body: str) -> Optional[str]:
    match = pattern.search(body)
    if match:
        return match.group(1)
    return None


# ---------------------------------------------------------------------------
# Per-field checks
# ---------------------------------------------------------------------------

def check_canonical(body: str, original_url: str) -> FieldCheck:
    """``correct`` only when the canonical href equals *original_url* verbatim."""
    value = _first(_CANONICAL_RE, body) or ""
    status = CORRECT if value and value == original_url else INCORRECT
    return FieldCheck(status=status, value=value)


def check_description(body: str) -> FieldCheck:
    value = _first(_DESCRIPTION_RE, body) or ""
    return FieldCheck(status=PRESENT if value else ABSENT, value=value)


def check_title(body: str) -> FieldCheck:
    value = _first(_TITLE_RE, body) or ""
    return FieldCheck(status=PRESENT if value else ABSENT, value=value)


def check_robots(body: str) -> str:
    """Return the robots ``content`` value, or :data:`ROBOTS_NOT_FOUND`."""
    value = _first(_ROBOTS_RE, body)
    return ROBOTS_NOT_FOUND if value is None else value


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_checks(body: str, original_url: str, identity: Identity) -> CheckResult:
    """Extract canonical, title, description and robots from *body*.

    Never raises: missing tags degrade to ``incorrect``/``absent`` or the
    robots sentinel.
    """
    return CheckResult(
        url=original_url,
        identity=identity,
        canonical=check_canonical(body, original_url),
        title=check_title(body),
        description=check_description(body),
        robots=check_robots(body),
    )
