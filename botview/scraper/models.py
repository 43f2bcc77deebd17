"""Data models for the crawler-view pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Canonical statuses
CORRECT = "correct"
INCORRECT = "incorrect"

# Title / description statuses
PRESENT = "present"
ABSENT = "absent"

# Robots value used when the page carries no robots meta tag.  Distinct from
# an empty ``content=""`` attribute, which is reported as-is.
ROBOTS_NOT_FOUND = "tag not found"

# Failure reasons
REASON_FETCH_ERROR = "fetch error"
REASON_NOT_A_FILE = "path exists but is not a file"
REASON_CACHE_ERROR = "cache error"


@dataclass(frozen=True)
class Identity:
    """A crawler persona: what we call it, what we send, and its file tag."""

    name: str
    user_agent: str
    tag: str


GOOGLEBOT = Identity(
    name="Googlebot",
    user_agent="Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)",
    tag="google",
)
YANDEXBOT = Identity(
    name="YandexBot",
    user_agent="Mozilla/5.0 (compatible; YandexBot/3.0; +http://yandex.com/bots)",
    tag="yandex",
)

# Processing order is fixed: Googlebot first, then YandexBot.
IDENTITIES = (GOOGLEBOT, YANDEXBOT)


@dataclass
class FieldCheck:
    status: str
    value: str


@dataclass
class CheckResult:
    """Extracted SEO fields for one (URL, identity) pair."""

    url: str
    identity: Identity
    canonical: FieldCheck
    title: FieldCheck
    description: FieldCheck
    robots: str


@dataclass
class FailureRecord:
    url: str
    identity: Identity
    reason: str


@dataclass
class FetchOutcome:
    success: bool
    body: Optional[str] = None


@dataclass
class CacheOutcome:
    hit: bool
    is_regular_file: bool = False


@dataclass
class RunSummary:
    """Accumulator threaded through the per-pair processing step."""

    results: List[CheckResult] = field(default_factory=list)
    failures: List[FailureRecord] = field(default_factory=list)
    successful: int = 0
    failed: int = 0
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def total(self) -> int:
        return self.successful + self.failed

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def add_result(self, result: CheckResult) -> None:
        self.results.append(result)
        self.successful += 1

    def add_failure(self, failure: FailureRecord) -> None:
        self.failures.append(failure)
        self.failed += 1
