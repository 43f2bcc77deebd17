"""On-disk response cache keyed by (identity, URL).

A cached file is trusted unconditionally: there is no freshness check and no
content validation, so a file truncated by an interrupted run is reused as-is
on the next one.  Delete it by hand to force a re-fetch.

Bodies are written and read back as raw UTF-8 bytes, so line endings survive
the round trip and a cached page extracts exactly like the live one.  Paths
are not length-bounded: a very long URL makes the filesystem calls raise
:class:`OSError`, which callers record as a per-pair failure.
"""

from __future__ import annotations

import re
from pathlib import Path

from botview.errors import CacheInconsistencyError
from botview.scraper.models import CacheOutcome, Identity

_SCHEME_RE = re.compile(r"^https?://")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_url(url: str) -> str:
    """Turn *url* into a filename fragment.

    The leading scheme is dropped and every character outside
    ``[A-Za-z0-9._-]`` becomes ``_``.
    """
    return _UNSAFE_RE.sub("_", _SCHEME_RE.sub("", url, count=1))


class ResponseCache:
    """Raw response bodies stored as ``{tag}_{sanitized_url}.html`` under *root*."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, url: str, identity: Identity) -> Path:
        return self.root / f"{identity.tag}_{sanitize_url(url)}.html"

    def lookup(self, url: str, identity: Identity) -> CacheOutcome:
        path = self.path_for(url, identity)
        if not path.exists():
            return CacheOutcome(hit=False)
        return CacheOutcome(hit=True, is_regular_file=path.is_file())

    def read(self, url: str, identity: Identity) -> str:
        """Return the cached body for the pair.

        Raises:
            CacheInconsistencyError: If something other than a regular file
                occupies the cache path.
            FileNotFoundError: If nothing is cached for the pair.
        """
        path = self.path_for(url, identity)
        if path.exists() and not path.is_file():
            raise CacheInconsistencyError(path)
        return path.read_bytes().decode("utf-8", errors="replace")

    def store(self, url: str, identity: Identity, body: str) -> Path:
        """Write *body* for the pair, overwriting any previous file."""
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.path_for(url, identity)
        path.write_bytes(body.encode("utf-8"))
        return path
