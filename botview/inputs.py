"""URL list loading."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List

from botview.errors import EmptyOrInvalidInputError, MissingInputError
from botview.messages import t

_URL_RE = re.compile(r"^https?://")


def _matching(lines: List[str]) -> Iterator[str]:
    for line in lines:
        if _URL_RE.match(line):
            yield line


def load_urls(path: Path) -> Iterator[str]:
    """Return the http(s) URLs listed in *path*, one per line, in file order.

    Lines that do not start with ``http://`` or ``https://`` are skipped
    without complaint.

    Raises:
        MissingInputError: If *path* does not exist.
        EmptyOrInvalidInputError: If no line is an http(s) URL.
    """
    path = Path(path)
    if not path.exists():
        raise MissingInputError(path)

    lines = [line.rstrip() for line in path.read_text(encoding="utf-8-sig").splitlines()]
    if not any(_URL_RE.match(line) for line in lines):
        raise EmptyOrInvalidInputError(path)
    return _matching(lines)


def write_placeholder(path: Path, lang: str | None = None) -> None:
    """Create *path* with a single instructional comment line."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(t("placeholder", lang) + "\n", encoding="utf-8")
