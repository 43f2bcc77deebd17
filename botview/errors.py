"""Exception hierarchy for botview.

Only :class:`ConfigurationError` and :class:`DependencyMissingError` stop a
run.  Everything else is scoped to a single (URL, identity) pair and ends up
as a :class:`~botview.scraper.models.FailureRecord` in the report.
"""

from __future__ import annotations


class BotviewError(Exception):
    """Base class for all botview errors."""


class ConfigurationError(BotviewError):
    """The input file is missing or unusable."""


class MissingInputError(ConfigurationError):
    def __init__(self, path) -> None:
        super().__init__(f"input file not found: {path}")
        self.path = path


class EmptyOrInvalidInputError(ConfigurationError):
    def __init__(self, path) -> None:
        super().__init__(f"input file has no http(s) URLs: {path}")
        self.path = path


class DependencyMissingError(BotviewError):
    """A required third-party package cannot be imported."""

    def __init__(self, package: str) -> None:
        super().__init__(f"required package is not installed: {package}")
        self.package = package


class FetchError(BotviewError):
    """A single fetch attempt returned an unusable response."""


class CacheInconsistencyError(BotviewError):
    """The cache path for a pair exists but is not a regular file."""

    def __init__(self, path) -> None:
        super().__init__(f"path exists but is not a file: {path}")
        self.path = path
