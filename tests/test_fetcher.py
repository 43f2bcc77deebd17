"""Tests for the retrying fetcher.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made.
- ``time.sleep`` is patched so retry delays cost nothing and can be counted.
"""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx

from botview.scraper.cache import ResponseCache
from botview.scraper.fetcher import fetch_page
from botview.scraper.models import GOOGLEBOT, YANDEXBOT

_URL = "https://example.com/page"
_HTML = '<html><head><title>Page</title></head><body>hi</body></html>'


@pytest.fixture
def cache(tmp_path) -> ResponseCache:
    return ResponseCache(tmp_path / "out")


def _silent(kind: str, message: str) -> None:
    pass


def _fetch(cache: ResponseCache, identity=GOOGLEBOT, **kwargs):
    kwargs.setdefault("max_attempts", 3)
    kwargs.setdefault("retry_delay", 5)
    return fetch_page(_URL, identity, cache, notify=_silent, **kwargs)


class TestFetchPage:
    def test_success_on_first_attempt(self, cache) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
            with patch("botview.scraper.fetcher.time.sleep") as mock_sleep:
                outcome = _fetch(cache)

        assert outcome.success is True
        assert outcome.body == _HTML
        assert route.call_count == 1
        mock_sleep.assert_not_called()

    def test_sends_identity_user_agent(self, cache) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
            with patch("botview.scraper.fetcher.time.sleep"):
                _fetch(cache, identity=YANDEXBOT)

        assert route.calls.last.request.headers["User-Agent"] == YANDEXBOT.user_agent

    def test_success_persists_body_to_cache(self, cache) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
            with patch("botview.scraper.fetcher.time.sleep"):
                _fetch(cache)

        path = cache.path_for(_URL, GOOGLEBOT)
        assert path.name == "google_example.com_page.html"
        assert path.read_text(encoding="utf-8") == _HTML

    @pytest.mark.parametrize("succeed_on", [2, 3])
    def test_recovers_after_failed_attempts(self, cache, succeed_on) -> None:
        failures = [httpx.Response(503, text="busy") for _ in range(succeed_on - 1)]
        with respx.mock:
            route = respx.get(_URL).mock(
                side_effect=failures + [httpx.Response(200, text=_HTML)]
            )
            with patch("botview.scraper.fetcher.time.sleep") as mock_sleep:
                outcome = _fetch(cache)

        assert outcome.success is True
        assert route.call_count == succeed_on
        assert mock_sleep.call_count == succeed_on - 1
        mock_sleep.assert_called_with(5)

    def test_all_attempts_fail(self, cache) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(500, text="error"))
            with patch("botview.scraper.fetcher.time.sleep") as mock_sleep:
                outcome = _fetch(cache)

        assert outcome.success is False
        assert outcome.body is None
        assert route.call_count == 3
        # No sleep after the final attempt.
        assert mock_sleep.call_count == 2
        assert not cache.path_for(_URL, GOOGLEBOT).exists()

    def test_empty_body_is_a_failed_attempt(self, cache) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(
                side_effect=[httpx.Response(200, text=""), httpx.Response(200, text=_HTML)]
            )
            with patch("botview.scraper.fetcher.time.sleep"):
                outcome = _fetch(cache)

        assert outcome.success is True
        assert route.call_count == 2

    def test_redirect_is_not_followed(self, cache) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(
                return_value=httpx.Response(301, headers={"Location": "https://example.com/other"})
            )
            with patch("botview.scraper.fetcher.time.sleep"):
                outcome = _fetch(cache, max_attempts=1)

        assert outcome.success is False
        assert route.call_count == 1

    def test_transport_error_is_retried(self, cache) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(
                side_effect=[httpx.ConnectError("refused"), httpx.Response(200, text=_HTML)]
            )
            with patch("botview.scraper.fetcher.time.sleep") as mock_sleep:
                outcome = _fetch(cache)

        assert outcome.success is True
        assert route.call_count == 2
        assert mock_sleep.call_count == 1

    def test_reports_progress(self, cache) -> None:
        events = []
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(404, text="nope"))
            with patch("botview.scraper.fetcher.time.sleep"):
                fetch_page(
                    _URL, GOOGLEBOT, cache,
                    max_attempts=2, retry_delay=0,
                    notify=lambda kind, msg: events.append(kind),
                )

        assert events.count("info") == 2
        assert "warning" in events
        assert events[-1] == "error"

    def test_malformed_url_counts_as_failed_attempts(self, cache) -> None:
        with respx.mock(assert_all_called=False):
            with patch("botview.scraper.fetcher.time.sleep") as mock_sleep:
                outcome = fetch_page(
                    "https://ex.com:abc/", GOOGLEBOT, cache,
                    max_attempts=3, retry_delay=5, notify=_silent,
                )

        assert outcome.success is False
        assert mock_sleep.call_count == 2

    def test_unwritable_cache_is_a_failure(self, cache) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
            with patch.object(cache, "store", side_effect=OSError(36, "File name too long")), \
                    patch("botview.scraper.fetcher.time.sleep") as mock_sleep:
                outcome = _fetch(cache)

        assert outcome.success is False
        assert outcome.body is None
        # Retrying cannot fix the cache path, so the response is not re-requested.
        assert route.call_count == 1
        mock_sleep.assert_not_called()
