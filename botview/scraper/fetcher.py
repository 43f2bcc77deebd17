"""HTTP fetcher with a bounded, fixed-delay retry loop."""

from __future__ import annotations

import time
from typing import Callable, Optional

import httpx

from botview.config import settings
from botview.errors import FetchError
from botview.messages import print_notify, t
from botview.scraper.cache import ResponseCache
from botview.scraper.models import FetchOutcome, Identity

Notify = Callable[[str, str], None]


def _get_once(client: httpx.Client, url: str) -> str:
    """Perform one GET and return the body.

    Raises:
        FetchError: Unless the server answered 200 with a non-empty body.
        httpx.HTTPError: On transport failures.
    """
    response = client.get(url)
    body = response.text
    if response.status_code != 200 or not body:
        raise FetchError(t("invalid_response", url=url, status=response.status_code))
    return body


def fetch_page(
    url: str,
    identity: Identity,
    cache: ResponseCache,
    *,
    max_attempts: Optional[int] = None,
    retry_delay: Optional[float] = None,
    timeout: Optional[float] = None,
    notify: Notify = print_notify,
) -> FetchOutcome:
    """Fetch *url* as *identity* and persist the body to *cache*.

    Makes up to ``max_attempts`` requests, sleeping ``retry_delay`` seconds
    between them (never after the last one).  Non-200 responses, empty bodies
    and transport errors all count as a failed attempt.  Redirects are not
    followed, so a 3xx is a failed attempt too.

    Returns:
        ``FetchOutcome(True, body)`` on success, ``FetchOutcome(False)`` once
        every attempt has failed or the body could not be written to the
        cache.
    """
    attempts = max_attempts if max_attempts is not None else settings.max_attempts
    delay = retry_delay if retry_delay is not None else settings.retry_delay

    with httpx.Client(
        headers={"User-Agent": identity.user_agent},
        timeout=timeout if timeout is not None else settings.request_timeout,
        follow_redirects=False,
    ) as client:
        for attempt in range(1, attempts + 1):
            notify("info", t("attempt", attempt=attempt, total=attempts, url=url, bot=identity.name))
            try:
                body = _get_once(client, url)
            except FetchError as exc:
                notify("warning", str(exc))
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                notify("warning", t("transport_error", url=url, error=exc))
            else:
                try:
                    path = cache.store(url, identity, body)
                except OSError as exc:
                    notify("error", t("cache_error", path=cache.path_for(url, identity), error=exc))
                    return FetchOutcome(success=False)
                notify("success", t("fetched", bot=identity.name, path=path))
                return FetchOutcome(success=True, body=body)

            if attempt < attempts:
                notify("warning", t("retrying", delay=delay))
                time.sleep(delay)

    notify("error", t("fetch_failed", url=url, bot=identity.name, total=attempts))
    return FetchOutcome(success=False)
