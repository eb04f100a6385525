"""HTTP fetcher for recipe pages."""

from __future__ import annotations

from typing import Callable, Optional
import logging

import requests

from recipe_scraper.errors import FetchError
from recipe_scraper.settings import settings


logger = logging.getLogger(__name__)

Fetcher = Callable[[str], bytes]


def fetch_url(
    url: str,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> bytes:
    """GET the url with UA header and a timeout. Returns the raw body bytes.

    Raises FetchError for bad URLs, connectivity problems and non-2xx statuses.
    """
    headers = {"User-Agent": settings.USER_AGENT}
    timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
    getter = session.get if session is not None else requests.get
    logger.debug("Fetching URL: %s", url)
    try:
        resp = getter(url, headers=headers, timeout=timeout, allow_redirects=True)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc
    body = resp.content or b""
    logger.info("Fetched %s -> status %s (%d bytes)", url, resp.status_code, len(body))
    return body
