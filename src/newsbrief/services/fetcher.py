"""Retrieval of raw article HTML from the source site."""

from __future__ import annotations

import logging

import requests

__all__ = ["ArticleFetchError", "ArticleFetcher", "DEFAULT_HEADERS"]

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/129.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "id-ID,id;q=0.9,en-US;q=0.8,en;q=0.7",
}

_TEXTUAL_TYPES = ("text/", "application/xhtml+xml", "application/xml")


class ArticleFetchError(RuntimeError):
    """Raised when the article source answers with something other than markup."""


class ArticleFetcher:
    """Plain HTTP ``GET`` of an article page.

    No retries are attempted. ``timeout`` defaults to ``None`` so a slow origin
    blocks until the transport gives up on its own.
    """

    def __init__(
        self, session: requests.Session | None = None, *, timeout: float | None = None
    ) -> None:
        self._session = session or requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        """Return the response body of ``url`` as text."""

        logger.info("Fetching article %s", url)
        response = self._session.get(url, timeout=self.timeout)
        response.raise_for_status()

        content_type = (response.headers.get("Content-Type") or "").lower()
        if content_type and not content_type.startswith(_TEXTUAL_TYPES):
            raise ArticleFetchError(f"Unexpected content type {content_type!r} for {url}")

        return response.text
