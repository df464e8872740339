"""Article body extraction from raw HTML."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from newsbrief.config import ARTICLE_SELECTOR
from newsbrief.models import ExtractedArticle

__all__ = ["ExtractionError", "extract_article"]

_CONTROL_WHITESPACE_RE = re.compile(r"[\r\n\t]")


class ExtractionError(ValueError):
    """Raised when the article body cannot be located in the page."""


def extract_article(html: str, selector: str = ARTICLE_SELECTOR) -> ExtractedArticle:
    """Return the text of the element matching ``selector``.

    Carriage returns, newlines and tabs are deleted outright. A page without a
    match, or with an empty match, is an error rather than an empty article.
    """

    soup = BeautifulSoup(html, "lxml")
    body = soup.select_one(selector)
    if body is None:
        raise ExtractionError(f"No element matches {selector!r}")

    text = _CONTROL_WHITESPACE_RE.sub("", body.get_text())
    if not text.strip():
        raise ExtractionError(f"Element {selector!r} contains no text")

    return ExtractedArticle(text=text)
