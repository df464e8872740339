"""Mapping between article URLs and page address paths."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urlparse

from newsbrief.config import SOURCE_BASE_URL

__all__ = ["article_url_from_path", "canonical_path"]


def article_url_from_path(segments: Sequence[object] | None) -> str | None:
    """Rebuild the article URL addressed by the page path ``segments``.

    Returns ``None`` when there are no segments or any of them is not a string.
    """

    if not segments or not all(isinstance(segment, str) for segment in segments):
        return None
    return SOURCE_BASE_URL + "/".join(segments)  # type: ignore[arg-type]


def canonical_path(url: str) -> str:
    """Return the address path shown for ``url``, e.g. ``/tech/example-article``."""

    return urlparse(url).path or "/"
