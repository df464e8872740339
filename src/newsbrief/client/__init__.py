"""Client-side helpers for consuming and rendering summary streams."""

from __future__ import annotations

from .consumer import ConsumerState, SummaryConsumer  # noqa: F401
from .render import format_bullets, split_bullets  # noqa: F401
from .url_state import article_url_from_path, canonical_path  # noqa: F401

__all__ = [
    "ConsumerState",
    "SummaryConsumer",
    "article_url_from_path",
    "canonical_path",
    "format_bullets",
    "split_bullets",
]
