"""Service layer entry points for newsbrief."""

from __future__ import annotations

from .extractor import ExtractionError, extract_article  # noqa: F401
from .fetcher import ArticleFetchError, ArticleFetcher  # noqa: F401
from .prompt import build_prompt  # noqa: F401
from .relay import CompletionRelay, RelayStream  # noqa: F401
from .summarizer import ArticleSummarizer  # noqa: F401

__all__ = [
    "ArticleFetchError",
    "ArticleFetcher",
    "ArticleSummarizer",
    "CompletionRelay",
    "ExtractionError",
    "RelayStream",
    "build_prompt",
    "extract_article",
]
