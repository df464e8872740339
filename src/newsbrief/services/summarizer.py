"""End-to-end pipeline from article URL to a streamed summary."""

from __future__ import annotations

import logging

from fastapi.concurrency import run_in_threadpool
from openai import AsyncOpenAI

from newsbrief.config import Settings
from newsbrief.services.extractor import extract_article
from newsbrief.services.fetcher import ArticleFetcher
from newsbrief.services.prompt import build_prompt
from newsbrief.services.relay import CompletionRelay, RelayStream

__all__ = ["ArticleSummarizer"]

logger = logging.getLogger(__name__)


class ArticleSummarizer:
    """Fetch an article, extract its body and relay the completion stream."""

    def __init__(self, fetcher: ArticleFetcher, relay: CompletionRelay, *, selector: str) -> None:
        self.fetcher = fetcher
        self.relay = relay
        self.selector = selector

    @classmethod
    def from_settings(cls, settings: Settings) -> "ArticleSummarizer":
        client = AsyncOpenAI(api_key=settings.openai_api_key, base_url=settings.openai_base_url)
        return cls(
            ArticleFetcher(timeout=settings.fetch_timeout),
            CompletionRelay(client, settings.completion),
            selector=settings.article_selector,
        )

    async def stream_summary(self, url: str) -> RelayStream:
        """Return the summary byte stream for ``url``.

        Every failure before the first byte (fetch, extraction, provider
        rejection) propagates to the caller.
        """

        html = await run_in_threadpool(self.fetcher.fetch, url)
        article = extract_article(html, self.selector)
        logger.info("Extracted %d characters from %s", len(article.text), url)
        return await self.relay.open(build_prompt(article.text))
