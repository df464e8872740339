"""Incremental consumer of the summary byte stream."""

from __future__ import annotations

import asyncio
import codecs
import logging
from enum import Enum
from typing import Callable, Sequence

import httpx
from pydantic import ValidationError

from newsbrief.client.render import split_bullets
from newsbrief.client.url_state import article_url_from_path, canonical_path
from newsbrief.models import SummaryRequest

__all__ = [
    "ConsumerState",
    "DEFAULT_ENDPOINT",
    "DEFAULT_SERVER",
    "INVALID_ARTICLE_NOTICE",
    "SummaryConsumer",
]

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "http://127.0.0.1:8000"
DEFAULT_ENDPOINT = "/api/summarize"
INVALID_ARTICLE_NOTICE = "Please enter a valid CNBC Indonesia article"

UpdateCallback = Callable[[list[str]], None]
NoticeCallback = Callable[[str], None]


class ConsumerState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    STREAMING = "streaming"


class SummaryConsumer:
    """Submit article URLs and accumulate the streamed summary.

    One request is active at a time. Starting a new one cancels the previous
    task, which closes its HTTP response and so aborts the connection.
    ``on_update`` receives the freshly split bullets after every chunk;
    ``on_notice`` receives user-facing messages such as validation failures.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str = DEFAULT_SERVER,
        endpoint: str = DEFAULT_ENDPOINT,
        on_update: UpdateCallback | None = None,
        on_notice: NoticeCallback | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=None)
        self.endpoint = endpoint
        self._on_update = on_update
        self._on_notice = on_notice

        self.summary = ""
        self.loading = False
        self.state = ConsumerState.IDLE
        self.current_article = ""
        self.path: str | None = None
        self._task: asyncio.Task[bool] | None = None

    async def __aenter__(self) -> "SummaryConsumer":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    @property
    def bullets(self) -> list[str]:
        return split_bullets(self.summary)

    def start(self, url: str | None = None) -> asyncio.Task[bool] | None:
        """Begin summarising ``url``, or the current article when omitted.

        Returns the request task, or ``None`` when the candidate was rejected
        without touching the network. A rejected candidate leaves any request
        already in flight running.
        """

        candidate = url if url else self.current_article
        try:
            request = SummaryRequest(url=candidate)
        except ValidationError:
            logger.info("Rejected non-article input %r", candidate)
            if self._on_notice is not None:
                self._on_notice(INVALID_ARTICLE_NOTICE)
            return None

        self.cancel()
        self.summary = ""
        self._publish()

        self.current_article = request.url
        self.loading = True
        self.state = ConsumerState.REQUESTING
        self._task = asyncio.get_running_loop().create_task(self._run(request))
        return self._task

    async def submit(self, url: str | None = None) -> bool:
        """Run a request to completion; ``True`` only for a fully read stream."""

        task = self.start(url)
        if task is None:
            return False

        await asyncio.wait({task})
        if task.cancelled():
            return False
        return task.result()

    async def seed_from_path(self, segments: Sequence[object] | None) -> bool:
        """Submit the article addressed by ``segments`` unless one was already submitted."""

        url = article_url_from_path(segments)
        if url is None or self.current_article:
            return False
        return await self.submit(url)

    def cancel(self) -> None:
        """Abort the in-flight request, if any."""

        task, self._task = self._task, None
        if task is not None and not task.done():
            logger.debug("Cancelling in-flight summary request")
            task.cancel()
        self.loading = False
        self.state = ConsumerState.IDLE

    async def aclose(self) -> None:
        self.cancel()
        if self._owns_client:
            await self._client.aclose()

    async def _run(self, request: SummaryRequest) -> bool:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        try:
            async with self._client.stream(
                "POST", self.endpoint, json=request.model_dump()
            ) as response:
                if not response.is_success:
                    logger.warning(
                        "Summary request failed: %s %s",
                        response.status_code,
                        response.reason_phrase,
                    )
                    return False

                self.state = ConsumerState.STREAMING
                async for chunk in response.aiter_bytes():
                    self._append(decoder.decode(chunk))

                tail = decoder.decode(b"", final=True)
                if tail:
                    self._append(tail)
        except httpx.HTTPError as exc:
            logger.warning("Summary stream for %s failed: %s", request.url, exc)
            return False
        finally:
            if self._task is asyncio.current_task():
                self._task = None
                self.loading = False
                self.state = ConsumerState.IDLE

        self.path = canonical_path(request.url)
        return True

    def _append(self, text: str) -> None:
        self.summary += text
        self._publish()

    def _publish(self) -> None:
        if self._on_update is not None:
            self._on_update(self.bullets)
