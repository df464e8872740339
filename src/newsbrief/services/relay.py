"""Pass-through relay of a streamed completion."""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator

import httpx
from openai import AsyncOpenAI, OpenAIError

from newsbrief.config import CompletionConfig
from newsbrief.models import CompletionPayload

__all__ = ["CompletionRelay", "RelayStream"]

logger = logging.getLogger(__name__)


class RelayStream:
    """Single-use byte stream over a provider completion stream.

    Iterating yields each event's text as UTF-8 the moment it arrives.
    :meth:`aclose` releases the upstream connection and is safe to call more
    than once, whether or not iteration ever started.
    """

    def __init__(self, upstream: Any) -> None:
        self._upstream = upstream
        self._closed = False

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self._forward()

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._upstream.close()

    async def _forward(self) -> AsyncIterator[bytes]:
        forwarded = 0
        try:
            async for event in self._upstream:
                for choice in event.choices:
                    if choice.text:
                        forwarded += 1
                        yield choice.text.encode("utf-8")
        except (OpenAIError, httpx.HTTPError) as exc:
            # The status line is already sent; the client sees a short body.
            logger.warning("Completion stream ended early after %d events: %s", forwarded, exc)
        finally:
            await self.aclose()
        logger.debug("Completion stream finished after %d events", forwarded)


class CompletionRelay:
    """Forward a streamed completion as a byte stream, one event at a time."""

    def __init__(self, client: AsyncOpenAI, config: CompletionConfig | None = None) -> None:
        self._client = client
        self.config = config or CompletionConfig()

    def build_payload(self, prompt: str) -> CompletionPayload:
        """Return the request body for ``prompt``; all other fields are fixed."""

        return CompletionPayload(prompt=prompt, **self.config.model_dump())

    async def open(self, prompt: str) -> RelayStream:
        """Start the completion and return a :class:`RelayStream` over its text.

        The provider call happens here, so rejections (bad credential, unknown
        model, unreachable host) raise before the caller commits to a response.
        """

        payload = self.build_payload(prompt)
        logger.debug(
            "Requesting streamed completion from %s (%d prompt chars)",
            payload.model,
            len(payload.prompt),
        )
        stream = await self._client.completions.create(**payload.model_dump())
        return RelayStream(stream)
