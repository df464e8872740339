"""Test doubles shared by the pipeline, API and client tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Iterable

import httpx

ARTICLE_URL = "https://www.cnbcindonesia.com/tech/example-article"

ARTICLE_HTML = """
<html>
    <head><title>Harga emas</title></head>
    <body>
        <div class="headline">Berita hari ini</div>
        <div class="detail_text">
\tHarga emas naik hari ini. Analis memperkirakan tren ini berlanjut.\r
</div>
    </body>
</html>
"""

HTML_WITHOUT_BODY = "<html><body><div class='content'>Nothing to see</div></body></html>"


class FakeCompletionStream:
    """Minimal stand-in for ``openai.AsyncStream`` of completion events."""

    def __init__(self, texts: Iterable[str], error: Exception | None = None) -> None:
        self.texts = list(texts)
        self.error = error
        self.closed = False
        self.close_calls = 0

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for text in self.texts:
            yield SimpleNamespace(choices=[SimpleNamespace(text=text)])
        if self.error is not None:
            raise self.error

    async def close(self) -> None:
        self.closed = True
        self.close_calls += 1


class FakeCompletions:
    def __init__(self, stream: FakeCompletionStream | None = None, error: Exception | None = None) -> None:
        self.stream = stream or FakeCompletionStream([])
        self.error = error
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.stream


def fake_openai(texts: Iterable[str] = (), *, error: Exception | None = None) -> SimpleNamespace:
    """Return an object shaped like ``AsyncOpenAI`` for the completions API."""

    return SimpleNamespace(completions=FakeCompletions(FakeCompletionStream(texts), error=error))


class ChunkedStream(httpx.AsyncByteStream):
    """Response body delivered in exactly the given chunks."""

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self.chunks = list(chunks)

    async def __aiter__(self):
        for chunk in self.chunks:
            yield chunk


def chunked(data: bytes, size: int) -> list[bytes]:
    return [data[index : index + size] for index in range(0, len(data), size)]
