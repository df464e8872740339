"""Tests for the extraction, prompt and fetch steps of the pipeline."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
import requests
from pydantic import ValidationError

from fakes import ARTICLE_HTML, ARTICLE_URL, HTML_WITHOUT_BODY
from newsbrief.models import SummaryRequest
from newsbrief.services.extractor import ExtractionError, extract_article
from newsbrief.services.fetcher import ArticleFetchError, ArticleFetcher
from newsbrief.services.prompt import build_prompt


def test_extract_article_strips_control_whitespace() -> None:
    article = extract_article(ARTICLE_HTML)

    assert article.text == "Harga emas naik hari ini. Analis memperkirakan tren ini berlanjut."
    assert not any(char in article.text for char in "\r\n\t")


def test_extract_article_deletes_newlines_between_paragraphs() -> None:
    html = '<div class="detail_text"><p>Satu.</p>\n<p>\tDua.</p></div>'

    assert extract_article(html).text == "Satu.Dua."


def test_extract_article_uses_custom_selector() -> None:
    html = '<article class="story">Isi berita</article>'

    assert extract_article(html, ".story").text == "Isi berita"


def test_extract_article_raises_when_selector_missing() -> None:
    with pytest.raises(ExtractionError):
        extract_article(HTML_WITHOUT_BODY)


def test_extract_article_raises_when_body_empty() -> None:
    with pytest.raises(ExtractionError):
        extract_article('<div class="detail_text">\n\t\r\n</div>')


def test_build_prompt_interpolates_text_verbatim() -> None:
    text = 'Menteri berkata "{harga}" naik'

    prompt = build_prompt(text)

    assert prompt.startswith("I want you to act like a news article summarizer.")
    assert "3 bullets points max" in prompt
    assert prompt.endswith(f'"{text}"')


def test_summary_request_requires_source_domain() -> None:
    assert SummaryRequest(url=ARTICLE_URL).url == ARTICLE_URL

    with pytest.raises(ValidationError):
        SummaryRequest(url="https://www.example.com/tech/example-article")


class DummyResponse:
    def __init__(self, text: str, status_code: int = 200, content_type: str | None = "text/html") -> None:
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": content_type} if content_type else {}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def _session(response: DummyResponse, calls: list) -> SimpleNamespace:
    def fake_get(url, timeout):
        calls.append((url, timeout))
        return response

    return SimpleNamespace(get=fake_get, headers={})


def test_fetcher_returns_page_text_without_timeout() -> None:
    calls: list = []
    fetcher = ArticleFetcher(_session(DummyResponse(ARTICLE_HTML), calls))

    assert fetcher.fetch(ARTICLE_URL) == ARTICLE_HTML
    assert calls == [(ARTICLE_URL, None)]


def test_fetcher_passes_configured_timeout() -> None:
    calls: list = []
    fetcher = ArticleFetcher(_session(DummyResponse(ARTICLE_HTML), calls), timeout=5.0)

    fetcher.fetch(ARTICLE_URL)

    assert calls == [(ARTICLE_URL, 5.0)]


def test_fetcher_sets_browser_headers() -> None:
    session = _session(DummyResponse(ARTICLE_HTML), [])

    ArticleFetcher(session)

    assert "User-Agent" in session.headers


def test_fetcher_propagates_http_errors() -> None:
    fetcher = ArticleFetcher(_session(DummyResponse("gone", status_code=404), []))

    with pytest.raises(requests.HTTPError):
        fetcher.fetch(ARTICLE_URL)


def test_fetcher_rejects_non_text_responses() -> None:
    fetcher = ArticleFetcher(_session(DummyResponse("%PDF", content_type="application/pdf"), []))

    with pytest.raises(ArticleFetchError):
        fetcher.fetch(ARTICLE_URL)


def test_fetcher_accepts_missing_content_type() -> None:
    fetcher = ArticleFetcher(_session(DummyResponse(ARTICLE_HTML, content_type=None), []))

    assert fetcher.fetch(ARTICLE_URL) == ARTICLE_HTML
