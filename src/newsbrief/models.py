"""Domain models used across the application."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from newsbrief.config import SOURCE_DOMAIN


class SummaryRequest(BaseModel):
    """A user submission, validated before any network call is made."""

    url: str

    @field_validator("url")
    @classmethod
    def _require_source_domain(cls, value: str) -> str:
        if SOURCE_DOMAIN not in value:
            raise ValueError(f"URL must point to {SOURCE_DOMAIN}")
        return value


class SummarizeBody(BaseModel):
    """JSON body accepted by ``POST /api/summarize``."""

    url: Optional[str] = None


class ExtractedArticle(BaseModel):
    """Article body text with control whitespace removed."""

    text: str


class CompletionPayload(BaseModel):
    """Request body sent to the completions endpoint."""

    model: str
    prompt: str
    temperature: float
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    max_tokens: int
    stream: Literal[True] = True
    n: int = 1
