"""Configuration models and helpers for the newsbrief service."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError

__all__ = [
    "ARTICLE_SELECTOR",
    "CompletionConfig",
    "DEFAULT_MODEL",
    "MissingCredentialError",
    "SOURCE_BASE_URL",
    "SOURCE_DOMAIN",
    "Settings",
]

#: Domain substring every submitted article URL must contain.
SOURCE_DOMAIN = "cnbcindonesia.com"

#: Base URL used to rebuild an article address from page path segments.
SOURCE_BASE_URL = "https://www.cnbcindonesia.com/"

#: CSS selector of the element holding the article body on the source site.
ARTICLE_SELECTOR = ".detail_text"

DEFAULT_MODEL = "gpt-3.5-turbo-instruct"


class MissingCredentialError(RuntimeError):
    """Raised when the generation provider credential is not configured."""


class CompletionConfig(BaseModel):
    """Fixed sampling parameters sent with every completion request."""

    model: str = Field(default=DEFAULT_MODEL, description="Completion model name")
    temperature: float = 0.5
    top_p: float = 1
    frequency_penalty: float = 0
    presence_penalty: float = 0
    max_tokens: int = 2048
    n: int = 1


class Settings(BaseModel):
    """Process-wide configuration, read once before the app accepts requests."""

    openai_api_key: str = Field(..., min_length=1, description="Generation provider credential")
    openai_base_url: str | None = Field(
        default=None,
        description="Optional override of the provider endpoint, e.g. for a proxy",
    )
    article_selector: str = ARTICLE_SELECTOR
    fetch_timeout: float | None = Field(
        default=None,
        description=(
            "Seconds to wait for the article source. ``None`` leaves the "
            "transport's own behaviour in place."
        ),
    )
    completion: CompletionConfig = Field(default_factory=CompletionConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        ``OPENAI_API_KEY`` is mandatory; every other variable is optional.
        """

        env = os.environ if environ is None else environ

        api_key = (env.get("OPENAI_API_KEY") or "").strip()
        if not api_key:
            raise MissingCredentialError("Missing env var from OpenAI: OPENAI_API_KEY")

        completion = CompletionConfig()
        model = (env.get("NEWSBRIEF_MODEL") or "").strip()
        if model:
            completion = completion.model_copy(update={"model": model})

        raw_timeout = (env.get("NEWSBRIEF_FETCH_TIMEOUT") or "").strip()
        try:
            return cls(
                openai_api_key=api_key,
                openai_base_url=(env.get("OPENAI_BASE_URL") or "").strip() or None,
                fetch_timeout=raw_timeout or None,
                completion=completion,
            )
        except ValidationError as exc:
            raise ValueError(f"Environment configuration is invalid:\n{exc}") from exc
