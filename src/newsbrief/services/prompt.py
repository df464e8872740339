"""Instruction template for the article summariser."""

from __future__ import annotations

__all__ = ["PROMPT_TEMPLATE", "build_prompt"]

PROMPT_TEMPLATE = (
    "I want you to act like a news article summarizer. I will input text from a news "
    "article and your job is to convert it into a useful summary of a few sentences. "
    "The target audience for this is old man above 40 years old. Do not repeat "
    "sentences, 3 bullets points max, and make sure all sentences are clear and "
    'complete: "{text}"'
)


def build_prompt(text: str) -> str:
    """Interpolate ``text`` into :data:`PROMPT_TEMPLATE` without any escaping."""

    return PROMPT_TEMPLATE.format(text=text)
