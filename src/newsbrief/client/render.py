"""Rendering of the accumulated summary buffer as bullets."""

from __future__ import annotations

from typing import Sequence

__all__ = ["SENTENCE_DELIMITER", "format_bullets", "split_bullets"]

SENTENCE_DELIMITER = ". "


def split_bullets(summary: str) -> list[str]:
    """Split ``summary`` into bullet texts on ``". "``, dropping empty segments.

    Always applied to the whole buffer, so the last bullet keeps changing
    while its sentence is still streaming in.
    """

    return [sentence for sentence in summary.split(SENTENCE_DELIMITER) if sentence]


def format_bullets(bullets: Sequence[str], marker: str = "•") -> str:
    """Return ``bullets`` as terminal-friendly lines."""

    return "\n".join(f"{marker} {bullet}" for bullet in bullets)
