"""Word-count and reading-time estimates for notes."""

from __future__ import annotations

import math
from pathlib import Path

from ..highlight import read_text
from .types import NoteStats

WORDS_PER_MINUTE = 200


def stats_for_text(text: str) -> NoteStats:
    words = len(text.split())
    return NoteStats(word_count=words, read_minutes=math.ceil(words / WORDS_PER_MINUTE))


def compute_stats(path: Path | None) -> NoteStats:
    """Return word count and ``ceil(words / 200)`` minutes for ``path``.

    ``(0, 0)`` when no path is given or the file cannot be read.
    """
    if path is None:
        return NoteStats()
    try:
        text = read_text(path)
    except OSError:
        return NoteStats()
    return stats_for_text(text)


__all__ = ["WORDS_PER_MINUTE", "stats_for_text", "compute_stats"]
