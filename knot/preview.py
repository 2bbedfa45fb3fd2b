"""Preview-pane content for the selected note.

Loads, sanitizes, and highlights note text and attaches word statistics.
Results are cached by path and mtime so redraws do not re-read the file.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path

from .highlight import DEFAULT_STYLE, colorize_note, read_text, sanitize_terminal_text
from .vault import NoteFile, NoteStats
from .vault.stats import stats_for_text

NO_SELECTION_TEXT = "---"
READ_ERROR_TEXT = "Error reading file"
PREVIEW_CACHE_MAX = 64


@dataclass(frozen=True)
class NotePreview:
    path: Path | None
    lines: tuple[str, ...]
    stats: NoteStats = NoteStats()
    readable: bool = True


_PREVIEW_CACHE: OrderedDict[tuple[str, int | None, str, bool], NotePreview] = OrderedDict()


def stats_label(stats: NoteStats) -> str:
    unit = "word" if stats.word_count == 1 else "words"
    return f"{stats.word_count} {unit} · ~{stats.read_minutes} min read"


def clear_preview_cache() -> None:
    _PREVIEW_CACHE.clear()


def _load_preview(path: Path, style: str, no_color: bool) -> NotePreview:
    try:
        text = read_text(path)
    except OSError:
        return NotePreview(path=path, lines=(READ_ERROR_TEXT,), readable=False)
    text = sanitize_terminal_text(text)
    rendered = text if no_color else colorize_note(text, path, style)
    lines = tuple(rendered.splitlines()) or ("",)
    return NotePreview(path=path, lines=lines, stats=stats_for_text(text))


def build_note_preview(
    note: NoteFile | None,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> NotePreview:
    """Return preview lines and stats for ``note`` (``---`` when ``None``)."""
    if note is None:
        return NotePreview(path=None, lines=(NO_SELECTION_TEXT,))

    key = (str(note.path), note.mtime_ns, style, no_color)
    cached = _PREVIEW_CACHE.get(key)
    if cached is not None:
        _PREVIEW_CACHE.move_to_end(key)
        return cached

    preview = _load_preview(note.path, style, no_color)
    if preview.readable and note.mtime_ns is not None:
        _PREVIEW_CACHE[key] = preview
        while len(_PREVIEW_CACHE) > PREVIEW_CACHE_MAX:
            _PREVIEW_CACHE.popitem(last=False)
    return preview
