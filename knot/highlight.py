"""Note loading, sanitization, and preview highlighting.

Tries Pygments first, then a line classifier for markdown-ish text.
Also neutralizes terminal control bytes to avoid unsafe preview side effects.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_LIST_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")
_FENCE_PREFIXES = ("```", "~~~")

_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()

DEFAULT_STYLE = "monokai"

LINE_STYLES: dict[str, str] = {
    "heading": "\033[1;38;5;81m",
    "list": "\033[38;5;229m",
    "quote": "\033[3;38;5;250m",
    "fence": "\033[2;38;5;109m",
    "code": "\033[38;5;114m",
}


def read_text(path: Path) -> str:
    """Decode ``path`` as UTF-8 (dropping a BOM), falling back to latin-1."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def classify_markdown_line(line: str, in_fence: bool = False) -> str:
    """Return a coarse kind for one note line.

    Kinds: ``heading``, ``list``, ``quote``, ``fence``, ``code``, ``blank``,
    ``text``. ``in_fence`` marks lines inside a fenced code block.
    """
    stripped = line.strip()
    if stripped.startswith(_FENCE_PREFIXES):
        return "fence"
    if in_fence:
        return "code"
    if not stripped:
        return "blank"
    if stripped.startswith("#"):
        return "heading"
    if stripped.startswith(">"):
        return "quote"
    if _LIST_RE.match(line):
        return "list"
    return "text"


def classify_markdown_lines(source: str) -> list[tuple[str, str]]:
    """Classify every line of ``source``, tracking fenced code blocks."""
    classified: list[tuple[str, str]] = []
    in_fence = False
    for line in source.splitlines():
        kind = classify_markdown_line(line, in_fence)
        if kind == "fence":
            in_fence = not in_fence
        classified.append((kind, line))
    return classified


def fallback_highlight(source: str) -> str:
    out: list[str] = []
    for kind, line in classify_markdown_lines(source):
        style = LINE_STYLES.get(kind)
        out.append(f"{style}{line}\033[0m" if style and line else line)
    return "\n".join(out)


def _normalize_style(style: str) -> str:
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    formatter = TerminalFormatter(style=style)
    _FORMATTERS[style] = formatter
    return formatter


def pygments_highlight(source: str, path: Path, style: str = DEFAULT_STYLE) -> str | None:
    """Highlight ``source`` with the lexer Pygments picks for ``path``.

    Returns ``None`` when no lexer matches the filename.
    """
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        return None
    formatter = _formatter_for_style(_normalize_style(style))
    return highlight(source, lexer, formatter)


def colorize_note(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Highlight a note for the preview pane.

    Files Pygments has a lexer for use it; anything else (including plain
    text) goes through the markdown line classifier.
    """
    rendered = pygments_highlight(source, path, style)
    if rendered and "\x1b[" in rendered:
        return rendered
    return fallback_highlight(source)
