"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (panes, tabs, prompts). The Pygments style
used for note previews is a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    chrome: str
    header: str
    pane_title: str
    pane_title_focused: str
    dir_row: str
    note_row: str
    note_meta: str
    prompt: str
    prompt_hint: str
    confirm: str
    status_error: str
    help_key: str
    category_palette: tuple[str, ...]


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    chrome="\033[2m",
    header="\033[1;38;5;252m",
    pane_title="\033[38;5;250m",
    pane_title_focused="\033[1;33m",
    dir_row="\033[1;34m",
    note_row="\033[38;5;252m",
    note_meta="\033[2;38;5;250m",
    prompt="\033[1;38;5;81m",
    prompt_hint="\033[2;38;5;250m",
    confirm="\033[1;37;41m",
    status_error="\033[1;31m",
    help_key="\033[38;5;229m",
    category_palette=("\033[36m", "\033[35m", "\033[32m", "\033[33m", "\033[34m"),
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    chrome="\033[2;38;5;31m",
    header="\033[1;38;5;45m",
    pane_title="\033[38;5;110m",
    pane_title_focused="\033[1;38;5;45m",
    dir_row="\033[1;38;5;45m",
    note_row="\033[38;5;153m",
    note_meta="\033[2;38;5;110m",
    prompt="\033[1;38;5;45m",
    prompt_hint="\033[2;38;5;110m",
    confirm="\033[1;38;5;231;48;5;124m",
    status_error="\033[1;38;5;203m",
    help_key="\033[38;5;153m",
    category_palette=("\033[38;5;39m", "\033[38;5;45m", "\033[38;5;117m", "\033[38;5;73m", "\033[38;5;153m"),
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    chrome="",
    header="",
    pane_title="",
    pane_title_focused="",
    dir_row="",
    note_row="",
    note_meta="",
    prompt="",
    prompt_hint="",
    confirm="",
    status_error="",
    help_key="",
    category_palette=("",),
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
