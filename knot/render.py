"""Screen composition for the vault browser.

``compose_screen`` is pure: it turns a ``VaultSnapshot`` plus preview content
into exactly ``height`` styled rows. ``render_screen`` writes them out.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from .ansi import display_width, fit_ansi_line, wrap_ansi_line
from .preview import NotePreview, stats_label
from .ui_theme import DEFAULT_THEME, UITheme
from .vault import ROOT_CATEGORY, Focus, InteractionMode, VaultSnapshot

DIVIDER = "│"
MIN_BODY_ROWS = 1
CHROME_ROWS = 5

PROMPT_LABELS: dict[InteractionMode, str] = {
    InteractionMode.CREATING_CATEGORY: "New category: ",
    InteractionMode.CREATING_SUBFOLDER: "New folder: ",
    InteractionMode.CREATING_NOTE: "New note: ",
    InteractionMode.SEARCHING: "Filter: ",
}

HELP_LINES: tuple[tuple[str, str], ...] = (
    ("Tab / Shift+Tab", "switch pane"),
    ("h/l  Left/Right", "previous/next category"),
    ("j/k  Down/Up", "move in focused pane"),
    ("Backspace", "back to category level"),
    ("Enter", "edit note (notes pane)"),
    ("/", "filter categories and notes"),
    ("Esc", "clear filter"),
    ("C / F / N", "new category/folder/note"),
    ("D", "delete selected item"),
    ("S", "git sync (add, commit, push)"),
    ("r", "rescan vault"),
    ("?", "toggle this help"),
    ("q", "quit"),
)


@dataclass(frozen=True)
class PaneWidths:
    folders: int
    notes: int
    preview: int


def pane_widths(width: int, with_subfolders: bool) -> PaneWidths:
    """Split ``width`` columns into pane widths (20/30/50 or 35/65)."""
    if with_subfolders:
        usable = max(3, width - 2)
        folders = max(1, usable * 20 // 100)
        notes = max(1, usable * 30 // 100)
        return PaneWidths(folders=folders, notes=notes, preview=max(1, usable - folders - notes))
    usable = max(2, width - 1)
    notes = max(1, usable * 35 // 100)
    return PaneWidths(folders=0, notes=notes, preview=max(1, usable - notes))


def _scroll_start(selected: int | None, total: int, rows: int) -> int:
    if selected is None or total <= rows:
        return 0
    return max(0, min(selected - rows + 1, total - rows)) if selected >= rows else 0


def _list_rows(
    labels: list[str],
    selected: int | None,
    rows: int,
    width: int,
    focused: bool,
    row_style: str,
    theme: UITheme,
    empty_text: str,
) -> list[str]:
    if not labels:
        empty = fit_ansi_line(f" {theme.note_meta}{empty_text}{theme.reset}", width)
        return [empty] + [" " * width] * (rows - 1)
    start = _scroll_start(selected, len(labels), rows)
    out: list[str] = []
    for row in range(rows):
        idx = start + row
        if idx >= len(labels):
            out.append(" " * width)
            continue
        is_selected = idx == selected
        marker = "›" if is_selected else " "
        text = f"{marker}{labels[idx]}"
        if is_selected and focused:
            out.append(f"{theme.reverse}{fit_ansi_line(text, width)}{theme.reset}")
        else:
            out.append(fit_ansi_line(f"{row_style}{text}{theme.reset}", width))
    return out


def _preview_rows(
    preview: NotePreview,
    rows: int,
    width: int,
    theme: UITheme,
    show_help: bool,
) -> list[str]:
    body: list[str] = []
    if show_help:
        body.append(f"{theme.header}Keys{theme.reset}")
        for keys, meaning in HELP_LINES:
            body.append(f"{theme.help_key}{keys:<16}{theme.reset} {meaning}")
    else:
        if preview.path is not None and preview.readable:
            body.append(f"{theme.note_meta}{stats_label(preview.stats)}{theme.reset}")
            body.append("")
        for line in preview.lines:
            body.extend(wrap_ansi_line(line, width))
            if len(body) >= rows:
                break
    body = body[:rows]
    body.extend([""] * (rows - len(body)))
    return [fit_ansi_line(line, width) for line in body]


def _category_tabs(snapshot: VaultSnapshot, width: int, theme: UITheme) -> str:
    focused = snapshot.focus == Focus.CATEGORIES
    title_style = theme.pane_title_focused if focused else theme.pane_title
    label = f"{title_style} Categories:{theme.reset} "
    tabs: list[str] = []
    palette = theme.category_palette
    for idx, name in enumerate(snapshot.categories):
        color = palette[idx % len(palette)]
        if idx == snapshot.category_idx:
            tabs.append(f"{theme.reverse}{color} {name} {theme.reset}")
        else:
            tabs.append(f"{color} {name} {theme.reset}")
    # Drop leading tabs until the selected one fits.
    first = 0
    while first < snapshot.category_idx:
        visible = "".join(tabs[first : snapshot.category_idx + 1])
        if display_width(label) + display_width(visible) < width:
            break
        first += 1
    lead = "… " if first > 0 else ""
    return fit_ansi_line(label + lead + "".join(tabs[first:]), width)


def _pane_title(title: str, width: int, focused: bool, theme: UITheme) -> str:
    style = theme.pane_title_focused if focused else theme.pane_title
    return fit_ansi_line(f"{style} {title} {theme.reset}", width)


def delete_target_label(snapshot: VaultSnapshot) -> str | None:
    """Describe what a confirmed delete would remove, or ``None``."""
    if snapshot.focus == Focus.CATEGORIES:
        name = snapshot.selected_category
        return None if name == ROOT_CATEGORY else f"category '{name}'"
    if snapshot.focus == Focus.SUBFOLDERS:
        name = snapshot.selected_subfolder
        return None if name is None else f"folder '{name}'"
    note = snapshot.selected_note
    return None if note is None else f"note '{note.name}'"


def _prompt_row(snapshot: VaultSnapshot, width: int, theme: UITheme) -> str:
    mode = snapshot.mode
    if mode == InteractionMode.CONFIRMING_DELETE:
        target = delete_target_label(snapshot) or "nothing selected"
        text = f"{theme.confirm} !!! PERMANENT DELETE {target}? [y/n] !!! {theme.reset}"
        return fit_ansi_line(text, width)
    label = PROMPT_LABELS.get(mode)
    if label is not None:
        return fit_ansi_line(f"{theme.prompt}{label}{snapshot.input_buffer}▏{theme.reset}", width)
    if snapshot.status_message:
        return fit_ansi_line(f"{theme.status_error} {snapshot.status_message}{theme.reset}", width)
    return " " * width


def footer_text(snapshot: VaultSnapshot) -> str:
    mode = snapshot.mode
    if mode == InteractionMode.CONFIRMING_DELETE:
        return " [y] Delete | any other key: Cancel "
    if mode == InteractionMode.SEARCHING:
        return " Filter: [ENTER] Keep | [ESC] Cancel | [Ctrl+U] Clear "
    if mode.takes_text_input:
        return " Name: [ENTER] Save | [ESC] Cancel "
    new_keys = "C/F/N" if snapshot.with_subfolders else "C/N"
    return (
        f" [TAB] Focus | [h/l] Category | [/] Filter | [{new_keys}] New | [D] Delete"
        " | [Enter] Edit | [S] Sync | [?] Help | [q] Quit "
    )


def compose_screen(
    snapshot: VaultSnapshot,
    preview: NotePreview,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
    show_help: bool = False,
) -> list[str]:
    """Build exactly ``height`` rows, each ``width - 1`` columns wide."""
    line_width = max(1, width - 1)
    body_rows = max(MIN_BODY_ROWS, height - CHROME_ROWS)
    widths = pane_widths(line_width, snapshot.with_subfolders)
    divider = f"{theme.chrome}{DIVIDER}{theme.reset}"

    header = f" knot | {snapshot.root} | Last Sync: {snapshot.last_sync}"
    if snapshot.filter_query:
        header += f" | filter: {snapshot.filter_query}"
    rows: list[str] = [
        fit_ansi_line(f"{theme.header}{header}{theme.reset}", line_width),
        _category_tabs(snapshot, line_width, theme),
    ]

    columns: list[list[str]] = []
    titles: list[str] = []
    if snapshot.with_subfolders:
        folders_focused = snapshot.focus == Focus.SUBFOLDERS
        titles.append(_pane_title("Folders", widths.folders, folders_focused, theme))
        columns.append(
            _list_rows(
                [f"{name}/" for name in snapshot.subfolders],
                snapshot.subfolder_idx,
                body_rows,
                widths.folders,
                folders_focused,
                theme.dir_row,
                theme,
                "(no folders)",
            )
        )
    notes_focused = snapshot.focus == Focus.FILES
    titles.append(_pane_title("Notes", widths.notes, notes_focused, theme))
    columns.append(
        _list_rows(
            [note.name for note in snapshot.notes],
            snapshot.file_idx,
            body_rows,
            widths.notes,
            notes_focused,
            theme.note_row,
            theme,
            "(no notes)",
        )
    )
    titles.append(_pane_title("Help" if show_help else "Preview", widths.preview, False, theme))
    columns.append(_preview_rows(preview, body_rows, widths.preview, theme, show_help))

    rows.append(divider.join(titles))
    for row in range(body_rows):
        rows.append(divider.join(column[row] for column in columns))

    rows.append(_prompt_row(snapshot, line_width, theme))
    rows.append(f"{theme.reverse}{fit_ansi_line(footer_text(snapshot), line_width)}{theme.reset}")
    return rows[:height] if height > 0 else rows


def render_screen(rows: list[str]) -> None:
    out = "\033[H" + "\r\n".join(rows) + "\033[J"
    os.write(sys.stdout.fileno(), out.encode("utf-8", errors="replace"))
