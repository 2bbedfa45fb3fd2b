"""Interactive runtime for the vault browser.

Builds the vault state, then reads one key at a time, dispatches it, and
redraws from a fresh snapshot. Editor and sync runs suspend the TUI.
"""

from __future__ import annotations

import logging
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .config import save_last_category
from .editor import launch_editor
from .highlight import DEFAULT_STYLE
from .input import read_key
from .keys import KeyContext, handle_key
from .preview import build_note_preview
from .render import compose_screen, render_screen
from .sync import run_interactive_sync
from .terminal import TerminalController
from .ui_theme import UITheme, resolve_theme
from .vault import ROOT_CATEGORY, VaultState, fs

logger = logging.getLogger(__name__)

RESIZE_POLL_MS = 250


@dataclass(frozen=True)
class AppOptions:
    """Resolved runtime settings (config merged with CLI flags)."""

    vault_root: Path
    style: str = DEFAULT_STYLE
    theme: str | None = None
    no_color: bool = False
    editor: str | None = None
    with_subfolders: bool = True
    initial_category: str | None = None


def build_state(options: AppOptions) -> VaultState:
    return VaultState(
        options.vault_root,
        with_subfolders=options.with_subfolders,
        initial_category=options.initial_category,
    )


def print_listing(state: VaultState, out: TextIO | None = None) -> None:
    """Write the category / subfolder / note tree as indented plain text."""
    stream = out if out is not None else sys.stdout
    query = state.filter_query
    for category in state.categories:
        stream.write(f"{category}\n")
        category_dir = state.root if category == ROOT_CATEGORY else state.root / category
        for note in fs.list_notes(category_dir, query):
            stream.write(f"  {note.name}\n")
        if not state.with_subfolders or category == ROOT_CATEGORY:
            continue
        for subfolder in fs.list_directory_names(category_dir):
            stream.write(f"  {subfolder}/\n")
            for note in fs.list_notes(category_dir / subfolder, query):
                stream.write(f"    {note.name}\n")


def run_app(options: AppOptions) -> None:
    """Run the TUI until the user quits, then remember the selected category."""
    state = build_state(options)
    theme = resolve_theme(options.theme, no_color=options.no_color)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    with terminal.raw_mode():
        run_main_loop(state, terminal, stdin_fd, options, theme)

    save_last_category(state.selected_category)


def run_main_loop(
    state: VaultState,
    terminal: TerminalController,
    stdin_fd: int,
    options: AppOptions,
    theme: UITheme,
) -> None:
    """Read, dispatch, and redraw until a quit key arrives."""
    show_help = False

    def open_editor() -> None:
        note = state.selected_note
        if note is None:
            return
        error = launch_editor(note.path, terminal.suspended, options.editor)
        state.note_edited(note.path)
        if error is not None:
            logger.warning("%s", error)
            state.set_status(error)

    def run_sync() -> None:
        report = run_interactive_sync(state.root, terminal.suspended)
        state.last_sync = report.timestamp
        state.refresh()
        state.set_status(report.summary())

    def toggle_help() -> None:
        nonlocal show_help
        show_help = not show_help

    context = KeyContext(
        state=state,
        open_editor=open_editor,
        run_sync=run_sync,
        toggle_help=toggle_help,
    )

    dirty = True
    last_size: tuple[int, int] | None = None
    while True:
        term = shutil.get_terminal_size((80, 24))
        size = (term.columns, term.lines)
        if size != last_size:
            last_size = size
            dirty = True
        if dirty:
            snapshot = state.snapshot()
            preview = build_note_preview(snapshot.selected_note, options.style, options.no_color)
            render_screen(compose_screen(snapshot, preview, term.columns, term.lines, theme, show_help))
            dirty = False

        key = read_key(stdin_fd, timeout_ms=RESIZE_POLL_MS)
        if not key:
            continue
        if handle_key(key, context):
            return
        dirty = True
