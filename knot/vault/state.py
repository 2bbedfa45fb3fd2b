"""Vault navigation state: the in-memory mirror of the vault hierarchy.

``VaultState`` owns the category/subfolder/note lists, the cursor in each,
the active filter, and the interaction mode. Every structural event
regenerates the lists from disk in dependency order (categories, then
subfolders, then notes) and re-derives each cursor from the identity of the
previously selected item, so no index is ever left pointing past its list.

Selections are remembered by identity (category name, subfolder name, note
path) rather than by index. A subfolder cursor of ``None`` on a non-empty
subfolder list means the notes shown are the ones directly in the category.

An item the filter excludes is dropped from its list, but its identity is
kept while it still exists on disk, so clearing the filter brings the
previous selection back. Acting on the filtered view adopts what is shown.
"""

from __future__ import annotations

from pathlib import Path

from . import fs
from .snapshot import VaultSnapshot
from .stats import compute_stats as compute_note_stats
from .types import (
    NOTE_SUFFIX,
    ROOT_CATEGORY,
    CreateKind,
    Focus,
    InteractionMode,
    MutationResult,
    NoteFile,
    NoteStats,
    create_kind_for_mode,
)

THREE_PANE_FOCUS_ORDER: tuple[Focus, ...] = (Focus.CATEGORIES, Focus.SUBFOLDERS, Focus.FILES)
TWO_PANE_FOCUS_ORDER: tuple[Focus, ...] = (Focus.CATEGORIES, Focus.FILES)


def _wrap_index(current: int | None, step: int, length: int) -> int:
    if current is None:
        return 0 if step > 0 else length - 1
    return (current + step) % length


class VaultState:
    """Single owner of vault navigation state, mutated by the event loop."""

    def __init__(
        self,
        root: Path,
        *,
        with_subfolders: bool = True,
        initial_category: str | None = None,
    ) -> None:
        self.root = Path(root)
        self.with_subfolders = with_subfolders
        self.categories: list[str] = [ROOT_CATEGORY]
        self.subfolders: list[str] = []
        self.notes: list[NoteFile] = []
        self.category_idx = 0
        self.subfolder_idx: int | None = None
        self.file_idx: int | None = None
        self.focus = Focus.CATEGORIES
        self.mode = InteractionMode.NORMAL
        self.filter_query = ""
        self.input_buffer = ""
        self.status_message = ""
        self.last_sync = "Manual"
        self._category_name = initial_category or ROOT_CATEGORY
        self._subfolder_name: str | None = None
        self._note_path: Path | None = None
        self._category_hidden = False
        self._filter_before_search = ""
        self.refresh()

    # ------------------------------------------------------------------
    # derived paths and selections

    @property
    def panes(self) -> tuple[Focus, ...]:
        return THREE_PANE_FOCUS_ORDER if self.with_subfolders else TWO_PANE_FOCUS_ORDER

    @property
    def selected_category(self) -> str:
        return self.categories[self.category_idx]

    @property
    def selected_subfolder(self) -> str | None:
        if self.subfolder_idx is None:
            return None
        return self.subfolders[self.subfolder_idx]

    @property
    def selected_note(self) -> NoteFile | None:
        if self.file_idx is None:
            return None
        return self.notes[self.file_idx]

    @property
    def category_path(self) -> Path:
        if self.selected_category == ROOT_CATEGORY:
            return self.root
        return self.root / self.selected_category

    @property
    def notes_dir(self) -> Path:
        subfolder = self.selected_subfolder
        if subfolder is None:
            return self.category_path
        return self.category_path / subfolder

    # ------------------------------------------------------------------
    # list regeneration

    def refresh(self) -> VaultSnapshot:
        """Regenerate every list from disk and re-validate all cursors."""
        self._rebuild_categories()
        self._rebuild_subfolders()
        self._rebuild_notes()
        return self.snapshot()

    def _rebuild_categories(self) -> None:
        names = [
            name
            for name in fs.list_directory_names(self.root, self.filter_query)
            if name != ROOT_CATEGORY
        ]
        self.categories = [ROOT_CATEGORY, *names]
        self._category_hidden = False
        if self._category_name in self.categories:
            self.category_idx = self.categories.index(self._category_name)
            return
        self.category_idx = 0
        if self.filter_query and (self.root / self._category_name).is_dir():
            self._category_hidden = True
            return
        self._category_name = ROOT_CATEGORY
        self._subfolder_name = None
        self._reset_notes_cursor()

    def _rebuild_subfolders(self) -> None:
        if not self.with_subfolders:
            self.subfolders = []
            self.subfolder_idx = None
            self._subfolder_name = None
            return
        self.subfolders = fs.list_directory_names(self.category_path)
        if not self._category_hidden and self._subfolder_name in self.subfolders:
            self.subfolder_idx = self.subfolders.index(self._subfolder_name)
            return
        self.subfolder_idx = None
        if not self._category_hidden:
            self._subfolder_name = None

    def _rebuild_notes(self) -> None:
        previous_idx = self.file_idx
        self.notes = fs.list_notes(self.notes_dir, self.filter_query)
        keep_identity = self._category_hidden or self._note_filtered_out()
        if not self.notes:
            self.file_idx = None
            if not keep_identity:
                self._note_path = None
            return
        for idx, note in enumerate(self.notes):
            if note.path == self._note_path:
                self.file_idx = idx
                return
        if previous_idx is None:
            self.file_idx = 0
        else:
            self.file_idx = max(0, min(previous_idx, len(self.notes) - 1))
        if not keep_identity:
            self._note_path = self.notes[self.file_idx].path

    def _note_filtered_out(self) -> bool:
        if not self.filter_query or self._note_path is None:
            return False
        return self._note_path.parent == self.notes_dir and self._note_path.is_file()

    def _adopt_visible_selection(self) -> None:
        """Replace remembered identities hidden by the filter with what is shown."""
        if self._category_hidden:
            self._category_hidden = False
            self._category_name = self.selected_category
            self._subfolder_name = self.selected_subfolder
        note = self.selected_note
        self._note_path = note.path if note is not None else None

    def _reset_notes_cursor(self) -> None:
        self.file_idx = None
        self._note_path = None

    # ------------------------------------------------------------------
    # navigation

    def set_focus(self, next_focus: Focus | None = None) -> bool:
        """Move focus to ``next_focus`` or, when omitted, to the next pane."""
        if self.mode != InteractionMode.NORMAL:
            return False
        if next_focus is None:
            return self.cycle_focus(1)
        self.focus = next_focus if next_focus in self.panes else Focus.FILES
        return True

    def cycle_focus(self, step: int = 1) -> bool:
        if self.mode != InteractionMode.NORMAL:
            return False
        panes = self.panes
        current = panes.index(self.focus) if self.focus in panes else 0
        self.focus = panes[(current + step) % len(panes)]
        return True

    def move_selection(self, direction: int) -> bool:
        """Move the focused pane's cursor by one row with wraparound.

        Returns whether a cursor moved. Category and subfolder moves rescan
        the dependent lists; note moves do not touch the filesystem.
        """
        if self.mode != InteractionMode.NORMAL or direction == 0:
            return False
        self._adopt_visible_selection()
        step = 1 if direction > 0 else -1
        if self.focus == Focus.CATEGORIES:
            return self._move_category(step)
        if self.focus == Focus.SUBFOLDERS:
            if not self.subfolders:
                return False
            idx = _wrap_index(self.subfolder_idx, step, len(self.subfolders))
            self._select_subfolder(self.subfolders[idx])
            return True
        if not self.notes:
            return False
        self.file_idx = _wrap_index(self.file_idx, step, len(self.notes))
        self._note_path = self.notes[self.file_idx].path
        return True

    def cycle_category(self, direction: int) -> bool:
        """Step the category cursor regardless of which pane has focus."""
        if self.mode != InteractionMode.NORMAL or direction == 0:
            return False
        return self._move_category(1 if direction > 0 else -1)

    def _move_category(self, step: int) -> bool:
        idx = _wrap_index(self.category_idx, step, len(self.categories))
        if idx == self.category_idx:
            return False
        self._select_category(self.categories[idx])
        return True

    def _select_category(self, name: str) -> None:
        self._category_name = name
        self._subfolder_name = None
        self._reset_notes_cursor()
        self._rebuild_categories()
        self._rebuild_subfolders()
        self._rebuild_notes()

    def _select_subfolder(self, name: str | None) -> None:
        self._subfolder_name = name
        self._reset_notes_cursor()
        self._rebuild_subfolders()
        self._rebuild_notes()

    def clear_subfolder(self) -> bool:
        """Return the note pane to the category level."""
        if self.mode != InteractionMode.NORMAL or self.subfolder_idx is None:
            return False
        self._select_subfolder(None)
        return True

    # ------------------------------------------------------------------
    # filtering

    def set_filter(self, query: str) -> VaultSnapshot:
        self.filter_query = query
        return self.refresh()

    def begin_search(self) -> bool:
        if self.mode != InteractionMode.NORMAL:
            return False
        self.mode = InteractionMode.SEARCHING
        self._filter_before_search = self.filter_query
        self.input_buffer = self.filter_query
        return True

    def commit_search(self) -> None:
        if self.mode != InteractionMode.SEARCHING:
            return
        self.mode = InteractionMode.NORMAL
        self.input_buffer = ""

    # ------------------------------------------------------------------
    # text input

    def append_input(self, text: str) -> bool:
        if not self.mode.takes_text_input or not text:
            return False
        self.input_buffer += text
        if self.mode == InteractionMode.SEARCHING:
            self.set_filter(self.input_buffer)
        return True

    def backspace(self) -> bool:
        if not self.mode.takes_text_input or not self.input_buffer:
            return False
        self.input_buffer = self.input_buffer[:-1]
        if self.mode == InteractionMode.SEARCHING:
            self.set_filter(self.input_buffer)
        return True

    def clear_input(self) -> bool:
        if not self.mode.takes_text_input:
            return False
        self.input_buffer = ""
        if self.mode == InteractionMode.SEARCHING:
            self.set_filter("")
        return True

    def cancel(self) -> None:
        """Leave any non-normal mode without applying its pending action."""
        if self.mode == InteractionMode.SEARCHING:
            self.mode = InteractionMode.NORMAL
            self.input_buffer = ""
            self.set_filter(self._filter_before_search)
            return
        if self.mode == InteractionMode.CONFIRMING_DELETE:
            self.confirm_delete(False)
            return
        self.mode = InteractionMode.NORMAL
        self.input_buffer = ""

    # ------------------------------------------------------------------
    # mutations

    def begin_create(self, kind: CreateKind) -> bool:
        if self.mode != InteractionMode.NORMAL:
            return False
        if kind == CreateKind.SUBFOLDER and not self.with_subfolders:
            return False
        self.mode = kind.mode
        self.input_buffer = ""
        return True

    def commit_create(self, name: str | None = None) -> MutationResult:
        """Create the pending category, subfolder, or note.

        ``name`` defaults to the input buffer. A blank name is a silent no-op.
        Failures are returned and kept as ``status_message``; the lists are
        refreshed and the mode returns to normal either way.
        """
        kind = create_kind_for_mode(self.mode)
        if kind is None:
            return MutationResult.failed("Nothing is being created")
        raw_name = self.input_buffer if name is None else name
        entry_name = raw_name.strip()
        self.mode = InteractionMode.NORMAL
        self.input_buffer = ""
        if not entry_name:
            self.refresh()
            return MutationResult.success()

        self._adopt_visible_selection()
        result = self._create(kind, entry_name)
        self._record(result)
        self.refresh()
        return result

    def _create(self, kind: CreateKind, name: str) -> MutationResult:
        error = fs.validate_entry_name(name)
        if error is not None:
            return MutationResult.failed(error)
        if kind == CreateKind.CATEGORY:
            if name == ROOT_CATEGORY:
                return MutationResult.failed(f"{ROOT_CATEGORY} is reserved")
            result = fs.create_directory(self.root / name)
            if result.ok:
                if not fs.matches_filter(name, self.filter_query):
                    self.filter_query = ""
                self._category_name = name
                self._subfolder_name = None
                self._reset_notes_cursor()
            return result
        if kind == CreateKind.SUBFOLDER:
            result = fs.create_directory(self.category_path / name)
            if result.ok:
                self._subfolder_name = name
                self._reset_notes_cursor()
            return result
        if name.endswith(NOTE_SUFFIX):
            name = name[: -len(NOTE_SUFFIX)]
            if not name:
                return MutationResult.failed("Note name is empty")
        return fs.create_note(self.notes_dir, name)

    def begin_delete(self) -> bool:
        if self.mode != InteractionMode.NORMAL:
            return False
        self.mode = InteractionMode.CONFIRMING_DELETE
        return True

    def delete_target(self) -> Path | None:
        """Resolve what a confirmed delete would remove from focus and cursor."""
        if self.focus == Focus.CATEGORIES:
            if self.selected_category == ROOT_CATEGORY:
                return None
            return self.category_path
        if self.focus == Focus.SUBFOLDERS:
            subfolder = self.selected_subfolder
            if subfolder is None:
                return None
            return self.category_path / subfolder
        note = self.selected_note
        return note.path if note is not None else None

    def confirm_delete(self, yes: bool) -> MutationResult:
        if self.mode != InteractionMode.CONFIRMING_DELETE:
            return MutationResult.failed("No delete is pending")
        self.mode = InteractionMode.NORMAL
        if not yes:
            self.refresh()
            return MutationResult.success()

        self._adopt_visible_selection()
        target = self.delete_target()
        if target is None:
            if self.focus == Focus.CATEGORIES:
                result = MutationResult.failed(f"{ROOT_CATEGORY} cannot be deleted")
            else:
                result = MutationResult.failed("Nothing selected to delete")
        else:
            result = fs.remove_path(target)
            if result.ok:
                if self.focus == Focus.CATEGORIES:
                    self._category_name = ROOT_CATEGORY
                    self._subfolder_name = None
                    self._reset_notes_cursor()
                elif self.focus == Focus.SUBFOLDERS:
                    self._subfolder_name = None
                    self._reset_notes_cursor()
                else:
                    self._note_path = None
        self._record(result)
        self.refresh()
        return result

    # ------------------------------------------------------------------
    # status, stats, snapshot

    def _record(self, result: MutationResult) -> None:
        self.status_message = "" if result.ok else (result.reason or "Operation failed")

    def note_edited(self, path: Path) -> VaultSnapshot:
        """Rescan after an external edit, keeping ``path`` selected when it survives."""
        if self.mode == InteractionMode.NORMAL:
            self._adopt_visible_selection()
            self._note_path = path
        return self.refresh()

    def set_status(self, message: str) -> None:
        self.status_message = message

    def clear_status(self) -> None:
        self.status_message = ""

    def compute_stats(self, selected_file: Path | None = None) -> NoteStats:
        if selected_file is None:
            note = self.selected_note
            selected_file = note.path if note is not None else None
        return compute_note_stats(selected_file)

    def snapshot(self) -> VaultSnapshot:
        return VaultSnapshot(
            root=self.root,
            categories=tuple(self.categories),
            subfolders=tuple(self.subfolders),
            notes=tuple(self.notes),
            category_idx=self.category_idx,
            subfolder_idx=self.subfolder_idx,
            file_idx=self.file_idx,
            focus=self.focus,
            mode=self.mode,
            with_subfolders=self.with_subfolders,
            filter_query=self.filter_query,
            input_buffer=self.input_buffer,
            status_message=self.status_message,
            last_sync=self.last_sync,
        )


__all__ = ["VaultState", "THREE_PANE_FOCUS_ORDER", "TWO_PANE_FOCUS_ORDER"]
