"""Immutable view of vault navigation state handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .types import Focus, InteractionMode, NoteFile


@dataclass(frozen=True)
class VaultSnapshot:
    """Ordered lists, selections, mode, and focus captured after one event."""

    root: Path
    categories: tuple[str, ...]
    subfolders: tuple[str, ...]
    notes: tuple[NoteFile, ...]
    category_idx: int
    subfolder_idx: int | None
    file_idx: int | None
    focus: Focus
    mode: InteractionMode
    with_subfolders: bool = True
    filter_query: str = ""
    input_buffer: str = ""
    status_message: str = ""
    last_sync: str = "Manual"

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


__all__ = ["VaultSnapshot"]
