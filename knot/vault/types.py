"""Value types for the vault navigation model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

ROOT_CATEGORY = "[Root]"
DEFAULT_NOTE_HEADING = "# New Note"
NOTE_SUFFIX = ".md"


class Focus(Enum):
    """Pane receiving navigation keys in normal mode."""

    CATEGORIES = "categories"
    SUBFOLDERS = "subfolders"
    FILES = "files"


class InteractionMode(Enum):
    """Which kind of input the current key press is interpreted as."""

    NORMAL = "normal"
    CREATING_CATEGORY = "creating_category"
    CREATING_SUBFOLDER = "creating_subfolder"
    CREATING_NOTE = "creating_note"
    SEARCHING = "searching"
    CONFIRMING_DELETE = "confirming_delete"

    @property
    def takes_text_input(self) -> bool:
        return self in _TEXT_INPUT_MODES


class CreateKind(Enum):
    CATEGORY = "category"
    SUBFOLDER = "subfolder"
    NOTE = "note"

    @property
    def mode(self) -> InteractionMode:
        return _CREATE_MODES[self]


_TEXT_INPUT_MODES = frozenset(
    {
        InteractionMode.CREATING_CATEGORY,
        InteractionMode.CREATING_SUBFOLDER,
        InteractionMode.CREATING_NOTE,
        InteractionMode.SEARCHING,
    }
)

_CREATE_MODES = {
    CreateKind.CATEGORY: InteractionMode.CREATING_CATEGORY,
    CreateKind.SUBFOLDER: InteractionMode.CREATING_SUBFOLDER,
    CreateKind.NOTE: InteractionMode.CREATING_NOTE,
}


def create_kind_for_mode(mode: InteractionMode) -> CreateKind | None:
    """Return the creation kind handled by ``mode``, if it is a creating mode."""
    for kind, kind_mode in _CREATE_MODES.items():
        if kind_mode == mode:
            return kind
    return None


@dataclass(frozen=True)
class NoteFile:
    """One note row in the file pane."""

    path: Path
    name: str
    mtime_ns: int | None = None


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a create/delete request.

    ``ok`` is ``False`` only when the filesystem refused the change; ``reason``
    then carries a short user-facing explanation.
    """

    ok: bool
    reason: str | None = None
    path: Path | None = None

    @classmethod
    def success(cls, path: Path | None = None) -> MutationResult:
        return cls(ok=True, reason=None, path=path)

    @classmethod
    def failed(cls, reason: str, path: Path | None = None) -> MutationResult:
        return cls(ok=False, reason=reason, path=path)


@dataclass(frozen=True)
class NoteStats:
    word_count: int = 0
    read_minutes: int = 0


__all__ = [
    "ROOT_CATEGORY",
    "DEFAULT_NOTE_HEADING",
    "NOTE_SUFFIX",
    "Focus",
    "InteractionMode",
    "CreateKind",
    "create_kind_for_mode",
    "NoteFile",
    "MutationResult",
    "NoteStats",
]
