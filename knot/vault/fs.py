"""Filesystem scanning and mutation primitives for the vault hierarchy.

Listing helpers never raise: unreadable directories scan as empty.
Mutation helpers never raise either; they report a ``MutationResult``.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .types import DEFAULT_NOTE_HEADING, NOTE_SUFFIX, MutationResult, NoteFile

logger = logging.getLogger(__name__)


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def matches_filter(name: str, query: str) -> bool:
    if not query:
        return True
    return query.casefold() in name.casefold()


def safe_mtime_ns(path: Path) -> int | None:
    """Return ``st_mtime_ns`` for ``path`` or ``None`` on stat failure."""
    try:
        return int(path.stat().st_mtime_ns)
    except OSError:
        return None


def list_directory_names(directory: Path, query: str = "") -> list[str]:
    """Return sorted names of visible child directories of ``directory``.

    ``query`` narrows the result to names containing it case-insensitively.
    """
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                if is_hidden_name(child.name):
                    continue
                try:
                    if not child.is_dir():
                        continue
                except OSError:
                    continue
                if not matches_filter(child.name, query):
                    continue
                names.append(child.name)
    except OSError as exc:
        logger.debug("cannot scan %s: %s", directory, exc)
        return []
    names.sort()
    return names


def list_notes(directory: Path, query: str = "") -> list[NoteFile]:
    """Return visible regular files in ``directory``, newest first.

    Files whose mtime cannot be read sort last. Equal timestamps fall back to
    name order so listings are stable between refreshes.
    """
    notes: list[NoteFile] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                if is_hidden_name(child.name):
                    continue
                try:
                    if not child.is_file():
                        continue
                except OSError:
                    continue
                if not matches_filter(child.name, query):
                    continue
                mtime_ns: int | None = None
                try:
                    mtime_ns = int(child.stat().st_mtime_ns)
                except OSError:
                    pass
                notes.append(NoteFile(path=Path(child.path), name=child.name, mtime_ns=mtime_ns))
    except OSError as exc:
        logger.debug("cannot scan %s: %s", directory, exc)
        return []
    notes.sort(key=lambda note: note.name)
    notes.sort(key=lambda note: note.mtime_ns if note.mtime_ns is not None else -1, reverse=True)
    return notes


def validate_entry_name(name: str) -> str | None:
    """Return an error message when ``name`` cannot be a single path component."""
    if name in {".", ".."}:
        return f"Invalid name: {name!r}"
    if "/" in name or (os.sep != "/" and os.sep in name):
        return f"Name cannot contain a path separator: {name!r}"
    if "\x00" in name:
        return "Name cannot contain NUL bytes"
    if is_hidden_name(name):
        return f"Hidden names are not listed: {name!r}"
    return None


def create_directory(path: Path) -> MutationResult:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError:
        return MutationResult.failed(f"Not a directory: {path.name}", path)
    except OSError as exc:
        logger.info("mkdir %s failed: %s", path, exc)
        return MutationResult.failed(f"Cannot create {path.name}: {exc.strerror or exc}", path)
    logger.info("created directory %s", path)
    return MutationResult.success(path)


def note_path_for(directory: Path, name: str) -> Path:
    return directory / f"{name}{NOTE_SUFFIX}"


def create_note(directory: Path, name: str, heading: str = DEFAULT_NOTE_HEADING) -> MutationResult:
    """Create ``<directory>/<name>.md`` seeded with ``heading``.

    An existing note is reported as a collision and left untouched.
    """
    target = note_path_for(directory, name)
    try:
        with target.open("x", encoding="utf-8") as handle:
            handle.write(heading)
    except FileExistsError:
        return MutationResult.failed(f"Note already exists: {target.name}", target)
    except OSError as exc:
        logger.info("create note %s failed: %s", target, exc)
        return MutationResult.failed(f"Cannot create {target.name}: {exc.strerror or exc}", target)
    logger.info("created note %s", target)
    return MutationResult.success(target)


def remove_path(path: Path) -> MutationResult:
    """Remove a directory tree or a single file."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        return MutationResult.failed(f"Already gone: {path.name}", path)
    except OSError as exc:
        logger.info("delete %s failed: %s", path, exc)
        return MutationResult.failed(f"Cannot delete {path.name}: {exc.strerror or exc}", path)
    logger.info("deleted %s", path)
    return MutationResult.success(path)


__all__ = [
    "is_hidden_name",
    "safe_mtime_ns",
    "list_directory_names",
    "list_notes",
    "validate_entry_name",
    "create_directory",
    "note_path_for",
    "create_note",
    "remove_path",
]
