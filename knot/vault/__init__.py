"""Vault navigation model.

This package contains the non-UI core:
- value types for notes, focus, interaction modes, and mutation outcomes
- filesystem listing/mutation helpers that never raise
- ``VaultState``, the owner of lists, cursors, filter, and mode
- immutable snapshots consumed by the renderer
"""

from __future__ import annotations

from .types import (
    DEFAULT_NOTE_HEADING,
    NOTE_SUFFIX,
    ROOT_CATEGORY,
    CreateKind,
    Focus,
    InteractionMode,
    MutationResult,
    NoteFile,
    NoteStats,
)
from .snapshot import VaultSnapshot
from .state import VaultState
from .stats import compute_stats

__all__ = [
    "DEFAULT_NOTE_HEADING",
    "NOTE_SUFFIX",
    "ROOT_CATEGORY",
    "CreateKind",
    "Focus",
    "InteractionMode",
    "MutationResult",
    "NoteFile",
    "NoteStats",
    "VaultSnapshot",
    "VaultState",
    "compute_stats",
]
