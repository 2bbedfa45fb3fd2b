"""Editor launch helper for external note edits.

Runs the configured editor in the foreground while the TUI is suspended.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "hx"


def resolve_editor_command(configured: str | None = None) -> list[str]:
    """Pick the editor command: config, then ``$VISUAL``, ``$EDITOR``, ``hx``."""
    for candidate in (configured, os.environ.get("VISUAL"), os.environ.get("EDITOR")):
        if candidate is None or not candidate.strip():
            continue
        try:
            cmd = shlex.split(candidate)
        except ValueError:
            continue
        if cmd:
            return cmd
    return [DEFAULT_EDITOR]


def launch_editor(
    target: Path,
    suspend: Callable[[], contextlib.AbstractContextManager],
    configured: str | None = None,
) -> str | None:
    cmd = resolve_editor_command(configured)
    logger.info("launching editor %s on %s", cmd[0], target)
    with suspend():
        try:
            proc = subprocess.run([*cmd, str(target)], check=False)
        except OSError as exc:
            return f"Failed to launch editor {cmd[0]!r}: {exc.strerror or exc}"
    if proc.returncode != 0:
        return f"Editor {cmd[0]!r} exited with status {proc.returncode}"
    return None
