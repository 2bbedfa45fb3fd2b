"""Git synchronization for the vault directory.

Sync is three blocking foreground steps: stage everything, commit with a
timestamped message, push to the configured remote. Output goes straight to
the user's terminal; only exit statuses are inspected. There is no retry.
"""

from __future__ import annotations

import contextlib
import logging
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

SYNC_MESSAGE_PREFIX = "Manual Sync"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class SyncStep:
    """Exit status of one git invocation; ``returncode`` is ``None`` if it never ran."""

    name: str
    args: tuple[str, ...]
    returncode: int | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class SyncReport:
    timestamp: str
    steps: tuple[SyncStep, ...]

    @property
    def ok(self) -> bool:
        # A commit with nothing to commit exits non-zero; the push decides.
        return bool(self.steps) and self.steps[-1].name == "push" and self.steps[-1].ok

    def summary(self) -> str:
        if self.ok:
            return f"Sync successful ({self.timestamp})"
        for step in reversed(self.steps):
            if step.error is not None:
                return f"Sync failed: {step.error}"
        return "Sync failed. Check your network or remote settings."


def format_timestamp(now: datetime | None = None) -> str:
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def sync_commands(timestamp: str) -> list[tuple[str, list[str]]]:
    return [
        ("add", ["git", "add", "."]),
        ("commit", ["git", "commit", "-m", f"{SYNC_MESSAGE_PREFIX}: {timestamp}"]),
        ("push", ["git", "push"]),
    ]


def _run_step(
    name: str,
    args: list[str],
    root: Path,
    runner: Callable[..., subprocess.CompletedProcess],
) -> SyncStep:
    try:
        proc = runner(args, cwd=root, check=False)
    except OSError as exc:
        logger.warning("git %s could not run: %s", name, exc)
        return SyncStep(name, tuple(args), None, f"cannot run {args[0]}: {exc.strerror or exc}")
    logger.info("git %s exited with %s", name, proc.returncode)
    return SyncStep(name, tuple(args), proc.returncode)


def sync_vault(
    root: Path,
    now: datetime | None = None,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> SyncReport:
    """Run add, commit, push in ``root`` and report each exit status."""
    timestamp = format_timestamp(now)
    steps: list[SyncStep] = []
    for name, args in sync_commands(timestamp):
        step = _run_step(name, args, root, runner)
        steps.append(step)
        if step.returncode is None:
            break
    return SyncReport(timestamp=timestamp, steps=tuple(steps))


def ensure_git_repo(root: Path) -> str | None:
    """Initialize a git repository in ``root`` unless one already exists."""
    if (root / ".git").exists():
        return None
    try:
        proc = subprocess.run(
            ["git", "init", "--quiet"],
            cwd=root,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        return f"git init failed: {exc.strerror or exc}"
    if proc.returncode != 0:
        return f"git init exited with status {proc.returncode}"
    logger.info("initialized git repository in %s", root)
    return None


def run_interactive_sync(
    root: Path,
    suspend: Callable[[], contextlib.AbstractContextManager],
    *,
    out: TextIO | None = None,
    wait_for_enter: Callable[[], object] | None = None,
) -> SyncReport:
    """Suspend the TUI, run the sync with visible output, and wait for Enter."""
    stream = out if out is not None else sys.stdout
    wait = wait_for_enter if wait_for_enter is not None else sys.stdin.readline
    with suspend():
        stream.write("\n--- STARTING GIT SYNC ---\n")
        stream.flush()
        report = sync_vault(root)
        stream.write(f"\n{report.summary()}\n")
        stream.write("\nPress [ENTER] to return to knot...")
        stream.flush()
        wait()
    return report
