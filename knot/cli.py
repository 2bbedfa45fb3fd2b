"""Command-line front door for knot.

Parses CLI options, merges them over the persisted config, prepares the vault
directory, then runs the TUI, a plain listing, or a one-shot git sync.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .app import AppOptions, build_state, print_listing, run_app
from .config import (
    load_editor,
    load_last_category,
    load_style,
    load_theme_name,
    load_vault_root,
    load_with_subfolders,
)
from .highlight import DEFAULT_STYLE
from .sync import ensure_git_repo, sync_vault
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: str | None, verbose: bool = False) -> logging.Handler | None:
    """Send ``knot`` logs to ``log_file``; stdout belongs to the TUI."""
    if not log_file:
        return None
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("knot")
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.addHandler(handler)
    return handler


def _stdin_is_tty() -> bool:
    try:
        return os.isatty(sys.stdin.fileno())
    except (OSError, ValueError):
        return False


def resolve_vault_root(raw: str | None) -> Path:
    """Pick the vault directory and make sure it exists.

    Raises ``SystemExit`` when the path names a regular file or cannot be
    created.
    """
    vault_root = Path(raw).expanduser() if raw else load_vault_root()
    if vault_root.exists() and not vault_root.is_dir():
        raise SystemExit(f"Vault path is not a directory: {vault_root}")
    try:
        vault_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SystemExit(f"Cannot create vault directory {vault_root}: {exc.strerror or exc}") from exc
    return vault_root


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knot",
        description="Browse, create, edit, and git-sync markdown notes in a terminal.",
    )
    parser.add_argument("vault", nargs="?", default=None, help="Vault directory (default: ~/.knot_vault or config).")
    parser.add_argument("--style", default=None, help="Pygments style name for note previews.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--editor", default=None, help="Editor command (default: $VISUAL, $EDITOR, then hx).")
    parser.add_argument("--flat", action="store_true", help="Two-pane layout without subfolders.")
    parser.add_argument("--list", action="store_true", help="Print the vault tree and exit.")
    parser.add_argument("--sync", action="store_true", help="Run git add/commit/push in the vault and exit.")
    parser.add_argument("--no-git-init", action="store_true", help="Do not create a git repository in the vault.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Append debug/info logs to PATH.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level (needs --log-file).")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch knot.

    ``argv`` is primarily for tests; ``None`` reads ``sys.argv``.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    vault_root = resolve_vault_root(args.vault)
    if not args.no_git_init:
        error = ensure_git_repo(vault_root)
        if error is not None:
            logger.warning("%s", error)

    options = AppOptions(
        vault_root=vault_root,
        style=args.style or load_style() or DEFAULT_STYLE,
        theme=args.theme or load_theme_name(),
        no_color=args.no_color,
        editor=args.editor or load_editor(),
        with_subfolders=False if args.flat else load_with_subfolders(),
        initial_category=load_last_category(),
    )

    if args.sync:
        report = sync_vault(vault_root)
        sys.stdout.write(f"{report.summary()}\n")
        raise SystemExit(0 if report.ok else 1)

    if args.list or not _stdin_is_tty():
        print_listing(build_state(options))
        return

    run_app(options)


if __name__ == "__main__":
    main()
