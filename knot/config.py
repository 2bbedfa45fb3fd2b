"""Persistent JSON config helpers.

Stores the vault location, editor command, theme, layout, and the category
that was selected on quit. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "knot"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_VAULT_ROOT = Path.home() / ".knot_vault"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write errors are logged and otherwise ignored so a read-only config
    directory never stops the browser.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("cannot write config %s: %s", CONFIG_PATH, exc)


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_vault_root() -> Path:
    """Return the configured vault directory, defaulting to ``~/.knot_vault``."""
    raw = _load_string("vault_root")
    if raw is None:
        return DEFAULT_VAULT_ROOT
    return Path(raw).expanduser()


def load_editor() -> str | None:
    return _load_string("editor")


def load_theme_name() -> str | None:
    return _load_string("theme")


def load_style() -> str | None:
    """Load the Pygments style used for note previews."""
    return _load_string("style")


def load_with_subfolders() -> bool:
    """Return whether the three-pane layout (with subfolders) is enabled.

    Only explicit booleans are accepted; anything else means ``True``.
    """
    value = load_config().get("with_subfolders")
    return value if isinstance(value, bool) else True


def load_last_category() -> str | None:
    return _load_string("last_category")


def save_last_category(name: str) -> None:
    _save_value("last_category", name)
