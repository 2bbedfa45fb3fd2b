"""Keyboard dispatch for normal, text-input, and delete-confirmation modes.

Key tokens come from ``knot.input.read_key``. Vault-state changes go straight
to ``VaultState``; anything needing the terminal (editor, sync, help) is a
callback supplied by the runtime loop.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .key_registry import KeyComboBinding, KeyComboRegistry
from .vault import CreateKind, Focus, InteractionMode, VaultState

QUIT_KEYS = frozenset({"q", "CTRL_C"})
CONFIRM_KEY = "y"


@dataclass(frozen=True)
class KeyContext:
    """State and bound operations required for key handling."""

    state: VaultState
    open_editor: Callable[[], None]
    run_sync: Callable[[], None]
    toggle_help: Callable[[], None]


def build_normal_registry(context: KeyContext) -> KeyComboRegistry:
    state = context.state

    def activate() -> None:
        if state.focus == Focus.FILES:
            if state.selected_note is not None:
                context.open_editor()
            return
        state.cycle_focus(1)

    def clear_filter() -> None:
        if state.filter_query:
            state.set_filter("")

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("TAB",), lambda: state.cycle_focus(1)),
        KeyComboBinding(("SHIFT_TAB",), lambda: state.cycle_focus(-1)),
        KeyComboBinding(("h", "LEFT"), lambda: state.cycle_category(-1)),
        KeyComboBinding(("l", "RIGHT"), lambda: state.cycle_category(1)),
        KeyComboBinding(("j", "DOWN"), lambda: state.move_selection(1)),
        KeyComboBinding(("k", "UP"), lambda: state.move_selection(-1)),
        KeyComboBinding(("BACKSPACE",), state.clear_subfolder),
        KeyComboBinding(("/",), state.begin_search),
        KeyComboBinding(("C",), lambda: state.begin_create(CreateKind.CATEGORY)),
        KeyComboBinding(("F",), lambda: state.begin_create(CreateKind.SUBFOLDER)),
        KeyComboBinding(("N",), lambda: state.begin_create(CreateKind.NOTE)),
        KeyComboBinding(("D",), state.begin_delete),
        KeyComboBinding(("ENTER",), activate),
        KeyComboBinding(("S",), context.run_sync),
        KeyComboBinding(("r",), state.refresh),
        KeyComboBinding(("?",), context.toggle_help),
        KeyComboBinding(("ESC",), clear_filter),
    )


def handle_normal_key(key: str, context: KeyContext) -> bool:
    """Handle one normal-mode key and return ``True`` when the app should quit."""
    if key in QUIT_KEYS:
        return True
    context.state.clear_status()
    build_normal_registry(context).dispatch(key)
    return False


def handle_text_input_key(key: str, state: VaultState) -> None:
    """Edit the prompt buffer for create/search modes."""
    if key == "ENTER":
        if state.mode == InteractionMode.SEARCHING:
            state.commit_search()
        else:
            state.commit_create()
        return
    if key in {"ESC", "CTRL_C"}:
        state.cancel()
        return
    if key == "BACKSPACE":
        state.backspace()
        return
    if key == "CTRL_U":
        state.clear_input()
        return
    if len(key) == 1 and key.isprintable():
        state.append_input(key)


def handle_confirm_key(key: str, state: VaultState) -> None:
    state.confirm_delete(key == CONFIRM_KEY)


def handle_key(key: str, context: KeyContext) -> bool:
    """Route ``key`` by interaction mode; ``True`` means quit."""
    if not key:
        return False
    state = context.state
    if state.mode == InteractionMode.NORMAL:
        return handle_normal_key(key, context)
    if state.mode == InteractionMode.CONFIRMING_DELETE:
        handle_confirm_key(key, state)
        return False
    handle_text_input_key(key, state)
    return False
