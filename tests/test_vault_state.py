"""Behavior tests for ``VaultState`` navigation, filtering, and mutations.

Each test builds a throwaway vault on disk and drives the state the way the
key handlers do, then checks lists, cursors, and the filesystem.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from knot.vault import (
    DEFAULT_NOTE_HEADING,
    ROOT_CATEGORY,
    CreateKind,
    Focus,
    InteractionMode,
    VaultState,
)


def _write(path: Path, text: str = "", mtime: float | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def _tree(root: Path) -> list[tuple[str, str | None]]:
    entries: list[tuple[str, str | None]] = []
    for path in sorted(root.rglob("*")):
        rel = str(path.relative_to(root))
        entries.append((rel, path.read_text(encoding="utf-8") if path.is_file() else None))
    return entries


class VaultStateTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def select_category(self, state: VaultState, name: str) -> None:
        while state.selected_category != name:
            self.assertTrue(state.cycle_category(1))


class CategoryListingTests(VaultStateTestCase):
    def test_root_is_first_and_unique(self) -> None:
        (self.root / "work").mkdir()
        (self.root / "personal").mkdir()
        (self.root / ROOT_CATEGORY).mkdir()
        (self.root / ".git").mkdir()
        _write(self.root / "loose.md")

        state = VaultState(self.root)

        self.assertEqual(state.categories, [ROOT_CATEGORY, "personal", "work"])
        self.assertEqual(state.category_idx, 0)
        self.assertEqual(state.category_path, self.root)

    def test_root_category_lists_notes_at_vault_root(self) -> None:
        _write(self.root / "inbox.md", mtime=100)
        _write(self.root / ".hidden.md", mtime=200)
        (self.root / "work").mkdir()

        state = VaultState(self.root)

        self.assertEqual([note.name for note in state.notes], ["inbox.md"])
        self.assertEqual(state.file_idx, 0)

    def test_initial_category_falls_back_to_root_when_missing(self) -> None:
        (self.root / "work").mkdir()

        self.assertEqual(VaultState(self.root, initial_category="work").selected_category, "work")
        self.assertEqual(VaultState(self.root, initial_category="gone").selected_category, ROOT_CATEGORY)

    def test_notes_sorted_newest_first_with_name_tiebreak(self) -> None:
        _write(self.root / "b.md", mtime=100)
        _write(self.root / "a.md", mtime=100)
        _write(self.root / "new.md", mtime=300)

        state = VaultState(self.root)

        self.assertEqual([note.name for note in state.notes], ["new.md", "a.md", "b.md"])


class RefreshInvariantTests(VaultStateTestCase):
    def assert_cursors_valid(self, state: VaultState) -> None:
        self.assertTrue(0 <= state.category_idx < len(state.categories))
        if state.subfolder_idx is not None:
            self.assertLess(state.subfolder_idx, len(state.subfolders))
        if state.notes:
            self.assertIsNotNone(state.file_idx)
            self.assertLess(state.file_idx, len(state.notes))
        else:
            self.assertIsNone(state.file_idx)

    def test_refresh_clamps_cursor_after_external_removal(self) -> None:
        for idx in range(4):
            _write(self.root / f"n{idx}.md", mtime=100 + idx)
        state = VaultState(self.root)
        state.set_focus(Focus.FILES)
        state.move_selection(-1)
        self.assertEqual(state.file_idx, 3)

        for idx in range(3):
            (self.root / f"n{idx}.md").unlink()
        state.refresh()

        self.assert_cursors_valid(state)
        self.assertEqual(state.file_idx, 0)

        (self.root / "n3.md").unlink()
        state.refresh()
        self.assert_cursors_valid(state)
        self.assertIsNone(state.selected_note)

    def test_refresh_falls_back_to_root_when_category_vanishes(self) -> None:
        (self.root / "work" / "deep").mkdir(parents=True)
        state = VaultState(self.root, initial_category="work")
        state.set_focus(Focus.SUBFOLDERS)
        state.move_selection(1)
        self.assertEqual(state.selected_subfolder, "deep")

        (self.root / "work" / "deep").rmdir()
        (self.root / "work").rmdir()
        state.refresh()

        self.assertEqual(state.selected_category, ROOT_CATEGORY)
        self.assertIsNone(state.subfolder_idx)
        self.assert_cursors_valid(state)

    def test_refresh_keeps_selected_note_by_path(self) -> None:
        _write(self.root / "a.md", mtime=100)
        _write(self.root / "b.md", mtime=200)
        state = VaultState(self.root)
        state.set_focus(Focus.FILES)
        state.move_selection(1)
        self.assertEqual(state.selected_note.name, "a.md")

        os.utime(self.root / "a.md", (300, 300))
        state.note_edited(self.root / "a.md")

        self.assertEqual(state.file_idx, 0)
        self.assertEqual(state.selected_note.name, "a.md")


class MoveSelectionTests(VaultStateTestCase):
    def test_note_cursor_wraps_at_both_ends(self) -> None:
        for idx, name in enumerate(("c", "b", "a")):
            _write(self.root / f"{name}.md", mtime=100 + idx)
        state = VaultState(self.root)
        state.set_focus(Focus.FILES)

        self.assertEqual(state.file_idx, 0)
        state.move_selection(-1)
        self.assertEqual(state.file_idx, 2)
        state.move_selection(1)
        self.assertEqual(state.file_idx, 0)
        for _ in range(7):
            state.move_selection(1)
            self.assertTrue(0 <= state.file_idx <= 2)
        self.assertEqual(state.file_idx, 1)

    def test_category_cursor_wraps_and_cascades(self) -> None:
        _write(self.root / "alpha" / "one.md")
        _write(self.root / "beta" / "two.md")
        state = VaultState(self.root)

        state.move_selection(-1)
        self.assertEqual(state.selected_category, "beta")
        self.assertEqual([note.name for note in state.notes], ["two.md"])

        state.move_selection(1)
        self.assertEqual(state.selected_category, ROOT_CATEGORY)
        self.assertEqual(state.notes, [])
        self.assertIsNone(state.file_idx)

    def test_empty_pane_ignores_moves(self) -> None:
        state = VaultState(self.root)
        state.set_focus(Focus.FILES)

        self.assertFalse(state.move_selection(1))
        self.assertFalse(state.move_selection(-1))
        self.assertIsNone(state.file_idx)
        self.assertFalse(state.cycle_category(1))

    def test_subfolder_cursor_starts_at_category_level(self) -> None:
        _write(self.root / "work" / "top.md")
        _write(self.root / "work" / "sub" / "deep.md")

        state = VaultState(self.root, initial_category="work")

        self.assertEqual(state.subfolders, ["sub"])
        self.assertIsNone(state.subfolder_idx)
        self.assertEqual(state.notes_dir, self.root / "work")
        self.assertEqual([note.name for note in state.notes], ["top.md"])

    def test_subfolder_selection_switches_note_listing(self) -> None:
        _write(self.root / "work" / "top.md")
        _write(self.root / "work" / "archive" / "old.md")
        _write(self.root / "work" / "drafts" / "idea.md")
        state = VaultState(self.root, initial_category="work")

        self.assertEqual(state.subfolders, ["archive", "drafts"])
        self.assertIsNone(state.subfolder_idx)
        self.assertEqual([note.name for note in state.notes], ["top.md"])

        state.set_focus(Focus.SUBFOLDERS)
        state.move_selection(-1)
        self.assertEqual(state.selected_subfolder, "drafts")
        self.assertEqual([note.name for note in state.notes], ["idea.md"])
        self.assertEqual(state.notes_dir, self.root / "work" / "drafts")

        self.assertTrue(state.clear_subfolder())
        self.assertIsNone(state.selected_subfolder)
        self.assertEqual([note.name for note in state.notes], ["top.md"])

    def test_navigation_is_ignored_outside_normal_mode(self) -> None:
        (self.root / "work").mkdir()
        state = VaultState(self.root)
        state.begin_create(CreateKind.NOTE)

        self.assertFalse(state.move_selection(1))
        self.assertFalse(state.cycle_category(1))
        self.assertFalse(state.cycle_focus())
        self.assertFalse(state.set_focus(Focus.FILES))
        self.assertFalse(state.begin_delete())
        self.assertEqual(state.selected_category, ROOT_CATEGORY)
        self.assertEqual(state.focus, Focus.CATEGORIES)


class FocusTests(VaultStateTestCase):
    def test_three_pane_focus_cycle(self) -> None:
        state = VaultState(self.root)
        seen = [state.focus]
        for _ in range(3):
            state.set_focus()
            seen.append(state.focus)
        self.assertEqual(seen, [Focus.CATEGORIES, Focus.SUBFOLDERS, Focus.FILES, Focus.CATEGORIES])

        state.cycle_focus(-1)
        self.assertEqual(state.focus, Focus.FILES)

    def test_two_pane_layout_skips_subfolders(self) -> None:
        (self.root / "work" / "sub").mkdir(parents=True)
        state = VaultState(self.root, with_subfolders=False, initial_category="work")

        self.assertEqual(state.subfolders, [])
        state.cycle_focus()
        self.assertEqual(state.focus, Focus.FILES)
        state.cycle_focus()
        self.assertEqual(state.focus, Focus.CATEGORIES)

        state.set_focus(Focus.SUBFOLDERS)
        self.assertEqual(state.focus, Focus.FILES)
        self.assertFalse(state.begin_create(CreateKind.SUBFOLDER))
        self.assertEqual(state.mode, InteractionMode.NORMAL)


class FilterTests(VaultStateTestCase):
    def test_filter_limits_categories_and_notes(self) -> None:
        for name in ("Alpha", "beta", "Graphs"):
            (self.root / name).mkdir()
        _write(self.root / "apple.md", mtime=100)
        _write(self.root / "Banana.md", mtime=200)
        _write(self.root / "PHONE.md", mtime=300)
        state = VaultState(self.root)
        before = state.snapshot()

        state.set_filter("pH")

        self.assertEqual(state.categories, [ROOT_CATEGORY, "Alpha", "Graphs"])
        self.assertEqual([note.name for note in state.notes], ["PHONE.md"])
        for name in state.categories[1:]:
            self.assertIn("ph", name.casefold())

        state.set_filter("")
        self.assertEqual(state.snapshot(), before)

    def test_clearing_filter_restores_hidden_category_selection(self) -> None:
        _write(self.root / "work" / "sub" / "deep.md", mtime=100)
        _write(self.root / "work" / "draft.md", mtime=100)
        _write(self.root / "loose.md", mtime=100)
        state = VaultState(self.root, initial_category="work")
        state.set_focus(Focus.SUBFOLDERS)
        state.move_selection(1)
        self.assertEqual(state.selected_subfolder, "sub")
        before = state.snapshot()

        state.set_filter("loose")
        self.assertEqual(state.categories, [ROOT_CATEGORY])
        self.assertEqual(state.selected_category, ROOT_CATEGORY)
        self.assertEqual([note.name for note in state.notes], ["loose.md"])

        state.set_filter("")
        self.assertEqual(state.snapshot(), before)

    def test_clearing_filter_restores_hidden_note_selection(self) -> None:
        _write(self.root / "work" / "draft.md", mtime=100)
        _write(self.root / "work" / "worklog.md", mtime=200)
        state = VaultState(self.root, initial_category="work")
        state.set_focus(Focus.FILES)
        state.move_selection(1)
        self.assertEqual(state.selected_note.name, "draft.md")
        before = state.snapshot()

        state.set_filter("wo")
        self.assertEqual(state.selected_note.name, "worklog.md")

        state.set_filter("")
        self.assertEqual(state.snapshot(), before)

    def test_cancelled_search_restores_category(self) -> None:
        _write(self.root / "work" / "draft.md")
        state = VaultState(self.root, initial_category="work")

        state.begin_search()
        state.append_input("dra")
        self.assertEqual(state.selected_category, ROOT_CATEGORY)
        state.cancel()

        self.assertEqual(state.selected_category, "work")
        self.assertEqual(state.selected_note.name, "draft.md")

    def test_moving_in_filtered_view_adopts_shown_category(self) -> None:
        _write(self.root / "work" / "draft.md")
        _write(self.root / "a.md", mtime=100)
        _write(self.root / "b.md", mtime=200)
        state = VaultState(self.root, initial_category="work")
        state.set_filter(".md")
        self.assertEqual(state.categories, [ROOT_CATEGORY])
        state.set_focus(Focus.FILES)

        state.move_selection(1)
        state.set_filter("")

        self.assertEqual(state.selected_category, ROOT_CATEGORY)
        self.assertEqual(state.selected_note.name, "a.md")

    def test_filter_does_not_keep_deleted_category(self) -> None:
        (self.root / "work").mkdir()
        state = VaultState(self.root, initial_category="work")
        state.set_filter("zzz")

        (self.root / "work").rmdir()
        state.set_filter("")

        self.assertEqual(state.selected_category, ROOT_CATEGORY)

    def test_subfolders_are_not_filtered(self) -> None:
        (self.root / "work" / "zzz").mkdir(parents=True)
        state = VaultState(self.root, initial_category="work")

        state.set_filter("wor")

        self.assertEqual(state.selected_category, "work")
        self.assertEqual(state.subfolders, ["zzz"])

    def test_search_edits_apply_live_and_cancel_restores(self) -> None:
        for name in ("work", "world", "home"):
            (self.root / name).mkdir()
        state = VaultState(self.root)
        state.set_filter("o")

        self.assertTrue(state.begin_search())
        self.assertEqual(state.input_buffer, "o")
        state.append_input("r")
        self.assertEqual(state.filter_query, "or")
        self.assertEqual(state.categories, [ROOT_CATEGORY, "work", "world"])
        state.append_input("l")
        self.assertEqual(state.categories, [ROOT_CATEGORY, "world"])
        state.backspace()
        self.assertEqual(state.filter_query, "or")

        state.cancel()
        self.assertEqual(state.mode, InteractionMode.NORMAL)
        self.assertEqual(state.filter_query, "o")
        self.assertEqual(state.categories, [ROOT_CATEGORY, "home", "work", "world"])

    def test_commit_search_keeps_filter(self) -> None:
        (self.root / "work").mkdir()
        (self.root / "home").mkdir()
        state = VaultState(self.root)

        state.begin_search()
        state.append_input("wo")
        state.commit_search()

        self.assertEqual(state.mode, InteractionMode.NORMAL)
        self.assertEqual(state.input_buffer, "")
        self.assertEqual(state.filter_query, "wo")
        self.assertEqual(state.categories, [ROOT_CATEGORY, "work"])

        state.begin_search()
        state.clear_input()
        self.assertEqual(state.filter_query, "")
        self.assertEqual(state.categories, [ROOT_CATEGORY, "home", "work"])


class CreateTests(VaultStateTestCase):
    def test_create_note_in_category_writes_default_heading(self) -> None:
        (self.root / "work").mkdir()
        state = VaultState(self.root, initial_category="work")

        self.assertTrue(state.begin_create(CreateKind.NOTE))
        for ch in "draft":
            state.append_input(ch)
        result = state.commit_create()

        target = self.root / "work" / "draft.md"
        self.assertTrue(result.ok)
        self.assertEqual(result.path, target)
        self.assertEqual(target.read_text(encoding="utf-8"), DEFAULT_NOTE_HEADING)
        self.assertIn("draft.md", [note.name for note in state.notes])
        self.assertEqual(state.mode, InteractionMode.NORMAL)
        self.assertEqual(state.status_message, "")

    def test_create_note_inside_selected_subfolder(self) -> None:
        (self.root / "work" / "drafts").mkdir(parents=True)
        state = VaultState(self.root, initial_category="work")
        state.set_focus(Focus.SUBFOLDERS)
        state.move_selection(1)

        state.begin_create(CreateKind.NOTE)
        result = state.commit_create("idea.md")

        self.assertTrue(result.ok)
        self.assertTrue((self.root / "work" / "drafts" / "idea.md").is_file())
        self.assertFalse((self.root / "work" / "drafts" / "idea.md.md").exists())

    def test_existing_note_is_not_overwritten(self) -> None:
        _write(self.root / "draft.md", "keep me")
        state = VaultState(self.root)

        state.begin_create(CreateKind.NOTE)
        result = state.commit_create("draft")

        self.assertFalse(result.ok)
        self.assertIn("already exists", result.reason)
        self.assertEqual(state.status_message, result.reason)
        self.assertEqual((self.root / "draft.md").read_text(encoding="utf-8"), "keep me")

    def test_create_category_selects_it(self) -> None:
        state = VaultState(self.root)

        state.begin_create(CreateKind.CATEGORY)
        result = state.commit_create("projects")

        self.assertTrue(result.ok)
        self.assertTrue((self.root / "projects").is_dir())
        self.assertEqual(state.selected_category, "projects")

    def test_create_category_under_filter_selects_it(self) -> None:
        (self.root / "work").mkdir()
        state = VaultState(self.root)
        state.set_filter("wo")

        state.begin_create(CreateKind.CATEGORY)
        result = state.commit_create("zeta")

        self.assertTrue(result.ok)
        self.assertEqual(state.filter_query, "")
        self.assertEqual(state.categories, [ROOT_CATEGORY, "work", "zeta"])
        self.assertEqual(state.selected_category, "zeta")

    def test_create_matching_category_keeps_filter(self) -> None:
        (self.root / "work").mkdir()
        state = VaultState(self.root)
        state.set_filter("wo")

        state.begin_create(CreateKind.CATEGORY)
        state.commit_create("worlds")

        self.assertEqual(state.filter_query, "wo")
        self.assertEqual(state.selected_category, "worlds")

    def test_create_subfolder_selects_it(self) -> None:
        (self.root / "work").mkdir()
        state = VaultState(self.root, initial_category="work")

        state.begin_create(CreateKind.SUBFOLDER)
        result = state.commit_create("meetings")

        self.assertTrue(result.ok)
        self.assertTrue((self.root / "work" / "meetings").is_dir())
        self.assertEqual(state.selected_subfolder, "meetings")

    def test_rejected_names_report_failure(self) -> None:
        state = VaultState(self.root)
        for kind, name in (
            (CreateKind.CATEGORY, "a/b"),
            (CreateKind.CATEGORY, ".."),
            (CreateKind.CATEGORY, ROOT_CATEGORY),
            (CreateKind.NOTE, ".secret"),
        ):
            state.begin_create(kind)
            result = state.commit_create(name)
            self.assertFalse(result.ok, name)
            self.assertTrue(state.status_message)
            self.assertEqual(state.mode, InteractionMode.NORMAL)
        self.assertEqual(list(self.root.iterdir()), [])

    def test_blank_name_is_silent_noop(self) -> None:
        state = VaultState(self.root)

        state.begin_create(CreateKind.CATEGORY)
        state.append_input("   ")
        result = state.commit_create()

        self.assertTrue(result.ok)
        self.assertIsNone(result.reason)
        self.assertIsNone(result.path)
        self.assertEqual(list(self.root.iterdir()), [])

    def test_commit_outside_create_mode_fails(self) -> None:
        state = VaultState(self.root)

        self.assertFalse(state.commit_create("x").ok)

    def test_cancel_create_has_no_effect(self) -> None:
        state = VaultState(self.root)

        state.begin_create(CreateKind.CATEGORY)
        state.append_input("nope")
        state.cancel()

        self.assertEqual(state.mode, InteractionMode.NORMAL)
        self.assertEqual(state.input_buffer, "")
        self.assertEqual(list(self.root.iterdir()), [])


class DeleteTests(VaultStateTestCase):
    def test_deleting_active_category_selects_root(self) -> None:
        _write(self.root / "work" / "deep" / "note.md")
        (self.root / "zeta").mkdir()
        state = VaultState(self.root, initial_category="work")

        self.assertTrue(state.begin_delete())
        result = state.confirm_delete(True)

        self.assertTrue(result.ok)
        self.assertFalse((self.root / "work").exists())
        self.assertEqual(state.selected_category, ROOT_CATEGORY)
        self.assertEqual(state.category_idx, 0)
        self.assertEqual(state.categories, [ROOT_CATEGORY, "zeta"])

    def test_root_cannot_be_deleted(self) -> None:
        _write(self.root / "note.md")
        state = VaultState(self.root)

        state.begin_delete()
        result = state.confirm_delete(True)

        self.assertFalse(result.ok)
        self.assertIn(ROOT_CATEGORY, result.reason)
        self.assertTrue((self.root / "note.md").exists())
        self.assertEqual(state.mode, InteractionMode.NORMAL)

    def test_delete_note_moves_cursor_to_neighbor(self) -> None:
        for idx in range(3):
            _write(self.root / f"n{idx}.md", mtime=100 + idx)
        state = VaultState(self.root)
        state.set_focus(Focus.FILES)
        state.move_selection(1)
        self.assertEqual(state.selected_note.name, "n1.md")

        state.begin_delete()
        result = state.confirm_delete(True)

        self.assertTrue(result.ok)
        self.assertFalse((self.root / "n1.md").exists())
        self.assertEqual([note.name for note in state.notes], ["n2.md", "n0.md"])
        self.assertEqual(state.selected_note.name, "n0.md")

    def test_delete_subfolder_returns_to_category_level(self) -> None:
        _write(self.root / "work" / "sub" / "x.md")
        _write(self.root / "work" / "top.md")
        state = VaultState(self.root, initial_category="work")
        state.set_focus(Focus.SUBFOLDERS)
        state.move_selection(1)

        state.begin_delete()
        self.assertTrue(state.confirm_delete(True).ok)

        self.assertFalse((self.root / "work" / "sub").exists())
        self.assertIsNone(state.selected_subfolder)
        self.assertEqual([note.name for note in state.notes], ["top.md"])

    def test_nothing_selected_reports_failure(self) -> None:
        (self.root / "work").mkdir()
        state = VaultState(self.root, initial_category="work")
        state.set_focus(Focus.FILES)

        state.begin_delete()
        result = state.confirm_delete(True)

        self.assertFalse(result.ok)
        self.assertEqual(result.reason, "Nothing selected to delete")

    def test_declined_delete_changes_nothing(self) -> None:
        _write(self.root / "work" / "a.md", "alpha", mtime=100)
        _write(self.root / "work" / "sub" / "b.md", "beta", mtime=200)
        state = VaultState(self.root, initial_category="work")
        before_tree = _tree(self.root)
        before = state.snapshot()

        for focus in (Focus.CATEGORIES, Focus.SUBFOLDERS, Focus.FILES):
            state.set_focus(focus)
            focused = state.snapshot()
            self.assertTrue(state.begin_delete())
            self.assertTrue(state.confirm_delete(False).ok)
            self.assertEqual(state.snapshot(), focused)

        state.set_focus(Focus.CATEGORIES)
        state.begin_delete()
        state.cancel()

        self.assertEqual(_tree(self.root), before_tree)
        self.assertEqual(state.snapshot(), before)

    def test_confirm_without_pending_delete_fails(self) -> None:
        state = VaultState(self.root)

        self.assertFalse(state.confirm_delete(True).ok)


class RoundTripTests(VaultStateTestCase):
    def test_create_then_delete_restores_listings(self) -> None:
        (self.root / "existing").mkdir()
        _write(self.root / "root-note.md")
        state = VaultState(self.root)
        before_categories = list(state.categories)
        before_notes = list(state.notes)

        state.begin_create(CreateKind.CATEGORY)
        self.assertTrue(state.commit_create("scratch").ok)
        self.assertEqual(state.selected_category, "scratch")

        state.begin_create(CreateKind.NOTE)
        self.assertTrue(state.commit_create("temp").ok)
        self.assertEqual([note.name for note in state.notes], ["temp.md"])

        state.set_focus(Focus.FILES)
        state.begin_delete()
        self.assertTrue(state.confirm_delete(True).ok)
        self.assertEqual(state.notes, [])

        state.set_focus(Focus.CATEGORIES)
        state.begin_delete()
        self.assertTrue(state.confirm_delete(True).ok)

        self.assertEqual(state.categories, before_categories)
        self.assertEqual(state.notes, before_notes)
        self.assertEqual(state.selected_category, ROOT_CATEGORY)


class StatsTests(VaultStateTestCase):
    def test_compute_stats_for_selected_note(self) -> None:
        _write(self.root / "note.md", " ".join(["word"] * 201))
        state = VaultState(self.root)

        stats = state.compute_stats()

        self.assertEqual(stats.word_count, 201)
        self.assertEqual(stats.read_minutes, 2)

    def test_compute_stats_without_selection_is_zero(self) -> None:
        state = VaultState(self.root)

        stats = state.compute_stats()

        self.assertEqual((stats.word_count, stats.read_minutes), (0, 0))


if __name__ == "__main__":
    unittest.main()
