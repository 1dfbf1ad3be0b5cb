"""Tests for key dispatch and the interactive browser loop."""

from __future__ import annotations

import unittest
from unittest import mock

from lazytree.file_tree import FileTree, insert_file
from lazytree.runtime.browser import apply_key, apply_keys, browser_lines, run_browser
from lazytree.selection import SelectedEntry, make_selection
from lazytree.ui_theme import PLAIN_THEME


def _selection():
    tree = insert_file(FileTree(), "/root/fileA.ext", 0)
    tree = insert_file(tree, "/root/DIR/fileB.ext", 1)
    return make_selection(tree)


class _FakeTerminal:
    def __init__(self) -> None:
        self.stdin_fd = 0
        self.frames: list[list[str]] = []
        self.entered = 0
        self.exited = 0

    def draw(self, lines: list[str]) -> None:
        self.frames.append(lines)

    def raw_mode(self):
        terminal = self

        class _Context:
            def __enter__(self):
                terminal.entered += 1

            def __exit__(self, *exc_info):
                terminal.exited += 1
                return False

        return _Context()


class ApplyKeyTests(unittest.TestCase):
    def test_vi_and_arrow_keys_map_to_transitions(self) -> None:
        selection = _selection()
        for key in ("j", "DOWN"):
            self.assertEqual(apply_key(selection, key).selected.path, "/DIR")
        directory = apply_key(selection, "j")
        for key in ("l", "RIGHT", "ENTER"):
            self.assertEqual(apply_key(directory, key).selected.path, "/DIR/fileB.ext")
        inside = apply_key(directory, "l")
        for key in ("h", "LEFT", "BACKSPACE"):
            self.assertEqual(apply_key(inside, key).selected.path, "/fileA.ext")
        for key in ("k", "UP"):
            self.assertEqual(apply_key(directory, key).selected.path, "/fileA.ext")

    def test_quit_keys_return_none(self) -> None:
        for key in ("q", "ESC", "CTRL_C"):
            self.assertIsNone(apply_key(_selection(), key))

    def test_unbound_key_keeps_selection(self) -> None:
        selection = _selection()
        self.assertIs(apply_key(selection, "x"), selection)

    def test_apply_keys_folds_and_stops_at_quit(self) -> None:
        selection = apply_keys(_selection(), ["j", "l", "q", "h"])
        self.assertEqual(selection.selected, SelectedEntry("/DIR/fileB.ext", 1, "file"))


class RunBrowserTests(unittest.TestCase):
    def test_run_browser_draws_each_state_and_returns_final_selection(self) -> None:
        terminal = _FakeTerminal()
        keys = iter(["j", "l", "q"])

        final = run_browser(_selection(), PLAIN_THEME, terminal=terminal, read_key=lambda _fd: next(keys))

        self.assertEqual(final.selected.path, "/DIR/fileB.ext")
        self.assertEqual(len(terminal.frames), 3)
        self.assertEqual(terminal.frames[-1][0], "/root/DIR")
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_run_browser_stops_at_end_of_input(self) -> None:
        terminal = _FakeTerminal()
        keys = iter(["j", ""])

        final = run_browser(_selection(), PLAIN_THEME, terminal=terminal, read_key=lambda _fd: next(keys))

        self.assertEqual(final.selected.path, "/DIR")

    def test_run_browser_uses_real_terminal_by_default(self) -> None:
        with mock.patch("lazytree.runtime.browser.TerminalController") as controller_cls, mock.patch(
            "lazytree.runtime.browser.sys"
        ) as sys_mock:
            sys_mock.stdin.fileno.return_value = 5
            sys_mock.stdout.fileno.return_value = 6
            controller = controller_cls.return_value
            controller.stdin_fd = 5
            run_browser(_selection(), PLAIN_THEME, read_key=lambda _fd: "q")

        controller_cls.assert_called_once_with(5, 6)
        controller.raw_mode.assert_called_once()
        controller.draw.assert_called_once()

    def test_browser_lines_end_with_status_row(self) -> None:
        lines = browser_lines(_selection(), PLAIN_THEME)

        self.assertEqual(lines[0], "/root")
        self.assertEqual(lines[-2], "")
        self.assertTrue(lines[-1].startswith("/root/fileA.ext"))


if __name__ == "__main__":
    unittest.main()
