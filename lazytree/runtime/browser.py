"""Keyboard-driven selection browser.

Maps key tokens onto selection transitions and runs the raw-mode loop that
redraws the current directory listing after every key.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable

from ..input import read_key as read_terminal_key
from ..render import format_selection_lines
from ..selection import (
    Selection,
    select_next,
    select_previous,
    selected_absolute_path,
    visit_child_branch,
    visit_parent_branch,
)
from ..terminal import TerminalController
from ..ui_theme import UITheme

logger = logging.getLogger(__name__)

KEY_ACTIONS: dict[str, Callable[[Selection], Selection]] = {
    "j": select_next,
    "DOWN": select_next,
    "k": select_previous,
    "UP": select_previous,
    "l": visit_child_branch,
    "RIGHT": visit_child_branch,
    "ENTER": visit_child_branch,
    "h": visit_parent_branch,
    "LEFT": visit_parent_branch,
    "BACKSPACE": visit_parent_branch,
}
QUIT_KEYS = frozenset({"q", "ESC", "CTRL_C"})
STATUS_HINT = "j/k move  l enter  h up  q quit"


def apply_key(selection: Selection, key: str) -> Selection | None:
    """Return the selection after ``key``; ``None`` means quit.

    Unbound keys leave the selection unchanged.
    """
    if key in QUIT_KEYS:
        return None
    action = KEY_ACTIONS.get(key)
    if action is None:
        return selection
    return action(selection)


def apply_keys(selection: Selection, keys: Iterable[str]) -> Selection:
    """Fold ``keys`` over ``selection``, stopping at the first quit key."""
    for key in keys:
        updated = apply_key(selection, key)
        if updated is None:
            break
        selection = updated
    return selection


def browser_lines(selection: Selection, theme: UITheme | None = None) -> list[str]:
    """Return the full screen: directory listing, blank row, status row."""
    lines = format_selection_lines(selection, theme)
    dim = theme.status_dim if theme is not None else ""
    reset = theme.reset if theme is not None else ""
    status = selected_absolute_path(selection) or "(nothing selected)"
    lines.append("")
    lines.append(f"{dim}{status}  [{STATUS_HINT}]{reset}")
    return lines


def run_browser(
    selection: Selection,
    theme: UITheme | None = None,
    *,
    terminal: TerminalController | None = None,
    read_key: Callable[[int], str] | None = None,
) -> Selection:
    """Run the interactive loop until a quit key or end of input.

    Returns the selection current when the loop ended.
    """
    controller = terminal or TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    next_key = read_key or read_terminal_key
    with controller.raw_mode():
        while True:
            controller.draw(browser_lines(selection, theme))
            key = next_key(controller.stdin_fd)
            if not key:
                break
            updated = apply_key(selection, key)
            if updated is None:
                break
            if updated != selection:
                logger.debug("Key %r moved selection to %r", key, updated.selected.path)
            selection = updated
    return selection


__all__ = [
    "KEY_ACTIONS",
    "QUIT_KEYS",
    "apply_key",
    "apply_keys",
    "browser_lines",
    "run_browser",
]
