"""Navigable cursor over file trees.

A ``Selection`` is a plain value: every transition returns a new selection
and never mutates the tree it points into.
"""

from __future__ import annotations

from .navigation import select_next, select_previous, visit_child_branch, visit_parent_branch
from .refresh import make_selection, refresh_selection, selected_absolute_path
from .types import EntryKind, SelectedEntry, Selection, selected_entry_for

__all__ = [
    "EntryKind",
    "SelectedEntry",
    "Selection",
    "selected_entry_for",
    "make_selection",
    "refresh_selection",
    "selected_absolute_path",
    "select_next",
    "select_previous",
    "visit_child_branch",
    "visit_parent_branch",
]
