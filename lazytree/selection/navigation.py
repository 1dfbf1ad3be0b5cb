"""Cursor transitions: sibling moves and directory descend/ascend.

Every transition is total. A missing neighbor or an empty target branch
leaves the selection where it is instead of failing.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..file_tree.lookup import (
    LookupResult,
    NotFound,
    lookup_branch,
    lookup_next_in_branch,
    lookup_previous_in_branch,
)
from ..file_tree.types import FileTreeEntry
from .types import Selection, selected_entry_for


def _select_in_branch(
    selection: Selection,
    search: Callable[[Sequence[FileTreeEntry], str], LookupResult],
) -> Selection:
    result = search(selection.siblings, selection.selected.leaf_name)
    if isinstance(result, NotFound):
        return selection
    return Selection(
        selection.tree,
        selection.siblings,
        selected_entry_for(selection.selected.branch_name, result.entry),
    )


def _select_first_in_branch(selection: Selection, branch_name: str) -> Selection:
    branch = lookup_branch(selection.tree, branch_name)
    if not branch:
        return selection
    return Selection(selection.tree, branch, selected_entry_for(branch_name, branch[0]))


def select_next(selection: Selection) -> Selection:
    """Select the following sibling; the last sibling stays selected."""
    return _select_in_branch(selection, lookup_next_in_branch)


def select_previous(selection: Selection) -> Selection:
    """Select the preceding sibling; the first sibling stays selected."""
    return _select_in_branch(selection, lookup_previous_in_branch)


def visit_child_branch(selection: Selection) -> Selection:
    """Descend into the selected directory and select its first entry.

    Selections on files are returned unchanged.
    """
    if not selection.selected.is_directory:
        return selection
    return _select_first_in_branch(selection, selection.selected.path)


def visit_parent_branch(selection: Selection) -> Selection:
    """Ascend one directory and select the first entry there.

    The first entry of the parent directory is selected, not necessarily the
    directory just left. At top level this re-selects the first top-level
    entry.
    """
    branch_name = selection.selected.branch_name
    parent_branch_name = branch_name.rpartition("/")[0] if branch_name else ""
    return _select_first_in_branch(selection, parent_branch_name)


__all__ = [
    "select_next",
    "select_previous",
    "visit_child_branch",
    "visit_parent_branch",
]
