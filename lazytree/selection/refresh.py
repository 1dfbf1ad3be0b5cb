"""Selection construction and re-anchoring onto newer trees."""

from __future__ import annotations

from ..file_tree.lookup import lookup_branch
from ..file_tree.paths import join_path, split_path
from ..file_tree.types import FileEntry, FileTree
from .types import SelectedEntry, Selection, selected_entry_for


def make_selection(tree: FileTree) -> Selection:
    """Select the first top-level entry of ``tree``, or nothing when empty."""
    if not tree.children:
        return Selection(tree, (), SelectedEntry())
    return Selection(tree, tree.children, selected_entry_for("", tree.children[0]))


def _root_shift(old_root: str | None, new_root: str | None) -> str:
    """Return the part of ``old_root`` that lies below ``new_root``.

    Rebasing only shortens roots, so the old root's extra segments are what
    root-relative selection paths need prepended.
    """
    if not old_root or new_root is None:
        return ""
    return join_path(split_path(old_root)[len(split_path(new_root)) :])


def refresh_selection(selection: Selection, new_tree: FileTree) -> Selection:
    """Re-anchor ``selection`` onto ``new_tree`` (typically after an insertion).

    The selected entry keeps its effective absolute location: when the new
    tree was rebased onto a shorter root, the stored root-relative path is
    prefixed with the removed root segments. A selected file that was
    re-inserted picks up its new handle.
    """
    selected = selection.selected
    if not new_tree.children or not selected.path:
        return make_selection(new_tree)

    shift = _root_shift(selection.tree.root, new_tree.root)
    siblings = lookup_branch(new_tree, f"{shift}{selected.branch_name}")
    handle = selected.handle
    if selected.is_file:
        for entry in siblings:
            if isinstance(entry, FileEntry) and entry.name == selected.leaf_name:
                handle = entry.handle
                break
    return Selection(
        new_tree,
        siblings,
        SelectedEntry(path=f"{shift}{selected.path}", handle=handle, kind=selected.kind),
    )


def selected_absolute_path(selection: Selection) -> str:
    """Return the absolute path of the selected entry, ``""`` when none."""
    if not selection.selected.path or selection.tree.root is None:
        return ""
    return f"{selection.tree.root}{selection.selected.path}"


__all__ = [
    "make_selection",
    "refresh_selection",
    "selected_absolute_path",
]
