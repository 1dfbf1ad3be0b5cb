"""Row formatting for file trees and selection listings."""

from __future__ import annotations

from .file_tree.types import DirectoryEntry, FileTree, FileTreeEntry
from .selection.types import Selection
from .ui_theme import DEFAULT_THEME, UITheme

PYTHON_SUFFIXES = (".py", ".pyi", ".pyw")


def file_color_for(name: str, theme: UITheme | None = None) -> str:
    """Return ANSI color used for file names based on suffix."""
    active_theme = theme or DEFAULT_THEME
    if name.lower().endswith(PYTHON_SUFFIXES):
        return active_theme.tree_file_python
    return active_theme.tree_file_default


def format_entry(entry: FileTreeEntry, depth: int, selected: bool, theme: UITheme | None = None) -> str:
    """Render one entry row; depth 1 is a top-level entry."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if isinstance(entry, DirectoryEntry):
        indent = "  " * depth
        marker = f"{active_theme.tree_marker}▾ {reset}"
        label = f"{active_theme.tree_dir}{entry.name}/{reset}"
    else:
        # Align file names under the parent directory arrow column.
        indent = "  " * max(0, depth - 1)
        marker = "  "
        label = f"{file_color_for(entry.name, active_theme)}{entry.name}{reset}"
    row = f"{indent}{marker}{label}"
    if selected:
        return f"{active_theme.reverse}{row}{reset}"
    return row


def _root_label(root: str | None) -> str:
    if root is None:
        return "(empty)"
    return root or "/"


def format_tree_lines(
    tree: FileTree,
    selection: Selection | None = None,
    theme: UITheme | None = None,
) -> list[str]:
    """Render ``tree`` depth-first, highlighting the selected entry's row."""
    active_theme = theme or DEFAULT_THEME
    lines = [f"{active_theme.header}{_root_label(tree.root)}{active_theme.reset}"]
    selected = selection.selected if selection is not None else None

    def visit(branch: tuple[FileTreeEntry, ...], branch_name: str, depth: int) -> None:
        for entry in branch:
            path = f"{branch_name}/{entry.name}"
            is_dir = isinstance(entry, DirectoryEntry)
            is_selected = (
                selected is not None
                and selected.path == path
                and selected.is_directory == is_dir
            )
            lines.append(format_entry(entry, depth, is_selected, active_theme))
            if is_dir:
                visit(entry.children, path, depth + 1)

    visit(tree.children, "", 1)
    return lines


def format_selection_lines(selection: Selection, theme: UITheme | None = None) -> list[str]:
    """Render the selection's current directory listing with a header row."""
    active_theme = theme or DEFAULT_THEME
    root = selection.tree.root
    directory = f"{root}{selection.selected.branch_name}" if root is not None else None
    lines = [f"{active_theme.header}{_root_label(directory)}{active_theme.reset}"]
    leaf_name = selection.selected.leaf_name
    highlighted = False
    for entry in selection.siblings:
        is_selected = (
            not highlighted
            and entry.name == leaf_name
            and isinstance(entry, DirectoryEntry) == selection.selected.is_directory
        )
        highlighted = highlighted or is_selected
        lines.append(format_entry(entry, 1, is_selected, active_theme))
    return lines


__all__ = [
    "PYTHON_SUFFIXES",
    "file_color_for",
    "format_entry",
    "format_tree_lines",
    "format_selection_lines",
]
