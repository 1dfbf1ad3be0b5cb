"""Selection datatypes: the selected-entry descriptor and the cursor value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..file_tree.types import DirectoryEntry, FileTree, FileTreeEntry

EntryKind = Literal["file", "directory"]


@dataclass(frozen=True)
class SelectedEntry:
    """Where a selection points, independent of any tree instance.

    ``path`` is relative to the tree root and includes the entry name
    (``/DIR/file.ext``); it is ``""`` when nothing is selected.
    """

    path: str = ""
    handle: object = None
    kind: EntryKind = "file"

    @property
    def leaf_name(self) -> str:
        return self.path.rpartition("/")[2]

    @property
    def branch_name(self) -> str:
        """Path of the directory containing the entry, ``""`` at top level."""
        return self.path.rpartition("/")[0]

    @property
    def is_file(self) -> bool:
        return self.kind == "file"

    @property
    def is_directory(self) -> bool:
        return self.kind == "directory"


def selected_entry_for(branch_name: str, entry: FileTreeEntry) -> SelectedEntry:
    """Describe ``entry`` found in the branch at ``branch_name``."""
    path = f"{branch_name}/{entry.name}"
    if isinstance(entry, DirectoryEntry):
        return SelectedEntry(path=path, handle=None, kind="directory")
    return SelectedEntry(path=path, handle=entry.handle, kind="file")


@dataclass(frozen=True)
class Selection:
    """Cursor over a file tree: the selected entry plus its sibling branch."""

    tree: FileTree
    siblings: tuple[FileTreeEntry, ...] = ()
    selected: SelectedEntry = field(default_factory=SelectedEntry)


__all__ = [
    "EntryKind",
    "SelectedEntry",
    "Selection",
    "selected_entry_for",
]
