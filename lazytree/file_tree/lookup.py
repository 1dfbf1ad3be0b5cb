"""Branch lookup and in-branch neighbor search."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .paths import split_path
from .types import DirectoryEntry, FileTree, FileTreeEntry, entry_name


@dataclass(frozen=True)
class Found:
    entry: FileTreeEntry


@dataclass(frozen=True)
class NotFound:
    name: str


LookupResult = Found | NotFound


def lookup_branch(tree: FileTree, path: str) -> tuple[FileTreeEntry, ...]:
    """Return the children of the directory at root-relative ``path``.

    ``tree.root`` is ignored: ``path`` is resolved from ``tree.children``.
    Returns an empty tuple when any segment does not name a directory.
    """
    branch = tree.children
    for segment in split_path(path):
        directory = next(
            (child for child in branch if isinstance(child, DirectoryEntry) and child.name == segment),
            None,
        )
        if directory is None:
            return ()
        branch = directory.children
    return branch


def lookup_next_in_branch(branch: Sequence[FileTreeEntry], name: str) -> LookupResult:
    """Return the entry after ``name``, or the entry itself when it is last."""
    for idx, entry in enumerate(branch):
        if entry_name(entry) == name:
            return Found(branch[idx + 1] if idx + 1 < len(branch) else entry)
    return NotFound(name)


def lookup_previous_in_branch(branch: Sequence[FileTreeEntry], name: str) -> LookupResult:
    """Return the entry before ``name``, or the entry itself when it is first."""
    for idx, entry in enumerate(branch):
        if entry_name(entry) == name:
            return Found(branch[idx - 1] if idx > 0 else entry)
    return NotFound(name)


__all__ = [
    "Found",
    "NotFound",
    "LookupResult",
    "lookup_branch",
    "lookup_next_in_branch",
    "lookup_previous_in_branch",
]
