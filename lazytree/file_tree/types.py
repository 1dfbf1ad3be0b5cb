"""Entry and tree datatypes for path-keyed file trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """Leaf entry mapping a file name to an opaque caller-owned handle."""

    name: str
    handle: object = None


@dataclass(frozen=True)
class DirectoryEntry:
    """Directory entry with children kept in first-insertion order."""

    name: str
    children: tuple["FileTreeEntry", ...] = ()


FileTreeEntry = DirectoryEntry | FileEntry


@dataclass(frozen=True)
class FileTree:
    """Immutable tree of entries sharing one common root directory path.

    ``root`` is ``None`` only for the empty tree. The filesystem root itself
    is spelled ``""`` so that ``root + "/" + name`` is always a valid path.
    """

    root: str | None = None
    children: tuple[FileTreeEntry, ...] = ()


def entry_name(entry: FileTreeEntry) -> str:
    """Return the name of a file or directory entry."""
    return entry.name


__all__ = [
    "FileEntry",
    "DirectoryEntry",
    "FileTreeEntry",
    "FileTree",
    "entry_name",
]
