"""Filesystem scanning that feeds file trees from a directory walk."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from .insert import insert_file
from .types import FileTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child observed during a scan."""

    name: str
    path: Path
    is_dir: bool


def list_directory_children(
    directory: Path,
    show_hidden: bool,
) -> tuple[list[DirectoryChild], Exception | None]:
    """List visible children, directories first, each group sorted by name.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    except (PermissionError, OSError) as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return children, None


def collect_file_paths(root: Path, show_hidden: bool = False) -> list[str]:
    """Return absolute paths of every visible file under ``root``.

    Directories are implied by the files they contain, so empty directories
    do not appear. Symlinked directories are listed as files, not followed.
    """
    root = root.resolve()
    paths: list[str] = []

    def walk(directory: Path) -> None:
        children, scan_error = list_directory_children(directory, show_hidden)
        if scan_error is not None:
            logger.debug("Skipping unreadable directory %s: %s", directory, scan_error)
            return
        for child in children:
            if child.is_dir:
                walk(child.path)
            else:
                paths.append(str(child.path))

    walk(root)
    return paths


def build_file_tree(
    paths: Iterable[str],
    handle_for: Callable[[str], object] | None = None,
    tree: FileTree | None = None,
) -> FileTree:
    """Insert every path into ``tree`` (empty by default).

    The handle attached to each file defaults to its absolute path.
    """
    result = tree if tree is not None else FileTree()
    for path in paths:
        handle = handle_for(path) if handle_for is not None else path
        result = insert_file(result, path, handle)
    return result


__all__ = [
    "DirectoryChild",
    "list_directory_children",
    "collect_file_paths",
    "build_file_tree",
]
