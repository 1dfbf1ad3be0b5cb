"""Insertion of files into immutable file trees, with root rebasing."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .paths import common_segment_prefix, is_segment_prefix, join_path, parse_file_path, split_path
from .types import DirectoryEntry, FileEntry, FileTree, FileTreeEntry

logger = logging.getLogger(__name__)


def _merge_into_branch(
    branch: tuple[FileTreeEntry, ...],
    entries: Sequence[FileTreeEntry],
) -> tuple[FileTreeEntry, ...]:
    """Append ``entries`` to ``branch``.

    A file whose name already names a file in the branch replaces it in
    place, so re-inserting a path updates its handle instead of duplicating
    the entry. Directories are always appended.
    """
    merged = list(branch)
    for entry in entries:
        if isinstance(entry, FileEntry):
            existing_idx = next(
                (
                    idx
                    for idx, sibling in enumerate(merged)
                    if isinstance(sibling, FileEntry) and sibling.name == entry.name
                ),
                None,
            )
            if existing_idx is not None:
                merged[existing_idx] = entry
                continue
        merged.append(entry)
    return tuple(merged)


def _insert_into_branch(
    branch: tuple[FileTreeEntry, ...],
    segments: Sequence[str],
    entries: Sequence[FileTreeEntry],
) -> tuple[FileTreeEntry, ...]:
    """Return ``branch`` with ``entries`` added under the directory at ``segments``.

    Only directories match while descending; a file sharing the segment name
    is skipped and a same-named directory is appended beside it. Unchanged
    siblings are shared with the input branch.
    """
    if not segments:
        return _merge_into_branch(branch, entries)

    name = segments[0]
    for idx, child in enumerate(branch):
        if isinstance(child, DirectoryEntry) and child.name == name:
            updated = DirectoryEntry(name, _insert_into_branch(child.children, segments[1:], entries))
            return branch[:idx] + (updated,) + branch[idx + 1 :]
    return branch + (DirectoryEntry(name, _insert_into_branch((), segments[1:], entries)),)


def insert_in_file_tree(tree: FileTree, directory: str, entry: FileTreeEntry) -> FileTree:
    """Return a new tree with ``entry`` placed in the directory at ``directory``.

    ``directory`` is absolute. When it lies outside the current root the
    tree is rebased onto the longest common ancestor: the inserted entry's
    chain comes first and the previous contents follow under the old root's
    relative path.
    """
    if tree.root is None:
        return FileTree(directory, (entry,))

    root_segments = split_path(tree.root)
    directory_segments = split_path(directory)
    if is_segment_prefix(root_segments, directory_segments):
        return FileTree(
            tree.root,
            _insert_into_branch(tree.children, directory_segments[len(root_segments) :], (entry,)),
        )

    common = common_segment_prefix(root_segments, directory_segments)
    new_root = join_path(common)
    logger.debug("Rebasing file tree from %r to %r for %r", tree.root, new_root, directory)
    inserted_branch = _insert_into_branch((), directory_segments[len(common) :], (entry,))
    return FileTree(
        new_root,
        _insert_into_branch(inserted_branch, root_segments[len(common) :], tree.children),
    )


def insert_file(tree: FileTree, file_path: str, handle: object = None) -> FileTree:
    """Insert a file by its absolute path, attaching ``handle`` to it."""
    directory, name = parse_file_path(file_path)
    return insert_in_file_tree(tree, directory, FileEntry(name, handle))


__all__ = [
    "insert_in_file_tree",
    "insert_file",
]
