"""Domain model for path-keyed file trees.

This package contains non-UI tree primitives:
- file/directory entry datatypes with nested children
- ``/``-path helpers
- insertion with root rebasing, branch lookup, neighbor search
- filesystem walk helpers that feed insertion
"""

from __future__ import annotations

from .fs import DirectoryChild, build_file_tree, collect_file_paths, list_directory_children
from .insert import insert_file, insert_in_file_tree
from .lookup import (
    Found,
    LookupResult,
    NotFound,
    lookup_branch,
    lookup_next_in_branch,
    lookup_previous_in_branch,
)
from .paths import (
    common_segment_prefix,
    is_absolute_path,
    is_segment_prefix,
    join_path,
    parse_file_path,
    split_path,
)
from .types import DirectoryEntry, FileEntry, FileTree, FileTreeEntry, entry_name

__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "FileTree",
    "FileTreeEntry",
    "entry_name",
    "parse_file_path",
    "split_path",
    "join_path",
    "common_segment_prefix",
    "is_segment_prefix",
    "is_absolute_path",
    "insert_in_file_tree",
    "insert_file",
    "Found",
    "NotFound",
    "LookupResult",
    "lookup_branch",
    "lookup_next_in_branch",
    "lookup_previous_in_branch",
    "DirectoryChild",
    "list_directory_children",
    "collect_file_paths",
    "build_file_tree",
]
