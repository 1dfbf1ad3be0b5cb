"""String helpers for ``/``-delimited absolute paths.

Paths are handled as plain strings rather than ``pathlib`` objects: tree
roots may be the empty string (filesystem root) and selection paths are
root-relative, neither of which round-trips through ``Path``.
"""

from __future__ import annotations

from collections.abc import Sequence


def parse_file_path(full_path: str) -> tuple[str, str]:
    """Split ``full_path`` into its directory path and final segment.

    ``"/root/file.ext"`` gives ``("/root", "file.ext")`` and ``"/file.ext"``
    gives ``("", "file.ext")``.
    """
    directory, _separator, name = full_path.rpartition("/")
    return directory, name


def split_path(path: str) -> list[str]:
    """Return the segments after the leading ``/``; ``""`` has none."""
    if not path:
        return []
    return path.split("/")[1:]


def join_path(segments: Sequence[str]) -> str:
    """Inverse of :func:`split_path`."""
    return "".join(f"/{segment}" for segment in segments)


def common_segment_prefix(left: Sequence[str], right: Sequence[str]) -> list[str]:
    """Return the longest shared leading run of segments."""
    common: list[str] = []
    for left_segment, right_segment in zip(left, right):
        if left_segment != right_segment:
            break
        common.append(left_segment)
    return common


def is_segment_prefix(prefix: Sequence[str], segments: Sequence[str]) -> bool:
    """Return whether ``prefix`` matches the start of ``segments`` segment-wise."""
    return len(prefix) <= len(segments) and list(segments[: len(prefix)]) == list(prefix)


def is_absolute_path(path: str) -> bool:
    """Return whether ``path`` is ``/``-rooted with no empty segments.

    ``"/"``, ``"//x"`` and ``"/srv/dir/"`` are rejected: an empty segment
    cannot name a tree entry.
    """
    return path.startswith("/") and all(split_path(path))


__all__ = [
    "parse_file_path",
    "split_path",
    "join_path",
    "common_segment_prefix",
    "is_segment_prefix",
    "is_absolute_path",
]
