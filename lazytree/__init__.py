"""Public package surface for lazytree.

Exports ``main`` for programmatic CLI invocation.
The tree model lives in ``lazytree.file_tree`` and the cursor in
``lazytree.selection``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
