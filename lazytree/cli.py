"""Command-line front door for lazytree.

Collects file paths from arguments, directory walks, or stdin, inserts them
into a file tree one at a time, and prints or browses the result.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from .file_tree import FileTree, collect_file_paths, insert_file, is_absolute_path
from .render import format_tree_lines
from .runtime import apply_keys, config, run_browser
from .selection import Selection, make_selection, refresh_selection, selected_absolute_path
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)

KEY_SCRIPT_ALIASES = {"j", "k", "l", "h"}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _key_script(value: str) -> list[str]:
    """argparse type for scripted navigation keys."""
    keys = [key for key in value if not key.isspace()]
    unknown = sorted({key for key in keys if key not in KEY_SCRIPT_ALIASES})
    if unknown:
        raise argparse.ArgumentTypeError(f"unknown navigation keys: {''.join(unknown)!r}")
    return keys


def gather_paths(targets: Iterable[Path], show_hidden: bool) -> list[str]:
    """Expand CLI targets into absolute file paths in walk order."""
    paths: list[str] = []
    for target in targets:
        if not target.exists():
            raise SystemExit(f"Path not found: {target}")
        if target.is_dir():
            walked = collect_file_paths(target, show_hidden=show_hidden)
            logger.debug("Collected %d files under %s", len(walked), target)
            paths.extend(walked)
        else:
            paths.append(str(target.resolve()))
    return paths


def read_stdin_paths(stream) -> list[str]:
    """Read newline-separated absolute paths, skipping blank lines."""
    paths: list[str] = []
    for raw_line in stream:
        line = raw_line.strip()
        if not line:
            continue
        if not is_absolute_path(line):
            raise SystemExit(f"Not an absolute path: {line}")
        paths.append(line)
    return paths


def build_selection(paths: Iterable[str]) -> Selection:
    """Insert ``paths`` one at a time, refreshing the selection after each."""
    selection = make_selection(FileTree())
    for path in paths:
        tree = insert_file(selection.tree, path, path)
        selection = refresh_selection(selection, tree)
    return selection


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments, build the tree, and print or browse it.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Browse files as a path-keyed tree.")
    parser.add_argument("paths", nargs="*", help="Files or directories. Defaults to current directory.")
    parser.add_argument("--stdin", action="store_true", help="Read newline-separated absolute paths from stdin.")
    parser.add_argument("--show-hidden", action="store_true", default=None, help="Include dot-files in walks.")
    parser.add_argument(
        "--keys",
        type=_key_script,
        default=[],
        help="Navigation keys to apply before output (j next, k previous, l enter, h up).",
    )
    parser.add_argument("--interactive", action="store_true", help="Browse the tree in the terminal.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-prefs", action="store_true", help="Persist --show-hidden and --theme.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    args = parser.parse_args()
    _configure_logging(args.verbose)
    if args.interactive and args.stdin:
        raise SystemExit("Cannot combine --interactive with --stdin.")

    saved = config.load_preferences()
    show_hidden = saved.show_hidden if args.show_hidden is None else args.show_hidden
    theme_name = normalize_theme_name(args.theme or saved.theme)
    if args.save_prefs:
        config.save_preferences(config.Preferences(show_hidden=show_hidden, theme=theme_name))

    paths: list[str] = []
    if args.stdin:
        paths.extend(read_stdin_paths(sys.stdin))
    if args.paths or not args.stdin:
        if default_path is None:
            default_path = Path.cwd()
        targets = [Path(raw) for raw in args.paths] or [default_path]
        paths.extend(gather_paths(targets, show_hidden))

    selection = apply_keys(build_selection(paths), args.keys)
    theme = resolve_theme(theme_name, no_color=args.no_color or not sys.stdout.isatty())

    if args.interactive:
        selection = run_browser(selection, theme)
        sys.stdout.write(selected_absolute_path(selection) + "\n")
        return

    lines = format_tree_lines(selection.tree, selection, theme)
    lines.append(f"selected: {selected_absolute_path(selection)}")
    sys.stdout.write("\n".join(lines) + "\n")


if __name__ == "__main__":
    main()
