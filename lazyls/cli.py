"""Command-line front door for lazyls.

Parses CLI options, resolves them against persisted sort defaults, and
prints each target path as an ordered listing.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import config
from .flags import DirOrderFlag, Flags, SortFlag, SortOrder
from .meta import Meta, list_directory, meta_from_path
from .render import render_listing
from .sort import sort_entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazyls", description="List directory contents in a stable, configurable order.")
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Paths to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", help="Include entries whose names start with '.'.")
    parser.add_argument("-l", "--long", action="store_true", help="Show type, size, and modification time.")
    parser.add_argument(
        "-t",
        "--timesort",
        dest="sort_by",
        action="store_const",
        const=SortFlag.TIME.value,
        help="Sort by modification time, newest first.",
    )
    parser.add_argument(
        "-S",
        "--sizesort",
        dest="sort_by",
        action="store_const",
        const=SortFlag.SIZE.value,
        help="Sort by size, largest first.",
    )
    parser.add_argument("--sort", dest="sort_by", choices=SortFlag.choices(), help="Sort by WORD instead of name.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the primary sort order.")
    parser.add_argument(
        "--group-dirs",
        dest="group_dirs",
        choices=DirOrderFlag.choices(),
        help="Group directories first, last, or not at all.",
    )
    parser.add_argument(
        "--group-directories-first",
        dest="group_dirs",
        action="store_const",
        const=DirOrderFlag.FIRST.value,
        help="Alias for --group-dirs=first.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the resolved sort options as defaults for future runs.",
    )
    return parser


def resolve_flags(args: argparse.Namespace, defaults: Flags) -> Flags:
    """Overlay explicit CLI sort options on ``defaults``."""
    directory_order = DirOrderFlag.from_arg(args.group_dirs) if args.group_dirs is not None else defaults.directory_order
    sort_by = SortFlag.from_arg(args.sort_by) if args.sort_by is not None else defaults.sort_by
    sort_order = SortOrder.REVERSE if args.reverse else defaults.sort_order
    return Flags(directory_order=directory_order, sort_by=sort_by, sort_order=sort_order)


def render_directory(directory: Path, flags: Flags, show_hidden: bool, long: bool, no_color: bool) -> str:
    """Render the ordered listing of ``directory``, or an inline scan error row."""
    entries, scan_error = list_directory(directory, show_hidden)
    if scan_error is not None:
        return f"<error: {scan_error}>"
    return render_listing(sort_entries(entries, flags), long=long, no_color=no_color)


def render_targets(paths: list[Path], flags: Flags, show_hidden: bool, long: bool, no_color: bool) -> str:
    """Render file arguments as one listing, then each directory under a header."""
    files: list[Meta] = []
    directories: list[Path] = []
    for path in paths:
        if path.is_dir():
            directories.append(path)
        else:
            files.append(meta_from_path(path, name=str(path)))

    blocks: list[str] = []
    if files:
        blocks.append(render_listing(sort_entries(files, flags), long=long, no_color=no_color))
    show_headers = len(paths) > 1
    for directory in directories:
        body = render_directory(directory, flags, show_hidden, long, no_color)
        blocks.append(f"{directory}:\n{body}" if show_headers else body)
    return "\n\n".join(block for block in blocks if block)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print listings for the requested paths.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed.
    """
    args = build_parser().parse_args()

    flags = resolve_flags(args, config.load_sort_flags())
    if args.save_defaults:
        config.save_sort_flags(flags)

    if default_path is None:
        default_path = Path.cwd()
    paths = [Path(raw) for raw in args.paths] or [default_path]
    for path in paths:
        if not path.exists() and not path.is_symlink():
            raise SystemExit(f"Path not found: {path}")

    output = render_targets(paths, flags, args.all, args.long, args.no_color)
    if output:
        sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main()
