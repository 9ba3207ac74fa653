"""Render ordered entries as plain rows or a long listing.

Rows are emitted in the order given; ordering is decided by ``lazyls.sort``.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass

from .meta import Directory, Meta, RegularFile, SymLink

SIZE_UNITS = ("B", "K", "M", "G", "T", "P")
DATE_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class ListingPalette:
    """ANSI palette for listing rows; empty strings disable color."""

    directory: str
    symlink: str
    file: str
    size: str
    date: str
    reset: str


COLOR_PALETTE = ListingPalette(
    directory="\033[1;34m",
    symlink="\033[36m",
    file="\033[38;5;252m",
    size="\033[38;5;109m",
    date="\033[2;38;5;245m",
    reset="\033[0m",
)
PLAIN_PALETTE = ListingPalette(directory="", symlink="", file="", size="", date="", reset="")


def format_size(size_bytes: int) -> str:
    """Format a byte count with a one-letter binary unit, e.g. ``4.0K``."""
    value = float(size_bytes)
    unit_idx = 0
    while value >= 1024 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_idx += 1
    if unit_idx == 0:
        return f"{size_bytes}B"
    return f"{value:.1f}{SIZE_UNITS[unit_idx]}"


def format_date(date_ns: int) -> str:
    return time.strftime(DATE_FORMAT, time.localtime(date_ns / 1_000_000_000))


def type_marker(meta: Meta) -> str:
    match meta.file_type:
        case Directory():
            return "d"
        case SymLink():
            return "l"
        case RegularFile():
            return "."
    raise TypeError(f"unknown file type: {meta.file_type!r}")


def _name_label(meta: Meta, palette: ListingPalette) -> str:
    match meta.file_type:
        case Directory():
            return f"{palette.directory}{meta.name}/{palette.reset}"
        case SymLink(is_dir=is_dir):
            suffix = "/" if is_dir else ""
            return f"{palette.symlink}{meta.name}{suffix}{palette.reset}"
        case _:
            return f"{palette.file}{meta.name}{palette.reset}"


def render_entry(meta: Meta, long: bool = False, no_color: bool = False) -> str:
    """Render one listing row for ``meta``."""
    palette = PLAIN_PALETTE if no_color else COLOR_PALETTE
    name = _name_label(meta, palette)
    if not long:
        return name
    size = f"{palette.size}{format_size(meta.size):>7}{palette.reset}"
    date = f"{palette.date}{format_date(meta.date)}{palette.reset}"
    return f"{type_marker(meta)} {size} {date} {name}"


def render_listing(entries: Iterable[Meta], long: bool = False, no_color: bool = False) -> str:
    """Render rows for ``entries`` joined by newlines, in the given order."""
    return "\n".join(render_entry(meta, long=long, no_color=no_color) for meta in entries)


__all__ = [
    "ListingPalette",
    "format_size",
    "format_date",
    "type_marker",
    "render_entry",
    "render_listing",
]
