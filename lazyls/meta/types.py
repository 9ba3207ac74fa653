"""Metadata records for listed filesystem entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RegularFile:
    """Plain file, or any other non-directory object."""


@dataclass(frozen=True)
class Directory:
    """Directory entry."""


@dataclass(frozen=True)
class SymLink:
    """Symbolic link; ``is_dir`` records whether the target resolves to a directory."""

    is_dir: bool = False


FileType = RegularFile | Directory | SymLink


@dataclass(frozen=True)
class Meta:
    """One listed entry with the metadata used for ordering and display.

    ``date`` is the modification time in integer nanoseconds. ``path`` is only
    carried for rendering and never takes part in ordering.
    """

    name: str
    size: int
    date: int
    file_type: FileType
    path: Path | None = None


def is_directory_like(file_type: FileType) -> bool:
    """Return whether ``file_type`` lists as a directory."""
    match file_type:
        case Directory():
            return True
        case SymLink(is_dir=is_dir):
            return is_dir
        case RegularFile():
            return False
    raise TypeError(f"unknown file type: {file_type!r}")


__all__ = [
    "RegularFile",
    "Directory",
    "SymLink",
    "FileType",
    "Meta",
    "is_directory_like",
]
