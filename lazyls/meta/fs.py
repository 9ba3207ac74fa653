"""Filesystem metadata collection for listed entries."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .types import Directory, FileType, Meta, RegularFile, SymLink


def _file_type_from_stat(path: Path, st: os.stat_result) -> FileType:
    """Classify an ``lstat`` result, resolving symlink targets."""
    if stat.S_ISLNK(st.st_mode):
        try:
            target_is_dir = path.is_dir()
        except OSError:
            target_is_dir = False
        return SymLink(is_dir=target_is_dir)
    if stat.S_ISDIR(st.st_mode):
        return Directory()
    return RegularFile()


def meta_from_path(path: Path, name: str | None = None) -> Meta:
    """Build a ``Meta`` for ``path`` without following a final symlink.

    ``size`` and ``date`` come from the link itself for symlinks. Raises
    ``OSError`` when ``path`` cannot be stat'ed.
    """
    st = path.lstat()
    return Meta(
        name=name if name is not None else (path.name or str(path)),
        size=int(st.st_size),
        date=int(st.st_mtime_ns),
        file_type=_file_type_from_stat(path, st),
        path=path,
    )


def list_directory(directory: Path, show_hidden: bool) -> tuple[list[Meta], Exception | None]:
    """Collect metadata for visible children of ``directory`` in scan order.

    Returns ``(entries, scan_error)``. ``scan_error`` is set when the directory
    cannot be scanned. Children that vanish or cannot be stat'ed mid-scan are
    skipped.
    """
    entries: list[Meta] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    entries.append(meta_from_path(Path(child.path), name=name))
                except OSError:
                    continue
    except (PermissionError, OSError) as exc:
        return [], exc
    return entries, None


__all__ = [
    "meta_from_path",
    "list_directory",
]
