"""Entry metadata model plus filesystem collection helpers.

This package contains the non-ordering side of a listing:
- closed ``FileType`` variants and the immutable ``Meta`` record
- stat-based collection of ``Meta`` values for paths and directories
"""

from __future__ import annotations

from .types import Directory, FileType, Meta, RegularFile, SymLink, is_directory_like
from .fs import list_directory, meta_from_path

__all__ = [
    "RegularFile",
    "Directory",
    "SymLink",
    "FileType",
    "Meta",
    "is_directory_like",
    "meta_from_path",
    "list_directory",
]
