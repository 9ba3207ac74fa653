"""Resolved sort options for one listing invocation.

Each option is a closed enum. ``Flags`` bundles the three choices and rejects
anything that is not one of them at construction time, so comparison code
never has to handle a malformed configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class _ArgEnum(Enum):
    """Enum whose values are the lowercase words accepted on the command line."""

    @classmethod
    def from_arg(cls, value: str):
        """Parse a flag word, raising ``ValueError`` listing accepted values."""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            accepted = ", ".join(member.value for member in cls)
            raise ValueError(f"invalid {cls.__name__} value: {value!r} (expected one of: {accepted})") from None

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


class DirOrderFlag(_ArgEnum):
    """Where directory-like entries are grouped."""

    FIRST = "first"
    LAST = "last"
    NONE = "none"


class SortFlag(_ArgEnum):
    """Primary sort key."""

    NAME = "name"
    SIZE = "size"
    TIME = "time"


class SortOrder(Enum):
    """Direction applied to one comparator stage."""

    DEFAULT = "default"
    REVERSE = "reverse"

    @classmethod
    def from_reverse(cls, reverse: bool) -> SortOrder:
        return cls.REVERSE if reverse else cls.DEFAULT


@dataclass(frozen=True)
class Flags:
    """Immutable sort configuration: grouping, primary key, and direction."""

    directory_order: DirOrderFlag = DirOrderFlag.NONE
    sort_by: SortFlag = SortFlag.NAME
    sort_order: SortOrder = SortOrder.DEFAULT

    def __post_init__(self) -> None:
        for field_name, expected in (
            ("directory_order", DirOrderFlag),
            ("sort_by", SortFlag),
            ("sort_order", SortOrder),
        ):
            value = getattr(self, field_name)
            if not isinstance(value, expected):
                raise TypeError(f"{field_name} must be a {expected.__name__}, got {value!r}")


__all__ = [
    "DirOrderFlag",
    "SortFlag",
    "SortOrder",
    "Flags",
]
