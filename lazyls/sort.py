"""Entry ordering: attribute comparators composed into one listing comparator.

A comparator maps two ``Meta`` values to an ``Ordering``. ``create_sorter``
stacks an optional directory-grouping stage in front of the primary-key
comparator, each stage carrying its own ``SortOrder`` so that reversing the
primary key never moves directories among files.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import IntEnum
from functools import cmp_to_key

from .flags import DirOrderFlag, Flags, SortFlag, SortOrder
from .meta import Meta, is_directory_like


class Ordering(IntEnum):
    """Three-way comparison result, usable wherever ``cmp``-style ints are."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        return Ordering(-self.value)

    @classmethod
    def of(cls, left: object, right: object) -> Ordering:
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


Sorter = Callable[[Meta, Meta], Ordering]


def by_name(a: Meta, b: Meta) -> Ordering:
    return Ordering.of(a.name, b.name)


def by_size(a: Meta, b: Meta) -> Ordering:
    """Larger entries first."""
    return Ordering.of(b.size, a.size)


def by_date(a: Meta, b: Meta) -> Ordering:
    """Newest entries first, ties broken by name."""
    ordering = Ordering.of(b.date, a.date)
    if ordering is Ordering.EQUAL:
        return by_name(a, b)
    return ordering


def with_dirs_first(a: Meta, b: Meta) -> Ordering:
    """Put directory-like entries before everything else.

    Only separates directory-like entries from the rest; two entries on the
    same side compare equal and are left to the primary key.
    """
    a_dir = is_directory_like(a.file_type)
    b_dir = is_directory_like(b.file_type)
    if a_dir == b_dir:
        return Ordering.EQUAL
    return Ordering.LESS if a_dir else Ordering.GREATER


_KEY_COMPARATORS: dict[SortFlag, Sorter] = {
    SortFlag.NAME: by_name,
    SortFlag.SIZE: by_size,
    SortFlag.TIME: by_date,
}


def create_sorter(flags: Flags) -> Sorter:
    """Build the comparator for ``flags``.

    Stages are evaluated in order and the first non-equal result wins, after
    applying that stage's own direction. ``DirOrderFlag.LAST`` is grouping
    with its direction reversed.
    """
    stages: list[tuple[SortOrder, Sorter]] = []
    if flags.directory_order is DirOrderFlag.FIRST:
        stages.append((SortOrder.DEFAULT, with_dirs_first))
    elif flags.directory_order is DirOrderFlag.LAST:
        stages.append((SortOrder.REVERSE, with_dirs_first))
    stages.append((flags.sort_order, _KEY_COMPARATORS[flags.sort_by]))
    frozen_stages = tuple(stages)

    def compare(a: Meta, b: Meta) -> Ordering:
        for direction, comparator in frozen_stages:
            ordering = comparator(a, b)
            if ordering is Ordering.EQUAL:
                continue
            if direction is SortOrder.REVERSE:
                return ordering.reverse()
            return ordering
        return Ordering.EQUAL

    return compare


def sort_entries(entries: Iterable[Meta], flags: Flags) -> list[Meta]:
    """Return ``entries`` as a new list in display order for ``flags``."""
    return sorted(entries, key=cmp_to_key(create_sorter(flags)))


__all__ = [
    "Ordering",
    "Sorter",
    "by_name",
    "by_size",
    "by_date",
    "with_dirs_first",
    "create_sorter",
    "sort_entries",
]
