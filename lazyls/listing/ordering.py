"""Total ordering of listed entries."""

from __future__ import annotations

import os
from collections.abc import Iterable

from ..entry_model import DirectoryEntry
from ..options import ListingOptions


def entry_sort_key(entry: DirectoryEntry, group_directories_first: bool = False) -> tuple:
    """Sort key: optional directories-first group, then byte-wise file name.

    The full path breaks ties between equal names from different arguments.
    """
    name_key = os.fsencode(entry.file_name)
    path_key = os.fsencode(str(entry.path))
    if group_directories_first:
        return (not entry.is_dir, name_key, path_key)
    return (name_key, path_key)


def sort_entries(entries: Iterable[DirectoryEntry], options: ListingOptions) -> list[DirectoryEntry]:
    group_first = options.group_directories_first
    return sorted(entries, key=lambda entry: entry_sort_key(entry, group_first))


__all__ = [
    "entry_sort_key",
    "sort_entries",
]
