"""Visibility filters applied before ordering."""

from __future__ import annotations

from collections.abc import Iterable

from ..entry_model import DirectoryEntry
from ..options import ListingOptions


def is_hidden(entry: DirectoryEntry) -> bool:
    return entry.file_name.startswith(".")


def is_backup(entry: DirectoryEntry) -> bool:
    return entry.file_name.endswith("~")


def filter_entries(entries: Iterable[DirectoryEntry], options: ListingOptions) -> list[DirectoryEntry]:
    """Drop hidden, backup, and non-directory entries as ``options`` request.

    Filters run in that order and compose by intersection.
    """
    visible = list(entries)
    if not options.all:
        visible = [entry for entry in visible if not is_hidden(entry)]
    if options.ignore_backups:
        visible = [entry for entry in visible if not is_backup(entry)]
    if options.directory:
        visible = [entry for entry in visible if entry.is_dir]
    return visible


__all__ = [
    "is_hidden",
    "is_backup",
    "filter_entries",
]
