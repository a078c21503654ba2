"""Expand user-supplied paths into candidate entries."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from ..entry_model import DirectoryEntry
from ..errors import ListingError

DEFAULT_PATH = "."


def list_directory_children(directory: Path) -> list[DirectoryEntry]:
    """Return one entry per immediate child of ``directory``.

    No metadata is loaded. Raises ``ListingError`` when the directory cannot
    be enumerated.
    """
    try:
        with os.scandir(directory) as entries:
            return [DirectoryEntry(path=Path(child.path)) for child in entries]
    except OSError as exc:
        raise ListingError.unreadable(directory, exc) from exc


def discover_entries(paths: Iterable[Path | str]) -> list[DirectoryEntry]:
    """Expand directories one level and keep other paths as literal entries.

    Arguments that do not exist at all (not even as dangling links), or that
    cannot be looked up, raise ``ListingError``.
    """
    discovered: list[DirectoryEntry] = []
    for raw_path in paths:
        path = Path(raw_path)
        try:
            os.lstat(path)
        except FileNotFoundError as exc:
            raise ListingError.missing(raw_path) from exc
        except OSError as exc:
            raise ListingError.inaccessible(raw_path, exc) from exc
        if os.path.isdir(path):
            discovered.extend(list_directory_children(path))
        else:
            discovered.append(DirectoryEntry(path=path, display_name=str(raw_path)))
    return discovered


__all__ = [
    "DEFAULT_PATH",
    "list_directory_children",
    "discover_entries",
]
