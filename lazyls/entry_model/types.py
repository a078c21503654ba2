"""Domain datatypes for listed filesystem entries."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EntryMetadata:
    """Snapshot of the stat fields shown by the long listing format."""

    mode: int
    uid: int
    gid: int
    nlink: int
    size: int
    mtime_ns: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> EntryMetadata:
        return cls(
            mode=int(st.st_mode),
            uid=int(st.st_uid),
            gid=int(st.st_gid),
            nlink=int(st.st_nlink),
            size=int(st.st_size),
            mtime_ns=int(st.st_mtime_ns),
        )

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)


@dataclass(frozen=True)
class DirectoryEntry:
    """One path under consideration for display.

    ``metadata`` stays ``None`` until loaded and also when loading failed;
    every accessor below returns ``None`` in both cases. ``display_name``
    overrides the shown name for paths given literally on the command line.
    """

    path: Path
    display_name: str | None = None
    metadata: EntryMetadata | None = None

    @property
    def file_name(self) -> str:
        """Final path component, or the whole path when it has none (``/``)."""
        return self.path.name or str(self.path)

    @property
    def name(self) -> str:
        return self.display_name if self.display_name is not None else self.file_name

    @property
    def is_dir(self) -> bool:
        if self.metadata is not None:
            return self.metadata.is_dir
        # Directory grouping must work before (or without) a successful stat.
        try:
            return self.path.is_dir()
        except OSError:
            return False

    @property
    def mode(self) -> int | None:
        return self.metadata.mode if self.metadata is not None else None

    @property
    def uid(self) -> int | None:
        return self.metadata.uid if self.metadata is not None else None

    @property
    def gid(self) -> int | None:
        return self.metadata.gid if self.metadata is not None else None

    @property
    def nlink(self) -> int | None:
        return self.metadata.nlink if self.metadata is not None else None

    @property
    def size(self) -> int | None:
        return self.metadata.size if self.metadata is not None else None

    @property
    def mtime_ns(self) -> int | None:
        return self.metadata.mtime_ns if self.metadata is not None else None


__all__ = [
    "EntryMetadata",
    "DirectoryEntry",
]
