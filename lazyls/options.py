"""Read-only listing configuration.

Built once from parsed command-line arguments and shared by every stage.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class ListingOptions:
    """Flags that govern filtering, ordering, and rendering."""

    all: bool = False
    long: bool = False
    human_readable: bool = False
    ignore_backups: bool = False
    directory: bool = False
    group_directories_first: bool = False

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> ListingOptions:
        """Project the listing flags out of an argparse namespace."""
        return cls(
            all=bool(getattr(args, "all", False)),
            long=bool(getattr(args, "long", False)),
            human_readable=bool(getattr(args, "human_readable", False)),
            ignore_backups=bool(getattr(args, "ignore_backups", False)),
            directory=bool(getattr(args, "directory", False)),
            group_directories_first=bool(getattr(args, "group_directories_first", False)),
        )


__all__ = ["ListingOptions"]
