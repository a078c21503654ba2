"""Discovery, filtering, ordering, and output-mode selection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..entry_model import DirectoryEntry, load_entry_metadata
from ..options import ListingOptions
from ..table import ColumnAlignment, Table, TableColumn, TableRow, render_table
from .context import ListingContext
from .discovery import DEFAULT_PATH, discover_entries
from .filtering import filter_entries
from .formatting import extract_long_fields, long_row_cells
from .ordering import sort_entries

logger = logging.getLogger(__name__)

NAME_SEPARATOR = "  "

# permissions, links, owner, group, size, modified, name
LONG_COLUMNS = (
    TableColumn(ColumnAlignment.LEFT),
    TableColumn(ColumnAlignment.LEFT),
    TableColumn(ColumnAlignment.LEFT),
    TableColumn(ColumnAlignment.LEFT),
    TableColumn(ColumnAlignment.RIGHT),
    TableColumn(ColumnAlignment.LEFT),
    TableColumn(ColumnAlignment.LEFT),
)


def collect_entries(paths: Sequence[Path | str], options: ListingOptions) -> list[DirectoryEntry]:
    """Return the filtered, ordered entries for ``paths`` (default ``.``)."""
    discovered = discover_entries(paths or [DEFAULT_PATH])
    return sort_entries(filter_entries(discovered, options), options)


def render_names(entries: Iterable[DirectoryEntry]) -> str:
    """Short format: every name followed by two spaces, then one newline."""
    return "".join(f"{entry.name}{NAME_SEPARATOR}" for entry in entries) + "\n"


def build_long_table(entries: Iterable[DirectoryEntry], context: ListingContext) -> Table:
    """Load metadata entry by entry and build the seven-column table.

    Entries whose metadata cannot be loaded are left out.
    """
    rows: list[TableRow] = []
    for entry in entries:
        fields = extract_long_fields(load_entry_metadata(entry), context)
        if fields is None:
            logger.debug("omitting %s from long listing: metadata unavailable", entry.path)
            continue
        rows.append(TableRow.of(long_row_cells(fields, context.options)))
    return Table(rows, LONG_COLUMNS)


def render_long(entries: Iterable[DirectoryEntry], context: ListingContext) -> str:
    return render_table(build_long_table(entries, context))


def render_listing(paths: Sequence[Path | str], context: ListingContext) -> str:
    """Produce the complete output text for one run.

    Raises ``ListingError`` when a user-supplied path cannot be listed.
    """
    entries = collect_entries(paths, context.options)
    if context.options.long:
        return render_long(entries, context)
    return render_names(entries)


__all__ = [
    "LONG_COLUMNS",
    "collect_entries",
    "render_names",
    "build_long_table",
    "render_long",
    "render_listing",
]
