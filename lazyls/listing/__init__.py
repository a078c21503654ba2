"""Listing pipeline: discover, filter, order, and render entries.

Short format prints bare names without touching metadata.
Long format loads metadata per entry and renders an aligned table.
"""

from __future__ import annotations

from .context import ListingContext
from .discovery import DEFAULT_PATH, discover_entries, list_directory_children
from .filtering import filter_entries, is_backup, is_hidden
from .formatting import (
    LongFields,
    extract_long_fields,
    format_timestamp,
    human_size,
    long_row_cells,
    modified_at,
    permission_string,
    size_string,
)
from .ordering import entry_sort_key, sort_entries
from .pipeline import (
    LONG_COLUMNS,
    build_long_table,
    collect_entries,
    render_listing,
    render_long,
    render_names,
)

__all__ = [
    "ListingContext",
    "DEFAULT_PATH",
    "discover_entries",
    "list_directory_children",
    "filter_entries",
    "is_hidden",
    "is_backup",
    "LongFields",
    "extract_long_fields",
    "format_timestamp",
    "human_size",
    "long_row_cells",
    "modified_at",
    "permission_string",
    "size_string",
    "entry_sort_key",
    "sort_entries",
    "LONG_COLUMNS",
    "build_long_table",
    "collect_entries",
    "render_listing",
    "render_long",
    "render_names",
]
