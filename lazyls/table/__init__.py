"""Generic aligned text tables used by the long listing format."""

from __future__ import annotations

from .table import ColumnAlignment, Table, TableColumn, TableRow, pad_cell, render_table

__all__ = [
    "ColumnAlignment",
    "TableColumn",
    "TableRow",
    "Table",
    "pad_cell",
    "render_table",
]
