"""Column-aligned plain-text tables.

Cells are pre-rendered strings; the table only knows widths and alignment.
There is no header row, no border, and no truncation.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from ..text_width import display_width


class ColumnAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class TableColumn:
    alignment: ColumnAlignment = ColumnAlignment.LEFT


@dataclass(frozen=True)
class TableRow:
    """One fixed-length row of rendered cells."""

    cells: tuple[str, ...]

    @classmethod
    def of(cls, cells: Iterable[str]) -> TableRow:
        return cls(tuple(cells))

    def __len__(self) -> int:
        return len(self.cells)


def pad_cell(text: str, width: int, alignment: ColumnAlignment) -> str:
    """Pad ``text`` with spaces to ``width`` display cells.

    Centered cells put the odd leftover space on the right.
    """
    padding = max(0, width - display_width(text))
    if alignment is ColumnAlignment.RIGHT:
        return " " * padding + text
    if alignment is ColumnAlignment.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding


class Table:
    """Rows of equal length plus one alignment per column.

    A row whose length differs from the column count is a programming error
    and raises ``ValueError`` at construction.
    """

    def __init__(self, rows: Iterable[TableRow | Sequence[str]], columns: Sequence[TableColumn]) -> None:
        self.columns: tuple[TableColumn, ...] = tuple(columns)
        self.rows: list[TableRow] = []
        for index, row in enumerate(rows):
            if not isinstance(row, TableRow):
                row = TableRow.of(row)
            if len(row) != len(self.columns):
                raise ValueError(
                    f"row {index} has {len(row)} cells, table has {len(self.columns)} columns"
                )
            self.rows.append(row)

    def column_widths(self) -> list[int]:
        """Return the widest rendered cell of every column across all rows."""
        widths = [0] * len(self.columns)
        for row in self.rows:
            for col, cell in enumerate(row.cells):
                widths[col] = max(widths[col], display_width(cell))
        return widths

    def render(self) -> str:
        return render_table(self)

    def __str__(self) -> str:
        return self.render()


def render_table(table: Table) -> str:
    """Render ``table`` as aligned lines, one per row, each ending in a newline."""
    widths = table.column_widths()
    lines: list[str] = []
    for row in table.rows:
        padded = [
            pad_cell(cell, widths[col], table.columns[col].alignment)
            for col, cell in enumerate(row.cells)
        ]
        lines.append(" ".join(padded) + "\n")
    return "".join(lines)


__all__ = [
    "ColumnAlignment",
    "TableColumn",
    "TableRow",
    "Table",
    "pad_cell",
    "render_table",
]
