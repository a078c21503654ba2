"""Long-format field extraction and stringification.

Extraction produces each column in its natural type; stringification turns
those values into table cells. The table renderer never sees the types.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from ..entry_model import DirectoryEntry
from ..options import ListingOptions
from .context import ListingContext

PERMISSION_TRIADS = {
    "0": "---",
    "1": "--x",
    "2": "-w-",
    "3": "-wx",
    "4": "r--",
    "5": "r-x",
    "6": "rw-",
    "7": "rwx",
}
UNKNOWN_TRIAD = "---"

# Scaled by 1024 yet labelled with decimal-style units; the trailing "B" is dropped.
SIZE_UNIT_LABELS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
SIZE_STEP = 1024

TIMESTAMP_FORMAT = "%b %d %H:%M"
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def permission_string(mode: int) -> str:
    """Render the owner/group/other rwx triads of ``mode`` (always 9 chars)."""
    digits = f"{mode & 0o777:03o}"
    return "".join(PERMISSION_TRIADS.get(digit, UNKNOWN_TRIAD) for digit in digits)


def human_size(size: int) -> str:
    """Scale ``size`` by powers of 1024 with one fractional digit.

    >>> human_size(2048)
    '2.0K'
    """
    value = float(size)
    unit_index = 0
    # Compare the value as displayed so 1048575 becomes 1.0M, not 1024.0K.
    while float(f"{value:.1f}") >= SIZE_STEP and unit_index < len(SIZE_UNIT_LABELS) - 1:
        value /= SIZE_STEP
        unit_index += 1
    label = SIZE_UNIT_LABELS[unit_index]
    if unit_index == 0:
        text = f"{size}{label}"
    else:
        text = f"{value:.1f}{label}"
    return text[:-1].upper()


def size_string(size: int, human_readable: bool) -> str:
    return human_size(size) if human_readable else str(size)


def modified_at(mtime_ns: int, utc_offset: tzinfo) -> datetime:
    """Convert a nanosecond epoch timestamp into ``utc_offset`` local time."""
    return (UNIX_EPOCH + timedelta(microseconds=mtime_ns // 1000)).astimezone(utc_offset)


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class LongFields:
    """Typed long-format columns for one entry."""

    mode: int
    nlink: int
    owner: str
    group: str
    size: int
    modified: datetime
    name: str


def extract_long_fields(entry: DirectoryEntry, context: ListingContext) -> LongFields | None:
    """Return typed columns, or ``None`` when the entry has no metadata."""
    metadata = entry.metadata
    if metadata is None:
        return None
    return LongFields(
        mode=metadata.mode,
        nlink=metadata.nlink,
        owner=context.identities.user_name(metadata.uid),
        group=context.identities.group_name(metadata.gid),
        size=metadata.size,
        modified=modified_at(metadata.mtime_ns, context.utc_offset),
        name=entry.name,
    )


def long_row_cells(fields: LongFields, options: ListingOptions) -> tuple[str, ...]:
    """Stringify ``fields`` in display column order."""
    return (
        permission_string(fields.mode),
        str(fields.nlink),
        fields.owner,
        fields.group,
        size_string(fields.size, options.human_readable),
        format_timestamp(fields.modified),
        fields.name,
    )


__all__ = [
    "PERMISSION_TRIADS",
    "TIMESTAMP_FORMAT",
    "LongFields",
    "permission_string",
    "human_size",
    "size_string",
    "modified_at",
    "format_timestamp",
    "extract_long_fields",
    "long_row_cells",
]
