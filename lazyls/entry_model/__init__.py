"""Domain model for listed entries plus their lazily loaded metadata.

This package contains the non-rendering entry primitives:
- entry and metadata-snapshot datatypes
- stat loading that degrades to ``None`` instead of raising
- owner/group name resolution with numeric fallback
- process-local UTC offset resolution
"""

from __future__ import annotations

from .metadata import IdentityResolver, load_entry_metadata, local_utc_offset, safe_load_metadata
from .types import DirectoryEntry, EntryMetadata

__all__ = [
    "DirectoryEntry",
    "EntryMetadata",
    "IdentityResolver",
    "load_entry_metadata",
    "local_utc_offset",
    "safe_load_metadata",
]
