"""Metadata loading and identity lookup for listed entries.

Nothing in this module raises for a single bad entry: stat failures become
``None`` and unknown uid/gid values fall back to their numeric form.
"""

from __future__ import annotations

import grp
import logging
import pwd
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone, tzinfo
from pathlib import Path

from .types import DirectoryEntry, EntryMetadata

logger = logging.getLogger(__name__)


def safe_load_metadata(path: Path) -> EntryMetadata | None:
    """Return a stat snapshot for ``path`` or ``None`` on failure."""
    try:
        st = path.stat()
    except OSError as exc:
        logger.debug("metadata unavailable for %s: %s", path, exc)
        return None
    return EntryMetadata.from_stat(st)


def load_entry_metadata(entry: DirectoryEntry) -> DirectoryEntry:
    """Return ``entry`` with freshly loaded (possibly absent) metadata.

    Each call performs a new stat; callers keep the returned entry.
    """
    return replace(entry, metadata=safe_load_metadata(entry.path))


def local_utc_offset(now: datetime | None = None) -> tzinfo:
    """Resolve the process-local UTC offset as a fixed ``timezone``.

    Falls back to UTC when the platform cannot report a local offset.
    """
    try:
        current = (now if now is not None else datetime.now()).astimezone()
        offset = current.utcoffset()
    except (OSError, OverflowError, ValueError) as exc:
        logger.warning("could not determine local UTC offset, using UTC: %s", exc)
        return timezone.utc
    if offset is None:
        return timezone.utc
    return timezone(offset)


def _passwd_name(uid: int) -> str:
    return pwd.getpwuid(uid).pw_name


def _group_name(gid: int) -> str:
    return grp.getgrgid(gid).gr_name


class IdentityResolver:
    """Resolve numeric owner/group ids to names, memoized for one run.

    Lookups that fail render as the decimal id.
    """

    def __init__(
        self,
        user_lookup: Callable[[int], str] | None = None,
        group_lookup: Callable[[int], str] | None = None,
    ) -> None:
        self._user_lookup = user_lookup or _passwd_name
        self._group_lookup = group_lookup or _group_name
        self._users: dict[int, str] = {}
        self._groups: dict[int, str] = {}

    def user_name(self, uid: int) -> str:
        if uid not in self._users:
            self._users[uid] = self._resolve(self._user_lookup, uid, "uid")
        return self._users[uid]

    def group_name(self, gid: int) -> str:
        if gid not in self._groups:
            self._groups[gid] = self._resolve(self._group_lookup, gid, "gid")
        return self._groups[gid]

    @staticmethod
    def _resolve(lookup: Callable[[int], str], ident: int, kind: str) -> str:
        try:
            return lookup(ident)
        except (KeyError, OverflowError) as exc:
            logger.debug("no name for %s %d: %s", kind, ident, exc)
            return str(ident)


__all__ = [
    "safe_load_metadata",
    "load_entry_metadata",
    "local_utc_offset",
    "IdentityResolver",
]
