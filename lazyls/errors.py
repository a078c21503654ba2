"""Fatal listing errors."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """A user-supplied path that cannot be listed at all."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(reason)

    @classmethod
    def missing(cls, path: Path | str) -> ListingError:
        return cls(path, f"cannot access '{path}': No such file or directory")

    @classmethod
    def inaccessible(cls, path: Path | str, exc: OSError) -> ListingError:
        detail = exc.strerror or str(exc)
        return cls(path, f"cannot access '{path}': {detail}")

    @classmethod
    def unreadable(cls, path: Path | str, exc: OSError) -> ListingError:
        detail = exc.strerror or str(exc)
        return cls(path, f"cannot open directory '{path}': {detail}")


__all__ = ["ListingError"]
