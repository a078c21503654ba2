"""Per-run collaborators shared by the listing stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timezone, tzinfo

from ..entry_model import IdentityResolver, local_utc_offset
from ..options import ListingOptions


@dataclass(frozen=True)
class ListingContext:
    """Options plus the values resolved once per run.

    Tests inject a fixed ``utc_offset`` and a stub ``identities`` resolver.
    """

    options: ListingOptions
    utc_offset: tzinfo = timezone.utc
    identities: IdentityResolver = field(default_factory=IdentityResolver)

    @classmethod
    def for_run(cls, options: ListingOptions) -> ListingContext:
        return cls(options=options, utc_offset=local_utc_offset(), identities=IdentityResolver())


__all__ = ["ListingContext"]
