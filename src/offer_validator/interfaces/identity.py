"""IdentityResolver protocol - resolves addresses and URLs to canonical ids."""

from __future__ import annotations

from typing import Protocol


class IdentityResolver(Protocol):
    """Maps upstream identifiers onto the ids the engagement index uses."""

    async def resolve_fid_by_custody_address(self, address: str) -> int:
        """Return the user fid that owns ``address``."""
        ...

    async def resolve_cast_hash_by_url(self, url: str) -> str:
        """Return the canonical hash of the cast at ``url``."""
        ...
