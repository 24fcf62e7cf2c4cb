"""Engagement index and locator protocols."""

from __future__ import annotations

from typing import Protocol

from offer_validator.models.offer import EngagementKind
from offer_validator.models.records import Page


class EngagementIndex(Protocol):
    """Cursor-paginated listings the engagement strategies scan."""

    async def fetch_cast_reactions(
        self, cast_hash: str, reaction_type: str, cursor: str | None = None
    ) -> Page:
        """One page of ``reaction_type`` ("recasts" / "likes") on a cast."""
        ...

    async def fetch_user_casts(self, fid: int, cursor: str | None = None) -> Page:
        """One page of casts authored by ``fid``, newest first."""
        ...


class EngagementLocator(Protocol):
    """Finds the qualifying engagement for an offer."""

    async def locate(
        self, kind: EngagementKind, responder_fid: int, cast_hash: str
    ) -> int | None:
        """Creation time (epoch ms) of the engagement, or None if absent."""
        ...
