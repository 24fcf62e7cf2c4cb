"""Engagement locator - finds the responder's qualifying engagement on a cast."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from offer_validator.engagement.pager import paginate
from offer_validator.interfaces.engagement import EngagementIndex
from offer_validator.models.offer import EngagementKind

log = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _fid_of(item: dict[str, Any]) -> int | None:
    user = item.get("user") or item.get("author") or {}
    fid = user.get("fid")
    return int(fid) if fid is not None else None


def _embedded_hashes(cast: dict[str, Any]) -> list[str]:
    """Hashes of every cast referenced from a cast's embeds."""
    hashes = []
    for embed in cast.get("embeds") or []:
        ref = embed.get("cast_id") or embed.get("castId") or embed.get("cast") or {}
        if h := ref.get("hash"):
            hashes.append(str(h))
    return hashes


def engagement_timestamp_ms(item: dict[str, Any]) -> int | None:
    """Creation time of a reaction or cast in epoch milliseconds.

    Reactions carry ``reaction_timestamp``; casts carry ``timestamp``. The
    reaction field wins when both are present.
    """
    raw = item.get("reaction_timestamp") or item.get("timestamp")
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        return int(raw)
    text = str(raw).strip()
    if text.isdigit():
        return int(text)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


class RecastStrategy:
    """Amplify: scan the cast's recasts for one by the responder."""

    reaction_type = "recasts"

    def __init__(self, index: EngagementIndex, max_pages: int = 0) -> None:
        self._index = index
        self._max_pages = max_pages

    async def find(self, responder_fid: int, cast_hash: str) -> dict[str, Any] | None:
        async def fetch(cursor):
            return await self._index.fetch_cast_reactions(
                cast_hash, self.reaction_type, cursor=cursor,
            )

        async for reaction in paginate(fetch, self._max_pages, label=self.reaction_type):
            if _fid_of(reaction) == responder_fid:
                return reaction
        return None


class LikeStrategy(RecastStrategy):
    """React: same scan as recasts, over the cast's likes."""

    reaction_type = "likes"


class QuoteStrategy:
    """Quote: scan the responder's own casts for one embedding the target cast."""

    def __init__(self, index: EngagementIndex, max_pages: int = 0) -> None:
        self._index = index
        self._max_pages = max_pages

    async def find(self, responder_fid: int, cast_hash: str) -> dict[str, Any] | None:
        async def fetch(cursor):
            return await self._index.fetch_user_casts(responder_fid, cursor=cursor)

        async for cast in paginate(fetch, self._max_pages, label="user casts"):
            if cast_hash in _embedded_hashes(cast):
                return cast
        return None


class IndexEngagementLocator:
    """Dispatches to one strategy per EngagementKind.

    Lookup failures are logged and reported as "no engagement" so that an
    index outage degrades the decision instead of aborting it.
    """

    def __init__(self, index: EngagementIndex, max_pages: int = 0) -> None:
        self._strategies = {
            EngagementKind.RECAST: RecastStrategy(index, max_pages),
            EngagementKind.QUOTE: QuoteStrategy(index, max_pages),
            EngagementKind.LIKE: LikeStrategy(index, max_pages),
        }

    async def locate(
        self, kind: EngagementKind, responder_fid: int, cast_hash: str
    ) -> int | None:
        strategy = self._strategies[kind]
        try:
            item = await strategy.find(responder_fid, cast_hash)
            if item is None:
                log.info(
                    "No %s by fid %d on cast %s", kind.name.lower(), responder_fid, cast_hash,
                )
                return None
            created_ms = engagement_timestamp_ms(item)
        except Exception as exc:
            log.error(
                "Error fetching %s for fid %d on cast %s: %s",
                kind.name.lower(), responder_fid, cast_hash, exc,
            )
            return None

        log.info(
            "Found %s by fid %d on cast %s at %s",
            kind.name.lower(), responder_fid, cast_hash, created_ms,
        )
        return created_ms
