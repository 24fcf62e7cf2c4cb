"""Neynar HTTP client - identity resolution and engagement listings."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from offer_validator.errors import UpstreamUnavailable
from offer_validator.models.records import Page

log = logging.getLogger(__name__)


def _next_cursor(data: dict[str, Any]) -> str | None:
    nxt = data.get("next") or {}
    return nxt.get("cursor") or None


class NeynarClient:
    """Async client for the Neynar v2 REST API.

    Implements both IdentityResolver and EngagementIndex. Holds one
    ``httpx.AsyncClient`` for the life of the process.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.neynar.com",
        page_size: int = 100,
        timeout: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._page_size = page_size
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"x-api-key": api_key, "accept": "application/json"},
            timeout=httpx.Timeout(timeout, connect=10),
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        params = {k: v for k, v in params.items() if v is not None}
        resp = await self._client.get(path, params=params)
        resp.raise_for_status()
        return resp.json()

    # ── IdentityResolver ───────────────────────────────────

    async def resolve_fid_by_custody_address(self, address: str) -> int:
        try:
            data = await self._get(
                "/v2/farcaster/user/custody-address", {"custody_address": address},
            )
            return int(data["user"]["fid"])
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            log.warning("Custody address lookup failed for %s: %s", address, exc)
            raise UpstreamUnavailable("identity", f"no user for {address}") from exc

    async def resolve_cast_hash_by_url(self, url: str) -> str:
        try:
            data = await self._get(
                "/v2/farcaster/cast", {"identifier": url, "type": "url"},
            )
            return str(data["cast"]["hash"])
        except (httpx.HTTPError, KeyError, TypeError) as exc:
            log.warning("Cast lookup failed for %s: %s", url, exc)
            raise UpstreamUnavailable("content", f"no cast at {url}") from exc

    # ── EngagementIndex ────────────────────────────────────

    async def fetch_cast_reactions(
        self, cast_hash: str, reaction_type: str, cursor: str | None = None
    ) -> Page:
        data = await self._get(
            "/v2/farcaster/reactions/cast",
            {
                "hash": cast_hash,
                "types": reaction_type,
                "limit": self._page_size,
                "cursor": cursor,
            },
        )
        return Page(items=list(data.get("reactions") or []), next_cursor=_next_cursor(data))

    async def fetch_user_casts(self, fid: int, cursor: str | None = None) -> Page:
        data = await self._get(
            "/v2/farcaster/feed/user/casts",
            {
                "fid": fid,
                "limit": self._page_size,
                "include_replies": "true",
                "cursor": cursor,
            },
        )
        return Page(items=list(data.get("casts") or []), next_cursor=_next_cursor(data))
