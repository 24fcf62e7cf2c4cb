"""Offer snapshot reader - ledger record plus identity/content resolution."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from offer_validator.bindings.offer_contract import OFFER_FIELDS
from offer_validator.errors import UnsupportedEngagementKind, UpstreamUnavailable
from offer_validator.interfaces.identity import IdentityResolver
from offer_validator.interfaces.ledger import OfferLedger
from offer_validator.models.offer import EngagementKind, Offer, OfferState

log = logging.getLogger(__name__)

MS_PER_SECOND = 1000


def _field(raw: Sequence[Any], name: str) -> Any:
    try:
        return raw[OFFER_FIELDS[name]]
    except (IndexError, TypeError) as exc:
        raise UpstreamUnavailable("ledger", f"malformed offer record: missing {name}") from exc


class OfferSnapshotReader:
    """Builds a normalized Offer from the ledger and the identity resolver.

    Both indirections (custody address -> fid, cast URL -> hash) are part of
    the read; a failure in either fails the whole snapshot.
    """

    def __init__(self, ledger: OfferLedger, identity: IdentityResolver) -> None:
        self._ledger = ledger
        self._identity = identity

    async def fetch(self, offer_id: int) -> Offer:
        raw = await self._ledger.get_offer(offer_id)

        receiver = str(_field(raw, "receiver"))
        accepted_at = int(_field(raw, "accepted_at"))
        duration = int(_field(raw, "duration"))
        cast_url = str(_field(raw, "cast_url"))
        state = OfferState.from_chain(_field(raw, "state"))

        if accepted_at < 0 or duration < 0:
            raise UpstreamUnavailable(
                "ledger", f"negative timing on offer {offer_id}",
            )

        # The selector only matters once the offer is accepted.
        kind = None
        if state == OfferState.ACCEPTED:
            try:
                kind = EngagementKind.from_selector(_field(raw, "reaction_type"))
            except UnsupportedEngagementKind as exc:
                log.error("Offer %d: %s", offer_id, exc)
                raise UpstreamUnavailable("ledger", str(exc)) from exc

        try:
            fid = await self._identity.resolve_fid_by_custody_address(receiver)
        except UpstreamUnavailable:
            raise
        except Exception as exc:
            raise UpstreamUnavailable("identity", str(exc)) from exc

        try:
            cast_hash = await self._identity.resolve_cast_hash_by_url(cast_url)
        except UpstreamUnavailable:
            raise
        except Exception as exc:
            raise UpstreamUnavailable("content", str(exc)) from exc

        offer = Offer(
            id=offer_id,
            state=state,
            engagement_kind=kind,
            responder_fid=fid,
            cast_hash=cast_hash,
            accept_time_ms=accepted_at * MS_PER_SECOND,
            duration_ms=duration * MS_PER_SECOND,
        )
        log.debug("Offer snapshot: %s", offer)
        return offer
