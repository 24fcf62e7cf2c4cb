"""Offer validator - wires snapshot, engagement lookup, policy and signing."""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from offer_validator.engagement.locator import IndexEngagementLocator
from offer_validator.errors import SigningError
from offer_validator.ethereum.attestation import LocalAttestationSigner
from offer_validator.ethereum.queries import OfferContractQueries
from offer_validator.ethereum.snapshot import OfferSnapshotReader
from offer_validator.interfaces.engagement import EngagementLocator
from offer_validator.interfaces.signer import AttestationSigner
from offer_validator.models.config import ValidatorConfig
from offer_validator.models.records import Decision, DecisionState
from offer_validator.neynar.client import NeynarClient
from offer_validator.policy.decision import decide

log = logging.getLogger(__name__)


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


class OfferValidator:
    """Evaluates one offer per call; holds no per-request state.

    Steps run strictly in order: snapshot read, engagement lookup (only for
    ACCEPTED offers), decision, and signing for terminal decisions.
    """

    def __init__(
        self,
        reader: OfferSnapshotReader,
        locator: EngagementLocator,
        signer: AttestationSigner,
        clock: Callable[[], int] = wall_clock_ms,
    ) -> None:
        self.reader = reader
        self.locator = locator
        self.signer = signer
        self.clock = clock
        self._closers: list[Callable[[], Awaitable[None]]] = []

    @classmethod
    def from_config(cls, cfg: ValidatorConfig) -> OfferValidator:
        """Build a validator backed by the real ledger, Neynar and signer."""
        neynar = NeynarClient(
            api_key=cfg.neynar.api_key,
            base_url=cfg.neynar.base_url,
            page_size=cfg.neynar.page_size,
            timeout=cfg.neynar.timeout,
        )
        queries = OfferContractQueries(cfg.contract_address, cfg.rpc_url)
        validator = cls(
            reader=OfferSnapshotReader(queries, neynar),
            locator=IndexEngagementLocator(neynar, max_pages=cfg.neynar.max_pages),
            signer=LocalAttestationSigner(cfg.private_key),
        )
        validator._closers = [neynar.close, queries.close]
        return validator

    async def close(self) -> None:
        """Release upstream sessions; one failing closer does not stop the rest."""
        closers, self._closers = self._closers, []
        for closer in closers:
            try:
                await closer()
            except Exception as exc:
                log.warning("Error closing upstream session: %s", exc)

    async def evaluate(self, offer_id: int) -> Decision:
        """Decide what can be done with an offer right now."""
        offer = await self.reader.fetch(offer_id)

        if not offer.accepted:
            log.info("Offer %d not accepted (state=%s)", offer_id, offer.state.name)
            return Decision(offer_id=offer_id, state=DecisionState.NOT_ACCEPTED)

        engagement_ms = await self.locator.locate(
            offer.engagement_kind, offer.responder_fid, offer.cast_hash,
        )
        now_ms = self.clock()
        state = decide(offer, engagement_ms, now_ms)
        log.info(
            "Offer %d: kind=%s engagement=%s now=%d -> %s",
            offer_id, offer.engagement_kind.name, engagement_ms, now_ms, state.value,
        )

        if not state.terminal:
            return Decision(offer_id=offer_id, state=state, engagement_ms=engagement_ms)

        try:
            attestation = self.signer.sign(offer_id, state.result)
        except SigningError:
            raise
        except Exception as exc:
            raise SigningError(f"signing failed for offer {offer_id}") from exc

        return Decision(
            offer_id=offer_id,
            state=state,
            attestation=attestation,
            engagement_ms=engagement_ms,
        )
