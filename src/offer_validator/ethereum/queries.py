"""Contract query helpers for the offers contract."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from web3 import AsyncHTTPProvider, AsyncWeb3

from offer_validator.bindings.offer_contract import OFFERS_ABI
from offer_validator.errors import UpstreamUnavailable

log = logging.getLogger(__name__)


class OfferContractQueries:
    """Read-only queries against the offers contract.

    Uses an AsyncWeb3 contract for ``eth_call`` only (no signing needed).
    """

    def __init__(self, contract_address: str, rpc_url: str) -> None:
        self._w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self._contract = self._w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(contract_address),
            abi=OFFERS_ABI,
        )

    async def close(self) -> None:
        """Close the provider's HTTP session."""
        try:
            await self._w3.provider.disconnect()
        except Exception as exc:
            log.debug("Provider disconnect failed: %s", exc)

    async def get_offer(self, offer_id: int) -> Sequence[Any]:
        """Query an offer's current on-chain record."""
        try:
            raw = await self._contract.functions.offers(offer_id).call()
        except Exception as exc:
            log.warning("offers(%d) failed: %s", offer_id, exc)
            raise UpstreamUnavailable("ledger", str(exc)) from exc
        log.debug("offers(%d) -> %r", offer_id, raw)
        return raw
