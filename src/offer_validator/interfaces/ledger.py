"""OfferLedger protocol - read-only access to the offers contract."""

from __future__ import annotations

from typing import Any, Protocol, Sequence


class OfferLedger(Protocol):
    """Reads raw offer records from the chain."""

    async def get_offer(self, offer_id: int) -> Sequence[Any]:
        """Return the positional offer tuple exactly as the contract emits it."""
        ...
