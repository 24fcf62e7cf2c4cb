"""Result records produced by one evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DecisionState(str, Enum):
    """Where an offer sits in the validation state machine."""

    NOT_ACCEPTED = "not_accepted"
    AWAITING_ENGAGEMENT = "awaiting_engagement"
    ENGAGED_AWAITING_DURATION = "engaged_awaiting_duration"
    CANCELLABLE = "cancellable"
    COMPLETABLE = "completable"

    @property
    def terminal(self) -> bool:
        """Terminal states require a signed attestation."""
        return self in (DecisionState.CANCELLABLE, DecisionState.COMPLETABLE)

    @property
    def result(self) -> bool:
        return self is DecisionState.COMPLETABLE


@dataclass(frozen=True)
class Attestation:
    """secp256k1 signature over keccak256(abi.encode(offerId, result))."""

    offer_id: int
    result: bool
    message_hash: str  # 0x-prefixed hex
    v: int
    r: str  # 0x-prefixed, 32 bytes
    s: str  # 0x-prefixed, 32 bytes


@dataclass
class Page:
    """One page of an engagement index listing."""

    items: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: str | None = None


@dataclass(frozen=True)
class Decision:
    """Outcome of validating a single offer."""

    offer_id: int
    state: DecisionState
    attestation: Attestation | None = None
    engagement_ms: int | None = None

    @property
    def result(self) -> bool:
        return self.state.result

    @property
    def signed(self) -> bool:
        return self.attestation is not None

    def to_response(self) -> dict[str, Any]:
        """JSON body returned to the caller.

        Unsigned outcomes use ``offerId``; signed outcomes use ``offer_id``
        plus the v/r/s triple, matching what the execution step consumes.
        """
        if self.attestation is None:
            return {"offerId": self.offer_id, "result": self.result}
        return {
            "offer_id": self.offer_id,
            "result": self.result,
            "v": self.attestation.v,
            "r": self.attestation.r,
            "s": self.attestation.s,
        }
