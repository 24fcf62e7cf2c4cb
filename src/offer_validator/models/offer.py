"""On-chain offer snapshot and its enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from offer_validator.errors import UnsupportedEngagementKind


class OfferState(IntEnum):
    """Lifecycle stage stored in the offers contract."""

    UNKNOWN = -1  # any value the contract may add later
    CREATED = 0
    ACCEPTED = 1
    COMPLETED = 2
    CANCELLED = 3

    @classmethod
    def from_chain(cls, value: int) -> OfferState:
        try:
            return cls(int(value))
        except ValueError:
            return cls.UNKNOWN


class EngagementKind(IntEnum):
    """Engagement the responder must perform, indexed by the on-chain selector."""

    RECAST = 0  # amplify
    QUOTE = 1
    LIKE = 2  # react

    @classmethod
    def from_selector(cls, selector: int) -> EngagementKind:
        """Validate an on-chain selector. Raises UnsupportedEngagementKind."""
        try:
            return cls(int(selector))
        except ValueError:
            raise UnsupportedEngagementKind(selector) from None


@dataclass(frozen=True)
class Offer:
    """Normalized offer facts read once per evaluation."""

    id: int
    state: OfferState
    engagement_kind: EngagementKind | None  # set only for ACCEPTED offers
    responder_fid: int
    cast_hash: str
    accept_time_ms: int
    duration_ms: int

    @property
    def accepted(self) -> bool:
        return self.state == OfferState.ACCEPTED
