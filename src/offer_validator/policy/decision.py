"""Decision policy - the offer validation state machine.

Given an offer, the creation time of the responder's engagement (if any)
and the current time, decide whether the offer can be cancelled, completed,
or must be left alone:

1. Offer not ACCEPTED                                  -> NOT_ACCEPTED
2. No engagement and the 24h response window is over,
   or the engagement landed after the window           -> CANCELLABLE
3. Engagement in time and the duration has elapsed     -> COMPLETABLE
4. Anything else                                       -> still pending

All comparisons are strict: an engagement exactly at the deadline is in
time, and completion needs ``now`` strictly past ``engagement + duration``.
"""

from __future__ import annotations

from offer_validator.models.offer import Offer
from offer_validator.models.records import DecisionState

DAY_MS = 24 * 60 * 60 * 1000


def response_deadline_ms(offer: Offer) -> int:
    return offer.accept_time_ms + DAY_MS


def decide(offer: Offer, engagement_ms: int | None, now_ms: int) -> DecisionState:
    if not offer.accepted:
        return DecisionState.NOT_ACCEPTED

    deadline = response_deadline_ms(offer)

    if engagement_ms is None:
        if now_ms > deadline:
            return DecisionState.CANCELLABLE
        return DecisionState.AWAITING_ENGAGEMENT

    if engagement_ms > deadline:
        return DecisionState.CANCELLABLE

    if now_ms > engagement_ms + offer.duration_ms:
        return DecisionState.COMPLETABLE

    return DecisionState.ENGAGED_AWAITING_DURATION
