"""Offer snapshot reader: normalization and fatal upstream failures."""

from __future__ import annotations

import pytest

from offer_validator.errors import UpstreamUnavailable
from offer_validator.ethereum.snapshot import OfferSnapshotReader
from offer_validator.models.offer import EngagementKind, OfferState
from tests.factories import CAST_HASH, RESPONDER_FID, make_offer_record
from tests.mocks import MockIdentity, MockLedger


async def test_snapshot_normalizes_record(mock_ledger, mock_identity):
    mock_ledger.put(5, make_offer_record(
        offer_id=5, accepted_at=1_700_000_000, duration=3600, reaction_type=1, state=1,
    ))
    reader = OfferSnapshotReader(mock_ledger, mock_identity)

    offer = await reader.fetch(5)

    assert offer.id == 5
    assert offer.state is OfferState.ACCEPTED
    assert offer.accepted
    assert offer.engagement_kind is EngagementKind.QUOTE
    assert offer.responder_fid == RESPONDER_FID
    assert offer.cast_hash == CAST_HASH
    assert offer.accept_time_ms == 1_700_000_000_000
    assert offer.duration_ms == 3_600_000


async def test_unknown_state_is_not_accepted(mock_ledger, mock_identity):
    mock_ledger.put(1, make_offer_record(state=9))
    offer = await OfferSnapshotReader(mock_ledger, mock_identity).fetch(1)
    assert offer.state is OfferState.UNKNOWN
    assert not offer.accepted


async def test_unsupported_selector_is_fatal(mock_ledger, mock_identity):
    mock_ledger.put(1, make_offer_record(reaction_type=3))
    with pytest.raises(UpstreamUnavailable) as excinfo:
        await OfferSnapshotReader(mock_ledger, mock_identity).fetch(1)
    assert excinfo.value.phase == "ledger"


async def test_selector_unchecked_before_acceptance(mock_ledger, mock_identity):
    mock_ledger.put(1, make_offer_record(reaction_type=3, state=2))
    offer = await OfferSnapshotReader(mock_ledger, mock_identity).fetch(1)
    assert offer.state is OfferState.COMPLETED
    assert offer.engagement_kind is None


async def test_ledger_failure_propagates(mock_identity):
    ledger = MockLedger(error=UpstreamUnavailable("ledger", "rpc down"))
    with pytest.raises(UpstreamUnavailable):
        await OfferSnapshotReader(ledger, mock_identity).fetch(1)


async def test_malformed_record_is_fatal(mock_ledger, mock_identity):
    mock_ledger.put(1, make_offer_record()[:5])
    with pytest.raises(UpstreamUnavailable):
        await OfferSnapshotReader(mock_ledger, mock_identity).fetch(1)


async def test_identity_failure_is_fatal(mock_ledger):
    mock_ledger.put(1, make_offer_record())
    identity = MockIdentity(error=RuntimeError("neynar 503"))
    with pytest.raises(UpstreamUnavailable) as excinfo:
        await OfferSnapshotReader(mock_ledger, identity).fetch(1)
    assert excinfo.value.phase == "identity"


async def test_content_failure_is_fatal(mock_ledger, mock_identity):
    mock_ledger.put(1, make_offer_record(cast_url="https://warpcast.com/nobody/0xdead"))
    with pytest.raises(UpstreamUnavailable) as excinfo:
        await OfferSnapshotReader(mock_ledger, mock_identity).fetch(1)
    assert excinfo.value.phase == "content"
