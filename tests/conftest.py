"""Shared fixtures for offer_validator tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from offer_validator.engagement.locator import IndexEngagementLocator
from offer_validator.ethereum.attestation import LocalAttestationSigner
from offer_validator.ethereum.snapshot import OfferSnapshotReader
from offer_validator.models.config import NeynarConfig, ValidatorConfig
from offer_validator.validator import OfferValidator

from tests.factories import CAST_HASH, CAST_URL, RECEIVER, RESPONDER_FID
from tests.mocks import FixedClock, MockIdentity, MockIndex, MockLedger

# Well-known development key (hardhat account #0); never funded on mainnet.
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_SIGNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
RPC_URL = "http://127.0.0.1:8545"
NEYNAR_URL = "https://api.neynar.test"


# ── Report metadata ───────────────────────────────────────────────


def pytest_configure(config):
    """Add signer/contract info to the report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Offers Contract"] = CONTRACT_ADDRESS
    meta["Attestation Signer"] = TEST_SIGNER


def pytest_html_results_summary(prefix, summary, postfix):
    """Show the addresses a recovered attestation should match."""
    prefix.append(
        '<div style="margin:8px 0;padding:10px;background:#f8f9fa;border:1px solid #dee2e6;'
        'border-radius:4px;font-family:monospace;font-size:13px;">'
        "<strong>Attestation Setup</strong><br/>"
        f"Offers Contract: {CONTRACT_ADDRESS}<br/>"
        f"Signer: {TEST_SIGNER}"
        "</div>"
    )


def make_test_config(**overrides) -> ValidatorConfig:
    """Build a ValidatorConfig suitable for testing."""
    defaults = dict(
        host="127.0.0.1",
        port=0,
        rpc_url=RPC_URL,
        contract_address=CONTRACT_ADDRESS,
        private_key=TEST_PRIVATE_KEY,
        neynar=NeynarConfig(api_key="test-neynar-key", base_url=NEYNAR_URL, max_pages=50),
    )
    defaults.update(overrides)
    return ValidatorConfig(**defaults)


@pytest.fixture
def test_config():
    """Default ValidatorConfig for tests."""
    return make_test_config()


@pytest.fixture
def signer():
    return LocalAttestationSigner(TEST_PRIVATE_KEY)


@pytest.fixture
def mock_ledger():
    return MockLedger()


@pytest.fixture
def mock_identity():
    return MockIdentity(fids={RECEIVER: RESPONDER_FID}, casts={CAST_URL: CAST_HASH})


@pytest.fixture
def mock_index():
    return MockIndex()


@pytest.fixture
def clock():
    return FixedClock(0)


@pytest.fixture
def validator(mock_ledger, mock_identity, mock_index, signer, clock):
    """OfferValidator wired to mocks, with a controllable clock."""
    return OfferValidator(
        reader=OfferSnapshotReader(mock_ledger, mock_identity),
        locator=IndexEngagementLocator(mock_index, max_pages=50),
        signer=signer,
        clock=clock,
    )
