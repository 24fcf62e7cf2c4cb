"""Live fixtures: real ledger RPC + real Neynar, gated on environment.

Runs only when the OFFER_VALIDATOR_* credentials are exported and
OFFER_VALIDATOR_LIVE_OFFER_ID names an existing offer.
"""

from __future__ import annotations

import os

import httpx
import pytest

from offer_validator.config import load_config
from offer_validator.validator import OfferValidator


@pytest.fixture(scope="session")
def live_config():
    """Gate: skip all live tests if credentials are not configured."""
    cfg = load_config(os.environ.get("OFFER_VALIDATOR_CONFIG"))
    missing = cfg.missing_fields()
    if missing:
        pytest.skip(f"live credentials not configured: {', '.join(missing)}")
    return cfg


@pytest.fixture(scope="session")
def live_offer_id():
    raw = os.environ.get("OFFER_VALIDATOR_LIVE_OFFER_ID", "")
    if not raw.isdigit():
        pytest.skip("OFFER_VALIDATOR_LIVE_OFFER_ID not set")
    return int(raw)


@pytest.fixture(scope="session")
def rpc_reachable(live_config):
    """Gate: skip if the ledger RPC does not answer eth_chainId."""
    try:
        r = httpx.post(
            live_config.rpc_url,
            json={"jsonrpc": "2.0", "id": 1, "method": "eth_chainId", "params": []},
            timeout=10,
        )
        if "result" in r.json():
            return True
        pytest.skip(f"ledger RPC not healthy: {r.text[:200]}")
    except (httpx.ConnectError, httpx.TimeoutException) as exc:
        pytest.skip(f"ledger RPC unreachable: {exc}")


@pytest.fixture
async def live_validator(live_config, rpc_reachable):
    validator = OfferValidator.from_config(live_config)
    yield validator
    await validator.close()
