"""Configuration models for the validator service."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NeynarConfig:
    """Neynar engagement index / identity resolver settings."""

    api_key: str = ""  # loaded from env var OFFER_VALIDATOR_NEYNAR_API_KEY
    base_url: str = "https://api.neynar.com"
    page_size: int = 100  # items requested per page
    max_pages: int = 500  # scan cap per lookup, 0 = unbounded
    timeout: int = 30  # seconds per request


@dataclass
class ValidatorConfig:
    """Complete validator configuration."""

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"
    allowed_origin: str = "*"

    # Ledger
    rpc_url: str = ""  # loaded from env var OFFER_VALIDATOR_RPC_URL
    contract_address: str = ""  # offers contract address (0x...)

    # Signer
    private_key: str = ""  # loaded from env var OFFER_VALIDATOR_PRIVATE_KEY

    # Engagement index
    neynar: NeynarConfig = field(default_factory=NeynarConfig)

    def missing_fields(self) -> list[str]:
        """Names of required settings that are still empty."""
        missing = []
        if not self.neynar.api_key:
            missing.append("neynar.api_key")
        if not self.rpc_url:
            missing.append("ledger.rpc_url")
        if not self.contract_address:
            missing.append("ledger.contract_address")
        if not self.private_key:
            missing.append("signer.private_key")
        return missing
