"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from offer_validator.errors import ConfigError
from offer_validator.models.config import NeynarConfig, ValidatorConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "OFFER_VALIDATOR_",
) -> ValidatorConfig:
    """Load validator configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (OFFER_VALIDATOR_PRIVATE_KEY, etc.)
        2. TOML config file
        3. Defaults from ValidatorConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = ValidatorConfig()

    # ── Server section ─────────────────────────────────────
    server = raw.get("server", {})
    if v := server.get("host"):
        cfg.host = str(v)
    if v := server.get("port"):
        cfg.port = int(v)
    if v := server.get("log_level"):
        cfg.log_level = str(v)
    if v := server.get("allowed_origin"):
        cfg.allowed_origin = str(v)

    # ── Ledger section ─────────────────────────────────────
    ledger = raw.get("ledger", {})
    if v := ledger.get("rpc_url"):
        cfg.rpc_url = str(v)
    if v := ledger.get("contract_address"):
        cfg.contract_address = str(v)

    # ── Signer section ─────────────────────────────────────
    signer = raw.get("signer", {})
    if v := signer.get("private_key"):
        cfg.private_key = str(v)

    # ── Neynar section ─────────────────────────────────────
    neynar_raw = raw.get("neynar", {})
    cfg.neynar = NeynarConfig(
        api_key=str(neynar_raw.get("api_key", "")),
        base_url=str(neynar_raw.get("base_url", "https://api.neynar.com")),
        page_size=int(neynar_raw.get("page_size", 100)),
        max_pages=int(neynar_raw.get("max_pages", 500)),
        timeout=int(neynar_raw.get("timeout", 30)),
    )

    # ── Environment variable overrides (highest priority) ──
    if key := os.environ.get(f"{env_prefix}NEYNAR_API_KEY"):
        cfg.neynar.api_key = key
    if rpc := os.environ.get(f"{env_prefix}RPC_URL"):
        cfg.rpc_url = rpc
    if addr := os.environ.get(f"{env_prefix}CONTRACT_ADDRESS"):
        cfg.contract_address = addr
    if pk := os.environ.get(f"{env_prefix}PRIVATE_KEY"):
        cfg.private_key = pk
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level
    if host := os.environ.get(f"{env_prefix}HOST"):
        cfg.host = host
    if port := os.environ.get(f"{env_prefix}PORT"):
        cfg.port = int(port)

    return cfg


def require_complete(cfg: ValidatorConfig) -> ValidatorConfig:
    """Fail fast if any credential the service needs at startup is absent."""
    missing = cfg.missing_fields()
    if missing:
        raise ConfigError(missing)
    return cfg
