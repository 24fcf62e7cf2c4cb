"""CLI entry point for the offer validator."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from offer_validator.api.server import parse_offer_id, run_server
from offer_validator.config import load_config, require_complete
from offer_validator.errors import ConfigError, SigningError, ValidatorError
from offer_validator.ethereum.attestation import LocalAttestationSigner, recover_signer
from offer_validator.validator import OfferValidator


def _mask(value: str) -> str:
    return "***configured***" if value else "(not set)"


def _require_complete(cfg):
    """Exit with error if any required setting is missing."""
    try:
        require_complete(cfg)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo("Set OFFER_VALIDATOR_* env vars or the matching config keys.", err=True)
        sys.exit(1)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """offer-validator - Signs completion/cancellation decisions for offers."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    cfg = load_config(config_path)
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Server ─────────────────────────────────────────────


@cli.command()
@click.option("--host", default=None, help="Bind address (overrides config)")
@click.option("--port", type=int, default=None, help="Bind port (overrides config)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the HTTP validation endpoint."""
    cfg = load_config(ctx.obj["config_path"])
    _require_complete(cfg)
    if host:
        cfg.host = host
    if port:
        cfg.port = port

    click.echo(f"Starting offer validator on {cfg.host}:{cfg.port}")
    asyncio.run(run_server(cfg))


# ── One-shot evaluation ────────────────────────────────


@cli.command()
@click.argument("offer_id")
@click.pass_context
def validate(ctx: click.Context, offer_id: str) -> None:
    """Evaluate a single offer and print the response body."""
    parsed = parse_offer_id(offer_id)
    if parsed is None:
        click.echo(f"Error: invalid offer id {offer_id!r}", err=True)
        sys.exit(2)

    cfg = load_config(ctx.obj["config_path"])
    _require_complete(cfg)

    async def _validate():
        validator = OfferValidator.from_config(cfg)
        try:
            return await validator.evaluate(parsed)
        finally:
            await validator.close()

    try:
        decision = asyncio.run(_validate())
    except ValidatorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(decision.to_response()))
    if ctx.obj["verbose"]:
        click.echo(f"State: {decision.state.value}", err=True)


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show effective configuration (secrets masked)."""
    cfg = load_config(ctx.obj["config_path"])
    click.echo(f"Listen:       {cfg.host}:{cfg.port}")
    click.echo(f"Log level:    {cfg.log_level}")
    click.echo(f"CORS origin:  {cfg.allowed_origin}")
    click.echo(f"RPC URL:      {cfg.rpc_url or '(not set)'}")
    click.echo(f"Contract:     {cfg.contract_address or '(not set)'}")
    click.echo(f"Neynar URL:   {cfg.neynar.base_url}")
    click.echo(f"Neynar key:   {_mask(cfg.neynar.api_key)}")
    click.echo(f"Page size:    {cfg.neynar.page_size}")
    click.echo(f"Max pages:    {cfg.neynar.max_pages or 'unbounded'}")
    click.echo(f"Signer key:   {_mask(cfg.private_key)}")

    missing = cfg.missing_fields()
    if missing:
        click.echo(f"Missing:      {', '.join(missing)}")


@cli.command()
@click.pass_context
def signer(ctx: click.Context) -> None:
    """Print the address attestations recover to."""
    cfg = load_config(ctx.obj["config_path"])
    if not cfg.private_key:
        click.echo("Error: No signer key configured.", err=True)
        click.echo("Set OFFER_VALIDATOR_PRIVATE_KEY or signer.private_key in config.", err=True)
        sys.exit(1)
    try:
        click.echo(LocalAttestationSigner(cfg.private_key).address)
    except SigningError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("offer_id", type=int)
@click.argument("result", type=click.Choice(["true", "false"]))
@click.argument("v", type=int)
@click.argument("r")
@click.argument("s")
def recover(offer_id: int, result: str, v: int, r: str, s: str) -> None:
    """Print the signer address recovered from an attestation."""
    try:
        click.echo(recover_signer(offer_id, result == "true", v, r, s))
    except Exception as exc:
        click.echo(f"Error: cannot recover signer: {exc}", err=True)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
