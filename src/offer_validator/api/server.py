"""HTTP entry point - GET /validate?offerId=N."""

from __future__ import annotations

import asyncio
import logging
import signal

from aiohttp import web

from offer_validator.errors import ValidatorError
from offer_validator.models.config import ValidatorConfig
from offer_validator.validator import OfferValidator

log = logging.getLogger(__name__)

VALIDATOR_KEY = web.AppKey("validator", OfferValidator)
HEADERS_KEY = web.AppKey("cors_headers", dict)


def cors_headers(allowed_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
    }


def parse_offer_id(raw: str) -> int | None:
    """Parse a positive integer offer id, or None if it is not one."""
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    return value if value > 0 else None


def _json(request: web.Request, status: int, body: dict) -> web.Response:
    return web.json_response(body, status=status, headers=request.app[HEADERS_KEY])


async def handle_validate(request: web.Request) -> web.Response:
    raw = request.query.get("offerId", "")
    if not raw:
        return _json(request, 400, {"error": "No offerId provided"})

    offer_id = parse_offer_id(raw)
    if offer_id is None:
        return _json(request, 400, {"error": "Invalid offerId"})

    validator = request.app[VALIDATOR_KEY]
    try:
        decision = await validator.evaluate(offer_id)
    except ValidatorError as exc:
        log.error("Validation of offer %d failed: %s", offer_id, exc)
        return _json(request, 500, {"error": "Internal server error"})
    except Exception:
        log.exception("Unexpected error validating offer %d", offer_id)
        return _json(request, 500, {"error": "Internal server error"})

    return _json(request, 200, decision.to_response())


async def handle_preflight(request: web.Request) -> web.Response:
    return web.Response(status=204, headers=request.app[HEADERS_KEY])


def create_app(validator: OfferValidator, allowed_origin: str = "*") -> web.Application:
    app = web.Application()
    app[VALIDATOR_KEY] = validator
    app[HEADERS_KEY] = cors_headers(allowed_origin)
    for path in ("/", "/validate"):
        app.router.add_get(path, handle_validate)
        app.router.add_route("OPTIONS", path, handle_preflight)
    return app


async def run_server(cfg: ValidatorConfig) -> None:
    """Serve until SIGINT/SIGTERM, then release upstream sessions."""
    validator = OfferValidator.from_config(cfg)
    runner = web.AppRunner(create_app(validator, cfg.allowed_origin))
    try:
        await runner.setup()
        site = web.TCPSite(runner, cfg.host, cfg.port)
        await site.start()
        log.info("Offer validator listening on http://%s:%d", cfg.host, cfg.port)
        log.info("  Signer: %s", validator.signer.address)
        log.info("  Contract: %s", cfg.contract_address)

        stop = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, stop.set)
            except NotImplementedError:
                # Windows doesn't support add_signal_handler
                pass

        await stop.wait()
    finally:
        log.info("Shutting down")
        await runner.cleanup()
        await validator.close()
        log.info("Server shut down cleanly")
