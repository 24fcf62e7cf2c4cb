"""API components - the HTTP validation endpoint."""

from offer_validator.api.server import create_app, run_server

__all__ = ["create_app", "run_server"]
