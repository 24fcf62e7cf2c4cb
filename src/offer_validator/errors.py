"""Exception types raised across the validator."""

from __future__ import annotations


class ValidatorError(Exception):
    """Base class for all validator failures."""


class ConfigError(ValidatorError):
    """Required configuration is missing or malformed."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"missing required configuration: {', '.join(missing)}")


class UpstreamUnavailable(ValidatorError):
    """The ledger or the identity/content resolver could not be read."""

    def __init__(self, phase: str, detail: str) -> None:
        self.phase = phase
        self.detail = detail
        super().__init__(f"{phase}: {detail}")


class UnsupportedEngagementKind(ValidatorError, ValueError):
    """The offer carries an engagement selector this service does not handle."""

    def __init__(self, selector: object) -> None:
        self.selector = selector
        super().__init__(f"unsupported engagement selector: {selector!r}")


class SigningError(ValidatorError):
    """The attestation could not be produced."""
