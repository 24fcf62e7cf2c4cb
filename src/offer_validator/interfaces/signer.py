"""AttestationSigner protocol - signs validation outcomes."""

from __future__ import annotations

from typing import Protocol

from offer_validator.models.records import Attestation


class AttestationSigner(Protocol):
    """Holds the signing key for validation attestations."""

    @property
    def address(self) -> str:
        """Checksummed address the attestations recover to."""
        ...

    def sign(self, offer_id: int, result: bool) -> Attestation:
        """Sign the (offer_id, result) pair."""
        ...
