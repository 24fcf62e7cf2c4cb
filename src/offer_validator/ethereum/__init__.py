"""Ethereum integration - offer queries, snapshot reader, attestation signer."""

from offer_validator.ethereum.attestation import LocalAttestationSigner, recover_signer
from offer_validator.ethereum.queries import OfferContractQueries
from offer_validator.ethereum.snapshot import OfferSnapshotReader

__all__ = [
    "LocalAttestationSigner",
    "OfferContractQueries",
    "OfferSnapshotReader",
    "recover_signer",
]
