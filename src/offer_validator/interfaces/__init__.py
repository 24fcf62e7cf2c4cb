"""Protocol interfaces for all offer_validator components."""

from offer_validator.interfaces.engagement import EngagementIndex, EngagementLocator
from offer_validator.interfaces.identity import IdentityResolver
from offer_validator.interfaces.ledger import OfferLedger
from offer_validator.interfaces.signer import AttestationSigner

__all__ = [
    "EngagementIndex", "EngagementLocator",
    "IdentityResolver",
    "OfferLedger",
    "AttestationSigner",
]
