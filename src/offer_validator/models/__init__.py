"""Data models for the offer validator."""

from offer_validator.models.config import NeynarConfig, ValidatorConfig
from offer_validator.models.offer import EngagementKind, Offer, OfferState
from offer_validator.models.records import (
    Attestation,
    Decision,
    DecisionState,
    Page,
)

__all__ = [
    "NeynarConfig", "ValidatorConfig",
    "EngagementKind", "Offer", "OfferState",
    "Attestation", "Decision", "DecisionState", "Page",
]
