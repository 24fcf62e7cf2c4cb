"""Neynar integration - Farcaster identity and engagement lookups."""

from offer_validator.neynar.client import NeynarClient

__all__ = ["NeynarClient"]
