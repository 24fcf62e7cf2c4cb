"""Engagement lookup - paginated scans of the engagement index."""

from offer_validator.engagement.locator import (
    IndexEngagementLocator,
    LikeStrategy,
    QuoteStrategy,
    RecastStrategy,
    engagement_timestamp_ms,
)
from offer_validator.engagement.pager import paginate

__all__ = [
    "IndexEngagementLocator",
    "LikeStrategy",
    "QuoteStrategy",
    "RecastStrategy",
    "engagement_timestamp_ms",
    "paginate",
]
