"""
Pricing models - rental quotes and tier market summaries.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .tiers import ListingTier


class RentalQuote(BaseModel):
    """Breakdown of a rental cost into the blocks that were charged."""
    total_days: int = Field(ge=1)
    pricing_tier: Literal["monthly", "weekly", "daily"]
    months: int = 0
    weeks: int = 0
    remaining_days: int = 0
    total: float

    @property
    def average_daily(self) -> float:
        return self.total / self.total_days


class TierStats(BaseModel):
    """Counts and prices for the listings in one tier."""
    tier: ListingTier
    count: int = 0
    share: float = Field(default=0.0, ge=0, le=1)
    median_price: Optional[float] = None


class MarketSummary(BaseModel):
    """Tier breakdown of a set of listings."""
    total_listings: int = 0
    promoted_listings: int = 0
    promoted_share: float = Field(default=0.0, ge=0, le=1)
    median_price: Optional[float] = None
    tiers: dict[ListingTier, TierStats] = Field(default_factory=dict)
    monthly_promotion_value: float = Field(default=0.0, description="Promoted listings at list price")
