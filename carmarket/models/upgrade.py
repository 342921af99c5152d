"""
Upgrade models - tier upgrade suggestions and priced upgrade quotes.
"""
from datetime import datetime

from pydantic import BaseModel, Field

from .tiers import ListingTier


class UpgradeSuggestion(BaseModel):
    """Advisory: the candidate tier outranks the current one."""
    current_tier: ListingTier
    suggested_tier: ListingTier
    feature_delta: int = Field(description="Extra features gained by upgrading")
    priority_gain: int = Field(ge=1)


class UpgradeQuote(BaseModel):
    """Price and expiry for promoting a listing for a fixed duration."""
    tier: ListingTier
    duration_days: int
    price: float
    currency: str = "USD"
    expires_at: datetime
    benefits: list[str] = Field(default_factory=list)
