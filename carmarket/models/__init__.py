"""
Pydantic models for carmarket.
All data contracts are defined here for strict validation.
"""

from .tiers import (
    ListingTier,
    ListingCategory,
    TierConfig,
    TIER_CONFIGS,
    get_tier_config,
    tier_priority,
)
from .listing import Listing, Owner, RentalRate, Availability, RentalListing
from .booking import CustomerInfo, BookingRequest, BookingCheck
from .upgrade import UpgradeSuggestion, UpgradeQuote
from .pricing import RentalQuote, TierStats, MarketSummary
from .api import ApiResponse, LoginCredentials, RegisterData, SearchFilters

__all__ = [
    # Tiers
    "ListingTier",
    "ListingCategory",
    "TierConfig",
    "TIER_CONFIGS",
    "get_tier_config",
    "tier_priority",
    # Listing
    "Listing",
    "Owner",
    "RentalRate",
    "Availability",
    "RentalListing",
    # Booking
    "CustomerInfo",
    "BookingRequest",
    "BookingCheck",
    # Upgrades
    "UpgradeSuggestion",
    "UpgradeQuote",
    # Pricing
    "RentalQuote",
    "TierStats",
    "MarketSummary",
    # API
    "ApiResponse",
    "LoginCredentials",
    "RegisterData",
    "SearchFilters",
]
