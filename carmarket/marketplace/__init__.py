"""Marketplace rules: ranking, rental pricing, upgrades and booking checks."""

from .ranking import rank_listings, filter_by_tier, filter_by_category, featured_slides
from .rental_pricing import calculate_rental_cost, rental_quote
from .upgrades import suggest_upgrade, next_upgrade_tier, quote_upgrade, effective_tier
from .availability import check_availability, ensure_bookable, build_booking_request
from .validation import validate_step, validate_draft
from .summary import summarize_market

__all__ = [
    "rank_listings",
    "filter_by_tier",
    "filter_by_category",
    "featured_slides",
    "calculate_rental_cost",
    "rental_quote",
    "suggest_upgrade",
    "next_upgrade_tier",
    "quote_upgrade",
    "effective_tier",
    "check_availability",
    "ensure_bookable",
    "build_booking_request",
    "validate_step",
    "validate_draft",
    "summarize_market",
]
