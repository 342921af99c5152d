"""
Listing ranking - orders listings by promotion tier, then recency.
"""
import logging
from typing import Iterable, Optional, TypeVar, Union

from ..models.listing import Listing
from ..models.tiers import ListingCategory, ListingTier, tier_priority


logger = logging.getLogger(__name__)

L = TypeVar("L", bound=Listing)


def _rank_key(listing: Listing) -> tuple[int, float]:
    # timestamp() lets naive and aware datetimes compare
    return tier_priority(listing.tier), listing.created_at.timestamp()


def rank_listings(listings: Iterable[L]) -> list[L]:
    """
    Sort listings for display.

    Higher tier priority first; within a tier, newest first.
    Returns a new list and leaves the input untouched.
    """
    return sorted(listings, key=_rank_key, reverse=True)


def filter_by_tier(listings: Iterable[L], tier: Union[ListingTier, str]) -> list[L]:
    """Keep only listings in the given tier."""
    wanted = ListingTier(tier)
    return [listing for listing in listings if listing.tier is wanted]


def filter_by_category(
    listings: Iterable[L],
    category: Optional[Union[ListingCategory, str]] = None,
) -> list[L]:
    """Keep listings in a category. None or "ALL" keeps everything."""
    if category is None or (isinstance(category, str) and category.upper() == "ALL"):
        return list(listings)
    wanted = ListingCategory(category)
    return [listing for listing in listings if listing.category is wanted]


def featured_slides(
    listings: Iterable[L],
    category: Optional[Union[ListingCategory, str]] = None,
    items_per_view: int = 3,
) -> list[list[L]]:
    """
    Build featured carousel slides.

    Only promoted listings are shown; they are ranked and then
    chunked into slides of `items_per_view`.
    """
    if items_per_view < 1:
        raise ValueError("items_per_view must be at least 1")

    promoted = [listing for listing in filter_by_category(listings, category) if listing.is_promoted]
    ranked = rank_listings(promoted)

    slides = [ranked[i:i + items_per_view] for i in range(0, len(ranked), items_per_view)]
    logger.debug(f"Built {len(slides)} carousel slides from {len(ranked)} promoted listings")
    return slides


def placement_position(listing_id: str, ranked: Iterable[Listing]) -> Optional[int]:
    """1-based position of a listing in a ranked sequence."""
    for position, listing in enumerate(ranked, 1):
        if listing.id == listing_id:
            return position
    return None
