"""
Market summary - tier breakdown and prices across a set of listings.
"""
import logging
from typing import Sequence

import numpy as np

from ..models.listing import Listing
from ..models.pricing import MarketSummary, TierStats
from ..models.tiers import ListingTier, TIER_CONFIGS


logger = logging.getLogger(__name__)


def _median_price(listings: Sequence[Listing]):
    prices = [l.price for l in listings if l.price and l.price > 0]
    if not prices:
        return None
    return float(np.median(prices))


def summarize_market(listings: Sequence[Listing]) -> MarketSummary:
    """Count listings per tier and compute median prices."""
    total = len(listings)
    if total == 0:
        return MarketSummary(
            tiers={tier: TierStats(tier=tier) for tier in ListingTier},
        )

    tiers = {}
    promoted = 0
    promotion_value = 0.0
    for tier in ListingTier:
        in_tier = [l for l in listings if l.tier is tier]
        tiers[tier] = TierStats(
            tier=tier,
            count=len(in_tier),
            share=round(len(in_tier) / total, 4),
            median_price=_median_price(in_tier),
        )
        if TIER_CONFIGS[tier].is_promoted:
            promoted += len(in_tier)
            promotion_value += len(in_tier) * TIER_CONFIGS[tier].monthly_price

    summary = MarketSummary(
        total_listings=total,
        promoted_listings=promoted,
        promoted_share=round(promoted / total, 4),
        median_price=_median_price(listings),
        tiers=tiers,
        monthly_promotion_value=round(promotion_value, 2),
    )
    logger.info(f"Market summary: {total} listings, {promoted} promoted")
    return summary
