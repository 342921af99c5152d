"""
Tier upgrades - suggestions, the upgrade ladder, priced quotes and expiry.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Union

from ..config import get_config
from ..errors import UpgradeError
from ..models.listing import Listing
from ..models.tiers import ListingTier, get_tier_config, promoted_tiers
from ..models.upgrade import UpgradeQuote, UpgradeSuggestion


logger = logging.getLogger(__name__)

TierLike = Union[ListingTier, str]

# Price by tier and promotion length in days
UPGRADE_PRICING: dict[ListingTier, dict[int, float]] = {
    ListingTier.FEATURED: {7: 15, 14: 25, 30: 45},
    ListingTier.PREMIUM: {7: 25, 14: 45, 30: 75},
    ListingTier.SPOTLIGHT: {7: 45, 14: 75, 30: 125},
}

UPGRADE_BENEFITS: dict[ListingTier, list[str]] = {
    ListingTier.FEATURED: [
        'Green "Featured" badge',
        "Higher search ranking",
        "Appears in featured carousel",
        "2x more visibility",
    ],
    ListingTier.PREMIUM: [
        'Blue "Premium" badge',
        "Priority search placement",
        "Featured in premium section",
        "Advanced analytics",
        "3x more visibility",
    ],
    ListingTier.SPOTLIGHT: [
        'Purple "Spotlight" badge with glow',
        "Top search placement",
        "Homepage spotlight section",
        "Premium analytics dashboard",
        "Priority customer support",
        "5x more visibility",
    ],
}

DEFAULT_DURATION_DAYS = 30


def suggest_upgrade(current: TierLike, candidate: TierLike) -> Optional[UpgradeSuggestion]:
    """
    Suggest moving from `current` to `candidate`.

    Returns None unless the candidate strictly outranks the current tier.
    """
    current_config = get_tier_config(current)
    candidate_config = get_tier_config(candidate)

    if candidate_config.priority <= current_config.priority:
        return None

    return UpgradeSuggestion(
        current_tier=current_config.tier,
        suggested_tier=candidate_config.tier,
        feature_delta=len(candidate_config.features) - len(current_config.features),
        priority_gain=candidate_config.priority - current_config.priority,
    )


def next_upgrade_tier(current: TierLike) -> Optional[ListingTier]:
    """The tier directly above `current`, or None at the top."""
    ladder = list(ListingTier)
    index = ladder.index(ListingTier(current))
    if index + 1 < len(ladder):
        return ladder[index + 1]
    return None


def available_upgrades(current: TierLike) -> list[ListingTier]:
    """Paid tiers the listing could switch to."""
    current_tier = ListingTier(current)
    return [tier for tier in promoted_tiers() if tier is not current_tier]


def quote_upgrade(
    tier: TierLike,
    duration_days: int = DEFAULT_DURATION_DAYS,
    now: Optional[datetime] = None,
) -> UpgradeQuote:
    """Price a promotion of `duration_days` and compute when it lapses."""
    target = ListingTier(tier)
    pricing = UPGRADE_PRICING.get(target)
    if pricing is None:
        raise UpgradeError(f"{target.value} is not a paid tier")
    if duration_days not in pricing:
        options = ", ".join(str(d) for d in sorted(pricing))
        raise UpgradeError(f"Unsupported duration {duration_days} days (choose {options})")

    now = now or datetime.now()
    quote = UpgradeQuote(
        tier=target,
        duration_days=duration_days,
        price=pricing[duration_days],
        expires_at=now + timedelta(days=duration_days),
        benefits=list(UPGRADE_BENEFITS[target]),
    )
    logger.info(f"Quoted {target.value} for {duration_days} days at {quote.price:.2f} {quote.currency}")
    return quote


def effective_tier(listing: Listing, now: Optional[datetime] = None) -> ListingTier:
    """The tier a listing currently holds; a lapsed promotion reads as BASIC."""
    expires_at = listing.premium_expires_at
    if expires_at is None or not listing.is_promoted:
        return listing.tier

    now = now or datetime.now(expires_at.tzinfo)
    if expires_at > now:
        return listing.tier
    return ListingTier.BASIC


def is_expiring_soon(expires_at: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """True when a promotion lapses within the configured window."""
    if expires_at is None:
        return False
    now = now or datetime.now(expires_at.tzinfo)
    window = timedelta(hours=get_config().booking.expiring_soon_hours)
    return expires_at - now < window
