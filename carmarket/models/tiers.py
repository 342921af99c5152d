"""
Tier models - promotion tiers and their static display metadata.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ListingTier(str, Enum):
    """Promotion level of a listing, lowest first."""
    BASIC = "BASIC"
    FEATURED = "FEATURED"
    PREMIUM = "PREMIUM"
    SPOTLIGHT = "SPOTLIGHT"

    @classmethod
    def _missing_(cls, value):
        # API payloads use lowercase names ("spotlight")
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class ListingCategory(str, Enum):
    """Whether a vehicle is offered for sale or for hire."""
    SALE = "SALE"
    RENTAL = "RENTAL"


class TierConfig(BaseModel):
    """Immutable display and placement metadata for one tier."""
    model_config = ConfigDict(frozen=True)

    tier: ListingTier
    label: str
    priority: int = Field(ge=1, le=4, description="Higher sorts first")
    description: str
    features: tuple[str, ...] = ()
    icon: str

    # Colour tokens (CSS colours)
    gradient: tuple[str, ...]
    bg_color: str
    text_color: str
    border_color: str
    glow_color: Optional[str] = None

    # Priority placement indicator (None for BASIC)
    placement_label: Optional[str] = None
    placement_description: Optional[str] = None

    monthly_price: float = Field(default=0.0, ge=0, description="List price per month")

    @property
    def is_promoted(self) -> bool:
        return self.tier is not ListingTier.BASIC

    @property
    def css_gradient(self) -> str:
        return f"linear-gradient(90deg, {', '.join(self.gradient)})"

    @property
    def css_class(self) -> str:
        return f"tier-{self.tier.value.lower()}"


_TIER_CONFIGS = {
    ListingTier.BASIC: TierConfig(
        tier=ListingTier.BASIC,
        label="Basic",
        priority=1,
        description="Standard listing visibility",
        features=("Basic search visibility", "Standard placement"),
        icon="📌",
        gradient=("#9CA3AF", "#6B7280"),
        bg_color="#F3F4F6",
        text_color="#374151",
        border_color="#D1D5DB",
        monthly_price=0.0,
    ),
    ListingTier.FEATURED: TierConfig(
        tier=ListingTier.FEATURED,
        label="Featured",
        priority=2,
        description="Enhanced visibility and placement",
        features=(
            "Priority in search results",
            "Featured section placement",
            "Green highlight border",
        ),
        icon="⭐",
        gradient=("#4ADE80", "#10B981"),
        bg_color="#F0FDF4",
        text_color="#15803D",
        border_color="#86EFAC",
        glow_color="rgba(187, 247, 208, 0.5)",
        placement_label="Featured Priority",
        placement_description="Good visibility - Featured section",
        monthly_price=29.99,
    ),
    ListingTier.PREMIUM: TierConfig(
        tier=ListingTier.PREMIUM,
        label="Premium",
        priority=3,
        description="Premium placement with special highlighting",
        features=(
            "Top search placement",
            "Premium carousel inclusion",
            "Blue premium border",
            "Boost icon",
        ),
        icon="💎",
        gradient=("#60A5FA", "#06B6D4"),
        bg_color="#EFF6FF",
        text_color="#1D4ED8",
        border_color="#93C5FD",
        glow_color="rgba(191, 219, 254, 0.5)",
        placement_label="Premium Priority",
        placement_description="Enhanced visibility - Priority placement",
        monthly_price=59.99,
    ),
    ListingTier.SPOTLIGHT: TierConfig(
        tier=ListingTier.SPOTLIGHT,
        label="Spotlight",
        priority=4,
        description="Maximum visibility with spotlight treatment",
        features=(
            "Highest priority placement",
            "Spotlight carousel",
            "Animated gradient border",
            "Crown icon",
            "Social media promotion",
        ),
        icon="🌟",
        gradient=("#C084FC", "#EC4899", "#EF4444"),
        bg_color="#FAF5FF",
        text_color="#7E22CE",
        border_color="#D8B4FE",
        glow_color="rgba(233, 213, 255, 0.5)",
        placement_label="Spotlight Priority",
        placement_description="Highest visibility - Top of all searches",
        monthly_price=99.99,
    ),
}

# Read-only registry, defined once at import
TIER_CONFIGS: Mapping[ListingTier, TierConfig] = MappingProxyType(_TIER_CONFIGS)


def get_tier_config(tier: Union[ListingTier, str]) -> TierConfig:
    """Look up the config for a tier given as enum or name."""
    return TIER_CONFIGS[ListingTier(tier)]


def tier_priority(tier: Union[ListingTier, str]) -> int:
    """Numeric priority of a tier (BASIC=1 ... SPOTLIGHT=4)."""
    return get_tier_config(tier).priority


def promoted_tiers() -> list[ListingTier]:
    """Paid tiers in ascending priority."""
    return [t for t in ListingTier if TIER_CONFIGS[t].is_promoted]
