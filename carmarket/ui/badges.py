"""
Badge and highlight rendering - maps a listing tier to its visual treatment.

Pure HTML/class builders with no Streamlit dependency; the CSS they refer
to is generated in styles.py from the same tier registry.
"""
from datetime import datetime
from html import escape
from typing import Literal, Optional, Union

from pydantic import BaseModel

from ..marketplace.upgrades import is_expiring_soon
from ..models.listing import RentalListing
from ..models.tiers import ListingTier, TierConfig, get_tier_config
from ..models.upgrade import UpgradeSuggestion


BadgeVariant = Literal["default", "compact", "detailed", "animated"]
Intensity = Literal["subtle", "medium", "strong"]

BADGE_VARIANTS: tuple[str, ...] = ("default", "compact", "detailed", "animated")
INTENSITIES: tuple[str, ...] = ("subtle", "medium", "strong")

TierLike = Union[ListingTier, str]


class PlacementInfo(BaseModel):
    """Priority placement indicator for a promoted tier."""
    tier: ListingTier
    icon: str
    label: str
    description: str
    color: str
    bg_color: str
    border_color: str


class RentalHighlight(BaseModel):
    """One line of the premium rental summary."""
    label: str
    available: bool
    description: str


def _icon(config: TierConfig, show_icon: bool) -> str:
    return f'<span class="tier-icon">{config.icon}</span>' if show_icon else ""


def badge_html(
    tier: TierLike,
    variant: BadgeVariant = "default",
    show_icon: bool = True,
    show_description: bool = False,
    animated: bool = False,
) -> str:
    """
    HTML for a tier badge. BASIC listings get no badge.
    """
    if variant not in BADGE_VARIANTS:
        raise ValueError(f"Unknown badge variant {variant!r}")

    config = get_tier_config(tier)
    if not config.is_promoted:
        return ""

    classes = ["tier-badge", f"badge-{variant}", config.css_class]
    if animated or variant == "animated":
        classes.append("badge-pulse")
    class_attr = " ".join(classes)
    icon = _icon(config, show_icon)

    if variant == "detailed":
        description = (
            f'<p class="badge-description">{escape(config.description)}</p>'
            if show_description else ""
        )
        return (
            f'<div class="{class_attr}">'
            f'<div class="badge-title">{icon}<strong>{escape(config.label)}</strong></div>'
            f"{description}"
            f"</div>"
        )

    if variant == "animated":
        return (
            f'<span class="{class_attr}">'
            f'<span class="badge-inner">{icon}{escape(config.label)}</span>'
            f"</span>"
        )

    return f'<span class="{class_attr}">{icon}{escape(config.label)}</span>'


def highlight_classes(tier: TierLike, intensity: Intensity = "medium") -> list[str]:
    """CSS classes for the highlighted card wrapper. BASIC is unstyled."""
    if intensity not in INTENSITIES:
        raise ValueError(f"Unknown highlight intensity {intensity!r}")

    config = get_tier_config(tier)
    if not config.is_promoted:
        return []

    classes = ["tier-highlight", f"highlight-{intensity}", config.css_class]
    if config.tier is ListingTier.SPOTLIGHT:
        classes.append("spotlight-overlay")
    return classes


def highlight_html(tier: TierLike, inner_html: str, intensity: Optional[Intensity] = None) -> str:
    """Wrap card content in the tier's highlight frame."""
    config = get_tier_config(tier)
    if intensity is None:
        intensity = "strong" if config.tier is ListingTier.SPOTLIGHT else "medium"
    classes = highlight_classes(config.tier, intensity)
    if not classes:
        return f"<div>{inner_html}</div>"
    return f'<div class="{" ".join(classes)}"><div class="highlight-body">{inner_html}</div></div>'


def placement_info(tier: TierLike) -> Optional[PlacementInfo]:
    """Placement label and colours, None for BASIC."""
    config = get_tier_config(tier)
    if not config.is_promoted:
        return None
    return PlacementInfo(
        tier=config.tier,
        icon=config.icon,
        label=config.placement_label or config.label,
        description=config.placement_description or config.description,
        color=config.text_color,
        bg_color=config.bg_color,
        border_color=config.border_color,
    )


def placement_html(
    tier: TierLike,
    position: Optional[int] = None,
    total_listings: Optional[int] = None,
) -> str:
    info = placement_info(tier)
    if info is None:
        return ""
    rank = ""
    if position and total_listings:
        rank = f'<span class="placement-rank">#{position} of {total_listings}</span>'
    return (
        f'<div class="placement {get_tier_config(tier).css_class}">'
        f'<span class="tier-icon">{info.icon}</span>'
        f'<div><div class="placement-label">{escape(info.label)}</div>'
        f'<div class="placement-description">{escape(info.description)}</div></div>'
        f"{rank}"
        f"</div>"
    )


def tier_feature_list(tier: TierLike) -> list[str]:
    return list(get_tier_config(tier).features)


def features_html(tier: TierLike, show_title: bool = True) -> str:
    config = get_tier_config(tier)
    title = (
        f'<h4 class="features-title">{config.icon} {escape(config.label)} Features</h4>'
        if show_title else ""
    )
    items = "".join(f"<li>✨ {escape(feature)}</li>" for feature in config.features)
    return f'<div class="tier-features {config.css_class}">{title}<ul>{items}</ul></div>'


def status_html(
    tier: TierLike,
    expires_at: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> str:
    """Current tier with its expiry date and an 'Expiring Soon' flag."""
    config = get_tier_config(tier)
    expiry = ""
    if expires_at:
        expiry = f'<span class="status-expiry">Expires: {expires_at:%Y-%m-%d}</span>'
    warning = ""
    if is_expiring_soon(expires_at, now):
        warning = '<span class="tag tag-expiring">Expiring Soon</span>'
    return (
        f'<div class="tier-status {config.css_class}">'
        f"{config.icon} {escape(config.label)} Listing{expiry}{warning}"
        f"</div>"
    )


def upgrade_html(suggestion: Optional[UpgradeSuggestion]) -> str:
    """Upgrade call-to-action; empty when there is nothing to suggest."""
    if suggestion is None:
        return ""
    config = get_tier_config(suggestion.suggested_tier)
    return (
        f'<div class="upgrade-suggestion {config.css_class}">'
        f"{config.icon} Upgrade to <strong>{escape(config.label)}</strong>"
        f'<div class="upgrade-delta">Get {suggestion.feature_delta} more features</div>'
        f"</div>"
    )


def rental_highlights(listing: RentalListing) -> list[RentalHighlight]:
    """Premium rental summary lines for a listing."""
    owner = listing.owner
    rating = owner.rating if owner else 0.0
    response_time = owner.response_time if owner else ""
    return [
        RentalHighlight(
            label="Instant Booking",
            available=listing.instant_booking,
            description="Book immediately without waiting for approval",
        ),
        RentalHighlight(
            label="Verified Owner",
            available=bool(owner and owner.verified),
            description="Identity and documents verified",
        ),
        RentalHighlight(
            label="High Rating",
            available=rating >= 4.5,
            description=f"{rating}/5.0 rating",
        ),
        RentalHighlight(
            label="Quick Response",
            available=response_time == "within 1 hour",
            description=f"Responds {response_time}" if response_time else "Response time unknown",
        ),
    ]
