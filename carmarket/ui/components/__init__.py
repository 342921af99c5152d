"""UI components package."""

from .listing_card import render_listings_section
from .featured_carousel import render_featured_carousel
from .booking_panel import render_booking_panel
from .upgrade_panel import render_upgrade_panel
from .market_panel import render_market_panel

__all__ = [
    "render_listings_section",
    "render_featured_carousel",
    "render_booking_panel",
    "render_upgrade_panel",
    "render_market_panel",
]
