"""
Listing card component - displays ranked listings with their tier treatment.
"""
from html import escape
from typing import Optional, Sequence

import streamlit as st

from ...config import get_config
from ...marketplace.upgrades import effective_tier
from ...models.listing import Listing, RentalListing
from ..badges import badge_html, highlight_html, placement_html


def format_price(amount: Optional[float], currency: Optional[str] = None) -> str:
    if not amount:
        return "Price on request"
    return f"{currency or get_config().ui.currency} {amount:,.0f}"


def listing_card_html(listing: Listing, position: Optional[int] = None, total: Optional[int] = None) -> str:
    """Card HTML wrapped in the listing's tier highlight."""
    tier = effective_tier(listing)
    tags_html = ""
    if isinstance(listing, RentalListing):
        price_str = f"{format_price(listing.rates.daily_rate)} / day"
        if listing.instant_booking:
            tags_html += '<span class="tag tag-instant">⚡ Instant Booking</span>'
    else:
        price_str = format_price(listing.price)

    details = " • ".join(str(part) for part in (listing.year, listing.make, listing.model) if part)
    card = f"""
    <div class="listing-card">
        <div class="card-header">
            <span class="title">{escape(listing.title or 'Untitled')}</span>
            {badge_html(tier, variant="compact")}
        </div>
        <div class="price">{price_str}</div>
        <div class="location">📍 {escape(listing.location or 'Unknown location')} {escape(details)}</div>
        <div>{tags_html}</div>
        {placement_html(tier, position, total)}
    </div>
    """
    return highlight_html(tier, card)


def render_listings_section(listings: Sequence[Listing]):
    """
    Render ranked listings as cards.

    Args:
        listings: Listings already in display order
    """
    if not listings:
        st.info("No listings to show")
        return

    total = len(listings)
    for position, listing in enumerate(listings, 1):
        st.markdown(listing_card_html(listing, position, total), unsafe_allow_html=True)
