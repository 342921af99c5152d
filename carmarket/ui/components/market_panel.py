"""
Market panel component - tier breakdown of the current listings.
"""
from typing import Sequence

import streamlit as st

from ...marketplace.summary import summarize_market
from ...models.listing import Listing
from ...models.tiers import get_tier_config
from .listing_card import format_price


def render_market_panel(listings: Sequence[Listing]):
    """Render summary metrics for a set of listings."""
    summary = summarize_market(listings)

    col1, col2, col3 = st.columns(3)
    col1.metric("Listings", summary.total_listings)
    col2.metric("Promoted", f"{summary.promoted_listings} ({summary.promoted_share * 100:.0f}%)")
    col3.metric("Median price", format_price(summary.median_price))

    rows = []
    for tier, stats in summary.tiers.items():
        config = get_tier_config(tier)
        rows.append({
            "Tier": f"{config.icon} {config.label}",
            "Listings": stats.count,
            "Share": f"{stats.share * 100:.0f}%",
            "Median price": format_price(stats.median_price),
        })
    st.dataframe(rows, use_container_width=True, hide_index=True)
