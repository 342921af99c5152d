"""
Upgrade panel component - current tier status and promotion options.
"""
from typing import Optional

import streamlit as st

from ...marketplace.upgrades import (
    UPGRADE_PRICING,
    available_upgrades,
    effective_tier,
    next_upgrade_tier,
    quote_upgrade,
    suggest_upgrade,
)
from ...models.listing import Listing
from ...models.tiers import get_tier_config
from ...models.upgrade import UpgradeQuote
from ..badges import features_html, status_html, upgrade_html


def render_upgrade_panel(listing: Listing) -> Optional[UpgradeQuote]:
    """
    Show the listing's tier status and let the owner pick an upgrade.

    Returns:
        The selected quote when the user confirms, else None
    """
    current = effective_tier(listing)
    st.markdown(status_html(current, listing.premium_expires_at), unsafe_allow_html=True)

    next_tier = next_upgrade_tier(current)
    if next_tier:
        st.markdown(upgrade_html(suggest_upgrade(current, next_tier)), unsafe_allow_html=True)

    options = available_upgrades(current)
    if not options:
        return None

    tier = st.selectbox(
        "Promotion tier",
        options=options,
        index=options.index(next_tier) if next_tier in options else 0,
        format_func=lambda t: f"{get_tier_config(t).icon} {get_tier_config(t).label}",
        key=f"upgrade_tier_{listing.id}",
    )
    duration = st.radio(
        "Duration",
        options=sorted(UPGRADE_PRICING[tier]),
        format_func=lambda d: f"{d} days",
        horizontal=True,
        key=f"upgrade_duration_{listing.id}",
    )
    st.markdown(features_html(tier), unsafe_allow_html=True)

    quote = quote_upgrade(tier, duration)
    st.metric("Price", f"${quote.price:,.2f}", help=f"Expires {quote.expires_at:%Y-%m-%d}")
    for benefit in quote.benefits:
        st.markdown(f"- {benefit}")

    if st.button(f"Upgrade to {get_tier_config(tier).label}", type="primary", key=f"upgrade_{listing.id}"):
        return quote
    return None
