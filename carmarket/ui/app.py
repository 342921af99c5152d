"""
Car Marketplace - browse, rent and promote listings.

Streamlit front end over the marketplace API.
"""
import sys
from pathlib import Path

# Add project root to path for imports when running via streamlit
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from carmarket.config import get_config
from carmarket.client import ApiService, normalize_listings
from carmarket.marketplace.ranking import filter_by_category, rank_listings
from carmarket.models.api import LoginCredentials, SearchFilters
from carmarket.models.listing import RentalListing
from carmarket.models.tiers import ListingCategory

from carmarket.ui.styles import inject_custom_css
from carmarket.ui.components import (
    render_listings_section,
    render_featured_carousel,
    render_booking_panel,
    render_upgrade_panel,
    render_market_panel,
)


def init_session_state():
    """Initialize session state variables."""
    defaults = {
        "client": None,
        "listings": [],
        "my_listings": [],
        "user": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def main():
    """Main application entry point."""
    config = get_config()

    st.set_page_config(
        page_title=config.ui.page_title,
        page_icon=config.ui.page_icon,
        layout="wide",
    )

    inject_custom_css()
    init_session_state()

    if st.session_state.client is None:
        st.session_state.client = ApiService()

    render_header()
    render_sidebar()

    browse_tab, rent_tab, promote_tab, market_tab = st.tabs(
        ["🚗 Browse", "📅 Rent", "👑 Promote", "📊 Market"]
    )
    with browse_tab:
        render_browse_tab()
    with rent_tab:
        render_rent_tab()
    with promote_tab:
        render_promote_tab()
    with market_tab:
        render_market_panel(st.session_state.listings)


def render_header():
    """Render the app header."""
    st.markdown(f"""
    <div class="app-header">
        <h1>{get_config().ui.page_icon} {get_config().ui.page_title}</h1>
        <p class="subtitle">Buy, sell and hire vehicles</p>
    </div>
    """, unsafe_allow_html=True)


def render_sidebar():
    """Login form and search filters."""
    client: ApiService = st.session_state.client

    with st.sidebar:
        if st.session_state.user:
            st.markdown(f"Signed in as **{st.session_state.user}**")
            if st.button("Sign out"):
                client.logout()
                st.session_state.user = None
                st.session_state.my_listings = []
                st.rerun()
        else:
            with st.form("login"):
                email = st.text_input("Email")
                password = st.text_input("Password", type="password")
                if st.form_submit_button("Sign in"):
                    response = client.login(LoginCredentials(email=email, password=password))
                    if response.success:
                        st.session_state.user = email
                        st.rerun()
                    else:
                        st.error(f"Failed to sign in: {response.error}")

        st.markdown("### Search")
        query = st.text_input("Keywords", placeholder="e.g. Toyota Prado")
        max_price = st.number_input("Max price", min_value=0, value=0, step=50000)
        if st.button("🔍 Search", type="primary", use_container_width=True):
            filters = SearchFilters(
                query=query or None,
                max_price=max_price or None,
                limit=get_config().ui.page_size,
            )
            with st.spinner("Loading listings..."):
                st.session_state.listings = client.search_ranked(filters)
            if not st.session_state.listings:
                st.warning("No listings found. Try another search.")


def render_browse_tab():
    listings = st.session_state.listings
    category = st.radio(
        "Category",
        options=["ALL", ListingCategory.SALE.value, ListingCategory.RENTAL.value],
        format_func=lambda c: {"ALL": "All", "SALE": "For sale", "RENTAL": "For hire"}[c],
        horizontal=True,
    )

    st.markdown("### ⭐ Featured")
    render_featured_carousel(listings, category=category, items_per_view=get_config().ui.items_per_view)

    st.markdown("### All listings")
    render_listings_section(rank_listings(filter_by_category(listings, category)))


def render_rent_tab():
    rentals = [l for l in st.session_state.listings if isinstance(l, RentalListing)]
    if not rentals:
        st.info("Search to load vehicles for hire")
        return

    by_id = {l.id: l for l in rank_listings(rentals)}
    selected = st.selectbox("Vehicle", options=list(by_id), format_func=lambda i: by_id[i].title)
    booking = render_booking_panel(by_id[selected])
    if booking is None:
        return

    with st.spinner("Submitting booking..."):
        response = st.session_state.client.create_booking(booking)
    if response.success:
        st.success("Booking confirmed! You will receive a confirmation email shortly.")
    else:
        st.error(f"Booking failed. Please try again. ({response.error})")


def render_promote_tab():
    client: ApiService = st.session_state.client
    if not st.session_state.user:
        st.info("Sign in to promote your listings")
        return

    if not st.session_state.my_listings:
        response = client.get_my_listings()
        if not response.success:
            st.error(f"Failed to load your listings: {response.error}")
            return
        st.session_state.my_listings = normalize_listings(response.data)

    mine = {l.id: l for l in st.session_state.my_listings}
    if not mine:
        st.info("You have no listings yet")
        return

    selected = st.selectbox("Listing", options=list(mine), format_func=lambda i: mine[i].title)
    quote = render_upgrade_panel(mine[selected])
    if quote is None:
        return

    response = client.upgrade_listing(selected, quote.tier, quote.duration_days)
    if response.success:
        st.success(response.message or "Listing upgraded")
        st.session_state.my_listings = []
    else:
        st.error(f"Failed to upgrade listing: {response.error}")


if __name__ == "__main__":
    main()
