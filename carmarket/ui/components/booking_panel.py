"""
Booking panel component - rental quote and instant booking form.
"""
from datetime import date, timedelta
from typing import Optional

import streamlit as st

from ...errors import BookingValidationError
from ...marketplace.availability import build_booking_request, check_availability
from ...marketplace.rental_pricing import rental_quote
from ...models.booking import BookingRequest, CustomerInfo
from ...models.listing import RentalListing
from ..badges import rental_highlights
from .listing_card import format_price


def render_rental_summary(listing: RentalListing):
    """Premium features summary for a rental."""
    st.markdown("#### 👑 Premium Features")
    for highlight in rental_highlights(listing):
        mark = "✅" if highlight.available else "▫️"
        st.markdown(f"{mark} **{highlight.label}** - {highlight.description}")


def render_booking_panel(listing: RentalListing) -> Optional[BookingRequest]:
    """
    Render date pickers, price breakdown and the booking form.

    Returns:
        A validated BookingRequest once the user submits, else None
    """
    render_rental_summary(listing)

    if not listing.instant_booking:
        st.info("Instant booking is not available for this vehicle. Contact the owner to arrange a rental.")
        return None

    today = date.today()
    col1, col2 = st.columns(2)
    with col1:
        start = st.date_input("Start date", value=today, min_value=today, key=f"start_{listing.id}")
    with col2:
        end = st.date_input(
            "End date",
            value=start + timedelta(days=listing.minimum_rental - 1),
            key=f"end_{listing.id}",
        )

    check = check_availability(listing, start, end, today=today)
    for message in check.errors:
        st.warning(message)

    if check.total_days:
        quote = rental_quote(listing.rates, check.total_days)
        col1, col2, col3 = st.columns(3)
        col1.metric("Days", quote.total_days)
        col2.metric("Total", format_price(quote.total))
        col3.metric("Per day", format_price(quote.average_daily))
        st.caption(
            f"Priced {quote.pricing_tier}: {quote.months} month(s), "
            f"{quote.weeks} week(s), {quote.remaining_days} day(s) at daily rate"
        )

    with st.form(f"booking_form_{listing.id}"):
        name = st.text_input("Full name")
        email = st.text_input("Email")
        phone = st.text_input("Phone")
        license_number = st.text_input("Driver's license number")
        message = st.text_area("Message to owner (optional)")
        submitted = st.form_submit_button("Book Instantly", type="primary", disabled=not check.is_valid)

    if not submitted:
        return None

    customer = CustomerInfo(
        name=name,
        email=email,
        phone=phone,
        license_number=license_number,
        message=message or None,
    )
    try:
        return build_booking_request(listing, start, end, customer, today=today)
    except BookingValidationError as e:
        for error in e.messages:
            st.error(error)
        return None
