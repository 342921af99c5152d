"""
Featured carousel component - promoted listings, one slide at a time.
"""
from typing import Optional, Sequence

import streamlit as st

from ...marketplace.ranking import featured_slides
from ...models.listing import Listing
from .listing_card import listing_card_html


def render_featured_carousel(
    listings: Sequence[Listing],
    category: Optional[str] = None,
    items_per_view: int = 3,
):
    """Render promoted listings as a paged carousel."""
    slides = featured_slides(listings, category=category, items_per_view=items_per_view)
    if not slides:
        st.info("⭐ No featured listings available")
        return

    if "carousel_index" not in st.session_state:
        st.session_state.carousel_index = 0
    index = st.session_state.carousel_index % len(slides)

    columns = st.columns(items_per_view)
    for column, listing in zip(columns, slides[index]):
        with column:
            st.markdown(listing_card_html(listing), unsafe_allow_html=True)

    if len(slides) > 1:
        prev_col, info_col, next_col = st.columns([1, 2, 1])
        with prev_col:
            if st.button("◀", key="carousel_prev", use_container_width=True):
                st.session_state.carousel_index = (index - 1) % len(slides)
                st.rerun()
        with info_col:
            st.caption(f"Slide {index + 1} of {len(slides)}")
        with next_col:
            if st.button("▶", key="carousel_next", use_container_width=True):
                st.session_state.carousel_index = (index + 1) % len(slides)
                st.rerun()
