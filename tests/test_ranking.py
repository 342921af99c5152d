"""
Tests for listing ranking by tier and recency.
"""
from datetime import datetime, timedelta

import pytest

from carmarket.models.listing import Listing
from carmarket.models.tiers import ListingCategory, ListingTier
from carmarket.marketplace.ranking import (
    featured_slides,
    filter_by_category,
    filter_by_tier,
    placement_position,
    rank_listings,
)


BASE_TIME = datetime(2024, 1, 1, 12, 0)


def make_listing(listing_id: str, tier: ListingTier, t: int, category=ListingCategory.SALE) -> Listing:
    """Listing created `t` hours after the base time."""
    return Listing(
        id=listing_id,
        title=f"Car {listing_id}",
        price=1_000_000,
        tier=tier,
        category=category,
        created_at=BASE_TIME + timedelta(hours=t),
    )


class TestRankListings:
    """Tests for rank_listings."""

    @pytest.fixture
    def mixed_listings(self) -> list[Listing]:
        return [
            make_listing("a", ListingTier.BASIC, 1),
            make_listing("b", ListingTier.SPOTLIGHT, 3),
            make_listing("c", ListingTier.FEATURED, 2),
            make_listing("d", ListingTier.SPOTLIGHT, 5),
        ]

    def test_documented_example(self, mixed_listings):
        """SPOTLIGHT(t=5), SPOTLIGHT(t=3), FEATURED(t=2), BASIC(t=1)."""
        ranked = rank_listings(mixed_listings)
        assert [l.id for l in ranked] == ["d", "b", "c", "a"]

    def test_output_is_permutation(self, mixed_listings):
        ranked = rank_listings(mixed_listings)
        assert len(ranked) == len(mixed_listings)
        assert sorted(l.id for l in ranked) == sorted(l.id for l in mixed_listings)

    def test_input_not_mutated(self, mixed_listings):
        before = [l.id for l in mixed_listings]
        rank_listings(mixed_listings)
        assert [l.id for l in mixed_listings] == before

    def test_higher_tier_always_first(self):
        """An old SPOTLIGHT beats a brand-new BASIC."""
        listings = [
            make_listing("new-basic", ListingTier.BASIC, 100),
            make_listing("old-premium", ListingTier.PREMIUM, 0),
        ]
        ranked = rank_listings(listings)
        assert ranked[0].id == "old-premium"

    def test_all_tiers_in_priority_order(self):
        listings = [make_listing(t.value, t, 0) for t in ListingTier]
        ranked = rank_listings(listings)
        assert [l.tier for l in ranked] == [
            ListingTier.SPOTLIGHT,
            ListingTier.PREMIUM,
            ListingTier.FEATURED,
            ListingTier.BASIC,
        ]

    def test_equal_tier_newest_first(self):
        listings = [make_listing(str(t), ListingTier.FEATURED, t) for t in (2, 7, 4)]
        ranked = rank_listings(listings)
        assert [l.id for l in ranked] == ["7", "4", "2"]

    def test_empty_input_returns_empty(self):
        assert rank_listings([]) == []

    def test_accepts_generators(self):
        ranked = rank_listings(make_listing(str(t), ListingTier.BASIC, t) for t in range(3))
        assert [l.id for l in ranked] == ["2", "1", "0"]


class TestFilters:
    """Tests for tier and category filters."""

    @pytest.fixture
    def listings(self) -> list[Listing]:
        return [
            make_listing("s1", ListingTier.PREMIUM, 1),
            make_listing("r1", ListingTier.PREMIUM, 2, ListingCategory.RENTAL),
            make_listing("s2", ListingTier.BASIC, 3),
        ]

    def test_filter_by_tier_accepts_lowercase(self, listings):
        result = filter_by_tier(listings, "premium")
        assert [l.id for l in result] == ["s1", "r1"]

    def test_filter_by_category(self, listings):
        result = filter_by_category(listings, ListingCategory.RENTAL)
        assert [l.id for l in result] == ["r1"]

    def test_filter_by_category_all(self, listings):
        assert len(filter_by_category(listings, "ALL")) == 3
        assert len(filter_by_category(listings, None)) == 3


class TestFeaturedSlides:
    """Tests for the featured carousel slides."""

    def test_basic_listings_excluded(self):
        listings = [
            make_listing("b", ListingTier.BASIC, 9),
            make_listing("f", ListingTier.FEATURED, 1),
        ]
        slides = featured_slides(listings)
        assert [[l.id for l in slide] for slide in slides] == [["f"]]

    def test_chunked_by_items_per_view(self):
        listings = [make_listing(str(t), ListingTier.PREMIUM, t) for t in range(5)]
        slides = featured_slides(listings, items_per_view=2)
        assert [len(slide) for slide in slides] == [2, 2, 1]
        assert slides[0][0].id == "4"

    def test_empty_input_has_no_slides(self):
        assert featured_slides([]) == []

    def test_invalid_items_per_view(self):
        with pytest.raises(ValueError):
            featured_slides([], items_per_view=0)


class TestPlacementPosition:
    """Tests for placement_position."""

    def test_position_is_one_based(self):
        ranked = rank_listings([
            make_listing("x", ListingTier.BASIC, 1),
            make_listing("y", ListingTier.SPOTLIGHT, 1),
        ])
        assert placement_position("y", ranked) == 1
        assert placement_position("x", ranked) == 2

    def test_missing_listing(self):
        assert placement_position("nope", []) is None
