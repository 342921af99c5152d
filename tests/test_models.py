"""
Tests for the pydantic data models and the tier registry.
"""
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from carmarket.errors import BookingValidationError
from carmarket.models.api import SearchFilters
from carmarket.models.booking import BookingRequest, CustomerInfo
from carmarket.models.listing import Availability, Listing, RentalListing, RentalRate
from carmarket.models.tiers import (
    ListingCategory,
    ListingTier,
    TIER_CONFIGS,
    get_tier_config,
    promoted_tiers,
    tier_priority,
)


class TestTiers:
    """Tests for ListingTier and the registry."""

    @pytest.mark.parametrize("raw", ["spotlight", "SPOTLIGHT", " Spotlight "])
    def test_case_insensitive_parse(self, raw):
        assert ListingTier(raw) is ListingTier.SPOTLIGHT

    def test_unknown_tier(self):
        with pytest.raises(ValueError):
            ListingTier("GOLD")

    def test_priorities_strictly_increase(self):
        priorities = [tier_priority(t) for t in ListingTier]
        assert priorities == [1, 2, 3, 4]

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            TIER_CONFIGS[ListingTier.BASIC] = TIER_CONFIGS[ListingTier.SPOTLIGHT]

    def test_configs_are_frozen(self):
        with pytest.raises(ValidationError):
            get_tier_config(ListingTier.FEATURED).priority = 9

    def test_promoted_tiers(self):
        assert promoted_tiers() == [ListingTier.FEATURED, ListingTier.PREMIUM, ListingTier.SPOTLIGHT]

    def test_css_helpers(self):
        config = get_tier_config("spotlight")
        assert config.css_class == "tier-spotlight"
        assert config.css_gradient.startswith("linear-gradient(90deg")


class TestListing:
    """Tests for Listing and RentalListing."""

    def test_defaults(self):
        listing = Listing(id="1", title="Axio")
        assert listing.tier is ListingTier.BASIC
        assert listing.category is ListingCategory.SALE
        assert not listing.is_promoted

    @pytest.mark.parametrize(
        "raw,expected",
        [("1,250,000", 1_250_000), ("KES 4 500", 4500), (990, 990.0), ("", None), ("n/a", None)],
    )
    def test_price_parsing(self, raw, expected):
        assert Listing(id="1", title="x", price=raw).price == expected

    def test_tier_from_lowercase(self):
        assert Listing(id="1", title="x", tier="premium").tier is ListingTier.PREMIUM

    def test_rental_requires_positive_daily_rate(self):
        with pytest.raises(ValidationError):
            RentalRate(daily_rate=0)

    def test_rental_bounds(self):
        with pytest.raises(ValidationError):
            RentalListing(
                id="r", title="x", rates={"daily_rate": 100}, minimum_rental=10, maximum_rental=5
            )

    def test_rental_must_be_rental_category(self):
        with pytest.raises(ValidationError):
            RentalListing(id="r", title="x", rates={"daily_rate": 100}, category=ListingCategory.SALE)

    def test_booked_dates_reduced_to_days(self):
        availability = Availability(
            booked_dates=[datetime(2024, 3, 15, 18, 30), "2024-03-16T08:00:00Z", "2024-03-17"]
        )
        assert availability.booked_dates == [date(2024, 3, 15), date(2024, 3, 16), date(2024, 3, 17)]


class TestBookingModels:
    """Tests for booking payloads."""

    @pytest.fixture
    def customer(self) -> CustomerInfo:
        return CustomerInfo(name="Jane", email="jane@example.com", phone="0700", license_number="DL1")

    def test_missing_fields(self):
        assert CustomerInfo(name="Jane", phone=" ").missing_fields() == ["email", "phone"]

    def test_total_days_must_match_range(self, customer):
        with pytest.raises(ValidationError):
            BookingRequest(
                listing_id="r",
                start_date=date(2024, 3, 1),
                end_date=date(2024, 3, 3),
                customer_info=customer,
                total_days=2,
                total_cost=100,
            )

    def test_payload_uses_api_names(self, customer):
        booking = BookingRequest(
            listing_id="r",
            start_date=date(2024, 3, 1),
            end_date=date(2024, 3, 3),
            customer_info=customer,
            total_days=3,
            total_cost=15000,
        )
        payload = booking.to_payload()
        assert payload["startDate"] == "2024-03-01"
        assert payload["totalDays"] == 3
        assert payload["customerInfo"]["licenseNumber"] == "DL1"

    def test_validation_error_message(self):
        error = BookingValidationError(["a", "b"])
        assert str(error) == "a; b"
        assert isinstance(error, ValueError)


class TestSearchFilters:
    """Tests for SearchFilters.to_params."""

    def test_camel_case_params(self):
        filters = SearchFilters(query="prado", min_price=100000, body_type="SUV", page=2)
        assert filters.to_params() == {
            "query": "prado",
            "minPrice": "100000.0",
            "bodyType": "SUV",
            "page": "2",
        }

    def test_empty_filters(self):
        assert SearchFilters().to_params() == {}
