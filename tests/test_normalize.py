"""
Tests for raw listing normalization.
"""
from datetime import date

from carmarket.client.normalize import normalize_listing, normalize_listings
from carmarket.models.listing import RentalListing
from carmarket.models.tiers import ListingCategory, ListingTier


class TestNormalizeListing:
    """Tests for normalize_listing."""

    def test_sale_listing(self):
        listing = normalize_listing({
            "_id": "abc",
            "title": "Mazda Demio",
            "price": "KES 950,000",
            "listingType": "featured",
            "location": {"city": "Mombasa"},
            "seller": {"id": "s1", "firstName": "Ali", "lastName": "Hassan", "verified": True},
            "premiumExpiresAt": "2024-05-01T00:00:00Z",
        })
        assert listing.id == "abc"
        assert listing.price == 950_000
        assert listing.tier is ListingTier.FEATURED
        assert listing.category is ListingCategory.SALE
        assert listing.location == "Mombasa"
        assert listing.owner.name == "Ali Hassan"
        assert listing.premium_expires_at.year == 2024

    def test_unknown_tier_falls_back_to_basic(self):
        listing = normalize_listing({"id": "1", "title": "x", "listingType": "platinum"})
        assert listing.tier is ListingTier.BASIC

    def test_rental_listing(self):
        listing = normalize_listing({
            "id": "r1",
            "title": "Noah for hire",
            "category": "rental",
            "dailyRate": 4500,
            "weeklyRate": 28000,
            "instantBooking": True,
            "availability": {"bookedDates": ["2024-03-15T00:00:00Z"]},
        })
        assert isinstance(listing, RentalListing)
        assert listing.rates.daily_rate == 4500
        assert listing.rates.weekly_rate == 28000
        assert listing.instant_booking
        assert listing.minimum_rental == 1
        assert listing.maximum_rental == 30
        assert listing.availability.booked_dates == [date(2024, 3, 15)]

    def test_rental_without_rate_dropped(self):
        assert normalize_listing({"id": "r2", "title": "x", "isRental": True}) is None

    def test_unreadable_payloads(self):
        assert normalize_listing("not a listing") is None
        assert normalize_listing({"title": "no id"}) is None
        assert normalize_listing({"id": "1", "title": "x", "year": "soon"}) is None


class TestNormalizeListings:
    """Tests for normalize_listings."""

    def test_bad_records_skipped(self):
        listings = normalize_listings([{"id": "1", "title": "a"}, None, {"id": "2", "title": "b"}])
        assert [l.id for l in listings] == ["1", "2"]

    def test_wrapped_payload(self):
        assert len(normalize_listings({"listings": [{"id": "1", "title": "a"}]})) == 1

    def test_empty(self):
        assert normalize_listings(None) == []


class TestTierFields:
    """Tier is read from listingType or tier, never from the payload type."""

    def test_type_field_not_treated_as_tier(self, caplog):
        with caplog.at_level("WARNING"):
            listing = normalize_listing({"id": "1", "title": "x", "type": "sale"})
        assert listing.tier is ListingTier.BASIC
        assert "Unknown listing tier" not in caplog.text

    def test_tier_field_used(self):
        assert normalize_listing({"id": "1", "title": "x", "tier": "premium"}).tier is ListingTier.PREMIUM
