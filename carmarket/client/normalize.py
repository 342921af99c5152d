"""
Normalization of raw API listing payloads into Listing / RentalListing models.
"""
import logging
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..config import get_config
from ..models.listing import Listing, Owner, RentalListing
from ..models.tiers import ListingCategory, ListingTier


logger = logging.getLogger(__name__)


def _parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _parse_tier(raw: dict[str, Any]) -> ListingTier:
    value = raw.get("listingType") or raw.get("tier")
    try:
        return ListingTier(value) if value else ListingTier.BASIC
    except ValueError:
        logger.warning(f"Unknown listing tier {value!r}, treating as BASIC")
        return ListingTier.BASIC


def _parse_owner(raw: dict[str, Any]) -> Optional[Owner]:
    data = raw.get("owner") or raw.get("seller") or raw.get("dealer")
    if not isinstance(data, dict):
        return None
    owner_id = data.get("id") or raw.get("dealerId") or raw.get("userId")
    name = data.get("name") or " ".join(
        part for part in (data.get("firstName"), data.get("lastName")) if part
    )
    if not owner_id or not name:
        return None
    return Owner(
        id=str(owner_id),
        name=name,
        avatar=data.get("avatar"),
        rating=data.get("rating") or 0,
        response_time=data.get("responseTime") or "",
        verified=bool(data.get("verified")),
    )


def normalize_listing(raw: Any) -> Optional[Union[Listing, RentalListing]]:
    """
    Normalize one raw listing dict. Returns None for payloads that cannot
    be read, so one bad record does not drop a whole page.
    """
    try:
        if hasattr(raw, "model_dump"):
            raw = raw.model_dump()
        elif not isinstance(raw, dict):
            return None

        listing_id = str(raw.get("id") or raw.get("_id") or raw.get("listingId") or "")
        if not listing_id:
            return None

        # Location may be a plain string or {city, region}
        location = raw.get("location")
        if isinstance(location, dict):
            location = location.get("name") or location.get("city") or location.get("region")

        fields: dict[str, Any] = {
            "id": listing_id,
            "title": raw.get("title") or raw.get("heading") or "",
            "price": raw.get("price"),
            "tier": _parse_tier(raw),
            "images": raw.get("images") or [],
            "location": location,
            "owner": _parse_owner(raw),
            "make": raw.get("make"),
            "model": raw.get("model"),
            "year": raw.get("year"),
            "premium_expires_at": _parse_datetime(raw.get("premiumExpiresAt")),
        }
        created_at = _parse_datetime(raw.get("createdAt") or raw.get("created_at"))
        if created_at:
            fields["created_at"] = created_at

        daily_rate = raw.get("dailyRate") or raw.get("rentalDailyRate")
        category = str(raw.get("category") or "").upper()
        is_rental = category == ListingCategory.RENTAL.value or raw.get("isRental") or daily_rate

        if not is_rental:
            return Listing(category=ListingCategory.SALE, **fields)

        if not daily_rate:
            logger.warning(f"Rental listing {listing_id} has no daily rate")
            return None

        availability = raw.get("availability") or {}
        booking_defaults = get_config().booking
        return RentalListing(
            **fields,
            rates={
                "daily_rate": daily_rate,
                "weekly_rate": raw.get("weeklyRate"),
                "monthly_rate": raw.get("monthlyRate"),
            },
            instant_booking=bool(raw.get("instantBooking")),
            minimum_rental=raw.get("minimumRental") or booking_defaults.default_minimum_rental,
            maximum_rental=raw.get("maximumRental") or booking_defaults.default_maximum_rental,
            availability={
                "available": availability.get("available", True),
                "next_available": availability.get("nextAvailable"),
                "booked_dates": availability.get("bookedDates") or [],
            },
            features=raw.get("features") or [],
        )

    except (ValidationError, ValueError, TypeError) as e:
        logger.warning(f"Failed to normalize listing: {e}")
        return None


def normalize_listings(raw_items: Any) -> list[Union[Listing, RentalListing]]:
    """Normalize a list of raw listings, skipping unreadable ones."""
    if isinstance(raw_items, dict):
        raw_items = raw_items.get("listings") or []
    listings = []
    for raw in raw_items or []:
        normalized = normalize_listing(raw)
        if normalized:
            listings.append(normalized)
    return listings
