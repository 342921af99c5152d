"""
Booking availability - client-side pre-validation of rental date ranges.

This only sees the booked dates the listing was fetched with. Conflicts
with bookings made concurrently elsewhere are detected by the booking API.
"""
import logging
from datetime import date
from typing import Iterable, Optional

from ..errors import BookingValidationError
from ..models.booking import BookingCheck, BookingRequest, CustomerInfo
from ..models.listing import RentalListing
from .rental_pricing import calculate_rental_cost


logger = logging.getLogger(__name__)


def check_booking_range(
    start: date,
    end: date,
    booked_dates: Iterable[date],
    minimum_rental: int = 1,
    maximum_rental: Optional[int] = None,
    today: Optional[date] = None,
) -> BookingCheck:
    """
    Validate an inclusive [start, end] range.

    Collects every problem rather than stopping at the first, so the
    form can show all messages at once.
    """
    today = today or date.today()
    errors = []
    conflicts: list[date] = []

    if end < start:
        errors.append("End date cannot be before start date")
        total_days = 0
    else:
        total_days = (end - start).days + 1

    if start < today:
        errors.append("Start date cannot be in the past")

    if total_days:
        conflicts = [day for day in sorted(set(booked_dates)) if start <= day <= end]
        if conflicts:
            listed = ", ".join(day.isoformat() for day in conflicts[:5])
            errors.append(f"Selected dates include unavailable days: {listed}")

        if total_days < minimum_rental:
            errors.append(f"Minimum rental period is {minimum_rental} days")
        if maximum_rental is not None and total_days > maximum_rental:
            errors.append(f"Maximum rental period is {maximum_rental} days")

    return BookingCheck(
        start_date=start,
        end_date=end,
        total_days=total_days,
        errors=errors,
        conflicting_dates=conflicts,
    )


def check_availability(
    listing: RentalListing,
    start: date,
    end: date,
    today: Optional[date] = None,
) -> BookingCheck:
    """Validate a proposed booking against a listing's calendar and limits."""
    result = check_booking_range(
        start,
        end,
        listing.availability.booked_dates,
        minimum_rental=listing.minimum_rental,
        maximum_rental=listing.maximum_rental,
        today=today,
    )
    if not result.is_valid:
        logger.info(f"Booking range {start}..{end} rejected for listing {listing.id}: {result.errors}")
    return result


def ensure_bookable(
    listing: RentalListing,
    start: date,
    end: date,
    today: Optional[date] = None,
) -> BookingCheck:
    """Like check_availability, but raises BookingValidationError on rejection."""
    result = check_availability(listing, start, end, today=today)
    if not result.is_valid:
        raise BookingValidationError(result.errors)
    return result


def build_booking_request(
    listing: RentalListing,
    start: date,
    end: date,
    customer: CustomerInfo,
    today: Optional[date] = None,
) -> BookingRequest:
    """
    Validate dates and customer details and price the booking.

    Raises BookingValidationError listing every problem found.
    """
    result = check_availability(listing, start, end, today=today)
    errors = list(result.errors)
    if customer.missing_fields():
        errors.insert(0, "Please fill in all required fields")
    if errors:
        raise BookingValidationError(errors)

    return BookingRequest(
        listing_id=listing.id,
        start_date=start,
        end_date=end,
        customer_info=customer,
        total_days=result.total_days,
        total_cost=calculate_rental_cost(listing.rates, result.total_days),
    )
