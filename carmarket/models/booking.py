"""
Booking models - customer details, booking requests and validation results.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class CustomerInfo(BaseModel):
    """Renter details collected by the booking form."""
    name: str = ""
    email: str = ""
    phone: str = ""
    license_number: str = ""
    message: Optional[str] = None

    def missing_fields(self) -> list[str]:
        """Required fields left blank."""
        required = {"name": self.name, "email": self.email, "phone": self.phone}
        return [field for field, value in required.items() if not value.strip()]


class BookingRequest(BaseModel):
    """
    A rental booking built client-side and submitted to the booking API.
    Not persisted locally.
    """
    listing_id: str
    start_date: date
    end_date: date
    customer_info: CustomerInfo
    total_days: int = Field(ge=1)
    total_cost: float = Field(ge=0)

    @model_validator(mode="after")
    def check_range(self) -> "BookingRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date precedes start_date")
        expected = (self.end_date - self.start_date).days + 1
        if self.total_days != expected:
            raise ValueError(f"total_days {self.total_days} does not match range of {expected} days")
        return self

    def to_payload(self) -> dict:
        """Body for the bookings endpoint."""
        return {
            "listingId": self.listing_id,
            "type": "rental",
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "totalDays": self.total_days,
            "totalCost": self.total_cost,
            "customerInfo": {
                "name": self.customer_info.name,
                "email": self.customer_info.email,
                "phone": self.customer_info.phone,
                "licenseNumber": self.customer_info.license_number,
                "message": self.customer_info.message,
            },
        }


class BookingCheck(BaseModel):
    """Outcome of the availability check for a proposed date range."""
    start_date: date
    end_date: date
    total_days: int = Field(description="Inclusive day count, 0 if the range is inverted")
    errors: list[str] = Field(default_factory=list, description="User-facing messages")
    conflicting_dates: list[date] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
