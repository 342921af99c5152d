"""
Listing models - sale and rental listings as used throughout the app.
"""
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .tiers import ListingCategory, ListingTier


def _parse_amount(v: Any) -> Optional[float]:
    """Parse a money amount from the formats the API and forms produce."""
    if v is None or v == "":
        return None
    if isinstance(v, (int, float)):
        return float(v)
    if isinstance(v, str):
        # "1,250,000", "KES 4 500"
        cleaned = v.replace(" ", "").replace(",", "").replace("KES", "").replace("$", "")
        try:
            return float(cleaned)
        except ValueError:
            return None
    if isinstance(v, dict):
        return float(v.get("value") or v.get("amount") or 0)
    return None


class Owner(BaseModel):
    """Seller or rental owner shown on a listing."""
    id: str
    name: str
    avatar: Optional[str] = None
    rating: float = Field(default=0.0, ge=0, le=5)
    response_time: str = ""
    verified: bool = False


class Listing(BaseModel):
    """A for-sale or for-rent vehicle record."""
    id: str
    title: str
    price: Optional[float] = None
    tier: ListingTier = ListingTier.BASIC
    category: ListingCategory = ListingCategory.SALE
    created_at: datetime = Field(default_factory=datetime.now)
    images: list[str] = Field(default_factory=list)
    location: Optional[str] = None
    owner: Optional[Owner] = None

    # Vehicle details
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None

    # When the paid tier lapses (None = no expiry)
    premium_expires_at: Optional[datetime] = None

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Optional[float]:
        """Parse price from various formats."""
        return _parse_amount(v)

    @property
    def is_promoted(self) -> bool:
        return self.tier is not ListingTier.BASIC


class RentalRate(BaseModel):
    """Daily rate plus optional discounted weekly and monthly rates."""
    daily_rate: float = Field(gt=0)
    weekly_rate: Optional[float] = Field(default=None, ge=0)
    monthly_rate: Optional[float] = Field(default=None, ge=0)

    @field_validator("daily_rate", "weekly_rate", "monthly_rate", mode="before")
    @classmethod
    def parse_rate(cls, v: Any) -> Optional[float]:
        return _parse_amount(v)


def _to_date(v: Any) -> Any:
    """Reduce datetimes and ISO timestamps to calendar days."""
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str) and "T" in v:
        return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
    return v


class Availability(BaseModel):
    """Calendar state of a rental vehicle."""
    available: bool = True
    next_available: Optional[date] = None
    booked_dates: list[date] = Field(default_factory=list)

    @field_validator("next_available", mode="before")
    @classmethod
    def parse_next_available(cls, v: Any) -> Any:
        return _to_date(v)

    @field_validator("booked_dates", mode="before")
    @classmethod
    def parse_booked_dates(cls, v: Any) -> Any:
        if v is None:
            return []
        return [_to_date(d) for d in v]


class RentalListing(Listing):
    """A rental listing with pricing, booking rules and availability."""
    category: ListingCategory = ListingCategory.RENTAL
    rates: RentalRate
    instant_booking: bool = False
    minimum_rental: int = Field(default=1, ge=1, description="Minimum rental, days")
    maximum_rental: int = Field(default=30, ge=1, description="Maximum rental, days")
    availability: Availability = Field(default_factory=Availability)
    features: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_rental_bounds(self) -> "RentalListing":
        if self.category is not ListingCategory.RENTAL:
            raise ValueError("Rental listings must use the RENTAL category")
        if self.minimum_rental > self.maximum_rental:
            raise ValueError(
                f"minimum_rental ({self.minimum_rental}) exceeds maximum_rental ({self.maximum_rental})"
            )
        return self


class ListingDraft(BaseModel):
    """
    In-progress listing from the multi-step create form.
    Every field may still be blank; validation reports what is missing.
    """
    # Step 0: basic info
    title: str = ""
    make: str = ""
    model: str = ""
    year: Optional[int] = None
    category: Optional[ListingCategory] = None

    # Step 1: details
    condition: str = ""
    body_type: str = ""
    fuel_type: str = ""
    transmission: str = ""

    # Step 2: description and features (no required fields)
    description: str = ""
    features: list[str] = Field(default_factory=list)

    # Step 3: pricing
    price: Optional[float] = None
    location: str = ""
    is_rental: bool = False
    rental_daily_rate: Optional[float] = None

    # Step 4: images
    images: list[str] = Field(default_factory=list)

    @field_validator("price", "rental_daily_rate", mode="before")
    @classmethod
    def parse_amounts(cls, v: Any) -> Optional[float]:
        return _parse_amount(v)
