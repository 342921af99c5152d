"""
Rental pricing - total cost of a rental from daily, weekly and monthly rates.

Pricing is a greedy fall-through, not a cheapest-combination search:
whole 30-day months at the monthly rate when one is set, otherwise whole
7-day weeks at the weekly rate when one is set, and the remainder at the
daily rate. A month remainder is never re-packed into weeks.
"""
from ..models.listing import RentalRate
from ..models.pricing import RentalQuote


DAYS_PER_MONTH = 30
DAYS_PER_WEEK = 7


def rental_quote(rates: RentalRate, days: int) -> RentalQuote:
    """Price `days` of rental and return the breakdown."""
    if days < 1:
        raise ValueError(f"Rental must be at least 1 day, got {days}")

    # Zero or missing rates fall through to the next block size
    if days >= DAYS_PER_MONTH and rates.monthly_rate:
        months, remaining = divmod(days, DAYS_PER_MONTH)
        return RentalQuote(
            total_days=days,
            pricing_tier="monthly",
            months=months,
            remaining_days=remaining,
            total=months * rates.monthly_rate + remaining * rates.daily_rate,
        )

    if days >= DAYS_PER_WEEK and rates.weekly_rate:
        weeks, remaining = divmod(days, DAYS_PER_WEEK)
        return RentalQuote(
            total_days=days,
            pricing_tier="weekly",
            weeks=weeks,
            remaining_days=remaining,
            total=weeks * rates.weekly_rate + remaining * rates.daily_rate,
        )

    return RentalQuote(
        total_days=days,
        pricing_tier="daily",
        remaining_days=days,
        total=days * rates.daily_rate,
    )


def calculate_rental_cost(rates: RentalRate, days: int) -> float:
    """Total cost of renting for `days` whole days."""
    return rental_quote(rates, days).total
