"""
Listing form validation - per-step checks for the create-listing wizard.
Errors come back as a field -> message map for the form to display.
"""
from typing import Optional

from ..models.listing import ListingDraft


STEP_TITLES = ["Basic Info", "Details", "Description", "Pricing", "Images"]


def validate_step(draft: ListingDraft, step: int) -> dict[str, str]:
    """Validate one wizard step. An empty dict means the step is complete."""
    errors: dict[str, str] = {}

    if step == 0:
        if not draft.title.strip():
            errors["title"] = "Title is required"
        if not draft.make.strip():
            errors["make"] = "Make is required"
        if not draft.model.strip():
            errors["model"] = "Model is required"
        if not draft.year:
            errors["year"] = "Year is required"
        if not draft.category:
            errors["category"] = "Category is required"

    elif step == 1:
        if not draft.condition:
            errors["condition"] = "Condition is required"
        if not draft.body_type:
            errors["body_type"] = "Body type is required"
        if not draft.fuel_type:
            errors["fuel_type"] = "Fuel type is required"
        if not draft.transmission:
            errors["transmission"] = "Transmission is required"

    elif step == 3:
        if not draft.price:
            errors["price"] = "Price is required"
        if not draft.location.strip():
            errors["location"] = "Location is required"
        if draft.is_rental and not draft.rental_daily_rate:
            errors["rental_daily_rate"] = "Daily rate is required for rentals"

    elif step == 4:
        if not draft.images:
            errors["images"] = "At least one image is required"

    elif not 0 <= step < len(STEP_TITLES):
        raise ValueError(f"Unknown form step {step}")

    return errors


def validate_draft(draft: ListingDraft) -> dict[str, str]:
    """Validate every step; used before final submission."""
    errors: dict[str, str] = {}
    for step in range(len(STEP_TITLES)):
        errors.update(validate_step(draft, step))
    return errors


def first_invalid_step(draft: ListingDraft) -> Optional[int]:
    """Index of the first step with errors, None when the draft is complete."""
    for step in range(len(STEP_TITLES)):
        if validate_step(draft, step):
            return step
    return None
