"""
Exceptions raised by the marketplace rules.
"""


class BookingValidationError(ValueError):
    """A proposed rental booking failed client-side validation."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Invalid booking")


class UpgradeError(ValueError):
    """A listing upgrade request cannot be priced."""
