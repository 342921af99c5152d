"""Client for the external marketplace API."""

from .api import ApiService
from .normalize import normalize_listing, normalize_listings
from .tokens import TokenStore

__all__ = ["ApiService", "TokenStore", "normalize_listing", "normalize_listings"]
