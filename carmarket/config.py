"""
Configuration and environment handling for carmarket.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class ApiConfig(BaseModel):
    """Marketplace REST API configuration."""
    base_url: str = Field(
        default_factory=lambda: os.getenv("CARMARKET_API_URL", "http://localhost:3000/api")
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("CARMARKET_API_TIMEOUT", "10"))
    )
    retry_attempts: int = Field(default=3, ge=1, description="Attempts per request on transport errors")
    retry_delay: float = Field(default=1.0, description="Base delay between retries, seconds")


class BookingConfig(BaseModel):
    """Rental booking defaults."""
    default_minimum_rental: int = Field(default=1, ge=1)
    default_maximum_rental: int = Field(default=30, ge=1)
    expiring_soon_hours: int = Field(default=24, description="Window for the 'expiring soon' flag")


class UIConfig(BaseModel):
    """UI configuration."""
    page_title: str = Field(default="Car Marketplace")
    page_icon: str = Field(default="🚗")
    items_per_view: int = Field(default=3, description="Listings per featured carousel slide")
    page_size: int = Field(default=20)
    currency: str = Field(default_factory=lambda: os.getenv("CARMARKET_CURRENCY", "KES"))


class Config(BaseModel):
    """Main configuration."""
    api: ApiConfig = Field(default_factory=ApiConfig)
    booking: BookingConfig = Field(default_factory=BookingConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Paths
    token_file: Path = Field(
        default_factory=lambda: Path(os.getenv("CARMARKET_TOKEN_FILE", ".cache/auth_token"))
    )


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
