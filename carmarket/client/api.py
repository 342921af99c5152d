"""
Marketplace API client with retry logic and a uniform response envelope.
"""
import logging
from pathlib import Path
from typing import Any, Optional, Union

import requests
from tenacity import (
    Retrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from ..config import ApiConfig, get_config
from ..models.api import ApiResponse, LoginCredentials, RegisterData, SearchFilters
from ..models.booking import BookingRequest
from ..models.listing import Listing, RentalListing
from ..models.tiers import ListingTier
from ..marketplace.ranking import rank_listings
from .normalize import normalize_listings
from .tokens import TokenStore


logger = logging.getLogger(__name__)

# Transport errors worth another attempt; HTTP error statuses are not retried
RETRYABLE_ERRORS = (requests.ConnectionError, requests.Timeout)


class ApiService:
    """
    Client for the external marketplace REST API.

    Every call returns an ApiResponse. Failures (transport errors, HTTP
    error statuses, unreadable bodies) come back as success=False with a
    message; nothing is raised to the caller.
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        token_store: Optional[TokenStore] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or get_config().api
        self.base_url = self.config.base_url.rstrip("/")
        self.tokens = token_store or TokenStore()
        self.session = session or requests.Session()
        logger.info(f"ApiService initialized for {self.base_url}")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self.tokens.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        """Send one request, retrying transport errors."""
        retrying = Retrying(
            stop=stop_after_attempt(self.config.retry_attempts),
            wait=wait_exponential(multiplier=self.config.retry_delay, max=10),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            reraise=True,
            before_sleep=lambda retry_state: logger.warning(
                f"Retry attempt {retry_state.attempt_number} for {method} {url}"
            ),
        )
        for attempt in retrying:
            with attempt:
                return self.session.request(
                    method,
                    url,
                    headers=self._headers(),
                    timeout=self.config.timeout,
                    **kwargs,
                )

    def _request(
        self,
        endpoint: str,
        method: str = "GET",
        json: Optional[Any] = None,
        params: Optional[dict[str, Any]] = None,
        files: Optional[dict[str, Any]] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> ApiResponse:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self._send(method, url, json=json, params=params, files=files, data=data)
        except requests.RequestException as e:
            logger.error(f"API Error ({endpoint}): {e}")
            return ApiResponse.failure(str(e) or "Network request failed")

        try:
            body = response.json() if response.content else None
        except ValueError:
            body = None

        if not response.ok:
            message = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("error")
            error = message or f"HTTP error! status: {response.status_code}"
            logger.error(f"API Error ({endpoint}): {error}")
            return ApiResponse.failure(error, status_code=response.status_code)

        # Bodies already in {success, data, error} form are unwrapped
        if isinstance(body, dict) and isinstance(body.get("success"), bool):
            return ApiResponse(
                success=body["success"],
                data=body.get("data"),
                message=body.get("message"),
                error=body.get("error"),
                status_code=response.status_code,
            )

        return ApiResponse(success=True, data=body, status_code=response.status_code)

    # Authentication

    def _store_token(self, response: ApiResponse) -> ApiResponse:
        if response.success and isinstance(response.data, dict) and response.data.get("token"):
            self.tokens.set(response.data["token"])
        return response

    def login(self, credentials: LoginCredentials) -> ApiResponse:
        return self._store_token(
            self._request("/auth/login", "POST", json=credentials.model_dump())
        )

    def register(self, user: RegisterData) -> ApiResponse:
        return self._store_token(
            self._request("/auth/register", "POST", json=user.to_payload())
        )

    def refresh_token(self) -> ApiResponse:
        return self._store_token(self._request("/auth/refresh", "POST"))

    def logout(self) -> ApiResponse:
        response = self._request("/auth/logout", "POST")
        # Local session ends even if the server call failed
        self.tokens.clear()
        return response

    def get_profile(self) -> ApiResponse:
        return self._request("/auth/profile")

    def change_password(self, current_password: str, new_password: str) -> ApiResponse:
        return self._request(
            "/auth/change-password",
            "POST",
            json={"currentPassword": current_password, "newPassword": new_password},
        )

    def update_profile(self, profile: dict[str, Any]) -> ApiResponse:
        return self._request("/mobile/profile", "PATCH", json=profile)

    # Listings

    def get_listings(self, filters: Optional[SearchFilters] = None) -> ApiResponse:
        params = filters.to_params() if filters else None
        return self._request("/listings", params=params)

    def get_listing(self, listing_id: str) -> ApiResponse:
        return self._request(f"/listings/{listing_id}")

    def get_my_listings(self) -> ApiResponse:
        return self._request("/listings/my-listings")

    def create_listing(self, listing: dict[str, Any]) -> ApiResponse:
        return self._request("/listings", "POST", json=listing)

    def update_listing(self, listing_id: str, changes: dict[str, Any]) -> ApiResponse:
        return self._request(f"/listings/{listing_id}", "PATCH", json=changes)

    def delete_listing(self, listing_id: str) -> ApiResponse:
        return self._request(f"/listings/{listing_id}", "DELETE")

    def get_featured_listings(self) -> ApiResponse:
        return self._request("/listings/featured")

    def get_recommended_listings(self) -> ApiResponse:
        return self._request("/listings/recommended")

    def get_upgrade_options(self, listing_id: str) -> ApiResponse:
        return self._request(f"/listings/{listing_id}/upgrade")

    def upgrade_listing(
        self,
        listing_id: str,
        tier: ListingTier,
        duration_days: int = 30,
        payment_method_id: Optional[str] = None,
    ) -> ApiResponse:
        payload = {"listingType": ListingTier(tier).value, "duration": str(duration_days)}
        if payment_method_id:
            payload["paymentMethodId"] = payment_method_id
        return self._request(f"/listings/{listing_id}/upgrade", "POST", json=payload)

    def search_ranked(
        self,
        filters: Optional[SearchFilters] = None,
    ) -> list[Union[Listing, RentalListing]]:
        """
        Fetch listings and return them normalized and in display order.

        Returns an empty list when the request fails.
        """
        response = self.get_listings(filters)
        if not response.success:
            logger.warning(f"Listing search failed: {response.error}")
            return []
        listings = normalize_listings(response.data)
        logger.info(f"Search completed: {len(listings)} listings")
        return rank_listings(listings)

    # Bookings

    def get_bookings(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
        booking_type: Optional[str] = None,
    ) -> ApiResponse:
        params = {"page": page, "limit": limit, "status": status, "type": booking_type}
        params = {key: value for key, value in params.items() if value}
        return self._request("/mobile/bookings", params=params or None)

    def get_booking(self, booking_id: str) -> ApiResponse:
        return self._request(f"/mobile/bookings/{booking_id}")

    def create_booking(self, booking: BookingRequest) -> ApiResponse:
        return self._request("/mobile/bookings", "POST", json=booking.to_payload())

    def update_booking(
        self,
        booking_id: str,
        status: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> ApiResponse:
        payload = {key: value for key, value in {"status": status, "notes": notes}.items() if value}
        return self._request(f"/mobile/bookings/{booking_id}", "PATCH", json=payload)

    def cancel_booking(self, booking_id: str) -> ApiResponse:
        return self._request(f"/mobile/bookings/{booking_id}", "DELETE")

    # Favorites

    def get_favorites(self) -> ApiResponse:
        return self._request("/favorites")

    def add_to_favorites(self, listing_id: str) -> ApiResponse:
        return self._request("/favorites", "POST", json={"listingId": listing_id})

    def remove_from_favorites(self, listing_id: str) -> ApiResponse:
        return self._request(f"/favorites/{listing_id}", "DELETE")

    # Messaging

    def get_conversations(self) -> ApiResponse:
        return self._request("/messages/conversations")

    def get_messages(self, conversation_id: str) -> ApiResponse:
        return self._request(f"/messages/conversations/{conversation_id}")

    def send_message(self, conversation_id: str, message: str) -> ApiResponse:
        return self._request(
            f"/messages/conversations/{conversation_id}", "POST", json={"message": message}
        )

    def create_inquiry(self, listing_id: str, message: str) -> ApiResponse:
        return self._request(
            "/messages/inquiries", "POST", json={"listingId": listing_id, "message": message}
        )

    # Notifications

    def get_notifications(self) -> ApiResponse:
        return self._request("/notifications")

    def mark_notification_as_read(self, notification_id: str) -> ApiResponse:
        return self._request(f"/notifications/{notification_id}/read", "PATCH")

    def get_notification_settings(self) -> ApiResponse:
        return self._request("/notifications/settings")

    def update_notification_settings(self, settings: dict[str, Any]) -> ApiResponse:
        return self._request("/notifications/settings", "PATCH", json=settings)

    # Analytics

    def get_dealer_analytics(self) -> ApiResponse:
        return self._request("/analytics/dealer")

    def get_listing_analytics(self, listing_id: str) -> ApiResponse:
        return self._request(f"/analytics/listings/{listing_id}")

    # Uploads

    def upload_image(self, image_path: Union[str, Path], image_type: str = "listing") -> ApiResponse:
        """Upload an image file; the response data carries its URL."""
        path = Path(image_path)
        try:
            with path.open("rb") as handle:
                return self._request(
                    "/upload/image",
                    "POST",
                    files={"image": (path.name, handle)},
                    data={"type": image_type},
                )
        except OSError as e:
            logger.error(f"Cannot read image {path}: {e}")
            return ApiResponse.failure(f"Cannot read image: {path.name}")

    def check_connection(self) -> bool:
        """True when the API health endpoint answers."""
        return self._request("/health").success
