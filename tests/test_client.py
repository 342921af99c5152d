"""
Tests for the marketplace API client, using a mocked requests session.
"""
from unittest.mock import MagicMock

import pytest
import requests

from carmarket.client.api import ApiService
from carmarket.client.tokens import TokenStore
from carmarket.config import ApiConfig
from carmarket.models.api import LoginCredentials, SearchFilters
from carmarket.models.tiers import ListingTier


def make_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = b"{}" if body is not None else b""
    response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session) -> ApiService:
    config = ApiConfig(base_url="http://api.test/api/", timeout=5, retry_attempts=3, retry_delay=0)
    return ApiService(config=config, token_store=TokenStore(persist=False), session=session)


class TestRequest:
    """Tests for request handling and the response envelope."""

    def test_plain_body_wrapped(self, client, session):
        session.request.return_value = make_response(body=[{"id": "1"}])
        response = client.get_listing("1")

        assert response.success
        assert response.data == [{"id": "1"}]
        method, url = session.request.call_args.args
        assert (method, url) == ("GET", "http://api.test/api/listings/1")
        assert session.request.call_args.kwargs["timeout"] == 5

    def test_envelope_unwrapped(self, client, session):
        session.request.return_value = make_response(
            body={"success": False, "error": "Listing not found"}
        )
        response = client.get_listing("x")
        assert not response.success
        assert response.error == "Listing not found"

    def test_http_error_uses_body_message(self, client, session):
        session.request.return_value = make_response(422, {"message": "Invalid dates"})
        response = client.get_bookings()
        assert not response.success
        assert response.error == "Invalid dates"
        assert response.status_code == 422

    def test_http_error_without_body(self, client, session):
        session.request.return_value = make_response(500)
        response = client.get_favorites()
        assert response.error == "HTTP error! status: 500"

    def test_http_errors_not_retried(self, client, session):
        session.request.return_value = make_response(503)
        client.get_profile()
        assert session.request.call_count == 1

    def test_transport_error_retried_then_reported(self, client, session):
        session.request.side_effect = requests.ConnectionError("connection refused")
        response = client.get_listings()

        assert session.request.call_count == 3
        assert not response.success
        assert response.status_code is None
        assert "connection refused" in response.error

    def test_recovers_after_transient_error(self, client, session):
        session.request.side_effect = [
            requests.Timeout("slow"),
            make_response(body={"status": "ok"}),
        ]
        assert client.check_connection()
        assert session.request.call_count == 2


class TestAuth:
    """Tests for token handling."""

    def test_login_stores_token_and_sends_bearer(self, client, session):
        session.request.return_value = make_response(
            body={"success": True, "data": {"token": "abc123", "user": {"id": "u1"}}}
        )
        client.login(LoginCredentials(email="a@b.c", password="pw"))
        assert client.tokens.get() == "abc123"

        session.request.return_value = make_response(body={"success": True, "data": {}})
        client.get_profile()
        headers = session.request.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer abc123"

    def test_no_token_no_header(self, client, session):
        session.request.return_value = make_response(body={})
        client.get_featured_listings()
        assert "Authorization" not in session.request.call_args.kwargs["headers"]

    def test_logout_clears_token_even_on_failure(self, client, session):
        client.tokens.set("abc123")
        session.request.return_value = make_response(500)
        client.logout()
        assert client.tokens.get() is None


class TestEndpoints:
    """Tests for request payloads of individual endpoints."""

    def test_search_filters_sent_as_params(self, client, session):
        session.request.return_value = make_response(body=[])
        client.get_listings(SearchFilters(make="Toyota", max_price=2_000_000))
        assert session.request.call_args.kwargs["params"] == {
            "make": "Toyota",
            "maxPrice": "2000000.0",
        }

    def test_upgrade_payload(self, client, session):
        session.request.return_value = make_response(body={"success": True})
        client.upgrade_listing("l-1", ListingTier.PREMIUM, 14)
        method, url = session.request.call_args.args
        assert (method, url) == ("POST", "http://api.test/api/listings/l-1/upgrade")
        assert session.request.call_args.kwargs["json"] == {"listingType": "PREMIUM", "duration": "14"}

    def test_upload_missing_file(self, client, session, tmp_path):
        response = client.upload_image(tmp_path / "missing.jpg")
        assert not response.success
        session.request.assert_not_called()


class TestSearchRanked:
    """Tests for search_ranked."""

    def test_results_normalized_and_ranked(self, client, session):
        session.request.return_value = make_response(body={
            "success": True,
            "data": {"listings": [
                {"id": "1", "title": "Vitz", "price": "850,000", "createdAt": "2024-01-02T00:00:00Z"},
                {"id": "2", "title": "Prado", "listingType": "spotlight", "createdAt": "2024-01-01T00:00:00Z"},
                {"title": "no id"},
            ]},
        })
        listings = client.search_ranked()
        assert [l.id for l in listings] == ["2", "1"]
        assert listings[1].price == 850_000

    def test_failure_gives_empty_list(self, client, session):
        session.request.return_value = make_response(500)
        assert client.search_ranked() == []


class TestTokenPersistence:
    """Tests for login when the token file cannot be written."""

    def test_login_survives_unwritable_token_path(self, session, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        config = ApiConfig(base_url="http://api.test/api", retry_attempts=1, retry_delay=0)
        client = ApiService(config=config, token_store=TokenStore(blocker / "auth_token"), session=session)
        session.request.return_value = make_response(
            body={"success": True, "data": {"token": "abc"}}
        )

        response = client.login(LoginCredentials(email="a@b.c", password="pw"))

        assert response.success
        assert client.tokens.get() == "abc"
        assert not (blocker / "auth_token").exists()

    def test_logout_survives_unremovable_token_path(self, session, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        config = ApiConfig(base_url="http://api.test/api", retry_attempts=1, retry_delay=0)
        client = ApiService(config=config, token_store=TokenStore(blocker / "auth_token"), session=session)
        session.request.return_value = make_response(body={"success": True})

        assert client.logout().success
        assert client.tokens.get() is None
