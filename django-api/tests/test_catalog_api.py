"""Integration tests for the musical catalog endpoints.

Run with: pytest tests/test_catalog_api.py -v
"""

from django.core.cache import cache
from rest_framework.test import APIClient

from musicals import cache_keys
from musicals.context import BookingContext

UNKNOWN_ID = "00000000-0000-4000-8000-000000000000"


class TestMusicalList:
    """Tests for GET /api/musicals"""

    def test_list_musicals_returns_catalog(self, api_client: APIClient, booking_context: BookingContext):
        """Returns every musical in catalog order."""
        response = api_client.get("/api/musicals")

        assert response.status_code == 200
        body = response.json()
        assert [item["name"] for item in body] == [
            "The Lion King",
            "Frozen",
            "Les Misérables",
            "Phantom of the Opera",
        ]
        first = body[0]
        assert first["id"] == str(booking_context.catalog.musicals[0].id)
        assert first["description"] == "A Disney classic - family musical."
        assert first["image"] == "assets/lionKing.png"
        assert first["show_count"] == 3

    def test_list_musicals_cached_response(self, api_client: APIClient, booking_context: BookingContext):
        """Given cached data, returns from cache."""
        cache.set(cache_keys.MUSICAL_LIST, [{"name": "Cached"}])

        response = api_client.get("/api/musicals")

        assert response.json() == [{"name": "Cached"}]


class TestMusicalDetail:
    """Tests for GET /api/musicals/{id}"""

    def test_get_musical_returns_details(self, api_client: APIClient, booking_context: BookingContext):
        """Given musical exists, returns musical details."""
        musical = booking_context.catalog.musicals[1]

        response = api_client.get(f"/api/musicals/{musical.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Frozen"

    def test_get_musical_not_found(self, api_client: APIClient, booking_context: BookingContext):
        """Given musical does not exist, returns 404."""
        response = api_client.get(f"/api/musicals/{UNKNOWN_ID}")

        assert response.status_code == 404
        assert response.json()["code"] == "MUSICAL_NOT_FOUND"

    def test_get_musical_invalid_id_format(self, api_client: APIClient, booking_context: BookingContext):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/musicals/frozen")

        assert response.status_code == 400
        assert response.json() == {
            "code": "INVALID_MUSICAL_ID",
            "message": "Invalid musical ID format",
        }


class TestShowList:
    """Tests for GET /api/musicals/{id}/shows"""

    def test_list_shows_with_availability(self, api_client: APIClient, booking_context: BookingContext):
        """Given a musical, returns its shows with seat availability."""
        musical = booking_context.catalog.musicals[0]
        musical.shows[0].book_seats([1, 2])

        response = api_client.get(f"/api/musicals/{musical.id}/shows")

        assert response.status_code == 200
        shows = response.json()
        assert [show["id"] for show in shows] == [str(show.id) for show in musical.shows]
        assert shows[0]["date"] == "2030-03-02"
        assert shows[0]["time"] == "19:00"
        assert shows[0]["capacity"] == 100
        assert [show["available_seats"] for show in shows] == [98, 100, 100]

    def test_list_shows_musical_not_found(self, api_client: APIClient, booking_context: BookingContext):
        """Given musical does not exist, returns 404."""
        response = api_client.get(f"/api/musicals/{UNKNOWN_ID}/shows")

        assert response.status_code == 404


class TestSeatList:
    """Tests for GET /api/musicals/{id}/shows/{show_id}/seats"""

    def test_list_available_seats(self, api_client: APIClient, booking_context: BookingContext):
        """Booked seats are left out of the seat list."""
        musical = booking_context.catalog.musicals[2]
        show = musical.shows[1]
        show.book_seats([2, 3])

        response = api_client.get(f"/api/musicals/{musical.id}/shows/{show.id}/seats")

        assert response.status_code == 200
        body = response.json()
        assert body["show_id"] == str(show.id)
        assert body["available_seats"][:3] == [1, 4, 5]
        assert len(body["available_seats"]) == 98
        assert body["labels"][:2] == ["S1", "S4"]

    def test_show_not_found(self, api_client: APIClient, booking_context: BookingContext):
        """Given a show of another musical, returns 404."""
        lion_king, frozen = booking_context.catalog.musicals[:2]

        response = api_client.get(
            f"/api/musicals/{lion_king.id}/shows/{frozen.shows[0].id}/seats"
        )

        assert response.status_code == 404
        assert response.json()["code"] == "SHOW_NOT_FOUND"

    def test_invalid_show_id(self, api_client: APIClient, booking_context: BookingContext):
        """Given invalid show UUID, returns 400."""
        musical = booking_context.catalog.musicals[0]

        response = api_client.get(f"/api/musicals/{musical.id}/shows/evening/seats")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_SHOW_ID"


class TestSettings:
    """Tests for the installed app set."""

    def test_runs_without_auth_apps(self, api_client: APIClient, booking_context: BookingContext):
        """The API serves requests with only DRF and musicals installed."""
        from django.apps import apps

        assert not apps.is_installed("django.contrib.auth")
        assert not apps.is_installed("django.contrib.contenttypes")
        assert api_client.get("/api/musicals").status_code == 200
