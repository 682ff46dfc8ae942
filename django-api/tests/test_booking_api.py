"""Integration tests for the quote and booking endpoints.

Run with: pytest tests/test_booking_api.py -v
"""

from pathlib import Path

import pytest
from rest_framework.test import APIClient

from musicals.context import BookingContext, build_context


def booking_url(context: BookingContext, action: str, musical_index: int = 0) -> str:
    musical = context.catalog.musicals[musical_index]
    return f"/api/musicals/{musical.id}/shows/{musical.shows[0].id}/{action}"


class TestQuote:
    """Tests for POST .../quote"""

    def test_quote_returns_priced_lines(self, api_client: APIClient, booking_context: BookingContext):
        """A quote lists each seat with its type and price."""
        response = api_client.post(
            booking_url(booking_context, "quote"),
            {"seats": ["S5", "S12", "S20"], "adult": 1, "senior": 1, "student": 1},
            format="json",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["musical_name"] == "The Lion King"
        assert body["total"] == "125.00"
        assert [(line["label"], line["ticket_type"], line["price"]) for line in body["lines"]] == [
            ("S5", "Adult", "50.00"),
            ("S12", "Senior", "40.00"),
            ("S20", "Student", "35.00"),
        ]

    def test_quote_does_not_book(self, api_client: APIClient, booking_context: BookingContext):
        """Seats stay available after a quote."""
        api_client.post(
            booking_url(booking_context, "quote"),
            {"seats": [1], "adult": 1},
            format="json",
        )

        assert booking_context.catalog.musicals[0].shows[0].available_seats() == 100


class TestBooking:
    """Tests for POST .../bookings"""

    def test_booking_creates_order_and_receipt(
        self, api_client: APIClient, booking_context: BookingContext, receipts_dir: Path
    ):
        """A valid booking returns 201 with the order and receipt path."""
        response = api_client.post(
            booking_url(booking_context, "bookings"),
            {"seats": [1, 2, 3], "adult": 2, "student": 1},
            format="json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["order"]["total"] == "135.00"
        assert [line["seat"] for line in body["order"]["lines"]] == [1, 2, 3]
        receipt = Path(body["receipt"])
        assert receipt.parent == receipts_dir.resolve()
        assert body["order"]["id"] in receipt.read_text(encoding="utf-8")
        assert booking_context.catalog.musicals[0].shows[0].available_seats() == 97

    def test_rebooking_returns_conflict(self, api_client: APIClient, booking_context: BookingContext):
        """A seat booked earlier is rejected with 409."""
        url = booking_url(booking_context, "bookings")
        api_client.post(url, {"seats": [1, 2, 3], "adult": 2, "student": 1}, format="json")

        response = api_client.post(url, {"seats": ["S1"], "adult": 1}, format="json")

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "SEAT_ALREADY_BOOKED"
        assert body["seats"] == [1]
        assert booking_context.catalog.musicals[0].shows[0].available_seats() == 97

    @pytest.mark.parametrize(
        "payload, code",
        [
            ({"seats": []}, "NO_SEATS_SELECTED"),
            ({"seats": [1, 2], "adult": 1}, "TICKET_COUNT_MISMATCH"),
            ({"seats": [0], "adult": 1}, "INVALID_SEAT_NUMBER"),
            ({"seats": ["S101"], "senior": 1}, "INVALID_SEAT_NUMBER"),
            ({"seats": [9, "S9"], "adult": 2}, "DUPLICATE_SEAT"),
        ],
    )
    def test_invalid_booking(
        self, api_client: APIClient, booking_context: BookingContext, payload, code
    ):
        """Validation failures return 400 with the error code and book nothing."""
        response = api_client.post(booking_url(booking_context, "bookings"), payload, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == code
        assert booking_context.catalog.musicals[0].shows[0].available_seats() == 100

    @pytest.mark.parametrize(
        "payload",
        [
            {"adult": 1},
            {"seats": ["front row"], "adult": 1},
            {"seats": ["S²"], "adult": 1},
            {"seats": [1], "adult": -1, "senior": 2},
        ],
    )
    def test_malformed_request(self, api_client: APIClient, booking_context: BookingContext, payload):
        """Malformed bodies are rejected before reaching the service."""
        response = api_client.post(booking_url(booking_context, "bookings"), payload, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"

    def test_receipt_failure_reports_committed_order(
        self, api_client: APIClient, booking_context: BookingContext, tmp_path: Path, monkeypatch
    ):
        """A failed receipt write returns 500 with the order; seats stay booked."""
        from django.apps import apps

        blocker = tmp_path / "blocked"
        blocker.write_text("not a directory")
        context = build_context(catalog=booking_context.catalog, receipts_dir=blocker)
        monkeypatch.setattr(apps.get_app_config("musicals"), "context", context)

        response = api_client.post(
            booking_url(context, "bookings"), {"seats": [4], "adult": 1}, format="json"
        )

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "RECEIPT_WRITE_FAILED"
        assert body["order"]["lines"][0]["seat"] == 4
        assert context.catalog.musicals[0].shows[0].is_booked(4)
