"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.apps import apps
from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from musicals import cache_keys
from musicals.context import BookingContext
from musicals.domain.errors import (
    DomainError,
    ErrorCode,
    ReceiptWriteFailedError,
    SeatAlreadyBookedError,
)
from musicals.handlers.serializers import (
    BookingRequestSerializer,
    MusicalSerializer,
    OrderSerializer,
    QuoteSerializer,
    SeatMapSerializer,
    ShowSerializer,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.MUSICAL_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SHOW_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_MUSICAL_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SHOW_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_SEATS_SELECTED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_COUNT_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SEAT_NUMBER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_SEAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SEAT_ALREADY_BOOKED: status.HTTP_409_CONFLICT,
    ErrorCode.RECEIPT_WRITE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_context() -> BookingContext:
    return apps.get_app_config("musicals").context


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, SeatAlreadyBookedError):
        body["seats"] = list(error.seats)
    if isinstance(error, ReceiptWriteFailedError):
        body["order"] = OrderSerializer(error.order).data
    return Response(body, status=ERROR_STATUS[error.code])


def invalid_request(serializer) -> Response:
    return Response(
        {
            "code": "INVALID_REQUEST",
            "message": "Invalid request body",
            "errors": serializer.errors,
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def cached(key: str, build):
    data = cache.get(key)
    if data is None:
        data = build()
        cache.set(key, data, settings.MUSICALS_CACHE_TIMEOUT)
    return data


class MusicalListView(APIView):
    """Handler for GET /api/musicals"""

    def get(self, request: Request) -> Response:
        service = get_context().catalog_service
        data = cached(
            cache_keys.MUSICAL_LIST,
            lambda: list(MusicalSerializer(service.list_musicals(), many=True).data),
        )
        return Response(data)


class MusicalDetailView(APIView):
    """Handler for GET /api/musicals/{musical_id}"""

    def get(self, request: Request, musical_id: str) -> Response:
        try:
            musical = get_context().catalog_service.get_musical(musical_id)
        except DomainError as exc:
            return error_response(exc)
        data = cached(
            cache_keys.musical_detail(str(musical.id)),
            lambda: dict(MusicalSerializer(musical).data),
        )
        return Response(data)


class ShowListView(APIView):
    """Handler for GET /api/musicals/{musical_id}/shows"""

    def get(self, request: Request, musical_id: str) -> Response:
        try:
            musical = get_context().catalog_service.get_musical(musical_id)
        except DomainError as exc:
            return error_response(exc)
        # Keyed on the canonical id so booking invalidation always matches.
        data = cached(
            cache_keys.shows_for_musical(str(musical.id)),
            lambda: list(ShowSerializer(musical.shows, many=True).data),
        )
        return Response(data)


class SeatListView(APIView):
    """Handler for GET /api/musicals/{musical_id}/shows/{show_id}/seats

    Never cached: clients re-fetch this right before confirming.
    """

    def get(self, request: Request, musical_id: str, show_id: str) -> Response:
        try:
            _, show = get_context().catalog_service.get_show(musical_id, show_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(SeatMapSerializer(show).data)


class QuoteView(APIView):
    """Handler for POST /api/musicals/{musical_id}/shows/{show_id}/quote"""

    def post(self, request: Request, musical_id: str, show_id: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(serializer)
        selection = serializer.validated_data
        try:
            quote = get_context().booking_service.quote(
                musical_id,
                show_id,
                selection["seats"],
                adult_count=selection["adult"],
                senior_count=selection["senior"],
                student_count=selection["student"],
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(QuoteSerializer(quote).data)


class BookingView(APIView):
    """Handler for POST /api/musicals/{musical_id}/shows/{show_id}/bookings"""

    def post(self, request: Request, musical_id: str, show_id: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request(serializer)
        selection = serializer.validated_data
        try:
            purchase = get_context().booking_service.purchase(
                musical_id,
                show_id,
                selection["seats"],
                adult_count=selection["adult"],
                senior_count=selection["senior"],
                student_count=selection["student"],
            )
        except ReceiptWriteFailedError as exc:
            logger.error("Order %s booked but receipt failed: %s", exc.order.id, exc.reason)
            return error_response(exc)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {
                "order": OrderSerializer(purchase.order).data,
                "receipt": purchase.receipt,
            },
            status=status.HTTP_201_CREATED,
        )
