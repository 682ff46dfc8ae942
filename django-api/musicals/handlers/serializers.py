"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from musicals.domain.errors import InvalidSeatNumberError
from musicals.domain.value_objects import parse_seat, seat_label


class MusicalSerializer(serializers.Serializer):
    """Serializer for Musical domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    image = serializers.CharField(source="image_path")
    show_count = serializers.SerializerMethodField()

    def get_show_count(self, musical) -> int:
        return len(musical.shows)


class ShowSerializer(serializers.Serializer):
    """Serializer for Show domain model with current availability."""

    id = serializers.UUIDField(source="id.value")
    date = serializers.DateField()
    time = serializers.TimeField(format="%H:%M")
    capacity = serializers.IntegerField(source="capacity.value")
    available_seats = serializers.SerializerMethodField()

    def get_available_seats(self, show) -> int:
        return show.available_seats()


class SeatMapSerializer(serializers.Serializer):
    """Unbooked seats of a show."""

    show_id = serializers.UUIDField(source="id.value")
    available_seats = serializers.SerializerMethodField()
    labels = serializers.SerializerMethodField()

    def get_available_seats(self, show) -> list[int]:
        return show.available_seat_numbers()

    def get_labels(self, show) -> list[str]:
        return [seat_label(seat) for seat in show.available_seat_numbers()]


class SeatField(serializers.Field):
    """A seat given as a number (12) or a label ("S12")."""

    def to_internal_value(self, data) -> int:
        try:
            return parse_seat(data)
        except InvalidSeatNumberError as exc:
            raise serializers.ValidationError(exc.message) from exc

    def to_representation(self, value) -> int:
        return value


class BookingRequestSerializer(serializers.Serializer):
    """Input for quotes and bookings."""

    seats = serializers.ListField(child=SeatField(), allow_empty=True)
    adult = serializers.IntegerField(min_value=0, default=0)
    senior = serializers.IntegerField(min_value=0, default=0)
    student = serializers.IntegerField(min_value=0, default=0)


class OrderLineSerializer(serializers.Serializer):
    seat = serializers.IntegerField()
    label = serializers.SerializerMethodField()
    ticket_type = serializers.CharField(source="ticket_type.value")
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="price.amount"
    )

    def get_label(self, line) -> str:
        return seat_label(line.seat)


class QuoteSerializer(serializers.Serializer):
    """Serializer for a booking preview."""

    musical_name = serializers.CharField()
    show_date = serializers.DateField()
    show_time = serializers.TimeField(format="%H:%M")
    lines = OrderLineSerializer(many=True)
    total = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="total.amount"
    )


class OrderSerializer(QuoteSerializer):
    """Serializer for Order domain model."""

    id = serializers.UUIDField(source="id.value")
