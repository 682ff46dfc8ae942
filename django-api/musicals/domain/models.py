"""Domain models for the musical catalog and bookings.

Everything here lives in memory. A Show's booked-seat set is the only
mutable state; the rest is frozen once the catalog is built.
"""

import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, time

from musicals.domain.errors import (
    DuplicateSeatError,
    InvalidSeatNumberError,
    SeatAlreadyBookedError,
)
from musicals.domain.value_objects import (
    Capacity,
    Money,
    MusicalId,
    OrderId,
    ShowId,
    TicketType,
)

SEAT_CAPACITY = 100


@dataclass(eq=False)
class Show:
    """Domain representation of a Show and its seat inventory."""

    id: ShowId
    date: date
    time: time
    capacity: Capacity = field(default_factory=lambda: Capacity(SEAT_CAPACITY))
    _booked: set[int] = field(default_factory=set, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, self.time)

    def _check_seat(self, seat: int) -> None:
        if not 1 <= seat <= self.capacity.value:
            raise InvalidSeatNumberError(seat, self.capacity.value)

    def is_booked(self, seat: int) -> bool:
        """Return whether a seat is taken.

        Raises:
            InvalidSeatNumberError: If the seat is outside 1..capacity.
        """
        self._check_seat(seat)
        return seat in self._booked

    def available_seats(self) -> int:
        return self.capacity.value - len(self._booked)

    def available_seat_numbers(self) -> list[int]:
        return [
            seat
            for seat in range(1, self.capacity.value + 1)
            if seat not in self._booked
        ]

    def booked_seats(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._booked)

    def check_available(self, seats: Iterable[int]) -> None:
        """Validate a batch of seats against the current seat map.

        Raises:
            InvalidSeatNumberError: If a seat is outside 1..capacity.
            DuplicateSeatError: If a seat appears twice.
            SeatAlreadyBookedError: Listing every requested seat that is taken.
        """
        seen: set[int] = set()
        for seat in seats:
            self._check_seat(seat)
            if seat in seen:
                raise DuplicateSeatError(seat)
            seen.add(seat)
        taken = [seat for seat in seen if seat in self._booked]
        if taken:
            raise SeatAlreadyBookedError(sorted(taken))

    def book_seats(self, seats: Sequence[int]) -> None:
        """Book every seat or none of them.

        The availability recheck and the update share one lock, so two
        callers can never both win the same seat.
        """
        with self._lock:
            self.check_available(seats)
            self._booked.update(seats)

    def book_seat(self, seat: int) -> None:
        self.book_seats([seat])


@dataclass(frozen=True)
class Musical:
    """Domain representation of a Musical."""

    id: MusicalId
    name: str
    description: str
    image_path: str
    shows: tuple[Show, ...] = ()

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Musical name cannot be empty")

    def find_show(self, show_id: ShowId) -> Show | None:
        for show in self.shows:
            if show.id == show_id:
                return show
        return None


@dataclass(frozen=True)
class Catalog:
    """The fixed collection of musicals available for booking."""

    musicals: tuple[Musical, ...] = ()

    def list_musicals(self) -> list[Musical]:
        return list(self.musicals)

    def find_musical(self, musical_id: MusicalId) -> Musical | None:
        for musical in self.musicals:
            if musical.id == musical_id:
                return musical
        return None


@dataclass(frozen=True)
class OrderLine:
    """One booked seat and the ticket type it was sold as."""

    seat: int
    ticket_type: TicketType

    @property
    def price(self) -> Money:
        return self.ticket_type.price


def total_of(lines: Iterable[OrderLine]) -> Money:
    total = Money.zero()
    for line in lines:
        total = total + line.price
    return total


@dataclass(frozen=True)
class Order:
    """Immutable record of a completed booking."""

    id: OrderId
    musical_name: str
    show_date: date
    show_time: time
    lines: tuple[OrderLine, ...]
    total: Money

    def __post_init__(self) -> None:
        if total_of(self.lines) != self.total:
            raise ValueError("Order total does not match its lines")

    @property
    def seat_types(self) -> dict[int, TicketType]:
        return {line.seat: line.ticket_type for line in self.lines}
