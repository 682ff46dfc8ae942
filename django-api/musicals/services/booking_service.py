"""Booking service - seat validation, pricing and commit.

A booking either books every requested seat and yields one Order, or
books nothing and raises a domain error. Ticket types are handed out to
seats in request order: adults first, then seniors, then students.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, time

from musicals.domain import Order, OrderId, OrderLine, Show, TicketType
from musicals.domain.errors import (
    DomainError,
    NoSeatsSelectedError,
    TicketCountMismatchError,
)
from musicals.domain.models import total_of
from musicals.domain.value_objects import Money
from musicals.services.catalog_service import CatalogService
from musicals.signals import seats_booked
from musicals.stores.interfaces import ReceiptStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quote:
    """Priced preview of a booking that has not been committed."""

    musical_name: str
    show_date: date
    show_time: time
    lines: tuple[OrderLine, ...]
    total: Money


@dataclass(frozen=True)
class Purchase:
    """A committed order and the location of its receipt."""

    order: Order
    receipt: str


def assign_ticket_types(
    seats: Sequence[int],
    adult_count: int = 0,
    senior_count: int = 0,
    student_count: int = 0,
) -> tuple[OrderLine, ...]:
    """Pair each seat with a ticket type.

    Raises:
        NoSeatsSelectedError: If ``seats`` is empty.
        TicketCountMismatchError: If a count is negative or the counts do
            not add up to the number of seats.
    """
    if not seats:
        raise NoSeatsSelectedError()
    counts = {
        TicketType.ADULT: adult_count,
        TicketType.SENIOR: senior_count,
        TicketType.STUDENT: student_count,
    }
    ticket_count = sum(counts.values())
    if any(count < 0 for count in counts.values()) or ticket_count != len(seats):
        raise TicketCountMismatchError(len(seats), ticket_count)

    types = [
        ticket_type
        for ticket_type in TicketType
        for _ in range(counts[ticket_type])
    ]
    return tuple(
        OrderLine(seat=seat, ticket_type=ticket_type)
        for seat, ticket_type in zip(seats, types)
    )


class BookingService:
    """Service for quoting and committing seat bookings."""

    def __init__(
        self,
        catalog: CatalogService,
        receipts: ReceiptStore | None = None,
    ) -> None:
        self._catalog = catalog
        self._receipts = receipts

    def quote(
        self,
        musical_id: str,
        show_id: str,
        seats: Sequence[int],
        adult_count: int = 0,
        senior_count: int = 0,
        student_count: int = 0,
    ) -> Quote:
        """Validate and price a selection without booking anything."""
        musical, show = self._catalog.get_show(musical_id, show_id)
        lines = assign_ticket_types(seats, adult_count, senior_count, student_count)
        show.check_available(seats)
        return Quote(
            musical_name=musical.name,
            show_date=show.date,
            show_time=show.time,
            lines=lines,
            total=total_of(lines),
        )

    def book(
        self,
        musical_id: str,
        show_id: str,
        seats: Sequence[int],
        adult_count: int = 0,
        senior_count: int = 0,
        student_count: int = 0,
    ) -> Order:
        """Book the seats and return the resulting order.

        Raises:
            NoSeatsSelectedError: If no seats were given.
            TicketCountMismatchError: If the counts do not match the seats.
            InvalidSeatNumberError: If a seat is outside the show's seat map.
            DuplicateSeatError: If a seat is requested twice.
            SeatAlreadyBookedError: If any seat is taken at commit time.
        """
        musical, show = self._catalog.get_show(musical_id, show_id)
        lines = assign_ticket_types(seats, adult_count, senior_count, student_count)
        try:
            show.book_seats([line.seat for line in lines])
        except DomainError as exc:
            logger.warning(
                "Booking rejected for %s on %s: %s", musical.name, show.starts_at, exc
            )
            raise

        order = Order(
            id=OrderId.new(),
            musical_name=musical.name,
            show_date=show.date,
            show_time=show.time,
            lines=lines,
            total=total_of(lines),
        )
        logger.info(
            "Order %s booked seats %s for %s on %s (total %s)",
            order.id,
            [line.seat for line in lines],
            musical.name,
            show.starts_at,
            order.total,
        )
        self._notify(musical.id, show, lines)
        return order

    def purchase(
        self,
        musical_id: str,
        show_id: str,
        seats: Sequence[int],
        adult_count: int = 0,
        senior_count: int = 0,
        student_count: int = 0,
    ) -> Purchase:
        """Book the seats and store a receipt for the order.

        The booking is not rolled back when the receipt cannot be written.

        Raises:
            ReceiptWriteFailedError: After a committed booking whose receipt
                could not be stored; the error carries the order.
        """
        if self._receipts is None:
            raise RuntimeError("BookingService has no receipt store configured")
        order = self.book(
            musical_id, show_id, seats, adult_count, senior_count, student_count
        )
        return Purchase(order=order, receipt=self._receipts.save(order))

    def _notify(self, musical_id, show: Show, lines: tuple[OrderLine, ...]) -> None:
        seats_booked.send(
            sender=self.__class__,
            musical_id=musical_id,
            show_id=show.id,
            seats=tuple(line.seat for line in lines),
        )
