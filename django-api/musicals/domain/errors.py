"""Domain error codes for the musicals module."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MUSICAL_NOT_FOUND = "MUSICAL_NOT_FOUND"
    SHOW_NOT_FOUND = "SHOW_NOT_FOUND"
    INVALID_MUSICAL_ID = "INVALID_MUSICAL_ID"
    INVALID_SHOW_ID = "INVALID_SHOW_ID"
    NO_SEATS_SELECTED = "NO_SEATS_SELECTED"
    TICKET_COUNT_MISMATCH = "TICKET_COUNT_MISMATCH"
    INVALID_SEAT_NUMBER = "INVALID_SEAT_NUMBER"
    DUPLICATE_SEAT = "DUPLICATE_SEAT"
    SEAT_ALREADY_BOOKED = "SEAT_ALREADY_BOOKED"
    RECEIPT_WRITE_FAILED = "RECEIPT_WRITE_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MusicalNotFoundError(DomainError):
    """Raised when a musical is not found."""

    def __init__(self, musical_id: str) -> None:
        super().__init__(
            code=ErrorCode.MUSICAL_NOT_FOUND,
            message="Musical not found",
        )
        self.musical_id = musical_id


class ShowNotFoundError(DomainError):
    """Raised when a show does not belong to the musical."""

    def __init__(self, show_id: str) -> None:
        super().__init__(
            code=ErrorCode.SHOW_NOT_FOUND,
            message="Show not found for musical",
        )
        self.show_id = show_id


class InvalidMusicalIdError(DomainError):
    """Raised when a musical ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MUSICAL_ID,
            message="Invalid musical ID format",
        )


class InvalidShowIdError(DomainError):
    """Raised when a show ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SHOW_ID,
            message="Invalid show ID format",
        )


class NoSeatsSelectedError(DomainError):
    """Raised when a booking names no seats."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_SEATS_SELECTED,
            message="Please select at least one seat",
        )


class TicketCountMismatchError(DomainError):
    """Raised when ticket counts do not add up to the number of seats."""

    def __init__(self, seat_count: int, ticket_count: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_COUNT_MISMATCH,
            message=(
                "Number of ticket types must equal number of seats selected. "
                f"Selected seats: {seat_count}, ticket count: {ticket_count}"
            ),
        )
        self.seat_count = seat_count
        self.ticket_count = ticket_count


class InvalidSeatNumberError(DomainError):
    """Raised for a seat outside the show's seat map."""

    def __init__(self, seat: object, capacity: int | None = None) -> None:
        if capacity is None:
            message = f"Invalid seat: {seat!r}"
        else:
            message = f"Seat {seat} is outside 1..{capacity}"
        super().__init__(code=ErrorCode.INVALID_SEAT_NUMBER, message=message)
        self.seat = seat


class DuplicateSeatError(DomainError):
    """Raised when the same seat is requested more than once."""

    def __init__(self, seat: int) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SEAT,
            message=f"Seat {seat} was selected more than once",
        )
        self.seat = seat


class SeatAlreadyBookedError(DomainError):
    """Raised when one or more requested seats are taken."""

    def __init__(self, seats: Iterable[int]) -> None:
        seats = tuple(seats)
        listed = ", ".join(str(seat) for seat in seats)
        super().__init__(
            code=ErrorCode.SEAT_ALREADY_BOOKED,
            message=f"Seat {listed} was just booked. Please refresh seats",
        )
        self.seats = seats


class ReceiptWriteFailedError(DomainError):
    """Raised when a receipt could not be stored.

    The booking behind ``order`` is already committed when this is raised.
    """

    def __init__(self, order, reason: str) -> None:
        super().__init__(
            code=ErrorCode.RECEIPT_WRITE_FAILED,
            message="Failed to save receipt",
        )
        self.order = order
        self.reason = reason
