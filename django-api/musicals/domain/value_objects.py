"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Self
from uuid import UUID, uuid4

from musicals.domain.errors import InvalidSeatNumberError


@dataclass(frozen=True)
class MusicalId:
    """Unique identifier for a Musical."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ShowId:
    """Unique identifier for a Show."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OrderId:
    """Globally unique identifier for an Order."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @property
    def short(self) -> str:
        """First eight characters, used in receipt file names."""
        return str(self.value)[:8]

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


class TicketType(Enum):
    """Pricing category applied to a booked seat.

    Declaration order is the order in which ticket types are handed out
    to a booking's seats.
    """

    ADULT = "Adult"
    SENIOR = "Senior"
    STUDENT = "Student"

    @property
    def price(self) -> Money:
        return TICKET_PRICES[self]


TICKET_PRICES = MappingProxyType(
    {
        TicketType.ADULT: Money(Decimal("50")),
        TicketType.SENIOR: Money(Decimal("40")),
        TicketType.STUDENT: Money(Decimal("35")),
    }
)


def seat_label(seat: int) -> str:
    """Display form of a seat number, e.g. 12 -> "S12"."""
    return f"S{seat}"


def parse_seat(raw: int | str) -> int:
    """Parse a seat given as a number or a label ("S12", "12").

    Raises:
        InvalidSeatNumberError: If the value is not a seat number.
    """
    if isinstance(raw, bool):
        raise InvalidSeatNumberError(raw)
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if text[:1] in ("S", "s"):
        text = text[1:]
    if not (text.isascii() and text.isdigit()):
        raise InvalidSeatNumberError(raw)
    return int(text)
