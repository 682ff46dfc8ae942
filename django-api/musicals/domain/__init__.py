from musicals.domain.models import SEAT_CAPACITY, Catalog, Musical, Order, OrderLine, Show
from musicals.domain.value_objects import (
    Capacity,
    Money,
    MusicalId,
    OrderId,
    ShowId,
    TicketType,
)

__all__ = [
    "Catalog",
    "Musical",
    "Show",
    "Order",
    "OrderLine",
    "SEAT_CAPACITY",
    "MusicalId",
    "ShowId",
    "OrderId",
    "Money",
    "Capacity",
    "TicketType",
]
