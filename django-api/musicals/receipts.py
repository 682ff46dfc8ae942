"""Plain-text rendering of order receipts."""

from musicals.domain import Order

HEADER = "London Musical Tickets - Receipt"
RULE = "-" * 40


def render_receipt(order: Order) -> str:
    """Render an order as receipt text, one seat per row in booking order."""
    lines = [
        HEADER,
        f"Order ID: {order.id}",
        f"Musical: {order.musical_name}",
        f"Show: {order.show_date.isoformat()} {order.show_time:%H:%M}",
        RULE,
        f"{'Seat':<8} {'Type':<10} {'Price':<8}".rstrip(),
        RULE,
    ]
    for line in order.lines:
        lines.append(f"{line.seat:<8} {line.ticket_type.value:<10} ${line.price}")
    lines += [
        RULE,
        f"Total: ${order.total}",
        "Thank you for your purchase!",
    ]
    return "\n".join(lines) + "\n"
