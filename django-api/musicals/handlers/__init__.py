from musicals.handlers.views import (
    BookingView,
    MusicalDetailView,
    MusicalListView,
    QuoteView,
    SeatListView,
    ShowListView,
)

__all__ = [
    "MusicalListView",
    "MusicalDetailView",
    "ShowListView",
    "SeatListView",
    "QuoteView",
    "BookingView",
]
