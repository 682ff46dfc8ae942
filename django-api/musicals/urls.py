from django.urls import path

from musicals.handlers import (
    BookingView,
    MusicalDetailView,
    MusicalListView,
    QuoteView,
    SeatListView,
    ShowListView,
)

urlpatterns = [
    path("musicals", MusicalListView.as_view(), name="musical-list"),
    path("musicals/<str:musical_id>", MusicalDetailView.as_view(), name="musical-detail"),
    path(
        "musicals/<str:musical_id>/shows",
        ShowListView.as_view(),
        name="show-list",
    ),
    path(
        "musicals/<str:musical_id>/shows/<str:show_id>/seats",
        SeatListView.as_view(),
        name="seat-list",
    ),
    path(
        "musicals/<str:musical_id>/shows/<str:show_id>/quote",
        QuoteView.as_view(),
        name="booking-quote",
    ),
    path(
        "musicals/<str:musical_id>/shows/<str:show_id>/bookings",
        BookingView.as_view(),
        name="booking-create",
    ),
]
