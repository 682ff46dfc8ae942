"""Django signals for cache invalidation.

``seats_booked`` is sent by the booking service after every committed
booking; the receiver drops cached views that show seat availability.
"""

from django.core.cache import cache
from django.dispatch import Signal, receiver

from musicals import cache_keys

# Sent with keyword arguments: musical_id, show_id, seats.
seats_booked = Signal()


@receiver(seats_booked)
def invalidate_show_cache(sender, musical_id, **kwargs):
    """Invalidate the shows list of a musical when its seats change."""
    cache.delete(cache_keys.shows_for_musical(str(musical_id)))
