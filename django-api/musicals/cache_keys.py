"""Cache keys shared by the handlers and the invalidation signals."""

MUSICAL_LIST = "musicals:list"


def musical_detail(musical_id: str) -> str:
    return f"musicals:{musical_id}"


def shows_for_musical(musical_id: str) -> str:
    return f"musicals:{musical_id}:shows"
