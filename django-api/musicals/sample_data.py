"""Sample catalog seeded at startup."""

from datetime import date, time, timedelta

from musicals.domain import Catalog, Musical, MusicalId, Show, ShowId

# (name, description, image, [(day offset, hour, minute), ...])
SAMPLE_MUSICALS = [
    (
        "The Lion King",
        "A Disney classic - family musical.",
        "assets/lionKing.png",
        [(1, 19, 0), (4, 14, 30), (9, 20, 0)],
    ),
    (
        "Frozen",
        "A magical musical for children.",
        "assets/frozen.jpeg",
        [(2, 13, 0), (6, 19, 30), (12, 18, 0)],
    ),
    (
        "Les Misérables",
        "Epic tale of revolution & love.",
        "assets/les.png",
        [(3, 19, 30), (10, 19, 30)],
    ),
    (
        "Phantom of the Opera",
        "Haunting romance and mystery.",
        "assets/pha.jpg",
        [(5, 19, 0), (11, 14, 0), (17, 20, 0)],
    ),
]


def build_sample_catalog(start: date | None = None) -> Catalog:
    """Build the sample catalog with shows scheduled relative to ``start``.

    ``start`` defaults to tomorrow.
    """
    if start is None:
        start = date.today() + timedelta(days=1)

    musicals = []
    for name, description, image_path, schedule in SAMPLE_MUSICALS:
        shows = tuple(
            Show(
                id=ShowId.new(),
                date=start + timedelta(days=offset),
                time=time(hour, minute),
            )
            for offset, hour, minute in schedule
        )
        musicals.append(
            Musical(
                id=MusicalId.new(),
                name=name,
                description=description,
                image_path=image_path,
                shows=shows,
            )
        )
    return Catalog(musicals=tuple(musicals))
