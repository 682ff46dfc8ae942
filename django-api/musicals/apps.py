from django.apps import AppConfig


class MusicalsConfig(AppConfig):
    name = "musicals"
    verbose_name = "London Musical Tickets"

    def ready(self) -> None:
        from musicals import signals  # noqa: F401
        from musicals.context import build_context

        self.context = build_context()
