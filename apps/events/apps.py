from django.apps import AppConfig


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.events"
    verbose_name = "Events"

    def ready(self) -> None:
        from .handlers import register_handlers

        register_handlers()
