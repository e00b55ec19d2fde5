from django.apps import AppConfig
from django.conf import settings


class MarketplaceConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "marketplace"

    def ready(self):
        from infrastructure.observability.tracing import setup_tracing

        tracing = getattr(settings, "TRACING", {})
        setup_tracing(service_name=tracing.get("SERVICE_NAME", "bazaar-backend"), enable=tracing.get("ENABLED", False))
