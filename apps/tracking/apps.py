from django.apps import AppConfig
from django.conf import settings


class TrackingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tracking'
    verbose_name = 'Order Tracking'

    def ready(self):
        """Build the store client once from settings."""
        from .services.store import StoreClient, StoreSettings

        self.store = StoreClient(StoreSettings.from_django_settings(settings))
        self.strict_actions = getattr(settings, 'TRACKING_STRICT_ACTIONS', False)
