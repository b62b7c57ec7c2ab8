from django.apps import AppConfig


class SystemSettingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.system_settings"
    verbose_name = "Website settings"

    def ready(self):
        from . import signals  # noqa: F401
