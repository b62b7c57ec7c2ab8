from django.apps import AppConfig


class GroupsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.groups"
    verbose_name = "Registration groups"

    def ready(self):
        from . import signals  # noqa: F401
