from django.apps import AppConfig


class PreRegistrationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.pre_registration"
    verbose_name = "Pre-registrations"
