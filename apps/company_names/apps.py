from django.apps import AppConfig


class CompanyNamesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.company_names"
    verbose_name = "Company names"
