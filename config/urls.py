from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from core.views import HealthView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    path("api/health/", HealthView.as_view(), name="health"),
    path("api/auth/", include("apps.authentication.urls", namespace="authentication")),
    path("api/users/", include("apps.authentication.user_urls", namespace="users")),
    # ── Website settings & registration window ───────────────────────
    path("api/settings/", include("apps.system_settings.urls", namespace="system_settings")),
    # ── Groups (time slots with capacity) ────────────────────────────
    path("api/groups/", include("apps.groups.urls", namespace="groups")),
    # ── Pre-registration ─────────────────────────────────────────────
    path("api/pre-register/", include("apps.pre_registration.urls", namespace="pre_registration")),
    path("api/companies/", include("apps.companies.urls", namespace="companies")),
    path("api/company-names/", include("apps.company_names.urls", namespace="company_names")),
    path("api/translations/", include("apps.translations.urls", namespace="translations")),
]
