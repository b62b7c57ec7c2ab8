from django.urls import path

from .views import (
    PreRegisterView,
    PreRegisteredCompaniesView,
    PreRegistrationByCodeView,
    PreRegistrationDetailView,
    PreRegistrationVerifyView,
)

app_name = "pre_registration"

urlpatterns = [
    path("",                                  PreRegisterView.as_view(),            name="pre-register"),
    path("verify/",                           PreRegistrationVerifyView.as_view(),  name="pre-register-verify"),
    path("public/companies/",                 PreRegisteredCompaniesView.as_view(), name="pre-registered-companies"),
    path("by-code/<str:code>/",               PreRegistrationByCodeView.as_view(),  name="pre-register-by-code"),
    path("<uuid:pre_registration_id>/",       PreRegistrationDetailView.as_view(),  name="pre-register-detail"),
]
