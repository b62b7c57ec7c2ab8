from django.urls import path

from .views import (
    CompanyNameByCodeView,
    CompanyNameDeleteAllView,
    CompanyNameDetailView,
    CompanyNameImportView,
    CompanyNameListCreateView,
    PublicCompanyNameListView,
    UnregisteredCompanyNameView,
)

app_name = "company_names"

urlpatterns = [
    path("",                       CompanyNameListCreateView.as_view(),   name="company-name-list"),
    path("public/",                PublicCompanyNameListView.as_view(),   name="company-name-public"),
    path("code/<str:code>/",       CompanyNameByCodeView.as_view(),       name="company-name-by-code"),
    path("all/",                   CompanyNameDeleteAllView.as_view(),    name="company-name-delete-all"),
    path("import/",                CompanyNameImportView.as_view(),       name="company-name-import"),
    path("unregistered/",          UnregisteredCompanyNameView.as_view(), name="company-name-unregistered"),
    path("<uuid:entry_id>/",       CompanyNameDetailView.as_view(),       name="company-name-detail"),
]
