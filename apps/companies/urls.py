from django.urls import path

from .views import (
    CompanyAdminListView,
    CompanyApproveView,
    CompanyBulkDeleteView,
    CompanyDetailView,
    CompanyExportView,
    CompanyListView,
    CompanyPaymentStatusView,
    CompanyRejectView,
    PublicQueueView,
)

app_name = "companies"

urlpatterns = [
    path("",                               CompanyListView.as_view(),          name="company-list"),
    path("admin/",                         CompanyAdminListView.as_view(),     name="company-admin-list"),
    path("public-queue/",                  PublicQueueView.as_view(),          name="company-public-queue"),
    path("export/",                        CompanyExportView.as_view(),        name="company-export"),
    path("bulk-delete/",                   CompanyBulkDeleteView.as_view(),    name="company-bulk-delete"),
    path("<uuid:company_id>/",             CompanyDetailView.as_view(),        name="company-detail"),
    path("<uuid:company_id>/approve/",     CompanyApproveView.as_view(),       name="company-approve"),
    path("<uuid:company_id>/reject/",      CompanyRejectView.as_view(),        name="company-reject"),
    path("<uuid:company_id>/status/",      CompanyPaymentStatusView.as_view(), name="company-status"),
]
