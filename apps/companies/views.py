"""
apps/companies/views.py

Endpoints:
    GET    /api/companies/                  — approved companies (public), all for admin / accounting
    POST   /api/companies/                  — full registration form (public, gated)
    GET    /api/companies/admin/            — admin list, filterable (see core.filters.CompanyFilter)
    GET    /api/companies/public-queue/     — payment queue, oldest first, public fields only
    GET    /api/companies/export/           — Excel export (admin / accounting)
    POST   /api/companies/bulk-delete/      — admin
    GET    /api/companies/{id}/             — public if approved
    PUT    /api/companies/{id}/             — admin
    DELETE /api/companies/{id}/             — admin
    POST   /api/companies/{id}/approve/     — admin
    POST   /api/companies/{id}/reject/      — admin
    PATCH  /api/companies/{id}/status/      — paid / spent / paymentDate (admin / accounting)
"""

import logging

from django.http import HttpResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ResourceNotFoundException, ValidationException
from core.filters import CompanyFilter
from core.mixins import AuditLogMixin, PermissionByRoleMixin
from core.pagination import paginate_if_requested
from core.permissions import IsAdmin, IsAdminOrAccounting, can_see_all_companies
from .export import build_companies_workbook
from .models import Company
from .serializers import BulkDeleteSerializer, CompanySerializer, PublicQueueSerializer
from .services import CompanyAdminService, CompanyRegistrationService

logger = logging.getLogger(__name__)


class CompanyListView(AuditLogMixin, APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        qs = Company.objects.select_related("group").order_by("-created_at")
        if not can_see_all_companies(request):
            qs = qs.filter(status=Company.Status.APPROVED)
        return Response(CompanySerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        company, created = CompanyRegistrationService.register(
            request.data,
            bypass_gate=can_see_all_companies(request),
        )
        self.log_action("REGISTER_COMPANY", company.name, f"code={company.code or '-'} created={created}")
        return Response(
            CompanySerializer(company).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class CompanyAdminListView(APIView):
    """
    GET /api/companies/admin/
        Query params: search, status, group=<uuid>, no_group=true, paid, spent,
                      created_after, created_before, page, page_size
    """
    permission_classes = [IsAdmin]

    def get(self, request):
        qs = Company.objects.select_related("group").order_by("-created_at")
        filterset = CompanyFilter(request.query_params, queryset=qs)
        if not filterset.is_valid():
            raise ValidationException(filterset.errors)
        return paginate_if_requested(request, filterset.qs, CompanySerializer, view=self)


class PublicQueueView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        qs = Company.objects.filter(status=Company.Status.APPROVED).order_by("created_at")
        return Response(PublicQueueSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class CompanyExportView(AuditLogMixin, APIView):
    """GET /api/companies/export/ → .xlsx, accepts the same filters as the admin list."""
    permission_classes = [IsAdminOrAccounting]

    def get(self, request):
        qs = Company.objects.select_related("group").order_by("created_at")
        filterset = CompanyFilter(request.query_params, queryset=qs)
        if not filterset.is_valid():
            raise ValidationException(filterset.errors)

        content = build_companies_workbook(filterset.qs)
        filename = f"companies_{timezone.localdate().isoformat()}.xlsx"
        self.log_action("EXPORT_COMPANIES", filename, f"{filterset.qs.count()} rows")

        response = HttpResponse(
            content,
            content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response


class CompanyBulkDeleteView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def post(self, request):
        serializer = BulkDeleteSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationException(serializer.errors)

        ids = serializer.validated_data["ids"]
        deleted, _ = Company.objects.filter(pk__in=ids).delete()
        self.log_action("BULK_DELETE_COMPANIES", f"{len(ids)} id(s)", f"{deleted} deleted")
        return Response(
            {"message": f"{deleted} company(ies) deleted.", "deletedCount": deleted},
            status=status.HTTP_200_OK,
        )


class CompanyDetailView(PermissionByRoleMixin, AuditLogMixin, APIView):
    permission_classes_by_method = {
        "GET": [AllowAny],
        "PUT": [IsAdmin],
        "DELETE": [IsAdmin],
    }

    def get(self, request, company_id):
        company = CompanyAdminService.get(company_id)
        if company.status != Company.Status.APPROVED and not can_see_all_companies(request):
            raise ResourceNotFoundException("Company not found.")
        return Response(CompanySerializer(company).data, status=status.HTTP_200_OK)

    def put(self, request, company_id):
        company = CompanyAdminService.update(CompanyAdminService.get(company_id), request.data)
        self.log_action("UPDATE_COMPANY", company.name, f"fields={sorted(request.data.keys())}")
        return Response(CompanySerializer(company).data, status=status.HTTP_200_OK)

    def delete(self, request, company_id):
        company = CompanyAdminService.get(company_id)
        name = company.name
        company.delete()
        self.log_action("DELETE_COMPANY", name)
        return Response({"message": "Company deleted successfully."}, status=status.HTTP_200_OK)


class CompanyApproveView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def post(self, request, company_id):
        company = CompanyAdminService.approve(CompanyAdminService.get(company_id))
        self.log_action("APPROVE_COMPANY", company.name)
        return Response(CompanySerializer(company).data, status=status.HTTP_200_OK)


class CompanyRejectView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def post(self, request, company_id):
        reason = request.data.get("reason", "")
        company = CompanyAdminService.reject(CompanyAdminService.get(company_id), reason)
        self.log_action("REJECT_COMPANY", company.name, f"reason={company.rejection_reason}")
        return Response(CompanySerializer(company).data, status=status.HTTP_200_OK)


class CompanyPaymentStatusView(AuditLogMixin, APIView):
    """
    PATCH /api/companies/{id}/status/
        Body: paid?, spent?, paymentDate? (YYYY-MM-DD), at least one of them.
        paid=true without a date stamps today's date.
    """
    permission_classes = [IsAdminOrAccounting]

    def patch(self, request, company_id):
        company = CompanyAdminService.update_payment_status(
            CompanyAdminService.get(company_id), request.data
        )
        self.log_action(
            "UPDATE_PAYMENT_STATUS", company.name,
            f"paid={company.paid} spent={company.spent} date={company.payment_date}",
        )
        return Response(CompanySerializer(company).data, status=status.HTTP_200_OK)
