"""
apps/company_names/views.py

Endpoints:
    GET    /api/company-names/public/            — directory for the registration dropdown
    GET    /api/company-names/code/{code}/       — lookup by 4-digit code (auto-fill)
    GET    /api/company-names/                   — admin list (newest first)
    POST   /api/company-names/                   — admin create (code generated)
    DELETE /api/company-names/all/               — admin: wipe the directory
    POST   /api/company-names/import/            — admin bulk import (JSON or .xlsx upload)
    GET    /api/company-names/unregistered/      — admin: names with no registration yet
    GET    /api/company-names/{id}/              — admin
    PUT    /api/company-names/{id}/              — admin
    DELETE /api/company-names/{id}/              — admin
"""

import logging

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ResourceNotFoundException, ValidationException
from core.mixins import AuditLogMixin
from core.permissions import IsAdmin
from .excel import read_company_rows
from .models import CompanyName
from .serializers import (
    CompanyNameImportUploadSerializer,
    CompanyNamePublicSerializer,
    CompanyNameSerializer,
    UnregisteredCompanyNameSerializer,
)
from .services import CompanyNameService

logger = logging.getLogger(__name__)


class PublicCompanyNameListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        qs = CompanyName.objects.order_by("name")
        return Response(CompanyNamePublicSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class CompanyNameByCodeView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, code):
        code = (code or "").strip()
        if not code:
            raise ValidationException("Code is required.")
        entry = CompanyName.objects.filter(code=code).first()
        if not entry:
            raise ResourceNotFoundException("Company not found with this code.")
        return Response(CompanyNameSerializer(entry).data, status=status.HTTP_200_OK)


class CompanyNameListCreateView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        qs = CompanyName.objects.order_by("-created_at")
        return Response(CompanyNameSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        entry = CompanyNameService.create(
            name=request.data.get("name"),
            contact_name=request.data.get("contactName", ""),
            mobile_number=request.data.get("mobileNumber", ""),
            notes=request.data.get("notes", ""),
        )
        self.log_action("CREATE_COMPANY_NAME", entry.name, f"code={entry.code}")
        return Response(CompanyNameSerializer(entry).data, status=status.HTTP_201_CREATED)


class CompanyNameDeleteAllView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def delete(self, request):
        deleted, _ = CompanyName.objects.all().delete()
        self.log_action("DELETE_ALL_COMPANY_NAMES", "company_names", f"{deleted} deleted")
        return Response(
            {"message": f"{deleted} company name(s) deleted.", "deletedCount": deleted},
            status=status.HTTP_200_OK,
        )


class CompanyNameImportView(AuditLogMixin, APIView):
    """
    POST /api/company-names/import/

    JSON body:
        {"companies": [{"name", "contactName", "mobileNumber", "code"}, ...]}
        {"names": ["Company A", "Company B"]}          (legacy format)
    Multipart:
        file=<.xlsx>  columns: name | contact name | mobile | code
    """
    permission_classes = [IsAdmin]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def post(self, request):
        if "file" in request.FILES:
            upload = CompanyNameImportUploadSerializer(data=request.data)
            if not upload.is_valid():
                raise ValidationException(upload.errors)
            file_obj = upload.validated_data["file"]
            entries = read_company_rows(file_obj, file_obj.name)
            source = file_obj.name
        elif isinstance(request.data.get("companies"), list):
            entries = request.data["companies"]
            source = "json:companies"
        elif isinstance(request.data.get("names"), list):
            entries = [str(name) for name in request.data["names"]]
            source = "json:names"
        else:
            raise ValidationException("Companies array is required.")

        result = CompanyNameService.import_companies(entries)
        self.log_action(
            "IMPORT_COMPANY_NAMES", source,
            f"imported={result['imported']} skipped={result['skipped']} errors={result['errors']}",
        )
        return Response(result, status=status.HTTP_200_OK)


class UnregisteredCompanyNameView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        entries = CompanyNameService.unregistered()
        return Response(UnregisteredCompanyNameSerializer(entries, many=True).data, status=status.HTTP_200_OK)


class CompanyNameDetailView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def _get_entry(self, entry_id):
        try:
            return CompanyName.objects.get(pk=entry_id)
        except CompanyName.DoesNotExist:
            raise ResourceNotFoundException("Company name not found.")

    def get(self, request, entry_id):
        return Response(CompanyNameSerializer(self._get_entry(entry_id)).data, status=status.HTTP_200_OK)

    def put(self, request, entry_id):
        entry = CompanyNameService.update(self._get_entry(entry_id), request.data)
        self.log_action("UPDATE_COMPANY_NAME", entry.name, f"code={entry.code}")
        return Response(CompanyNameSerializer(entry).data, status=status.HTTP_200_OK)

    def delete(self, request, entry_id):
        entry = self._get_entry(entry_id)
        name = entry.name
        entry.delete()
        self.log_action("DELETE_COMPANY_NAME", name)
        return Response({"message": "Company name deleted successfully."}, status=status.HTTP_200_OK)
