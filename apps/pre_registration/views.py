"""
apps/pre_registration/views.py

Endpoints (all public):
    POST /api/pre-register/                    — submit a pre-registration (gated)
    POST /api/pre-register/verify/             — check mobileNumber + code
    GET  /api/pre-register/public/companies/   — pre-registered company names
    GET  /api/pre-register/by-code/{code}/     — auto-fill data for a code
    GET  /api/pre-register/{id}/
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.companies.serializers import CompanySerializer
from core.permissions import can_see_all_companies
from .models import PreRegistration
from .serializers import PreRegisteredCompanySerializer, PreRegistrationSerializer
from .services import PreRegistrationService


class PreRegisterView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        result = PreRegistrationService.submit(
            request.data,
            bypass_gate=can_see_all_companies(request),
        )
        pre_registration, company = result.pre_registration, result.company

        payload = {
            "preRegistrationId": str(pre_registration.pk),
            "companyId": str(company.pk) if company else None,
            "data": PreRegistrationSerializer(pre_registration).data,
            "company": CompanySerializer(company).data if company else None,
        }
        if result.updated:
            payload.update({"message": "Pre-registration updated successfully", "updated": True})
            return Response(payload, status=status.HTTP_200_OK)

        payload["message"] = "Pre-registration and company registration submitted successfully"
        return Response(payload, status=status.HTTP_201_CREATED)


class PreRegistrationVerifyView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        entry = PreRegistrationService.verify(
            request.data.get("mobileNumber"), request.data.get("code")
        )
        return Response(
            {
                "valid": True,
                "preRegistrationId": str(entry.pk),
                "data": PreRegistrationSerializer(entry).data,
            },
            status=status.HTTP_200_OK,
        )


class PreRegistrationDetailView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, pre_registration_id):
        entry = PreRegistrationService.get(pre_registration_id)
        return Response(PreRegistrationSerializer(entry).data, status=status.HTTP_200_OK)


class PreRegisteredCompaniesView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        qs = PreRegistration.objects.order_by("-created_at")
        return Response(PreRegisteredCompanySerializer(qs, many=True).data, status=status.HTTP_200_OK)


class PreRegistrationByCodeView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, code):
        return Response(PreRegistrationService.lookup_by_code(code), status=status.HTTP_200_OK)
