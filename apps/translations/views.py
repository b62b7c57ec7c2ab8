from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import AuditLogMixin, NoCacheMixin, PermissionByRoleMixin
from core.permissions import IsAdmin
from .services import TranslationService


class TranslationView(PermissionByRoleMixin, NoCacheMixin, AuditLogMixin, APIView):
    """
    GET /api/translations/  → {en, ku, ar} overrides (public, never cached)
    PUT /api/translations/  → replace one or more languages (admin)
    """
    permission_classes_by_method = {
        "GET": [AllowAny],
        "PUT": [IsAdmin],
    }

    def get(self, request):
        return Response(TranslationService.get(), status=status.HTTP_200_OK)

    def put(self, request):
        data = TranslationService.update(request.data)
        self.log_action("UPDATE_TRANSLATIONS", "site", f"languages={sorted(request.data.keys())}")
        return Response(data, status=status.HTTP_200_OK)


class TranslationSeedView(AuditLogMixin, APIView):
    """POST /api/translations/seed/ → merge the locale files under the stored values (admin)"""
    permission_classes = [IsAdmin]

    def post(self, request):
        counts = TranslationService.seed()
        self.log_action("SEED_TRANSLATIONS", "site", str(counts))
        return Response(
            {
                "success": True,
                "message": "Translations seeded from locale files and saved to database",
                **counts,
            },
            status=status.HTTP_200_OK,
        )
