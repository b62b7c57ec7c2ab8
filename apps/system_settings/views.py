from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import AuditLogMixin, NoCacheMixin, PermissionByRoleMixin
from core.permissions import IsAdmin
from .serializers import WebsiteSettingsSerializer
from .services import WebsiteSettingsService


class WebsiteSettingsView(PermissionByRoleMixin, NoCacheMixin, AuditLogMixin, APIView):
    """
    GET /api/settings/website/  → effective open state, countdown, messages (public)
    PUT /api/settings/website/  → merge the provided fields (admin only)

    Clients poll the GET every `pollInterval` seconds.
    """
    permission_classes_by_method = {
        "GET": [AllowAny],
        "PUT": [IsAdmin],
    }

    def get(self, request):
        return Response(WebsiteSettingsService.public_state(), status=status.HTTP_200_OK)

    def put(self, request):
        obj = WebsiteSettingsService.update(request.data, actor=request.user.identifier)
        self.log_action(
            "UPDATE_SETTINGS", "website",
            f"fields={sorted(request.data.keys())}",
        )
        return Response(
            {
                "message": "Settings updated successfully.",
                "settings": WebsiteSettingsService.public_state(obj),
            },
            status=status.HTTP_200_OK,
        )


class SettingsListView(APIView):
    """
    GET /api/settings/  → raw stored settings document (admin only)
    """
    permission_classes = [IsAdmin]

    def get(self, request):
        obj = WebsiteSettingsService.get()
        return Response(WebsiteSettingsSerializer(obj).data, status=status.HTTP_200_OK)
