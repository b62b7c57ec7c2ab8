"""
apps/authentication/views.py

Endpoints:
    POST   /api/auth/login/        — staff login (public, rate-limited by middleware)
    GET    /api/users/             — admin
    POST   /api/users/             — admin
    GET    /api/users/{id}/        — admin
    PUT    /api/users/{id}/        — admin
    DELETE /api/users/{id}/        — admin
"""

import logging

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ValidationException
from core.mixins import AuditLogMixin
from core.permissions import IsAdmin
from .middleware import get_client_ip
from .serializers import LoginSerializer, UserSerializer, UserWriteSerializer
from .services import LoginService, UserService

logger = logging.getLogger(__name__)
User = get_user_model()


class LoginView(APIView):
    """
    POST /api/auth/login/
        Body: username (username, email or name), password
        200 → {"success": true, "user": {...}}
        400 missing fields, 401 bad credentials, 403 inactive account
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationException(serializer.errors)

        user = LoginService.authenticate(
            serializer.validated_data["username"],
            serializer.validated_data["password"],
            ip_address=get_client_ip(request),
        )
        return Response(
            {"success": True, "user": LoginService.session_payload(user)},
            status=status.HTTP_200_OK,
        )


class UserListCreateView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        users = User.objects.order_by("-created_at")
        return Response(UserSerializer(users, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = UserWriteSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationException(serializer.errors)

        user = serializer.save()
        self.log_action("CREATE_USER", user.username, f"role={user.role}")
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailView(AuditLogMixin, APIView):
    permission_classes = [IsAdmin]

    def get(self, request, user_id):
        return Response(UserSerializer(UserService.get(user_id)).data, status=status.HTTP_200_OK)

    def put(self, request, user_id):
        serializer = UserWriteSerializer(UserService.get(user_id), data=request.data, partial=True)
        if not serializer.is_valid():
            raise ValidationException(serializer.errors)

        user = serializer.save()
        self.log_action("UPDATE_USER", user.username, f"fields={sorted(k for k in request.data.keys() if k != 'password')}")
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)

    def delete(self, request, user_id):
        user = UserService.get(user_id)
        username = user.username
        user.delete()
        self.log_action("DELETE_USER", username)
        return Response({"message": "User deleted successfully."}, status=status.HTTP_200_OK)
