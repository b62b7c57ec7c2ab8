import logging
from typing import Dict

from django.contrib.auth import get_user_model
from django.db.models import Q
from django.utils import timezone

from core.exceptions import (
    AccountInactiveException,
    InvalidCredentialsException,
    ResourceNotFoundException,
    ValidationException,
)

security_logger = logging.getLogger("security")
User = get_user_model()


class LoginService:
    """
    Staff login. The identifier may be the username, the email or the
    display name, compared case-insensitively.
    """

    @staticmethod
    def find_user(identifier: str):
        return (
            User.objects.filter(
                Q(username__iexact=identifier) | Q(email__iexact=identifier) | Q(name__iexact=identifier)
            )
            .order_by("created_at")
            .first()
        )

    @classmethod
    def authenticate(cls, identifier, password, ip_address: str = "") -> User:
        identifier = (identifier or "").strip()
        if not identifier or not password:
            raise ValidationException("Username and password are required.")

        user = cls.find_user(identifier)
        if user is None:
            security_logger.warning(f"Login failed: unknown user '{identifier}' from {ip_address or '-'}.")
            raise InvalidCredentialsException()

        if not user.is_active_account or not user.is_active:
            security_logger.warning(f"Login refused: inactive account '{user.username}' from {ip_address or '-'}.")
            raise AccountInactiveException()

        if not user.has_usable_password() or not user.check_password(password):
            security_logger.warning(f"Login failed: wrong password for '{user.username}' from {ip_address or '-'}.")
            raise InvalidCredentialsException()

        user.last_login = timezone.now()
        user.save(update_fields=["last_login"])
        security_logger.info(f"Login successful: {user.username} ({user.role}) from {ip_address or '-'}.")
        return user

    @staticmethod
    def session_payload(user) -> Dict:
        """User block the frontend keeps in localStorage and replays as X-User-* headers."""
        return {
            "id": str(user.pk),
            "username": user.username or user.name,
            "name": user.name,
            "email": user.email,
            "role": user.role or User.Role.USER,
            "isAuthenticated": True,
        }


class UserService:

    @staticmethod
    def get(user_id) -> User:
        try:
            return User.objects.get(pk=user_id)
        except (User.DoesNotExist, ValueError):
            raise ResourceNotFoundException("User not found.")
