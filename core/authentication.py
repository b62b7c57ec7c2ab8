"""
Header-based authentication.

The frontend stores the logged-in user in localStorage after
POST /api/auth/login/ and replays it on every request through the
X-User-Email / X-User-Username / X-User-Role headers. Nothing here is
cryptographically verified: the headers identify the caller, the
permission classes in core/permissions.py decide what they may do.
"""

from django.conf import settings
from rest_framework.authentication import BaseAuthentication


class PortalPrincipal:
    """Lightweight request user built from the X-User-* headers."""

    is_authenticated = True
    is_anonymous = False

    ROLE_ADMIN = "admin"
    ROLE_ACCOUNTING = "accounting"
    ROLE_USER = "user"

    def __init__(self, email: str = "", username: str = "", role: str = ""):
        self.email = email or ""
        self.username = username or email or ""
        self.role = (role or self.ROLE_USER).strip().lower()

    @property
    def identifier(self) -> str:
        return self.username or self.email

    @property
    def is_admin(self) -> bool:
        admin_ids = {i.lower() for i in getattr(settings, "ADMIN_IDENTIFIERS", [])}
        return self.role == self.ROLE_ADMIN and self.identifier.lower() in admin_ids

    @property
    def is_accounting(self) -> bool:
        return self.role == self.ROLE_ACCOUNTING

    @property
    def can_see_all_companies(self) -> bool:
        return self.role in (self.ROLE_ADMIN, self.ROLE_ACCOUNTING)

    def __str__(self):
        return f"{self.identifier} ({self.role})"


class HeaderRoleAuthentication(BaseAuthentication):
    """
    Builds a PortalPrincipal from the request headers.

    Returns None (anonymous request) when neither X-User-Email nor
    X-User-Username is present, so public endpoints keep working.
    """

    def authenticate(self, request):
        email = request.META.get("HTTP_X_USER_EMAIL", "").strip()
        username = request.META.get("HTTP_X_USER_USERNAME", "").strip()
        role = request.META.get("HTTP_X_USER_ROLE", "").strip()

        if not email and not username:
            return None

        return PortalPrincipal(email=email, username=username, role=role), None

    def authenticate_header(self, request):
        # A non-empty value makes DRF answer 401 (not 403) for anonymous callers
        return "X-User-Email"
