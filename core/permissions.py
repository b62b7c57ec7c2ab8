from rest_framework.permissions import BasePermission


class IsPortalUser(BasePermission):
    """Any caller identified by the X-User-* headers."""
    message = "Unauthorized: Authentication required."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)


class IsAdmin(BasePermission):
    """Access restricted to the configured administrator identity."""
    message = "Forbidden: Admin access required."

    def has_permission(self, request, view):
        return (
            bool(request.user and request.user.is_authenticated)
            and getattr(request.user, "is_admin", False)
        )


class IsAdminOrAccounting(BasePermission):
    """Access restricted to administrators and accounting staff."""
    message = "Access restricted to administrators and accounting."

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return getattr(user, "is_admin", False) or getattr(user, "is_accounting", False)


def can_see_all_companies(request) -> bool:
    """Admin and accounting callers see every company, the public only approved ones."""
    user = request.user
    return bool(user and user.is_authenticated and getattr(user, "can_see_all_companies", False))
