from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler


# =============================================================================
# REGISTRATION EXCEPTIONS
# =============================================================================

class RegistrationClosedException(APIException):
    """
    Raised when a registration is submitted outside the open window.
    The admin-configured closed message replaces the default detail.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Registration is temporarily unavailable. Please try again later."
    default_code = "registration_closed"


class GroupFullException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "This group is full and no longer accepting registrations."
    default_code = "group_full"


class DuplicateRegistrationException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "This company has already been registered."
    default_code = "duplicate_registration"


# =============================================================================
# DATA EXCEPTIONS
# =============================================================================

class ValidationException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "The submitted data is invalid."
    default_code = "validation_error"


class ResourceNotFoundException(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "The requested record does not exist."
    default_code = "not_found"


class ConflictException(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The operation conflicts with existing data."
    default_code = "conflict"


# =============================================================================
# AUTH EXCEPTIONS
# =============================================================================

class AuthenticationRequiredException(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized: Authentication required."
    default_code = "authentication_required"


class InvalidCredentialsException(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid username or password."
    default_code = "invalid_credentials"


class AccountInactiveException(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Your account is inactive. Please contact an administrator."
    default_code = "account_inactive"


class PermissionDeniedException(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden: you are not allowed to perform this action."
    default_code = "permission_denied"


class TooManyLoginAttemptsException(APIException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_detail = "Too many failed logins. Access is blocked for 15 minutes."
    default_code = "rate_limited"


# =============================================================================
# GLOBAL EXCEPTION HANDLER
# =============================================================================

def _describe(data):
    """Split DRF error data into (message, code, errors)."""
    if isinstance(data, dict):
        if "detail" not in data:
            return "Validation error.", None, data
        detail = data["detail"]
        extra = {key: value for key, value in data.items() if key != "detail"}
        return detail, getattr(detail, "code", None), extra or None

    if isinstance(data, list):
        first = data[0] if data else "Unknown error."
        return first, getattr(first, "code", None), None

    return str(data), None, None


def custom_exception_handler(exc, context):
    """
    Every API error leaves as:
        {"error": true, "status_code": int, "message": str, "code"?: str, "errors"?: {...}}
    Exceptions DRF does not know about are left to Django (500).
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    message, code, errors = _describe(response.data)

    error_data = {
        "error": True,
        "status_code": response.status_code,
        "message": message,
    }
    if code:
        error_data["code"] = code
    if errors:
        error_data["errors"] = errors

    response.data = error_data
    return response
