import logging

from django.core.cache import cache
from django.http import JsonResponse

from core.exceptions import TooManyLoginAttemptsException

security_logger = logging.getLogger("security")

MAX_LOGIN_ATTEMPTS = 5
LOCKOUT_DURATION = 15 * 60     # seconds
LOCKOUT_CACHE_PREFIX = "login_lockout"
ATTEMPTS_CACHE_PREFIX = "login_attempts"


def get_client_ip(request) -> str:
    """
    Real client address. Behind a proxy or load balancer the first entry
    of X-Forwarded-For wins over REMOTE_ADDR.
    """
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "")


def header_identity(request) -> str:
    """Caller identity as announced by the X-User-* headers (never verified)."""
    return (
        request.META.get("HTTP_X_USER_USERNAME", "").strip()
        or request.META.get("HTTP_X_USER_EMAIL", "").strip()
        or "anonymous"
    )


class RateLimitLoginMiddleware:
    """
    Brute-force protection for POST /api/auth/login/.

    An IP address is locked out for LOCKOUT_DURATION seconds after
    MAX_LOGIN_ATTEMPTS consecutive failed logins. Counters live in the
    Django cache (Redis in production) and are cleared by a successful login.
    """

    LOGIN_PATH = "/api/auth/login/"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        is_login = request.method == "POST" and request.path == self.LOGIN_PATH

        if is_login:
            ip_address = get_client_ip(request)
            if self._is_locked_out(ip_address):
                security_logger.warning(f"Blocked login attempt from {ip_address} (too many failures).")
                return JsonResponse(
                    {
                        "error": True,
                        "status_code": TooManyLoginAttemptsException.status_code,
                        "message": str(TooManyLoginAttemptsException.default_detail),
                        "code": TooManyLoginAttemptsException.default_code,
                    },
                    status=TooManyLoginAttemptsException.status_code,
                )

        response = self.get_response(request)

        if is_login:
            ip_address = get_client_ip(request)
            if response.status_code == 200:
                self._reset_attempts(ip_address)
            elif response.status_code in (400, 401, 403):
                self._increment_attempts(ip_address)

        return response

    def _is_locked_out(self, ip_address: str) -> bool:
        return cache.get(f"{LOCKOUT_CACHE_PREFIX}:{ip_address}") is not None

    def _increment_attempts(self, ip_address: str) -> None:
        attempts_key = f"{ATTEMPTS_CACHE_PREFIX}:{ip_address}"
        attempts = cache.get(attempts_key, 0) + 1
        cache.set(attempts_key, attempts, timeout=LOCKOUT_DURATION)

        if attempts >= MAX_LOGIN_ATTEMPTS:
            cache.set(f"{LOCKOUT_CACHE_PREFIX}:{ip_address}", True, timeout=LOCKOUT_DURATION)
            security_logger.warning(f"IP {ip_address} locked out after {attempts} failed logins.")

    def _reset_attempts(self, ip_address: str) -> None:
        cache.delete(f"{ATTEMPTS_CACHE_PREFIX}:{ip_address}")
        cache.delete(f"{LOCKOUT_CACHE_PREFIX}:{ip_address}")


class ForbiddenAccessLogMiddleware:
    """
    Writes every 401/403 API answer to the security log.

    Requests are never blocked here, only logged with the announced
    X-User-* identity and the client IP.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        if response.status_code in (401, 403) and request.path.startswith("/api/"):
            security_logger.warning(
                f"Access refused ({response.status_code}) for [{header_identity(request)}] "
                f"role={request.META.get('HTTP_X_USER_ROLE', '-') or '-'} "
                f"{request.method} {request.path} from {get_client_ip(request)}."
            )

        return response
