import logging

logger = logging.getLogger("django")


class AuditLogMixin:
    """
    Trace des actions sensibles (création, modification, suppression,
    export) avec l'identité annoncée par les en-têtes X-User-*.
    """

    def log_action(self, action: str, target: str, details: str = "") -> None:
        user = getattr(self.request, "user", None)
        if user and user.is_authenticated:
            who = f"{user.identifier} ({getattr(user, 'role', '-')})"
        else:
            who = "anonyme"
        logger.info(f"[AUDIT] {action} | User: {who} | Target: {target} | {details}")


class NoCacheMixin:
    """
    Ajoute les en-têtes anti-cache aux réponses (traductions et état du
    site relus en direct par le frontend après chaque modification admin).
    """

    NO_CACHE_HEADERS = {
        "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
        "Pragma": "no-cache",
        "Expires": "0",
        "Surrogate-Control": "no-store",
    }

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        for header, value in self.NO_CACHE_HEADERS.items():
            response[header] = value
        return response


class PermissionByRoleMixin:
    """
    Permissions par méthode HTTP, par exemple lecture publique et écriture
    réservée à l'admin :
        permission_classes_by_method = {
            "GET": [AllowAny],
            "PUT": [IsAdmin],
        }
    HEAD et OPTIONS suivent la règle de GET quand ils ne sont pas listés.
    """
    permission_classes_by_method = {}

    def get_permissions(self):
        method = self.request.method
        rules = self.permission_classes_by_method
        if method not in rules and method in ("HEAD", "OPTIONS"):
            method = "GET"
        if method in rules:
            return [permission() for permission in rules[method]]
        return super().get_permissions()
