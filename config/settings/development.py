"""
Configuration Django pour l'environnement de développement.
Surcharge base.py avec des paramètres adaptés au développement local.
"""

from .base import *

# =============================================================================
# DÉVELOPPEMENT
# =============================================================================

DEBUG = True

ALLOWED_HOSTS = ["*"]

# =============================================================================
# CACHE LOCAL (sans Redis) — remplace Redis en développement
# =============================================================================

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "portal-dev-cache",
    }
}

# =============================================================================
# CORS PERMISSIF EN DÉVELOPPEMENT
# =============================================================================

CORS_ALLOW_ALL_ORIGINS = True

# =============================================================================
# LOGS VERBEUX EN DÉVELOPPEMENT
# =============================================================================

# Console uniquement pour éviter les verrous de fichiers sous Windows
LOGGING["loggers"]["django"]["handlers"] = ["console"]
LOGGING["loggers"]["apps"]["handlers"] = ["console"]
LOGGING["loggers"]["apps"]["level"] = "DEBUG"
