"""
Configuration Django pour l'environnement de production.
Surcharge base.py avec des paramètres de sécurité renforcés.
"""

from django.core.exceptions import ImproperlyConfigured

from .base import *

# =============================================================================
# PRODUCTION
# =============================================================================

DEBUG = False

if SECRET_KEY.startswith("insecure-"):
    raise ImproperlyConfigured("SECRET_KEY must be set in production.")

# =============================================================================
# SÉCURITÉ HTTPS
# =============================================================================

SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True
SECURE_CONTENT_TYPE_NOSNIFF = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
X_FRAME_OPTIONS = "DENY"
