"""
Configuration Django pour la suite de tests (pytest-django).
Base SQLite en mémoire, cache local, hashage de mot de passe rapide.
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "portal-test-cache",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

TIME_ZONE = "UTC"

ADMIN_IDENTIFIERS = ["admin", "admin@example.com"]

LOGGING["loggers"]["django"]["handlers"] = ["console"]
LOGGING["loggers"]["security"]["handlers"] = ["console"]
LOGGING["loggers"]["apps"]["handlers"] = ["console"]
LOGGING["loggers"]["apps"]["level"] = "WARNING"
