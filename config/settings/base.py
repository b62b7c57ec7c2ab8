"""
Configuration Django de base — commune à tous les environnements.
Les paramètres spécifiques à dev/prod/test sont dans development.py,
production.py et test.py.
"""

import os
from pathlib import Path
import environ

# =============================================================================
# CHEMINS
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Chargement des variables d'environnement depuis .env
env = environ.Env()
environ.Env.read_env(os.path.join(BASE_DIR, ".env"))

# =============================================================================
# SÉCURITÉ
# =============================================================================

SECRET_KEY = env("SECRET_KEY", default="insecure-dev-key-change-me")
DEBUG = env.bool("DEBUG", default=False)
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])

# =============================================================================
# APPLICATIONS INSTALLÉES
# =============================================================================

DJANGO_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "rest_framework",
    "corsheaders",
    "django_filters",
    "drf_spectacular",
]

LOCAL_APPS = [
    "apps.authentication",
    "apps.system_settings",
    "apps.groups",             # ← groups AVANT companies (FK)
    "apps.company_names",
    "apps.pre_registration",
    "apps.companies",
    "apps.translations",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# =============================================================================
# MIDDLEWARE
# =============================================================================

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",                              # CORS
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "apps.authentication.middleware.RateLimitLoginMiddleware",           # Rate limiting
    "apps.authentication.middleware.ForbiddenAccessLogMiddleware",       # 401/403 logs
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# =============================================================================
# URLS ET WSGI
# =============================================================================

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# =============================================================================
# TEMPLATES
# =============================================================================

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# =============================================================================
# BASE DE DONNÉES PostgreSQL
# =============================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": env("DB_NAME", default="portal_db"),
        "USER": env("DB_USER", default="portal_user"),
        "PASSWORD": env("DB_PASSWORD", default=""),
        "HOST": env("DB_HOST", default="localhost"),
        "PORT": env("DB_PORT", default="5432"),
        "OPTIONS": {
            "connect_timeout": 10,
        },
    }
}

# =============================================================================
# MODÈLE UTILISATEUR CUSTOM
# =============================================================================

AUTH_USER_MODEL = "authentication.User"

AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
]

# =============================================================================
# DJANGO REST FRAMEWORK
# =============================================================================

REST_FRAMEWORK = {
    # Authentification par en-têtes X-User-* posés par le frontend
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "core.authentication.HeaderRoleAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
        "rest_framework.filters.SearchFilter",
        "rest_framework.filters.OrderingFilter",
    ],
    "DEFAULT_PAGINATION_CLASS": None,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
}

# =============================================================================
# PORTAIL — RÔLES, INSCRIPTIONS, TRADUCTIONS
# =============================================================================

# Identifiants (username ou email) acceptés pour le rôle admin
ADMIN_IDENTIFIERS = env.list("ADMIN_IDENTIFIERS", default=["admin", "admin@example.com"])

# Intervalle (secondes) de rafraîchissement côté client et du watcher
REGISTRATION_POLL_INTERVAL = env.int("REGISTRATION_POLL_INTERVAL", default=2)

# Dossier des fichiers de langue (en.json, ku.json, ar.json)
TRANSLATIONS_LOCALE_DIR = env("TRANSLATIONS_LOCALE_DIR", default=str(BASE_DIR / "locales"))
TRANSLATION_LANGUAGES = ("en", "ku", "ar")

# =============================================================================
# CORS
# =============================================================================

CORS_ALLOWED_ORIGINS = env.list(
    "CORS_ALLOWED_ORIGINS",
    default=[
        "http://localhost:5173",   # Vite dev server
        "http://localhost:3000",   # React dev server alternatif
    ],
)
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_HEADERS = [
    "accept",
    "authorization",
    "content-type",
    "origin",
    "x-csrftoken",
    "x-requested-with",
    "x-user-role",
    "x-user-email",
    "x-user-username",
]

# =============================================================================
# CACHE (Redis)
# =============================================================================

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": env("REDIS_URL", default="redis://localhost:6379/0"),
    }
}

# =============================================================================
# FICHIERS STATIQUES
# =============================================================================

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# =============================================================================
# INTERNATIONALISATION
# =============================================================================

LANGUAGE_CODE = "en-us"
TIME_ZONE = env("TIME_ZONE", default="Asia/Baghdad")
USE_I18N = True
USE_TZ = True

# =============================================================================
# VALIDATION DES MOTS DE PASSE
# =============================================================================

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
     "OPTIONS": {"min_length": 6}},
]

# =============================================================================
# LOGS
# =============================================================================

LOG_DIR = BASE_DIR / "logs"
LOG_DIR.mkdir(exist_ok=True)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name} {message}",
            "style": "{",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
        "django_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "django.log",
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 5,
            "formatter": "verbose",
        },
        "security_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "security.log",
            "maxBytes": 10 * 1024 * 1024,  # 10 MB
            "backupCount": 10,
            "formatter": "verbose",
        },
        "registration_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / "registration.log",
            "maxBytes": 10 * 1024 * 1024,
            "backupCount": 5,
            "formatter": "verbose",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console", "django_file"],
            "level": "INFO",
            "propagate": False,
        },
        "security": {
            "handlers": ["console", "security_file"],
            "level": "WARNING",
            "propagate": False,
        },
        "apps": {
            "handlers": ["console", "registration_file"],
            "level": "INFO",
            "propagate": False,
        },
    },
}

# =============================================================================
# SWAGGER / OpenAPI (drf-spectacular)
# =============================================================================

SPECTACULAR_SETTINGS = {
    "TITLE": "Registration Portal API",
    "DESCRIPTION": "API Backend — pré-inscription des sociétés, groupes et file de paiement",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}

# =============================================================================
# DIVERS
# =============================================================================

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
