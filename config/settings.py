"""
KCP – Django Settings (Infrastructure Only)
===========================================
Django hosts the infrastructure store read by DbObjectLookup.
Machine filters themselves never touch settings.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("KCP_SECRET_KEY", "kcp-dev-key-replace-before-deployment")

DEBUG = os.environ.get("KCP_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    # ── KCP Modules ───────────────────────────────────────────
    "controlplane.infrastructure_store",
]

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured separately.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("KCP_DB_NAME", str(BASE_DIR / "db.sqlite3")),
    }
}

# ── Time ──────────────────────────────────────────────────────
TIME_ZONE = "UTC"
USE_TZ = True

# ── Logging ───────────────────────────────────────────────────
KCP_LOG_LEVEL = os.environ.get("KCP_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "kcp": {
            "handlers": ["console"],
            "level": KCP_LOG_LEVEL,
            "propagate": True,
        },
    },
}

# ── Default Primary Key ──────────────────────────────────────
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
