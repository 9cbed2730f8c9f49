"""Settings used by the pytest suite.

Provides a throwaway ``SECRET_KEY`` and swaps Redis for the local-memory
cache before the base settings are evaluated.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("CACHE_BACKEND", "locmem")

from config.settings import *  # noqa: E402,F401,F403

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
DEFAULT_FROM_EMAIL = "no-reply@storefront.test"
