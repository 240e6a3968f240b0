"""
With these settings, tests run faster.
"""

from .base import *  # noqa: F403
from .base import BASE_DIR
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="AlGzerkUv160WCFbKM8vn2qyFYWS5jX0AHND8TnRj55iqlMSPtJsUllwpba1oqOO",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1", "testserver"]  # noqa: S104

# PASSWORDS
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#password-hashers
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# LIVEDECK
# ------------------------------------------------------------------------------
# Tests point these at tmp_path; keep the repo tree untouched by default.
LIVEDECK_DECKS_DIR = str(BASE_DIR / "tests" / "decks")
LIVEDECK_STATE_FILE = ""
HOST_USERNAME = "host"
HOST_PASSWORD_HASH = ""
HOST_SESSION_TIMEOUT = 60 * 60

# LOGGING
# ------------------------------------------------------------------------------
# Let pytest's caplog see livedeck records.
LOGGING["loggers"]["livedeck"]["propagate"] = True  # noqa: F405
LOGGING["loggers"]["livedeck"]["handlers"] = []  # noqa: F405
