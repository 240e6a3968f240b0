from .base import *  # noqa: F403
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = True
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="pZ3uKq0w7bJ1h8sV5nT2cR9yX4mL6aE0fG3dH7jN1kQ8rS2tU5vW9xY4zB6cD0eF",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#allowed-hosts
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"]  # noqa: S104

# LOGGING
# ------------------------------------------------------------------------------
LOGGING["loggers"]["livedeck"]["level"] = env(  # noqa: F405
    "LIVEDECK_LOG_LEVEL",
    default="DEBUG",
)
