"""Process-wide presentation state built from Django settings.

The HTTP views and the Socket.IO handlers must see the same registry, so
both go through these accessors.
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache

from django.conf import settings

from livedeck.decks.loaders import CsvDeckLoader

from .auth import HostAuthenticator
from .persistence import SnapshotGateway
from .registry import SetRegistry
from .timer import TimerEngine


@lru_cache(maxsize=1)
def get_registry() -> SetRegistry:
    return SetRegistry(
        loader=CsvDeckLoader(settings.LIVEDECK_DECKS_DIR),
        snapshots=SnapshotGateway(settings.LIVEDECK_STATE_FILE),
    )


@lru_cache(maxsize=1)
def get_timer_engine() -> TimerEngine:
    return TimerEngine()


@lru_cache(maxsize=1)
def get_authenticator() -> HostAuthenticator:
    return HostAuthenticator(
        username=settings.HOST_USERNAME,
        password_hash=settings.HOST_PASSWORD_HASH,
        timeout=timedelta(seconds=settings.HOST_SESSION_TIMEOUT),
    )


def reset_services() -> None:
    """Drop the cached state so the next access rebuilds it (tests)."""

    get_registry.cache_clear()
    get_timer_engine.cache_clear()
    get_authenticator.cache_clear()
