"""Host login and the gate in front of every mutating command.

Sessions are attached to socket.io connection ids and are only checked when a
privileged command arrives; nothing sweeps them in the background.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from datetime import timedelta

from django.contrib.auth.hashers import check_password
from django.utils import timezone
from django.utils.crypto import constant_time_compare

logger = logging.getLogger(__name__)


class SessionCheck(enum.Enum):
    GRANTED = "granted"
    DENIED = "denied"
    EXPIRED = "expired"

    def __bool__(self) -> bool:
        return self is SessionCheck.GRANTED


@dataclass
class HostSession:
    is_host: bool = False
    login_time: datetime | None = None


class HostAuthenticator:
    def __init__(
        self,
        username: str,
        password_hash: str | None,
        timeout: timedelta,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.username = username
        self.password_hash = password_hash
        self.timeout = timeout
        self.clock = clock
        self._sessions: dict[str, HostSession] = {}

    def session(self, sid: str) -> HostSession | None:
        return self._sessions.get(sid)

    def login(self, sid: str, username: object, password: object) -> bool:
        if not isinstance(username, str) or not isinstance(password, str):
            return False
        if not self.password_hash:
            logger.warning("Host login attempted but HOST_PASSWORD_HASH is not set")
            return False

        # Evaluate both so a wrong username costs the same as a wrong password.
        user_ok = constant_time_compare(username, self.username)
        password_ok = check_password(password, self.password_hash)
        if not (user_ok and password_ok):
            logger.info("Rejected host login for %s", sid)
            return False

        self._sessions[sid] = HostSession(is_host=True, login_time=self.clock())
        logger.info("Host logged in on %s", sid)
        return True

    def logout(self, sid: str) -> None:
        self._sessions.pop(sid, None)

    forget = logout

    def is_host(self, sid: str) -> bool:
        session = self._sessions.get(sid)
        return bool(session and session.is_host)

    def authorize(self, sid: str) -> SessionCheck:
        """Check that `sid` holds a live host session.

        An expired session is dropped, so EXPIRED is reported only for the
        first command after expiry; later commands get DENIED.
        """

        session = self._sessions.get(sid)
        if session is None or not session.is_host:
            return SessionCheck.DENIED
        if session.login_time is None:
            return SessionCheck.DENIED
        if self.clock() - session.login_time > self.timeout:
            del self._sessions[sid]
            logger.info("Host session expired on %s", sid)
            return SessionCheck.EXPIRED
        return SessionCheck.GRANTED
