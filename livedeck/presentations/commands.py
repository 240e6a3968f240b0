"""Single entry point for every inbound socket command.

Each command resolves its target set, passes the host gate when it mutates
state, and mutates and publishes while holding that set's lock, so events for
one room go out in the order the commands were applied.

Rejected commands (bad arguments, unauthorized senders, no joined set) are
dropped without replying to the sender.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from collections.abc import Callable
from typing import Any

from livedeck.realtime.events.presentation import publish_slide_changed
from livedeck.realtime.events.presentation import publish_slides_updated
from livedeck.realtime.events.presentation import publish_timer_update
from livedeck.realtime.events.presentation import send_login_result
from livedeck.realtime.events.presentation import send_session_expired
from livedeck.realtime.router import BroadcastRouter

from . import navigation
from .auth import HostAuthenticator
from .auth import SessionCheck
from .exceptions import RejectedCommand
from .registry import SetRegistry
from .state import PresentationSet
from .timer import TimerEngine

logger = logging.getLogger(__name__)

JOIN = "join"
HOST_LOGIN = "host:login"
HOST_LOGOUT = "host:logout"
HOST_SELECT_SET = "host:selectSet"
HOST_CHANGE_SLIDE = "host:changeSlide"
HOST_NEXT_SLIDE = "host:nextSlide"
HOST_PREV_SLIDE = "host:prevSlide"
HOST_START_TIMER = "host:startTimer"
HOST_STOP_TIMER = "host:stopTimer"
HOST_RESET_TIMER = "host:resetTimer"
HOST_RELOAD_DECK = "host:reloadDeck"

COMMANDS = (
    JOIN,
    HOST_LOGIN,
    HOST_LOGOUT,
    HOST_SELECT_SET,
    HOST_CHANGE_SLIDE,
    HOST_NEXT_SLIDE,
    HOST_PREV_SLIDE,
    HOST_START_TIMER,
    HOST_STOP_TIMER,
    HOST_RESET_TIMER,
    HOST_RELOAD_DECK,
)

Handler = Callable[[str, Any], Awaitable[None]]


def _set_id_from(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("setId")
    return payload


class CommandHandler:
    def __init__(  # noqa: PLR0913
        self,
        registry: SetRegistry,
        timers: TimerEngine,
        auth: HostAuthenticator,
        router: BroadcastRouter,
        *,
        reset_requires_fresh_session: bool = False,
    ):
        self.registry = registry
        self.timers = timers
        self.auth = auth
        self.router = router
        self.reset_requires_fresh_session = reset_requires_fresh_session
        self._handlers: dict[str, Handler] = {
            JOIN: self._join,
            HOST_LOGIN: self._login,
            HOST_LOGOUT: self._logout,
            HOST_SELECT_SET: self._select_set,
            HOST_CHANGE_SLIDE: self._change_slide,
            HOST_NEXT_SLIDE: self._next_slide,
            HOST_PREV_SLIDE: self._prev_slide,
            HOST_START_TIMER: self._start_timer,
            HOST_STOP_TIMER: self._stop_timer,
            HOST_RESET_TIMER: self._reset_timer,
            HOST_RELOAD_DECK: self._reload_deck,
        }

    async def handle(self, sid: str, command: str, payload: Any = None) -> None:
        handler = self._handlers.get(command)
        if handler is None:
            logger.debug("Ignoring unknown command %r from %s", command, sid)
            return
        try:
            await handler(sid, payload)
        except RejectedCommand as exc:
            logger.debug("Ignored %s from %s: %s", command, sid, exc)

    async def disconnect(self, sid: str) -> None:
        self.router.forget(sid)
        self.auth.forget(sid)

    async def tick(self) -> int:
        """Run one timer sweep over every cached set.

        Returns the number of sets whose timer update was published.
        """

        published = 0
        for pset in self.registry.cached():
            if not pset.timer.running:
                continue
            async with pset.lock:
                if self.timers.tick([pset]):
                    await publish_timer_update(self.router, pset)
                    published += 1
        return published

    # ---------------- Gate ----------------

    async def _authorized(self, sid: str) -> bool:
        check = self.auth.authorize(sid)
        if check is SessionCheck.EXPIRED:
            await send_session_expired(self.router, sid)
        return bool(check)

    async def _host_target(self, sid: str) -> PresentationSet:
        """Return the set the host on `sid` controls, or reject the command."""

        if not await self._authorized(sid):
            msg = "not an authorized host"
            raise RejectedCommand(msg)
        return self._joined_set(sid)

    def _joined_set(self, sid: str) -> PresentationSet:
        set_id = self.router.room_of(sid)
        if set_id is None:
            msg = "connection has not joined a set"
            raise RejectedCommand(msg)
        return self.registry.get_or_create(set_id)

    # ---------------- Membership & login ----------------

    async def _join(self, sid: str, payload: Any) -> None:
        pset = self.registry.get_or_create(_set_id_from(payload))
        async with pset.lock:
            await self.router.join(sid, pset)

    async def _select_set(self, sid: str, payload: Any) -> None:
        if not await self._authorized(sid):
            msg = "not an authorized host"
            raise RejectedCommand(msg)
        await self._join(sid, payload)

    async def _login(self, sid: str, payload: Any) -> None:
        data = payload if isinstance(payload, dict) else {}
        ok = self.auth.login(sid, data.get("username"), data.get("password"))
        await send_login_result(self.router, sid, ok=ok)

    async def _logout(self, sid: str, payload: Any) -> None:
        self.auth.logout(sid)

    # ---------------- Navigation ----------------

    async def _navigate(self, pset: PresentationSet, move: Callable[[], bool]) -> None:
        async with pset.lock:
            if not move():
                return
            self.registry.persist()
            await publish_slide_changed(self.router, pset)
            await publish_timer_update(self.router, pset)

    async def _change_slide(self, sid: str, payload: Any) -> None:
        pset = await self._host_target(sid)
        await self._navigate(
            pset,
            lambda: navigation.change_slide(pset, payload, self.timers),
        )

    async def _next_slide(self, sid: str, payload: Any) -> None:
        pset = await self._host_target(sid)
        await self._navigate(pset, lambda: navigation.next_slide(pset, self.timers))

    async def _prev_slide(self, sid: str, payload: Any) -> None:
        pset = await self._host_target(sid)
        await self._navigate(pset, lambda: navigation.prev_slide(pset, self.timers))

    # ---------------- Timer ----------------

    async def _start_timer(self, sid: str, payload: Any) -> None:
        pset = await self._host_target(sid)
        async with pset.lock:
            self.timers.start(pset, payload)
            await publish_timer_update(self.router, pset)

    async def _stop_timer(self, sid: str, payload: Any) -> None:
        pset = await self._host_target(sid)
        async with pset.lock:
            self.timers.stop(pset)
            await publish_timer_update(self.router, pset)

    async def _reset_timer(self, sid: str, payload: Any) -> None:
        if self.reset_requires_fresh_session:
            pset = await self._host_target(sid)
        elif self.auth.is_host(sid):
            # Only the host flag is checked here, not session expiry.
            pset = self._joined_set(sid)
        else:
            msg = "not a host"
            raise RejectedCommand(msg)
        async with pset.lock:
            self.timers.reset(pset)
            await publish_timer_update(self.router, pset)

    # ---------------- Deck ----------------

    async def _reload_deck(self, sid: str, payload: Any) -> None:
        pset = await self._host_target(sid)
        async with pset.lock:
            if self.registry.reload_deck(pset.id) is None:
                msg = f"deck source for set {pset.id} could not be loaded"
                raise RejectedCommand(msg)
            self.registry.persist()
            await publish_slides_updated(self.router, pset)
