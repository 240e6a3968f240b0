"""Room-scoped delivery of presentation events.

Each set maps to one socket.io room. A connection is a member of at most one
set room; joining another set leaves the previous room first.
"""

from __future__ import annotations

import logging
from typing import Any

from livedeck.presentations.state import PresentationSet

logger = logging.getLogger(__name__)


def room_for_set(set_id: str) -> str:
    return f"set_{set_id}"


class BroadcastRouter:
    def __init__(self, server: Any, namespace: str | None = None):
        self.server = server
        self.namespace = namespace
        self._membership: dict[str, str] = {}

    def room_of(self, sid: str) -> str | None:
        """Return the set id `sid` is joined to, if any."""

        return self._membership.get(sid)

    async def join(self, sid: str, pset: PresentationSet) -> None:
        """Move `sid` into the room of `pset` and send it the full snapshot.

        Callers hold ``pset.lock`` so no publish for the set interleaves
        between entering the room and the snapshot.
        """

        previous = self._membership.get(sid)
        if previous is not None and previous != pset.id:
            await self.server.leave_room(sid, room_for_set(previous), namespace=self.namespace)
        await self.server.enter_room(sid, room_for_set(pset.id), namespace=self.namespace)
        self._membership[sid] = pset.id
        logger.debug("Connection %s joined set %s", sid, pset.id)

        await self.unicast(sid, "init", pset.snapshot())

    def forget(self, sid: str) -> None:
        # socket.io drops room membership itself on disconnect.
        self._membership.pop(sid, None)

    async def publish(self, set_id: str, event: str, payload: Any) -> None:
        await self.server.emit(
            event,
            payload,
            room=room_for_set(set_id),
            namespace=self.namespace,
        )

    async def unicast(self, sid: str, event: str, payload: Any = None) -> None:
        await self.server.emit(event, payload, to=sid, namespace=self.namespace)
