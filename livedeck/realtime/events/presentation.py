from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # import for type checking only
    from livedeck.presentations.state import PresentationSet
    from livedeck.realtime.router import BroadcastRouter


async def publish_slide_changed(router: BroadcastRouter, pset: PresentationSet) -> None:
    await router.publish(pset.id, "slideChanged", pset.current_slide_index)


async def publish_timer_update(router: BroadcastRouter, pset: PresentationSet) -> None:
    await router.publish(pset.id, "timerUpdate", pset.timer.to_payload())


async def publish_slides_updated(router: BroadcastRouter, pset: PresentationSet) -> None:
    """Publish the whole set after its deck was replaced."""

    await router.publish(pset.id, "slidesUpdated", pset.snapshot())


async def send_login_result(router: BroadcastRouter, sid: str, *, ok: bool) -> None:
    await router.unicast(sid, "host:loginResult", {"ok": ok})


async def send_session_expired(router: BroadcastRouter, sid: str) -> None:
    await router.unicast(sid, "host:sessionExpired", {})
