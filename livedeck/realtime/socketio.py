"""Global Socket.IO server for viewers and hosts.

Current frontend convention:
- URL base: ws://<host>:8000
- Socket.IO path: settings.SOCKETIO_PATH (default ``socket.io``)
- Viewers emit ``join`` with a set id; hosts additionally emit ``host:*``
  commands after ``host:login``.

Every inbound event is forwarded to the `CommandHandler`; this module only
wires the transport and runs the once-per-second timer sweep.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import socketio
from django.conf import settings

from livedeck.presentations.commands import COMMANDS
from livedeck.presentations.commands import CommandHandler
from livedeck.presentations.services import get_authenticator
from livedeck.presentations.services import get_registry
from livedeck.presentations.services import get_timer_engine
from livedeck.realtime.router import BroadcastRouter

logger = logging.getLogger(__name__)


def _cors_allowed_origins() -> str | list[str]:
    origins = list(settings.SOCKETIO_CORS_ALLOWED_ORIGINS)
    # engine.io only treats the bare string "*" as "allow any origin".
    return "*" if "*" in origins else origins


sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=_cors_allowed_origins(),
    logger=False,
    engineio_logger=False,
)

_ticker_started = False


@lru_cache(maxsize=1)
def get_command_handler() -> CommandHandler:
    return CommandHandler(
        registry=get_registry(),
        timers=get_timer_engine(),
        auth=get_authenticator(),
        router=BroadcastRouter(sio),
        reset_requires_fresh_session=settings.HOST_RESET_REQUIRES_FRESH_SESSION,
    )


async def run_ticker(handler: CommandHandler, interval: float) -> None:
    while True:
        await sio.sleep(interval)
        try:
            await handler.tick()
        except Exception:
            logger.exception("Timer tick failed")


def _ensure_ticker() -> None:
    # Background tasks need a running loop, so start on the first connection.
    global _ticker_started  # noqa: PLW0603
    if _ticker_started:
        return
    _ticker_started = True
    sio.start_background_task(
        run_ticker,
        get_command_handler(),
        settings.TIMER_TICK_INTERVAL,
    )
    logger.info("Timer ticker started (every %ss)", settings.TIMER_TICK_INTERVAL)


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    _ensure_ticker()
    logger.info("Client connected: %s", sid)


@sio.event
async def disconnect(sid: str, *args: Any):
    await get_command_handler().disconnect(sid)
    logger.info("Client disconnected: %s", sid)


def _forward(command: str):
    async def handler(sid: str, data: Any = None):
        await get_command_handler().handle(sid, command, data)

    handler.__name__ = f"on_{command.replace(':', '_')}"
    return handler


for _command in COMMANDS:
    sio.on(_command, _forward(_command))
