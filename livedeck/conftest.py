import pytest
from django.contrib.auth.hashers import make_password

from livedeck.presentations.auth import HostAuthenticator
from livedeck.presentations.commands import CommandHandler
from livedeck.presentations.persistence import SnapshotGateway
from livedeck.presentations.registry import SetRegistry
from livedeck.presentations.timer import TimerEngine
from livedeck.realtime.router import BroadcastRouter
from livedeck.tests.factories import HOST_PASSWORD
from livedeck.tests.factories import SESSION_TIMEOUT
from livedeck.tests.factories import FakeClock
from livedeck.tests.factories import FakeSocketServer
from livedeck.tests.factories import StaticDeckLoader
from livedeck.tests.factories import make_deck


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def server() -> FakeSocketServer:
    return FakeSocketServer()


@pytest.fixture
def loader() -> StaticDeckLoader:
    return StaticDeckLoader(
        {
            "main": make_deck(30, 45),
            "side": make_deck(10, 0, 20),
        },
    )


@pytest.fixture
def snapshots(tmp_path) -> SnapshotGateway:
    return SnapshotGateway(tmp_path / "state.json")


@pytest.fixture
def registry(loader, snapshots) -> SetRegistry:
    return SetRegistry(loader=loader, snapshots=snapshots)


@pytest.fixture
def timers(clock) -> TimerEngine:
    return TimerEngine(clock=clock)


@pytest.fixture
def authenticator(clock) -> HostAuthenticator:
    return HostAuthenticator(
        username="host",
        password_hash=make_password(HOST_PASSWORD),
        timeout=SESSION_TIMEOUT,
        clock=clock,
    )


@pytest.fixture
def router(server) -> BroadcastRouter:
    return BroadcastRouter(server)


@pytest.fixture
def handler(registry, timers, authenticator, router) -> CommandHandler:
    return CommandHandler(
        registry=registry,
        timers=timers,
        auth=authenticator,
        router=router,
    )
