import pytest


@pytest.fixture(autouse=True)
def _fresh_services():
    from livedeck.presentations.services import reset_services
    from livedeck.realtime.socketio import get_command_handler

    reset_services()
    get_command_handler.cache_clear()
    yield
    reset_services()
    get_command_handler.cache_clear()
