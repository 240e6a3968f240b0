from livedeck.presentations.auth import HostAuthenticator
from livedeck.presentations.auth import SessionCheck
from livedeck.tests.factories import HOST_PASSWORD
from livedeck.tests.factories import SESSION_TIMEOUT


def test_login_with_valid_credentials(authenticator, clock):
    assert authenticator.login("sid-1", "host", HOST_PASSWORD) is True

    session = authenticator.session("sid-1")
    assert session.is_host is True
    assert session.login_time == clock()
    assert authenticator.authorize("sid-1") is SessionCheck.GRANTED


def test_login_rejects_wrong_username_or_password(authenticator):
    assert authenticator.login("sid-1", "host", "nope") is False
    assert authenticator.login("sid-1", "guest", HOST_PASSWORD) is False
    assert authenticator.login("sid-1", None, None) is False

    assert authenticator.session("sid-1") is None
    assert not authenticator.authorize("sid-1")


def test_failed_login_keeps_existing_session(authenticator, clock):
    authenticator.login("sid-1", "host", HOST_PASSWORD)
    login_time = clock()
    clock.advance(60)

    assert authenticator.login("sid-1", "host", "wrong") is False
    assert authenticator.session("sid-1").login_time == login_time


def test_login_never_matches_the_stored_hash_as_plaintext(authenticator):
    assert authenticator.login("sid-1", "host", authenticator.password_hash) is False


def test_login_disabled_without_password_hash(clock):
    auth = HostAuthenticator("host", "", SESSION_TIMEOUT, clock=clock)

    assert auth.login("sid-1", "host", "") is False


def test_sessions_are_per_connection(authenticator):
    authenticator.login("sid-1", "host", HOST_PASSWORD)

    assert authenticator.authorize("sid-2") is SessionCheck.DENIED


def test_expired_session_is_reported_once(authenticator, clock):
    authenticator.login("sid-1", "host", HOST_PASSWORD)

    clock.advance(SESSION_TIMEOUT.total_seconds())
    assert authenticator.authorize("sid-1") is SessionCheck.GRANTED

    clock.advance(1)
    assert authenticator.authorize("sid-1") is SessionCheck.EXPIRED
    assert authenticator.authorize("sid-1") is SessionCheck.DENIED
    assert authenticator.session("sid-1") is None


def test_is_host_checks_only_the_flag(authenticator, clock):
    authenticator.login("sid-1", "host", HOST_PASSWORD)
    clock.advance(SESSION_TIMEOUT.total_seconds() + 1)

    assert authenticator.is_host("sid-1") is True


def test_logout_and_forget(authenticator):
    authenticator.login("sid-1", "host", HOST_PASSWORD)
    authenticator.logout("sid-1")
    assert authenticator.is_host("sid-1") is False

    authenticator.login("sid-2", "host", HOST_PASSWORD)
    authenticator.forget("sid-2")
    assert authenticator.session("sid-2") is None
