from io import StringIO

import pytest
from django.contrib.auth.hashers import check_password
from django.contrib.auth.hashers import make_password
from django.core.management import call_command
from django.core.management.base import CommandError

GETPASS = "livedeck.presentations.management.commands.hash_host_password.getpass.getpass"


def test_hash_host_password_prints_usable_hash():
    out = StringIO()

    call_command("hash_host_password", "--password", "s3cret", stdout=out)

    hashed = out.getvalue().strip()
    assert hashed != "s3cret"
    assert check_password("s3cret", hashed)


def test_hash_host_password_env_line_uses_configured_hasher():
    out = StringIO()

    call_command(
        "hash_host_password",
        "--password",
        "s3cret",
        "--hasher",
        "md5",
        "--env",
        stdout=out,
    )

    key, _, hashed = out.getvalue().strip().partition("=")
    assert key == "HOST_PASSWORD_HASH"
    assert hashed.startswith("md5$")
    assert check_password("s3cret", hashed)


def test_hash_host_password_rejects_hasher_not_in_settings():
    with pytest.raises(CommandError):
        call_command("hash_host_password", "--password", "s3cret", "--hasher", "scrypt")


def test_hash_host_password_mismatched_prompt(monkeypatch):
    answers = iter(["one", "two"])
    monkeypatch.setattr(GETPASS, lambda prompt="": next(answers))
    out = StringIO()

    with pytest.raises(CommandError, match="Passwords do not match."):
        call_command("hash_host_password", stdout=out)

    assert out.getvalue() == ""


def test_hash_host_password_check_against_settings(settings):
    settings.HOST_PASSWORD_HASH = make_password("s3cret")
    out = StringIO()

    call_command("hash_host_password", "--password", "s3cret", "--check", stdout=out)

    assert "Password matches HOST_PASSWORD_HASH." in out.getvalue()


def test_hash_host_password_check_prompts_once(settings, monkeypatch):
    settings.HOST_PASSWORD_HASH = make_password("s3cret")
    monkeypatch.setattr(GETPASS, lambda prompt="": "wrong")

    with pytest.raises(CommandError, match="does not match"):
        call_command("hash_host_password", "--check")


def test_hash_host_password_check_without_configured_hash(settings):
    settings.HOST_PASSWORD_HASH = ""

    with pytest.raises(CommandError, match="host login is disabled"):
        call_command("hash_host_password", "--password", "s3cret", "--check")


def test_list_sets(settings):
    out = StringIO()

    call_command("list_sets", stdout=out)

    assert out.getvalue().splitlines() == ["main\tMain\ten, de"]


def test_list_sets_without_sources(settings, tmp_path):
    settings.LIVEDECK_DECKS_DIR = str(tmp_path)
    out = StringIO()

    call_command("list_sets", stdout=out)

    assert "No deck sources found." in out.getvalue()
