from __future__ import annotations

import getpass

from django.conf import settings
from django.contrib.auth.hashers import check_password
from django.contrib.auth.hashers import get_hashers
from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.core.management.base import CommandError
from django.core.management.base import CommandParser


def _hasher_choices() -> list[str]:
    return ["default", *(hasher.algorithm for hasher in get_hashers())]


class Command(BaseCommand):
    help = (
        "Hash a host password for HOST_PASSWORD_HASH, or check a password "
        "against the configured HOST_PASSWORD_HASH"
    )

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--password",
            dest="password",
            help="Plain-text host password (omit to be prompted)",
        )
        parser.add_argument(
            "--hasher",
            dest="hasher",
            choices=_hasher_choices(),
            default="default",
            help="Algorithm from PASSWORD_HASHERS; 'default' uses the first entry.",
        )
        parser.add_argument(
            "--env",
            action="store_true",
            help="Print a HOST_PASSWORD_HASH=... line ready for an env file.",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Verify the password against the configured HOST_PASSWORD_HASH.",
        )

    def handle(self, *args, **options) -> None:
        password = options["password"] or self._prompt(confirm=not options["check"])

        if options["check"]:
            self._check(password)
            return

        hasher = options["hasher"]
        hashed = make_password(password, hasher=None if hasher == "default" else hasher)
        self.stdout.write(f"HOST_PASSWORD_HASH={hashed}" if options["env"] else hashed)

    def _prompt(self, *, confirm: bool) -> str:
        password = getpass.getpass("Host password: ")
        if confirm and password != getpass.getpass("Confirm:       "):
            msg = "Passwords do not match."
            raise CommandError(msg)
        if not password:
            msg = "Empty passwords are not accepted."
            raise CommandError(msg)
        return password

    def _check(self, password: str) -> None:
        encoded = settings.HOST_PASSWORD_HASH
        if not encoded:
            msg = "HOST_PASSWORD_HASH is not set; host login is disabled."
            raise CommandError(msg)
        if not check_password(password, encoded):
            msg = "Password does not match HOST_PASSWORD_HASH."
            raise CommandError(msg)
        self.stdout.write(self.style.SUCCESS("Password matches HOST_PASSWORD_HASH."))
