from __future__ import annotations

from django.core.management.base import BaseCommand

from livedeck.presentations.services import get_registry


class Command(BaseCommand):
    help = "List the presentation sets found in LIVEDECK_DECKS_DIR"

    def handle(self, *args, **options) -> None:
        summaries = get_registry().list_available()
        if not summaries:
            self.stdout.write(self.style.WARNING("No deck sources found."))
            return
        for summary in summaries:
            languages = ", ".join(summary.languages) or "-"
            self.stdout.write(f"{summary.id}\t{summary.display_name}\t{languages}")
