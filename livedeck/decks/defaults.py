"""Built-in deck used whenever a set has no loadable source."""

from __future__ import annotations

from .models import Deck
from .models import Slide


def get_default_deck() -> Deck:
    return Deck(
        slides=(
            Slide(
                id="1",
                title={"en": "Welcome", "pl": "Witamy", "de": "Willkommen"},
                content={
                    "en": "Welcome to our presentation",
                    "pl": "Witamy na naszej prezentacji",
                    "de": "Willkommen zu unserer Präsentation",
                },
                duration=30,
            ),
            Slide(
                id="2",
                title={"en": "Slide 2", "pl": "Slajd 2", "de": "Folie 2"},
                content={
                    "en": "This is slide number two",
                    "pl": "To jest slajd numer dwa",
                    "de": "Dies ist Folie Nummer zwei",
                },
                duration=45,
            ),
        ),
    )
