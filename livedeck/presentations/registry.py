from __future__ import annotations

import logging
from typing import Protocol

from livedeck.decks.defaults import get_default_deck
from livedeck.decks.loaders import is_valid_set_id
from livedeck.decks.models import Deck
from livedeck.decks.models import SetSummary

from .exceptions import DeckLoadError
from .exceptions import RejectedCommand
from .persistence import SnapshotGateway
from .state import PresentationSet
from .state import TimerState

logger = logging.getLogger(__name__)


class DeckLoader(Protocol):
    def load(self, set_id: str) -> Deck: ...

    def available(self) -> list[SetSummary]: ...


def normalize_set_id(set_id: object) -> str:
    candidate = set_id.strip() if isinstance(set_id, str) else set_id
    if not is_valid_set_id(candidate):
        msg = f"invalid set id: {set_id!r}"
        raise RejectedCommand(msg)
    return candidate  # type: ignore[return-value]


def _clamp_index(index: int, deck: Deck) -> int:
    return max(0, min(index, len(deck) - 1))


class SetRegistry:
    """Owns every `PresentationSet`, keyed by set id.

    Sets are created on first access and cached for the process lifetime, so
    all callers observe the same mutable record for a given id.
    """

    def __init__(
        self,
        loader: DeckLoader | None = None,
        snapshots: SnapshotGateway | None = None,
    ):
        self.loader = loader
        self.snapshots = snapshots or SnapshotGateway(None)
        self._sets: dict[str, PresentationSet] = {}
        self._seed: dict[str, int] = self.snapshots.load()

    def get(self, set_id: str) -> PresentationSet | None:
        return self._sets.get(set_id)

    def get_or_create(self, set_id: object) -> PresentationSet:
        key = normalize_set_id(set_id)
        pset = self._sets.get(key)
        if pset is not None:
            return pset

        deck = self._load_deck(key)
        if deck is None:
            logger.warning("Using default deck for set %s", key)
            deck = get_default_deck()
        index = _clamp_index(self._seed.get(key, 0), deck)
        pset = PresentationSet(
            id=key,
            deck=deck,
            current_slide_index=index,
            timer=TimerState.idle(deck.duration_at(index)),
        )
        self._sets[key] = pset
        logger.info("Created set %s (%s slides, slide %s)", key, len(deck), index)
        return pset

    def cached(self) -> list[PresentationSet]:
        return list(self._sets.values())

    def list_available(self) -> list[SetSummary]:
        if self.loader is None:
            return []
        return self.loader.available()

    def reload_deck(self, set_id: str) -> PresentationSet | None:
        """Reload a cached set's deck from its source.

        Keeps the current deck when the source cannot be loaded.
        """

        pset = self.get_or_create(set_id)
        deck = self._load_deck(pset.id)
        if deck is None:
            return None
        return self.replace_deck(pset.id, deck)

    def replace_deck(self, set_id: str, deck: Deck) -> PresentationSet:
        pset = self.get_or_create(set_id)
        if not deck.slides:
            msg = f"refusing to install an empty deck for set {pset.id}"
            raise RejectedCommand(msg)
        pset.deck = deck
        pset.current_slide_index = _clamp_index(pset.current_slide_index, deck)
        pset.timer = TimerState.idle(deck.duration_at(pset.current_slide_index))
        return pset

    def indices(self) -> dict[str, int]:
        """Slide positions worth restoring, keyed by set id.

        Sets on their first slide are left out since a missing entry already
        restores to slide 0. Ids that viewers merely joined never grow the
        snapshot that way.
        """

        indices = dict(self._seed)
        indices.update(
            {set_id: pset.current_slide_index for set_id, pset in self._sets.items()},
        )
        return {set_id: index for set_id, index in indices.items() if index}

    def persist(self) -> bool:
        return self.snapshots.save(self.indices())

    def _load_deck(self, set_id: str) -> Deck | None:
        if self.loader is None:
            return None
        try:
            return self.loader.load(set_id)
        except DeckLoadError as exc:
            logger.warning("Could not load deck for set %s: %s", set_id, exc)
        return None
