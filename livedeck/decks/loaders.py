"""CSV deck sources.

Each set is one CSV file named ``<set_id>.csv`` inside the decks directory,
with one row per (slide, language)::

    slideId,language,title,content,duration
    1,en,Welcome,Welcome to our presentation,30
    1,pl,Witamy,Witamy na naszej prezentacji,30

Rows sharing a ``slideId`` are merged into one slide; the duration of the first
row for a slide wins. Slides keep the order in which their id first appears.
"""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path

from livedeck.presentations.exceptions import DeckLoadError

from .models import Deck
from .models import SetSummary
from .models import Slide

logger = logging.getLogger(__name__)

SET_ID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
DURATION_RE = re.compile(r"\s*([+-]?\d+)")


def is_valid_set_id(set_id: object) -> bool:
    return isinstance(set_id, str) and bool(SET_ID_RE.match(set_id))


def display_name_for(set_id: str) -> str:
    return " ".join(set_id.replace("_", " ").replace("-", " ").split()).title()


def _parse_duration(raw: str | None) -> int:
    # Leading integer only: "30.5" and "30s" both mean 30 seconds.
    match = DURATION_RE.match(raw or "")
    if match is None:
        return 0
    return max(int(match.group(1)), 0)


def _is_blank(row: dict) -> bool:
    return not any(isinstance(v, str) and v.strip() for v in row.values())


def parse_deck_rows(rows) -> Deck:
    slides: dict[str, dict] = {}
    for row in rows:
        slide_id = (row.get("slideId") or "").strip() or "1"
        entry = slides.get(slide_id)
        if entry is None:
            entry = {
                "title": {},
                "content": {},
                "duration": _parse_duration(row.get("duration")),
            }
            slides[slide_id] = entry

        lang = (row.get("language") or "").strip()
        if lang:
            entry["title"][lang] = row.get("title") or ""
            entry["content"][lang] = row.get("content") or ""

    return Deck(
        slides=tuple(
            Slide(
                id=slide_id,
                title=entry["title"],
                content=entry["content"],
                duration=entry["duration"],
            )
            for slide_id, entry in slides.items()
        ),
    )


class CsvDeckLoader:
    def __init__(self, decks_dir: str | Path):
        self.decks_dir = Path(decks_dir)

    def path_for(self, set_id: str) -> Path:
        if not is_valid_set_id(set_id):
            msg = f"invalid set id: {set_id!r}"
            raise DeckLoadError(msg)
        return self.decks_dir / f"{set_id}.csv"

    def load(self, set_id: str) -> Deck:
        path = self.path_for(set_id)
        if not path.is_file():
            msg = f"no deck source for set {set_id!r} at {path}"
            raise DeckLoadError(msg)

        try:
            with path.open(encoding="utf-8", newline="") as fh:
                deck = parse_deck_rows(
                    row for row in csv.DictReader(fh) if not _is_blank(row)
                )
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            msg = f"could not read deck source {path}: {exc}"
            raise DeckLoadError(msg) from exc

        if not deck.slides:
            msg = f"deck source {path} has no slides"
            raise DeckLoadError(msg)

        logger.info("Loaded %s slides for set %s from %s", len(deck), set_id, path)
        return deck

    def available(self) -> list[SetSummary]:
        """List the sets this loader can materialize.

        Only the ``language`` column is read; slides are not built.
        """

        if not self.decks_dir.is_dir():
            return []

        summaries: list[SetSummary] = []
        for path in sorted(self.decks_dir.glob("*.csv")):
            set_id = path.stem
            if not is_valid_set_id(set_id):
                continue
            try:
                languages = self._peek_languages(path)
            except (OSError, UnicodeDecodeError, csv.Error):
                logger.warning("Skipping unreadable deck source %s", path)
                continue
            summaries.append(
                SetSummary(
                    id=set_id,
                    display_name=display_name_for(set_id),
                    languages=tuple(languages),
                ),
            )
        return summaries

    @staticmethod
    def _peek_languages(path: Path) -> list[str]:
        seen: dict[str, None] = {}
        with path.open(encoding="utf-8", newline="") as fh:
            for row in csv.DictReader(fh):
                lang = (row.get("language") or "").strip()
                if lang:
                    seen.setdefault(lang, None)
        return list(seen)
