from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any


@dataclass(frozen=True)
class Slide:
    """One slide of a deck.

    `duration` is in whole seconds; 0 means the slide has no timer.
    """

    id: str
    title: dict[str, str] = field(default_factory=dict)
    content: dict[str, str] = field(default_factory=dict)
    duration: int = 0

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": dict(self.title),
            "content": dict(self.content),
            "duration": self.duration,
        }


@dataclass(frozen=True)
class Deck:
    slides: tuple[Slide, ...] = ()

    def __len__(self) -> int:
        return len(self.slides)

    def __getitem__(self, index: int) -> Slide:
        return self.slides[index]

    @property
    def languages(self) -> list[str]:
        """Languages in first-seen order across slide titles and contents."""

        seen: dict[str, None] = {}
        for slide in self.slides:
            for lang in (*slide.title.keys(), *slide.content.keys()):
                seen.setdefault(lang, None)
        return list(seen)

    def duration_at(self, index: int) -> int:
        return self.slides[index].duration or 0

    def to_payload(self) -> list[dict[str, Any]]:
        return [slide.to_payload() for slide in self.slides]


@dataclass(frozen=True)
class SetSummary:
    id: str
    display_name: str
    languages: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "languages": list(self.languages),
        }
