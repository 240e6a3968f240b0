from __future__ import annotations

import asyncio
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from typing import Any

from livedeck.decks.models import Deck


@dataclass
class TimerState:
    running: bool = False
    time_left: int = 0
    total_time: int = 0
    start_time: datetime | None = None

    @classmethod
    def idle(cls, seconds: int) -> TimerState:
        return cls(running=False, time_left=seconds, total_time=seconds)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "running": self.running,
            "timeLeft": self.time_left,
            "totalTime": self.total_time,
        }
        if self.start_time is not None:
            payload["startTime"] = int(self.start_time.timestamp() * 1000)
        return payload


@dataclass
class PresentationSet:
    """Live state of one set. Owned by the registry, mutated in place."""

    id: str
    deck: Deck
    current_slide_index: int = 0
    timer: TimerState = field(default_factory=TimerState)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    @property
    def languages(self) -> list[str]:
        return self.deck.languages

    @property
    def slide_count(self) -> int:
        return len(self.deck)

    def snapshot(self) -> dict[str, Any]:
        return {
            "setId": self.id,
            "slides": self.deck.to_payload(),
            "currentSlide": self.current_slide_index,
            "languages": self.languages,
            "timer": self.timer.to_payload(),
        }
