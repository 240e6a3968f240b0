"""Countdown timer state machine.

A set's timer is Idle (stopped, ``time_left == total_time``), Running, or
Expired (stopped at 0). While running, ``time_left`` is always recomputed from
the absolute time elapsed since ``start_time`` rather than decremented, so late
or skipped ticks never make the countdown drift.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterable
from datetime import datetime

from django.utils import timezone

from .state import PresentationSet
from .state import TimerState
from .validators import as_non_negative_int

logger = logging.getLogger(__name__)


class TimerEngine:
    def __init__(self, clock: Callable[[], datetime] = timezone.now):
        self.clock = clock

    def start(self, pset: PresentationSet, seconds: object) -> TimerState:
        total = as_non_negative_int(seconds)
        pset.timer = TimerState(
            running=True,
            time_left=total,
            total_time=total,
            start_time=self.clock(),
        )
        logger.debug("Timer started for set %s: %ss", pset.id, total)
        return pset.timer

    def stop(self, pset: PresentationSet) -> TimerState:
        timer = pset.timer
        if timer.running:
            self._recompute(timer)
        timer.running = False
        timer.start_time = None
        return timer

    def reset(self, pset: PresentationSet) -> TimerState:
        pset.timer = TimerState.idle(0)
        return pset.timer

    def load_slide(self, pset: PresentationSet, index: int) -> TimerState:
        """Replace the timer with an idle one for the slide at `index`."""

        pset.timer = TimerState.idle(pset.deck.duration_at(index))
        return pset.timer

    def tick(self, psets: Iterable[PresentationSet]) -> list[PresentationSet]:
        """Recompute every running timer.

        Returns the sets whose timer changed on this tick, either because
        ``time_left`` moved or because the timer just expired.
        """

        changed: list[PresentationSet] = []
        for pset in psets:
            timer = pset.timer
            if not timer.running:
                continue
            before = timer.time_left
            self._recompute(timer)
            if timer.time_left == 0:
                timer.running = False
                timer.start_time = None
                logger.info("Timer expired for set %s", pset.id)
                changed.append(pset)
            elif timer.time_left != before:
                changed.append(pset)
        return changed

    def _recompute(self, timer: TimerState) -> None:
        if timer.start_time is None:
            return
        elapsed = int((self.clock() - timer.start_time).total_seconds())
        remaining = max(0, timer.total_time - max(elapsed, 0))
        timer.time_left = min(remaining, timer.time_left)
