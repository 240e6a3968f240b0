from __future__ import annotations

from .exceptions import RejectedCommand
from .state import PresentationSet
from .timer import TimerEngine
from .validators import as_int


def change_slide(pset: PresentationSet, index: object, timers: TimerEngine) -> bool:
    """Move `pset` to slide `index`.

    Returns True when the slide actually changed. Selecting the current slide
    is a no-op and leaves a running timer alone; out-of-range indices raise
    `RejectedCommand`.
    """

    target = as_int(index)
    if not 0 <= target < pset.slide_count:
        msg = f"slide index {target} out of range for set {pset.id}"
        raise RejectedCommand(msg)
    if target == pset.current_slide_index:
        return False

    pset.current_slide_index = target
    timers.load_slide(pset, target)
    return True


def next_slide(pset: PresentationSet, timers: TimerEngine) -> bool:
    return change_slide(pset, pset.current_slide_index + 1, timers)


def prev_slide(pset: PresentationSet, timers: TimerEngine) -> bool:
    return change_slide(pset, pset.current_slide_index - 1, timers)
