from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import time
from core.activity import Activity, Timetable, clone_timetable
from core.constraints import validate, is_order_valid
from scheduler.propagation import propagate_all
from utils.constants import STEP, MAX_SHIFT, MAX_CANDIDATES, SEARCH_TIMEOUT_SECONDS
from utils.time_utils import step_multiples

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    candidates: List[Timetable] = field(default_factory=list)
    """Fully-instantiated, valid timetables in enumeration order."""
    truncated: bool = False
    """True if the candidate cap or the deadline stopped enumeration early."""
    nodes_explored: int = 0
    """Number of (duration, start) choices tried."""


def generate_duration_candidates(activity: Activity) -> List[int]:
    """
    Durations to try for a flexible activity: every multiple of STEP within
    MAX_SHIFT of the current duration, clamped to the activity's bounds.

    Falls back to the current duration when no multiple fits the bounds.
    """
    low = max(activity.min_duration, activity.duration - MAX_SHIFT)
    high = min(activity.max_duration, activity.duration + MAX_SHIFT)
    return step_multiples(low, high, STEP) or [activity.duration]


def generate_start_candidates(
    activity: Activity, day_start: int, day_end: int, duration: Optional[int] = None
) -> List[int]:
    """
    Starts to try: every multiple of STEP within MAX_SHIFT of the current
    start, clamped so that an activity of `duration` stays inside the day.
    """
    if duration is None:
        duration = activity.duration
    low = max(day_start, activity.start - MAX_SHIFT)
    high = min(day_end - duration, activity.start + MAX_SHIFT)
    return step_multiples(low, high, STEP)


class _Search:
    """Bounded backtracking over a private working copy of the timetable."""

    def __init__(
        self,
        timetable: Timetable,
        day_start: int,
        day_end: int,
        max_candidates: int,
        deadline: Optional[float],
        now: Optional[int] = None,
    ):
        self.baseline = clone_timetable(timetable)
        self.working = clone_timetable(timetable)
        self.day_start = day_start
        self.day_end = day_end
        self.max_candidates = max_candidates
        self.deadline = deadline
        self.now = now
        self.result = SearchResult()

    def _snapshot(self) -> List[Tuple[int, int]]:
        return [(act.start, act.duration) for act in self.working]

    def _restore(self, snapshot: List[Tuple[int, int]]) -> None:
        for act, (start, duration) in zip(self.working, snapshot):
            act.start = start
            act.duration = duration

    def _out_of_budget(self) -> bool:
        if len(self.result.candidates) >= self.max_candidates:
            return True
        return self.deadline is not None and time.monotonic() >= self.deadline

    def _is_valid(self) -> bool:
        validation = validate(self.working, self.day_start, self.day_end, reference=self.baseline)
        return validation.valid and is_order_valid(self.working)

    def _ends_after_now(self) -> bool:
        # Activities still running at `now` may not be pushed into the past
        if self.now is None:
            return True
        return all(
            act.end > self.now
            for act, base in zip(self.working, self.baseline)
            if not base.locked
        )

    def backtrack(self, index: int) -> bool:
        """
        Enumerate choices for the activity at `index` and everything after it.

        Returns:
            bool: False once the budget is exhausted, telling callers to stop.
        """
        if index >= len(self.working):
            if not self._ends_after_now():
                return True
            self.result.candidates.append(clone_timetable(self.working))
            return True

        activity = self.working[index]

        # Locked activities contribute no choices
        if activity.locked:
            return self.backtrack(index + 1)

        entry = self._snapshot()
        durations = generate_duration_candidates(activity) if activity.flexible else [activity.duration]

        for dur in durations:
            for start in generate_start_candidates(activity, self.day_start, self.day_end, dur):
                if self._out_of_budget():
                    self.result.truncated = True
                    self._restore(entry)
                    return False

                self._restore(entry)
                activity.duration = dur
                activity.start = start
                self.result.nodes_explored += 1

                propagate_all(self.working, self.day_start, self.day_end)

                if self._is_valid() and not self.backtrack(index + 1):
                    self._restore(entry)
                    return False

        # Restore pre-branch values before returning to the caller
        self._restore(entry)
        return True


def generate_candidates(
    timetable: Timetable,
    day_start: int,
    day_end: int,
    max_candidates: int = MAX_CANDIDATES,
    timeout_seconds: Optional[float] = SEARCH_TIMEOUT_SECONDS,
    now: Optional[int] = None,
) -> SearchResult:
    """
    Enumerate every valid timetable reachable by moving each unlocked activity
    on the STEP grid within MAX_SHIFT minutes of where it is now.

    The search is exhaustive and exponential in the number of unlocked
    activities, so it stops after `max_candidates` candidates or
    `timeout_seconds` of wall time, whichever comes first, and reports that
    through `SearchResult.truncated`. When `now` is given, a candidate that
    makes an unlocked activity end at or before `now` is discarded. The input
    timetable is never modified.
    """
    deadline = time.monotonic() + timeout_seconds if timeout_seconds is not None else None
    search = _Search(timetable, day_start, day_end, max_candidates, deadline, now)

    start_time = time.monotonic()
    search.backtrack(0)
    elapsed = time.monotonic() - start_time

    result = search.result
    logger.info(
        f"🔍 Search explored {result.nodes_explored} choices, found {len(result.candidates)} candidate(s) in {elapsed:.2f}s"
    )
    if result.truncated:
        logger.warning(
            f"⚠️ Search truncated after {len(result.candidates)} candidate(s) (cap {max_candidates}, timeout {timeout_seconds}s)."
        )
    return result
