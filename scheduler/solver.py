from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
from core.activity import Timetable, check_timetable, clone_timetable, sort_by_start
from core.realtime import apply_time_locks
from core.state import TimetableState
from exceptions.custom_errors import InvalidDayBoundsError
from scheduler.apply import Renderer, apply_timetable
from scheduler.scoring import select_best
from scheduler.search import generate_candidates
from utils.constants import MAX_CANDIDATES, SEARCH_TIMEOUT_SECONDS
from utils.helpers.timetable_frame import render_timetable

logger = logging.getLogger(__name__)


class SolveStatus(str, Enum):
    SOLVED = "solved"
    NOTHING_TO_ADJUST = "nothing_to_adjust"
    NO_SOLUTION = "no_solution"
    TRUNCATED = "search_truncated"


@dataclass
class SolveResult:
    """The outcome of one `solve_timetable` call."""

    status: SolveStatus
    """How the solve terminated."""
    timetable: Timetable
    """The timetable committed into the session."""
    score: Optional[int] = None
    """Score of the committed candidate, None if no candidate was chosen."""
    candidate_count: int = 0
    """Number of valid candidates the search produced."""
    truncated: bool = False
    """Whether the search hit its candidate cap or deadline."""


def solve_timetable(
    state: TimetableState,
    day_start: int,
    day_end: int,
    render: Optional[Renderer] = render_timetable,
    notify: bool = True,
    max_candidates: int = MAX_CANDIDATES,
    timeout_seconds: Optional[float] = SEARCH_TIMEOUT_SECONDS,
) -> SolveResult:
    """
    Re-derive the session's timetable after a disturbance, changing as little
    as possible and never touching activities that have already finished.

    Steps:
        1. Read the live timetable in start order and the clock.
        2. Lock activities that have ended.
        3. Stop with NOTHING_TO_ADJUST if no unlocked flexible activity is left.
        4. Enumerate candidates with the bounded search.
        5. With no candidate, commit the locked timetable as NO_SOLUTION.
        6. Otherwise commit the candidate closest to the original.
        7. Notify `render` once with what was committed, unless `notify` is False.

    Raises:
        InvalidDayBoundsError: If `day_start` is not before `day_end`.
        InvalidActivityError: If an activity has impossible bounds or negative times.
    """
    if day_start >= day_end:
        raise InvalidDayBoundsError(
            f"Day start ({day_start}) must be before day end ({day_end})."
        )

    renderer = render if notify else None

    # 1. Read state
    original = sort_by_start(state.get())
    check_timetable(original)
    now = state.get_clock()
    if now is None:
        logger.info("⏰ Clock not set; no activity is locked by time.")

    # 2. Lock past activities
    locked = clone_timetable(original)
    apply_time_locks(locked, now)

    # 3. Anything left to adjust?
    adjustable = [act for act in locked if not act.locked and act.flexible]
    if not adjustable:
        logger.info("⏭️ No activities can be adjusted.")
        committed = apply_timetable(state, locked, renderer)
        return SolveResult(SolveStatus.NOTHING_TO_ADJUST, committed)

    # 4. Search
    logger.info(f"🚀 Searching adjustments for {len(adjustable)} flexible activit{'y' if len(adjustable) == 1 else 'ies'}...")
    search = generate_candidates(locked, day_start, day_end, max_candidates, timeout_seconds, now)

    # 5. No candidate
    if not search.candidates:
        logger.warning("⚠️ No valid schedule solution found!")
        committed = apply_timetable(state, locked, renderer)
        status = SolveStatus.TRUNCATED if search.truncated else SolveStatus.NO_SOLUTION
        return SolveResult(status, committed, truncated=search.truncated)

    # 6. Score against the pre-lock original and commit the best
    selection = select_best(original, search.candidates)
    committed = apply_timetable(state, selection.best, renderer)
    logger.info(f"✅ Applied best schedule with score {selection.best_score} (out of {len(search.candidates)} candidates)")

    status = SolveStatus.TRUNCATED if search.truncated else SolveStatus.SOLVED
    return SolveResult(
        status,
        committed,
        score=selection.best_score,
        candidate_count=len(search.candidates),
        truncated=search.truncated,
    )
