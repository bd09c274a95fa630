from typing import List, Optional
import logging
from core.activity import Activity, Timetable

"""
Real-time locking: activities whose time window has already elapsed become
permanently immutable.
"""

logger = logging.getLogger(__name__)


def is_locked_by_time(activity: Activity, now: Optional[int]) -> bool:
    """True if the activity has already ended at `now`. An unset clock locks nothing."""
    if now is None:
        return False
    return activity.end <= now


def get_time_locks(timetable: Timetable, now: Optional[int]) -> List[bool]:
    """Per-activity mask of which activities have ended at `now`."""
    return [is_locked_by_time(act, now) for act in timetable]


def apply_time_locks(timetable: Timetable, now: Optional[int]) -> int:
    """
    Lock, in place, every activity that has ended at `now`.

    Locking is monotonic: activities that are already locked stay locked, so
    repeated calls are safe.

    Returns:
        int: The number of activities newly locked by this call.
    """
    newly_locked = 0
    for act in timetable:
        if not act.locked and is_locked_by_time(act, now):
            act.locked = True  # permanently locked
            newly_locked += 1
    if newly_locked:
        logger.info(f"🔒 Locked {newly_locked} finished activit{'y' if newly_locked == 1 else 'ies'} at t={now}")
    return newly_locked


def mutable_subset(timetable: Timetable, now: Optional[int]) -> Timetable:
    """Activities that are neither time-locked nor explicitly locked."""
    return [act for act in timetable if not act.locked and not is_locked_by_time(act, now)]


def enforce_real_time_locks(state) -> None:
    """Lock finished activities in the state's live timetable and commit the result."""
    timetable = state.get()
    apply_time_locks(timetable, state.get_clock())
    state.set(timetable)
