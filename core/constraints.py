from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from core.activity import Activity, Timetable
from utils.time_utils import ranges_overlap

"""
Constraint validation for a day's timetable. Nothing in this module mutates
the activities it is given.
"""

DURATION = "duration"
DAY_BOUNDARY = "dayBoundary"
LOCKED_VIOLATION = "lockedViolation"
OVERLAP = "overlap"


@dataclass
class Violation:
    """A single broken constraint, tagged by `type`."""

    type: str
    activity: Optional[Activity] = None
    """The offending activity (duration, dayBoundary, lockedViolation)."""
    other: Optional[Activity] = None
    """The second activity of an overlapping pair."""
    message: str = ""


@dataclass
class ValidationResult:
    valid: bool
    violations: List[Violation] = field(default_factory=list)


def duration_valid(activity: Activity) -> bool:
    return activity.min_duration <= activity.duration <= activity.max_duration


def within_day_boundary(activity: Activity, day_start: int, day_end: int) -> bool:
    return activity.start >= day_start and activity.end <= day_end


def overlaps(a: Activity, b: Activity) -> bool:
    """Half-open interval overlap; an activity never overlaps itself."""
    if a is b:
        return False
    return ranges_overlap(a.start, a.end, b.start, b.end)


def find_overlaps(timetable: Timetable) -> List[Tuple[Activity, Activity]]:
    """Every overlapping pair, each reported once in timetable order."""
    conflicts = []
    for i, a in enumerate(timetable):
        for b in timetable[i + 1 :]:
            if overlaps(a, b):
                conflicts.append((a, b))
    return conflicts


def locked_changes(timetable: Timetable, reference: Timetable) -> List[Activity]:
    """Activities locked in `reference` whose start or duration differ in `timetable`."""
    changed = []
    for ref, act in zip(reference, timetable):
        if ref.locked and (ref.start != act.start or ref.duration != act.duration):
            changed.append(act)
    return changed


def validate(
    timetable: Timetable,
    day_start: int,
    day_end: int,
    reference: Optional[Timetable] = None,
) -> ValidationResult:
    """
    Validate a whole timetable.

    Args:
        timetable: The timetable to check.
        day_start: Earliest allowed start, in minutes since midnight.
        day_end: Latest allowed end, in minutes since midnight.
        reference: Optional earlier version of the same timetable. Any activity
            locked there must keep its start and duration.

    Returns:
        ValidationResult: `valid` is True only when `violations` is empty.
    """
    violations: List[Violation] = []

    for act in timetable:
        if not duration_valid(act):
            violations.append(
                Violation(
                    DURATION,
                    activity=act,
                    message=f"'{act.name}' lasts {act.duration} min, outside [{act.min_duration}, {act.max_duration}].",
                )
            )
        if not within_day_boundary(act, day_start, day_end):
            violations.append(
                Violation(
                    DAY_BOUNDARY,
                    activity=act,
                    message=f"'{act.name}' [{act.start}, {act.end}) is outside the day [{day_start}, {day_end}).",
                )
            )

    if reference is not None:
        for act in locked_changes(timetable, reference):
            violations.append(
                Violation(
                    LOCKED_VIOLATION,
                    activity=act,
                    message=f"'{act.name}' is locked and cannot be changed.",
                )
            )

    for a, b in find_overlaps(timetable):
        violations.append(
            Violation(OVERLAP, activity=a, other=b, message=f"'{a.name}' overlaps '{b.name}'.")
        )

    return ValidationResult(valid=not violations, violations=violations)


def is_order_valid(timetable: Timetable) -> bool:
    """True if activities are sorted by non-decreasing start."""
    return all(timetable[i - 1].start <= timetable[i].start for i in range(1, len(timetable)))
