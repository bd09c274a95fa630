from dataclasses import dataclass, replace
from typing import List
from exceptions.custom_errors import InvalidActivityError


@dataclass
class Activity:
    """
    A named time interval in a day's timetable.

    Identity is the activity's position in the timetable; search, propagation
    and scoring all compare activities index by index.
    """

    name: str
    start: int
    """Minutes since midnight."""
    duration: int
    """Length in minutes."""
    min_duration: int
    """Inclusive lower bound on `duration`."""
    max_duration: int
    """Inclusive upper bound on `duration`."""
    flexible: bool = True
    """Whether propagation and search may adjust the duration."""
    locked: bool = False
    """Permanently frozen, by time passing or by an explicit pin."""
    priority: int = 0
    """Non-negative; higher means costlier to change."""

    @property
    def end(self) -> int:
        return self.start + self.duration

    def copy(self) -> "Activity":
        return replace(self)


Timetable = List[Activity]


def clone_timetable(timetable: Timetable) -> Timetable:
    """Independent copy of a timetable; no activity is shared with the input."""
    return [act.copy() for act in timetable]


def sort_by_start(timetable: Timetable) -> Timetable:
    """Return a start-sorted copy (stable, so ties keep their order)."""
    return sorted(clone_timetable(timetable), key=lambda act: act.start)


def timetables_equal(first: Timetable, second: Timetable) -> bool:
    """Compare two timetables on start and duration only."""
    if len(first) != len(second):
        return False
    return all(
        a.start == b.start and a.duration == b.duration for a, b in zip(first, second)
    )


def check_timetable(timetable: Timetable) -> None:
    """
    Reject activities no timetable could ever hold.

    Raises:
        InvalidActivityError: On a negative start, duration or priority, or
            when `min_duration` exceeds `max_duration`.
    """
    for act in timetable:
        if act.start < 0 or act.duration < 0 or act.priority < 0:
            raise InvalidActivityError(
                f"Activity '{act.name}' has a negative start, duration or priority."
            )
        if act.min_duration > act.max_duration:
            raise InvalidActivityError(
                f"Activity '{act.name}' has min duration {act.min_duration} above max duration {act.max_duration}."
            )
