from core.activity import Timetable

"""
This module contains the forward and backward propagation passes that remove
overlaps between adjacent activities with as little disturbance as possible.

Both passes work in place on a start-sorted working copy. Shrinking a flexible
activity is always tried before shifting it, and locked activities are never
touched: they act as anchors the passes work around.
"""


def forward_propagate(timetable: Timetable, day_end: int) -> None:
    """
    Walk left to right, pushing each activity clear of the one before it.

    For an overlapping pair, a flexible, unlocked right-hand activity first has
    its head trimmed (its end stays put) down to its minimum duration. Any
    residual overlap is then removed by shifting it later, which applies to
    inflexible activities too as long as they are unlocked.

    Finally, a flexible, unlocked last activity that runs past `day_end` is
    shortened to fit, but never below its minimum duration.
    """
    for current, nxt in zip(timetable, timetable[1:]):
        overlap = current.end - nxt.start
        if overlap <= 0:
            continue

        if not nxt.locked and nxt.flexible:
            reduction = max(0, min(nxt.duration - nxt.min_duration, overlap))
            nxt.start += reduction
            nxt.duration -= reduction
            overlap -= reduction

        if overlap > 0 and not nxt.locked:
            nxt.start += overlap

    if not timetable:
        return
    last = timetable[-1]
    if last.end > day_end and last.flexible and not last.locked:
        last.duration = max(last.min_duration, day_end - last.start)


def backward_propagate(timetable: Timetable, day_start: int) -> None:
    """
    Mirror of `forward_propagate`, walking right to left and moving the
    left-hand activity of each overlapping pair.

    A flexible, unlocked left-hand activity first has its tail trimmed; any
    residual overlap shifts it earlier. If that would start it before
    `day_start`, it is pinned to `day_start` and stretched to meet the next
    activity's start, but never below its minimum duration.
    """
    for i in range(len(timetable) - 1, 0, -1):
        current = timetable[i]
        prev = timetable[i - 1]

        overlap = prev.end - current.start
        if overlap <= 0:
            continue

        if not prev.locked and prev.flexible:
            reduction = max(0, min(prev.duration - prev.min_duration, overlap))
            prev.duration -= reduction
            overlap -= reduction

        if overlap > 0 and not prev.locked:
            prev.start -= overlap
            if prev.start < day_start:
                prev.start = day_start
                prev.duration = max(prev.min_duration, current.start - day_start)


def propagate_all(timetable: Timetable, day_start: int, day_end: int) -> None:
    """Run the forward pass, then the backward pass."""
    forward_propagate(timetable, day_end)
    backward_propagate(timetable, day_start)
