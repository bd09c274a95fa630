from typing import List


def time_string_to_minutes(time_str: str) -> int:
    """Convert an "HH:MM" string to minutes since midnight."""
    try:
        hours, minutes = (int(part) for part in str(time_str).strip().split(":"))
    except ValueError:
        raise ValueError(f"Could not parse time string '{time_str}', expected HH:MM")
    return hours * 60 + minutes


def minutes_to_time_string(minutes: int) -> str:
    """Convert minutes since midnight to an "HH:MM" string."""
    hrs, mins = divmod(int(minutes), 60)
    return f"{hrs:02d}:{mins:02d}"


def minutes_to_duration_string(minutes: int) -> str:
    """Human readable duration, e.g. 90 -> "1h 30m", 45 -> "45m"."""
    h, m = divmod(int(minutes), 60)
    parts = []
    if h > 0:
        parts.append(f"{h}h")
    if m > 0:
        parts.append(f"{m}m")
    return " ".join(parts)


def round_to_step(value: int, step: int) -> int:
    """Round a number to the nearest multiple of step."""
    return int(round(value / step)) * step


def clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def ranges_overlap(start1: int, end1: int, start2: int, end2: int) -> bool:
    """Half-open overlap test for [start1, end1) and [start2, end2)."""
    return start1 < end2 and start2 < end1


def step_multiples(low: int, high: int, step: int) -> List[int]:
    """All multiples of step in the closed range [low, high], ascending."""
    if high < low:
        return []
    first = -(-low // step) * step  # ceil to the next multiple
    return list(range(first, high + 1, step))
