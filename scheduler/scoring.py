from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from core.activity import Timetable
from utils.constants import CHANGE_PENALTY


@dataclass
class Change:
    index: int
    start_diff: int
    duration_diff: int
    priority: int


@dataclass
class SelectionResult:
    best: Optional[Timetable]
    best_score: float
    all_scores: List[Tuple[Timetable, int]] = field(default_factory=list)


def compute_changes(original: Timetable, candidate: Timetable) -> List[Change]:
    """List the activities whose start or duration differ between the two timetables."""
    changes = []
    for i, (o, c) in enumerate(zip(original, candidate)):
        start_diff = abs(c.start - o.start)
        duration_diff = abs(c.duration - o.duration)
        if start_diff > 0 or duration_diff > 0:
            changes.append(Change(i, start_diff, duration_diff, c.priority or 0))
    return changes


def score_timetable(original: Timetable, candidate: Timetable) -> int:
    """
    Weighted distance of a candidate from the original; lower is better.

    Each changed activity costs `(priority + 1) * (|Δstart| + |Δduration|)`
    plus a flat CHANGE_PENALTY. An identical candidate scores 0.
    """
    changes = compute_changes(original, candidate)
    score = sum((c.priority + 1) * (c.start_diff + c.duration_diff) for c in changes)
    return score + len(changes) * CHANGE_PENALTY


def select_best(original: Timetable, candidates: List[Timetable]) -> SelectionResult:
    """Pick the lowest-scoring candidate; on a tie the first one enumerated wins."""
    result = SelectionResult(best=None, best_score=float("inf"))
    for candidate in candidates:
        score = score_timetable(original, candidate)
        result.all_scores.append((candidate, score))
        if score < result.best_score:
            result.best_score = score
            result.best = candidate
    return result
