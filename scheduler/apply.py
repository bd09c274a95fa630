from typing import Callable, Optional
import logging
from core.activity import Timetable, clone_timetable
from core.realtime import apply_time_locks
from core.state import TimetableState

logger = logging.getLogger(__name__)

Renderer = Callable[[Timetable], object]


def apply_timetable(
    state: TimetableState,
    timetable: Timetable,
    render: Optional[Renderer] = None,
) -> Timetable:
    """
    Commit a timetable into the session.

    Activities that have finished by the session clock are locked first, the
    result replaces the live timetable (recording history), and `render` is
    called with it when given.

    Returns:
        Timetable: An independent copy of what was committed.
    """
    committed = clone_timetable(timetable)
    apply_time_locks(committed, state.get_clock())
    state.set(committed)

    if render is not None:
        render(clone_timetable(committed))
    return committed
