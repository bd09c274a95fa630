import logging
import pandas as pd
from core.activity import Timetable
from utils.time_utils import minutes_to_time_string, minutes_to_duration_string

logger = logging.getLogger(__name__)

TIMETABLE_COLUMNS = ["Name", "Start", "End", "Duration", "Priority", "Flexible", "Locked"]


def timetable_to_df(timetable: Timetable) -> pd.DataFrame:
    """
    Build a display-ready DataFrame of a timetable, one row per activity, with
    times formatted as "HH:MM" and durations as "1h 30m".
    """
    rows = [
        {
            "Name": act.name,
            "Start": minutes_to_time_string(act.start),
            "End": minutes_to_time_string(act.end),
            "Duration": minutes_to_duration_string(act.duration),
            "Priority": act.priority,
            "Flexible": act.flexible,
            "Locked": act.locked,
        }
        for act in timetable
    ]
    return pd.DataFrame(rows, columns=TIMETABLE_COLUMNS)


def render_timetable(timetable: Timetable) -> pd.DataFrame:
    """Default presentation hook: log the timetable as a table and return the frame."""
    df = timetable_to_df(timetable)
    if df.empty:
        logger.info("📅 Timetable is empty.")
    else:
        logger.info("📅 Committed timetable:\n" + df.to_string(index=False))
    return df
