from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from schemas.timetable.activity import ActivityRecord
from utils.constants import DAY_START, DAY_END


class TimetableRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    activities: List[ActivityRecord]
    dayStart: int = Field(default=DAY_START, ge=0)
    dayEnd: int = Field(default=DAY_END, ge=0)

    @model_validator(mode="after")
    def sort_activities(self) -> "TimetableRequest":
        # Engine components expect a start-sorted timetable
        self.activities = sorted(self.activities, key=lambda r: r.start)
        return self


class ValidateRequest(TimetableRequest):
    pass


class PropagateRequest(TimetableRequest):
    pass


class SolveRequest(TimetableRequest):
    now: Optional[int] = Field(default=None, ge=0)
    """Current time in minutes since midnight; activities ending by then are locked."""
    maxCandidates: Optional[int] = Field(default=None, ge=1)
    timeoutSeconds: Optional[float] = Field(default=None, gt=0)
