from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from typing import Dict, List
from core.activity import Activity, Timetable


class ActivityRecord(BaseModel):
    """
    Serialized form of an activity.

    Unknown fields are rejected and every field is required except
    `priority`, which defaults to 0 for records written before it existed.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str
    start: int = Field(ge=0)
    duration: int = Field(ge=0)
    minDuration: int = Field(ge=0)
    maxDuration: int = Field(ge=0)
    flexible: bool
    locked: bool
    priority: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_duration_bounds(self) -> "ActivityRecord":
        if self.minDuration > self.maxDuration:
            raise ValueError(
                f"minDuration ({self.minDuration}) must not exceed maxDuration ({self.maxDuration}) for '{self.name}'."
            )
        return self

    def to_activity(self) -> Activity:
        return Activity(
            name=self.name,
            start=self.start,
            duration=self.duration,
            min_duration=self.minDuration,
            max_duration=self.maxDuration,
            flexible=self.flexible,
            locked=self.locked,
            priority=self.priority,
        )

    @classmethod
    def from_activity(cls, act: Activity) -> "ActivityRecord":
        return cls(
            name=act.name,
            start=act.start,
            duration=act.duration,
            minDuration=act.min_duration,
            maxDuration=act.max_duration,
            flexible=act.flexible,
            locked=act.locked,
            priority=act.priority,
        )


TemplateStoreAdapter = TypeAdapter(Dict[str, List[ActivityRecord]])


def records_to_timetable(records: List[ActivityRecord]) -> Timetable:
    return [r.to_activity() for r in records]


def timetable_to_records(timetable: Timetable) -> List[dict]:
    """Plain dicts in the serialized (camelCase) shape, ready for JSON."""
    return [ActivityRecord.from_activity(act).model_dump() for act in timetable]
