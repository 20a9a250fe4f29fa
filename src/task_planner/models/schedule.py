"""Schedule parse result models."""

from datetime import date, time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DayCode(str, Enum):
    """Canonical weekday codes."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"


class RecurrenceType(str, Enum):
    """How often a task repeats."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"


class TimeParseResult(BaseModel):
    """Title and time of day pulled out of task text."""

    model_config = ConfigDict(frozen=True)

    cleaned_title: str = Field(..., description="Task title with the time phrase removed")
    scheduled_time: time | None = Field(None, description="Time of day, if one was recognized")


class ScheduleParseResult(TimeParseResult):
    """Title, time of day and recurrence pulled out of task text."""

    recurrence_type: RecurrenceType = Field(
        RecurrenceType.NONE, description="none, daily or weekly"
    )
    recurrence_days: tuple[DayCode, ...] | None = Field(
        None, description="Days of the week, only for weekly recurrence"
    )
    recurrence_end_date: date | None = Field(
        None, description="Last day of the recurrence, if an end phrase was found"
    )

    @model_validator(mode="after")
    def _check_recurrence_days(self) -> "ScheduleParseResult":
        if self.recurrence_type == RecurrenceType.WEEKLY:
            if not self.recurrence_days:
                raise ValueError("weekly recurrence requires at least one day")
            if len(set(self.recurrence_days)) != len(self.recurrence_days):
                raise ValueError("recurrence_days must not repeat a day")
        elif self.recurrence_days is not None:
            raise ValueError(f"{self.recurrence_type.value} recurrence cannot carry days")
        return self

    @property
    def is_recurring(self) -> bool:
        """Whether the task repeats or carries an end date for the expander."""
        return self.recurrence_type != RecurrenceType.NONE or self.recurrence_end_date is not None
