"""Task-related Pydantic models."""

from datetime import date, time

from pydantic import BaseModel, Field

from .schedule import DayCode, RecurrenceType, ScheduleParseResult, TimeParseResult


class TaskParseRequest(BaseModel):
    """Request to parse a typed task title."""

    text: str = Field(
        ...,
        description="Raw task text like 'teach 333 MW 3:00 pm till May 1'",
        min_length=1,
        max_length=1000,
    )
    today: date | None = Field(
        None, description="Reference date for end-date year inference (defaults to today)"
    )


class TimeParseRequest(BaseModel):
    """Request to pull only a time of day out of a task title."""

    text: str = Field(
        ...,
        description="Raw task text like 'Call mom at 2:30 pm'",
        min_length=1,
        max_length=1000,
    )


class ScheduleParseResponse(ScheduleParseResult):
    """Parsed schedule plus the text it came from."""

    raw_input: str = Field(..., description="Original input text")


class TimeParseResponse(TimeParseResult):
    """Parsed time of day plus the text it came from."""

    raw_input: str = Field(..., description="Original input text")


class TaskDraftRequest(TaskParseRequest):
    """Request to turn typed text into a task ready to store."""

    task_date: date = Field(..., description="Day the task belongs to (YYYY-MM-DD)")


class RecurrenceRequest(BaseModel):
    """Recurrence handed to the expander that creates the dated task rows."""

    recurrence_type: RecurrenceType = Field(..., description="none, daily or weekly")
    days: tuple[DayCode, ...] | None = Field(None, description="Days of the week for weekly tasks")
    end_date: date | None = Field(None, description="Last day to create tasks for")


class TaskDraft(BaseModel):
    """Task record built from parsed text, ready for the task store."""

    title: str = Field(..., description="Task title", min_length=1)
    task_date: date = Field(..., description="Day the task belongs to")
    scheduled_time: time | None = Field(None, description="Time of day, if any")
    is_all_day: bool = Field(True, description="True when the task has no time of day")
    duration_minutes: int = Field(30, ge=1, description="Planned duration in minutes")
    recurrence: RecurrenceRequest | None = Field(
        None, description="Recurrence for the expander, if the text described one"
    )
