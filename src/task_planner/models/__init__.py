"""Pydantic models for parse results and request/response schemas."""

from .schedule import DayCode, RecurrenceType, ScheduleParseResult, TimeParseResult
from .task import (
    RecurrenceRequest,
    ScheduleParseResponse,
    TaskDraft,
    TaskDraftRequest,
    TaskParseRequest,
    TimeParseRequest,
    TimeParseResponse,
)

__all__ = [
    "DayCode",
    "RecurrenceType",
    "ScheduleParseResult",
    "TimeParseResult",
    "TaskParseRequest",
    "TimeParseRequest",
    "TaskDraftRequest",
    "ScheduleParseResponse",
    "TimeParseResponse",
    "RecurrenceRequest",
    "TaskDraft",
]
