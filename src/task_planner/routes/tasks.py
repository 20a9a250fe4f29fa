"""Task text parsing endpoints."""

from fastapi import APIRouter, HTTPException

from ..models.task import (
    ScheduleParseResponse,
    TaskDraft,
    TaskDraftRequest,
    TaskParseRequest,
    TimeParseRequest,
    TimeParseResponse,
)
from ..services.schedule_parser import parse_schedule, parse_time
from ..services.task_drafts import build_task_draft

router = APIRouter(tags=["tasks"])


@router.post("/parse", response_model=ScheduleParseResponse)
async def parse_task(request: TaskParseRequest) -> ScheduleParseResponse:
    """
    Parse typed task text into title, time of day and recurrence.

    Recognizes:
    - Times: "at 2:30 pm", "3pm", "at noon", "by eod"
    - Daily tasks: "daily", "every day"
    - Weekly days: "MWF", "TTh", "Monday and Wednesday"
    - End dates: "till May 1", "until 6/30/2027"

    Example input: "teach 333 MW 3:00 pm till May 1"
    """
    parsed = parse_schedule(request.text, request.today)
    return ScheduleParseResponse(**parsed.model_dump(), raw_input=request.text)


@router.post("/parse-time", response_model=TimeParseResponse)
async def parse_task_time(request: TimeParseRequest) -> TimeParseResponse:
    """
    Parse only the time of day out of task text.

    Day names and end dates are left in the title.
    """
    parsed = parse_time(request.text)
    return TimeParseResponse(**parsed.model_dump(), raw_input=request.text)


@router.post("/draft", response_model=TaskDraft)
async def draft_task(request: TaskDraftRequest) -> TaskDraft:
    """
    Turn typed text into a task record for the given day.

    A recognized time makes the task timed instead of all-day. A recognized
    recurrence is attached for the expander; no extra tasks are created here.
    """
    if not request.text.strip():
        raise HTTPException(status_code=422, detail="Task text must not be blank")

    return build_task_draft(request.text, request.task_date, request.today)
