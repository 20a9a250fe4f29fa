"""Build storable task drafts from typed task text."""

import logging
from datetime import date

from ..config import settings
from ..models.schedule import ScheduleParseResult
from ..models.task import RecurrenceRequest, TaskDraft
from .schedule_parser import parse_schedule

logger = logging.getLogger(__name__)


def _recurrence_request(parsed: ScheduleParseResult) -> RecurrenceRequest | None:
    if not parsed.is_recurring:
        return None
    return RecurrenceRequest(
        recurrence_type=parsed.recurrence_type,
        days=parsed.recurrence_days,
        end_date=parsed.recurrence_end_date,
    )


def build_task_draft(text: str, task_date: date, today: date | None = None) -> TaskDraft:
    """
    Turn typed task text into a task record.

    The cleaned title becomes the stored title. A recognized time makes the
    task timed rather than all-day. Any recurrence is attached for the
    expander, which creates the dated rows; nothing is expanded here.

    Args:
        text: Raw task text like "staff meeting TTh 10am"
        task_date: Day the task belongs to
        today: Reference date for end-date year inference

    Returns:
        TaskDraft ready for the task store
    """
    parsed = parse_schedule(text, today)
    title = parsed.cleaned_title.strip()[: settings.max_title_length]

    draft = TaskDraft(
        title=title,
        task_date=task_date,
        scheduled_time=parsed.scheduled_time,
        is_all_day=parsed.scheduled_time is None,
        duration_minutes=settings.default_duration_minutes,
        recurrence=_recurrence_request(parsed),
    )

    logger.info(
        f"Task draft '{draft.title}' on {draft.task_date}: "
        f"{'all day' if draft.is_all_day else draft.scheduled_time}, "
        f"recurrence={parsed.recurrence_type.value}"
    )
    return draft
