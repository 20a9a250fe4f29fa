"""Natural-language schedule parsing for task titles."""

import logging
import re
from datetime import date

from ..models.schedule import RecurrenceType, ScheduleParseResult, TimeParseResult
from .day_patterns import extract_weekdays
from .end_dates import extract_end_date
from .time_expressions import match_time_expression
from .title_cleanup import cut_span, tidy_or_fallback

logger = logging.getLogger(__name__)

DAILY_PHRASE = re.compile(r"\b(?:every\s*day|daily)\b", re.IGNORECASE)


def extract_daily(text: str) -> tuple[str, bool]:
    """Remove an "every day"/"daily" keyword, returning the remaining text and whether one was found."""
    match = DAILY_PHRASE.search(text)
    if not match:
        return text, False
    return cut_span(text, match.start(), match.end()), True


def parse_time(text: str) -> TimeParseResult:
    """
    Extract a time of day from task text, without looking for recurrence.

    Args:
        text: Task text like "Submit report 3pm"

    Returns:
        TimeParseResult with the cleaned title and the time, if any
    """
    if not text or not text.strip():
        return TimeParseResult(cleaned_title=text)

    found = match_time_expression(text)
    if found is None:
        return TimeParseResult(cleaned_title=text.strip())

    logger.debug(f"Time '{text[found.start:found.end]}' -> {found.value} ({found.rule})")
    return TimeParseResult(
        cleaned_title=tidy_or_fallback(cut_span(text, found.start, found.end), text),
        scheduled_time=found.value,
    )


def parse_schedule(text: str, today: date | None = None) -> ScheduleParseResult:
    """
    Split task text into a clean title, a time of day and a recurrence.

    Phases run in a fixed order, each cutting its phrase out before the next:
    1. End date ("till May 1") so month names are gone before day matching
    2. Daily keyword ("daily", "every day")
    3. Weekday pattern ("MWF", "Tue and Thu"), skipped when daily matched
    4. Time of day ("3:00 pm", "at noon") over whatever is left

    Never raises: anything unrecognized is left in the title.

    Args:
        text: Task text like "teach 333 MW 3:00 pm till May 1"
        today: Reference date for end-date year inference, defaults to date.today()

    Returns:
        ScheduleParseResult with title, time and recurrence fields
    """
    if not text or not text.strip():
        return ScheduleParseResult(cleaned_title=text)

    remaining, end_date = extract_end_date(text, today)

    recurrence_type = RecurrenceType.NONE
    recurrence_days = None

    remaining, is_daily = extract_daily(remaining)
    if is_daily:
        recurrence_type = RecurrenceType.DAILY
    else:
        remaining, recurrence_days = extract_weekdays(remaining)
        if recurrence_days:
            recurrence_type = RecurrenceType.WEEKLY

    scheduled_time = None
    found = match_time_expression(remaining)
    if found is not None:
        scheduled_time = found.value
        remaining = cut_span(remaining, found.start, found.end)

    # Nothing cut out: the title is the input as typed, only trimmed
    cleaned_title = text.strip() if remaining == text else tidy_or_fallback(remaining, text)

    result = ScheduleParseResult(
        cleaned_title=cleaned_title,
        scheduled_time=scheduled_time,
        recurrence_type=recurrence_type,
        recurrence_days=recurrence_days,
        recurrence_end_date=end_date,
    )
    logger.debug(
        f"Parsed '{text}' -> title='{result.cleaned_title}' time={result.scheduled_time} "
        f"recurrence={result.recurrence_type.value} days={result.recurrence_days} "
        f"until={result.recurrence_end_date}"
    )
    return result
