"""Rule-based time-of-day extraction from task text."""

import logging
import re
from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import Callable

from .schedule_vocabulary import NAMED_TIMES, NAMED_TIME_PATTERN

logger = logging.getLogger(__name__)

# "pm", "PM", "p.m.", "p.m"; never followed by another word character
_MERIDIEM = r"(?P<meridiem>[ap])\.?m\.?(?!\w)"
_AT = r"(?:\bat\s+|@\s*)"


class RuleKind(str, Enum):
    """Shape of the phrase a rule recognizes."""

    EXPLICIT_HOUR_MINUTE = "explicit_hour_minute"
    EXPLICIT_HOUR = "explicit_hour"
    NAMED_TIME = "named_time"
    RELATIVE_NAMED_TIME = "relative_named_time"


@dataclass(frozen=True)
class TimeRule:
    """A single time-recognition rule."""

    name: str
    kind: RuleKind
    pattern: re.Pattern[str]
    convert: Callable[[re.Match[str]], time | None]


@dataclass(frozen=True)
class TimeMatch:
    """A recognized time phrase and where it sits in the text."""

    value: time
    start: int
    end: int
    rule: str


def to_24_hour(hour: int, meridiem: str) -> int:
    """Convert a 12-hour clock hour to 24-hour form."""
    is_pm = meridiem.lower().startswith("p")
    if is_pm and hour < 12:
        return hour + 12
    if not is_pm and hour == 12:
        return 0
    return hour


def _hour_minute(match: re.Match[str]) -> time | None:
    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    meridiem = match.group("meridiem")

    if not 0 <= minute <= 59:
        return None

    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = to_24_hour(hour, meridiem)
    elif not 0 <= hour <= 23:
        return None

    return time(hour, minute)


def _hour(match: re.Match[str]) -> time | None:
    hour = int(match.group("hour"))
    if not 1 <= hour <= 12:
        return None
    return time(to_24_hour(hour, match.group("meridiem")), 0)


def _named(match: re.Match[str]) -> time | None:
    name = re.sub(r"\s+", " ", match.group("name").lower())
    return NAMED_TIMES.get(name)


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


# --- Time Rules (most specific first) ---

TIME_RULES: tuple[TimeRule, ...] = (
    # "at 2:30 pm", "at 14:30", "@ 9:15am"
    TimeRule(
        name="at_hour_minute",
        kind=RuleKind.EXPLICIT_HOUR_MINUTE,
        pattern=_compile(
            _AT + r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?:\s*" + _MERIDIEM + r"|\b)"
        ),
        convert=_hour_minute,
    ),
    # "at 3 pm", "at 3pm"
    TimeRule(
        name="at_hour",
        kind=RuleKind.EXPLICIT_HOUR,
        pattern=_compile(_AT + r"(?P<hour>\d{1,2})\s*" + _MERIDIEM),
        convert=_hour,
    ),
    # "at noon", "@ lunch", "at end of day"
    TimeRule(
        name="at_named_time",
        kind=RuleKind.NAMED_TIME,
        pattern=_compile(_AT + r"(?P<name>" + NAMED_TIME_PATTERN + r")\b"),
        convert=_named,
    ),
    # "2:30 pm" without "at" needs the meridiem
    TimeRule(
        name="hour_minute",
        kind=RuleKind.EXPLICIT_HOUR_MINUTE,
        pattern=_compile(r"\b(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*" + _MERIDIEM),
        convert=_hour_minute,
    ),
    # "3pm", "3 pm"
    TimeRule(
        name="hour",
        kind=RuleKind.EXPLICIT_HOUR,
        pattern=_compile(r"\b(?P<hour>\d{1,2})\s*" + _MERIDIEM),
        convert=_hour,
    ),
    # "by noon", "before lunch", "after dinner"
    TimeRule(
        name="relative_named_time",
        kind=RuleKind.RELATIVE_NAMED_TIME,
        pattern=_compile(
            r"\b(?:by|before|around|after)\s+(?P<name>" + NAMED_TIME_PATTERN + r")\b"
        ),
        convert=_named,
    ),
)


def match_time_expression(text: str) -> TimeMatch | None:
    """
    Find the most specific time phrase in text.

    Rules are tried in priority order and only the first match of each rule
    is considered. A match whose numbers are out of range is rejected and
    the next rule is tried.

    Args:
        text: Task text like "Call mom at 2:30 pm"

    Returns:
        TimeMatch with the time of day and the phrase span, or None
    """
    for rule in TIME_RULES:
        match = rule.pattern.search(text)
        if not match:
            continue

        value = rule.convert(match)
        if value is None:
            logger.debug(f"Rejected out-of-range time '{match.group(0)}' ({rule.name})")
            continue

        return TimeMatch(value=value, start=match.start(), end=match.end(), rule=rule.name)

    return None
