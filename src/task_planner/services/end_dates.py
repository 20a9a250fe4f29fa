"""End-date extraction for recurring tasks ("till May 1", "until 6/30/2027")."""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from .title_cleanup import cut_span

logger = logging.getLogger(__name__)

MONTHS_EN = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_MONTH_NUMBERS: dict[str, int] = {
    **{name.lower(): number for number, name in enumerate(MONTHS_EN, start=1)},
    **{name[:3].lower(): number for number, name in enumerate(MONTHS_EN, start=1)},
    "sept": 9,
}

_MONTH_WORD = r"(?:" + "|".join(sorted(_MONTH_NUMBERS, key=len, reverse=True)) + r")\.?"

_DATE_TEXT = (
    r"(?:"
    r"\b" + _MONTH_WORD + r"\s+\d{1,2}(?:st|nd|rd|th)?\b(?:,?\s*\d{4}\b)?"
    r"|\d{4}-\d{1,2}-\d{1,2}\b"
    r"|\d{1,2}/\d{1,2}(?:/\d{2,4})?\b"
    r")"
)

END_DATE_PHRASE = re.compile(
    r"\b(?:till|until|through|thru|ending|ends|end)\s+(?P<date>" + _DATE_TEXT + r")",
    re.IGNORECASE,
)

MONTH_DAY_YEAR = re.compile(
    r"(?P<month>[a-z]+)\.?\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?(?:,?\s*(?P<year>\d{4}))?",
    re.IGNORECASE,
)

_FOUR_DIGIT_YEAR = re.compile(r"\b\d{4}\b")


@dataclass(frozen=True)
class EndDateMatch:
    """An end-date phrase; value is None when the date text did not parse."""

    value: date | None
    start: int
    end: int


def _parse_generic(text: str, today: date) -> date | None:
    try:
        return date_parser.parse(text, default=datetime(today.year, 1, 1)).date()
    except (ValueError, OverflowError) as e:
        logger.debug(f"Generic date parse failed for '{text}': {e}")
        return None


def _parse_month_day(text: str, today: date) -> date | None:
    match = MONTH_DAY_YEAR.search(text)
    if not match:
        return None

    month = _MONTH_NUMBERS.get(match.group("month").lower())
    if month is None:
        return None

    year = int(match.group("year")) if match.group("year") else today.year
    try:
        return date(year, month, int(match.group("day")))
    except ValueError as e:
        logger.debug(f"Month/day parse failed for '{text}': {e}")
        return None


def parse_end_date(text: str, today: date | None = None) -> date | None:
    """
    Turn end-date text into a calendar date.

    When the text carries no four-digit year and the date has already passed
    this year, the following year is assumed.

    Args:
        text: Date text like "May 1", "6/30" or "March 3rd, 2027"
        today: Reference date, defaults to date.today()

    Returns:
        The end date, or None if neither parse succeeds
    """
    today = today or date.today()

    parsed = _parse_generic(text, today) or _parse_month_day(text, today)
    if parsed is None:
        return None

    if not _FOUR_DIGIT_YEAR.search(text) and parsed < today:
        parsed += relativedelta(years=1)

    return parsed


def find_end_date(text: str, today: date | None = None) -> EndDateMatch | None:
    """Find a "till/until/through <date>" phrase in text."""
    match = END_DATE_PHRASE.search(text)
    if not match:
        return None

    return EndDateMatch(
        value=parse_end_date(match.group("date"), today),
        start=match.start(),
        end=match.end(),
    )


def extract_end_date(text: str, today: date | None = None) -> tuple[str, date | None]:
    """
    Remove an end-date phrase from text, returning the remaining text and the date.

    The phrase is removed even when its date does not parse, so "until Feb 30"
    never leaks into the title or later parsing.
    """
    found = find_end_date(text, today)
    if found is None:
        return text, None

    if found.value is None:
        logger.debug(f"Dropped unparsable end date '{text[found.start:found.end]}'")
    return cut_span(text, found.start, found.end), found.value
