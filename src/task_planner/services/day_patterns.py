"""Weekday pattern recognition ("MWF", "TTh", "every Monday and Wednesday")."""

import logging
import re
from dataclasses import dataclass

from ..models.schedule import DayCode
from .schedule_vocabulary import DAY_ABBREVIATIONS, LONGEST_DAY_SPELLING
from .title_cleanup import cut_span

logger = logging.getLogger(__name__)

_FULL_NAME = r"(?i:monday|tuesday|wednesday|thursday|friday|saturday|sunday)s?"
_SHORT_NAME = r"Mon|Tues?|Weds?|Thu(?:rs?)?|Fri|Sat|Sun"

# Inside a run of two or more days every spelling is accepted in any case
_ANY_DAY = r"\b(?:" + _FULL_NAME + r"|(?i:" + _SHORT_NAME + r"))\b\.?"

# A day on its own: short forms in title or upper case, and lowercase only for
# the ones that are not also English words ("sat", "sun", "wed" stay words).
_LONE_DAY = (
    r"\b(?:"
    + _FULL_NAME
    + r"|" + _SHORT_NAME
    + r"|" + _SHORT_NAME.upper()
    + r"|mon|tues?|thu(?:rs?)?|fri"
    + r")\b\.?"
)
_DAY_SEPARATOR = r"(?:\s*[,/&]\s*|\s+)(?:(?i:and)\s+)?"

SEPARATED_DAYS = re.compile(
    r"(?:\b(?i:every|on)\s+)?"
    r"(?:" + _ANY_DAY + r"(?:" + _DAY_SEPARATOR + _ANY_DAY + r")+|" + _LONE_DAY + r")"
)

# Registrar-style runs: "MWF", "TTh", "MTWRF", "SaSu", "MoWe". Case-sensitive
# and at least two characters long so "US" or a lone "M" are not read as days;
# a lone "We", "Mo" or "Fr" is a word, not a day.
CONCATENATED_DAYS = re.compile(
    r"\b(?=\w{2})(?!(?:We|Mo|Fr)\b)(?:Th|TH|Tu|Mo|We|Fr|Sa|Su|M|T|W|R|F)+\b"
)

_TOKEN_SEPARATORS = re.compile(r"[\s,/&.]+")


@dataclass(frozen=True)
class DayPatternMatch:
    """A recognized run of weekday tokens and where it sits in the text."""

    days: list[DayCode]
    start: int
    end: int
    shape: str


def _lookup(token: str) -> DayCode | None:
    key = token.lower()
    code = DAY_ABBREVIATIONS.get(key)
    if code is None and len(key) > 3 and key.endswith("s"):
        code = DAY_ABBREVIATIONS.get(key[:-1])
    return code


def tokenize_concatenated(token: str) -> list[DayCode]:
    """
    Split a run of abbreviations with no spaces into day codes.

    Scans left to right trying the longest spelling first, so "TTh" reads
    as Tuesday, Thursday rather than Tuesday, Tuesday. Characters that start
    no spelling are skipped.
    """
    days: list[DayCode] = []
    position = 0

    while position < len(token):
        longest = min(LONGEST_DAY_SPELLING, len(token) - position)
        for length in range(longest, 0, -1):
            code = DAY_ABBREVIATIONS.get(token[position:position + length].lower())
            if code is not None:
                if code not in days:
                    days.append(code)
                position += length
                break
        else:
            position += 1

    return days


def tokenize_separated(text: str) -> list[DayCode]:
    """Look up each whitespace/comma separated token, skipping unknown words."""
    days: list[DayCode] = []
    for token in _TOKEN_SEPARATORS.split(text):
        if not token:
            continue
        code = _lookup(token)
        if code is not None and code not in days:
            days.append(code)
    return days


def find_day_pattern(text: str) -> DayPatternMatch | None:
    """
    Find a run of weekday tokens in text.

    Separated names ("Monday, Wednesday") are tried before concatenated
    abbreviations ("MW"). A run only counts if at least one day is
    recognized.

    Returns:
        DayPatternMatch with ordered, de-duplicated days, or None
    """
    match = SEPARATED_DAYS.search(text)
    if match:
        days = tokenize_separated(match.group(0))
        if days:
            return DayPatternMatch(days=days, start=match.start(), end=match.end(), shape="separated")

    match = CONCATENATED_DAYS.search(text)
    if match:
        days = tokenize_concatenated(match.group(0))
        if days:
            return DayPatternMatch(
                days=days, start=match.start(), end=match.end(), shape="concatenated"
            )

    return None


def extract_weekdays(text: str) -> tuple[str, list[DayCode] | None]:
    """Remove a weekday run from text, returning the remaining text and its days."""
    found = find_day_pattern(text)
    if found is None:
        return text, None

    logger.debug(f"Weekly pattern '{text[found.start:found.end]}' -> {[d.value for d in found.days]}")
    return cut_span(text, found.start, found.end), found.days
