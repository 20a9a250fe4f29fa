"""Fixed vocabularies for schedule parsing: named times and weekday spellings."""

from datetime import time
from types import MappingProxyType

from ..models.schedule import DayCode

# Word -> time of day. Keys are lowercase; "end of day" is the only multi-word entry.
NAMED_TIMES: MappingProxyType[str, time] = MappingProxyType({
    "midnight": time(0, 0),
    "dawn": time(6, 0),
    "sunrise": time(6, 30),
    "morning": time(9, 0),
    "noon": time(12, 0),
    "midday": time(12, 0),
    "afternoon": time(14, 0),
    "evening": time(18, 0),
    "sunset": time(18, 30),
    "dusk": time(18, 30),
    "night": time(20, 0),
    "eod": time(17, 0),
    "end of day": time(17, 0),
    "cob": time(17, 0),
    "lunchtime": time(12, 0),
    "lunch": time(12, 0),
    "dinnertime": time(18, 0),
    "dinner": time(18, 0),
    "breakfast": time(8, 0),
})

# Every accepted weekday spelling (lowercase) -> canonical code.
DAY_ABBREVIATIONS: MappingProxyType[str, DayCode] = MappingProxyType({
    # Monday
    "m": DayCode.MON,
    "mo": DayCode.MON,
    "mon": DayCode.MON,
    "monday": DayCode.MON,
    # Tuesday
    "t": DayCode.TUE,
    "tu": DayCode.TUE,
    "tue": DayCode.TUE,
    "tues": DayCode.TUE,
    "tuesday": DayCode.TUE,
    # Wednesday
    "w": DayCode.WED,
    "we": DayCode.WED,
    "wed": DayCode.WED,
    "weds": DayCode.WED,
    "wednesday": DayCode.WED,
    # Thursday ("r" is the registrar-style single letter)
    "r": DayCode.THU,
    "th": DayCode.THU,
    "thu": DayCode.THU,
    "thur": DayCode.THU,
    "thurs": DayCode.THU,
    "thursday": DayCode.THU,
    # Friday
    "f": DayCode.FRI,
    "fr": DayCode.FRI,
    "fri": DayCode.FRI,
    "friday": DayCode.FRI,
    # Saturday
    "s": DayCode.SAT,
    "sa": DayCode.SAT,
    "sat": DayCode.SAT,
    "saturday": DayCode.SAT,
    # Sunday
    "u": DayCode.SUN,
    "su": DayCode.SUN,
    "sun": DayCode.SUN,
    "sunday": DayCode.SUN,
})

LONGEST_DAY_SPELLING = max(len(key) for key in DAY_ABBREVIATIONS)

NAMED_TIME_PATTERN = "|".join(
    name.replace(" ", r"\s+") for name in sorted(NAMED_TIMES, key=len, reverse=True)
)
