"""Tests for time-of-day extraction."""

from datetime import time

import pytest

from src.task_planner.services.schedule_parser import parse_time
from src.task_planner.services.time_expressions import match_time_expression, to_24_hour


def test_at_hour_minute_with_meridiem() -> None:
    """Test 'at 2:30 pm' is read as 14:30 and removed from the title."""
    result = parse_time("Call mom at 2:30 pm")
    assert result.scheduled_time == time(14, 30)
    assert result.cleaned_title == "Call mom"


def test_bare_hour_with_meridiem() -> None:
    """Test '3pm' without a preposition is recognized."""
    result = parse_time("Submit report 3pm")
    assert result.scheduled_time == time(15, 0)
    assert result.cleaned_title == "Submit report"


def test_at_hour_minute_is_24_hour_without_meridiem() -> None:
    """Test 'at 14:30' is read on the 24-hour clock."""
    result = parse_time("at 14:30 standup")
    assert result.scheduled_time == time(14, 30)
    assert result.cleaned_title == "standup"


def test_at_sign_counts_as_preposition() -> None:
    """Test '@ 9:15am' works like 'at 9:15am'."""
    result = parse_time("Call @ 9:15am")
    assert result.scheduled_time == time(9, 15)
    assert result.cleaned_title == "Call"


def test_dotted_meridiem() -> None:
    """Test 'p.m.' is accepted as a meridiem."""
    result = parse_time("Pick up kids 3 p.m.")
    assert result.scheduled_time == time(15, 0)
    assert result.cleaned_title == "Pick up kids"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Lunch with Sam at noon", time(12, 0)),
        ("Walk at lunchtime", time(12, 0)),
        ("Stretch at dawn", time(6, 0)),
        ("Finish draft by eod", time(17, 0)),
        ("Send notes by EOD", time(17, 0)),
        ("Wrap up before end of day", time(17, 0)),
        ("Read after dinner", time(18, 0)),
        ("Photos around sunset", time(18, 30)),
        ("Pay bills at midnight", time(0, 0)),
    ],
)
def test_named_times(text: str, expected: time) -> None:
    """Test named times with a leading preposition."""
    assert parse_time(text).scheduled_time == expected


def test_named_time_needs_preposition() -> None:
    """Test a bare named time word stays in the title."""
    result = parse_time("Lunch with Sam")
    assert result.scheduled_time is None
    assert result.cleaned_title == "Lunch with Sam"


def test_at_rules_beat_bare_times() -> None:
    """Test an 'at' phrase wins over an earlier bare time."""
    result = parse_time("Prep 3pm call at 4pm")
    assert result.scheduled_time == time(16, 0)
    assert result.cleaned_title == "Prep 3pm call"


def test_twelve_am_is_midnight() -> None:
    """Test 12 am converts to hour 0."""
    assert parse_time("Meeting at 12 am").scheduled_time == time(0, 0)


def test_twelve_pm_is_noon() -> None:
    """Test 12:15 pm stays in hour 12."""
    assert parse_time("Gym at 12:15 pm").scheduled_time == time(12, 15)


def test_zero_hour_on_24_hour_clock() -> None:
    """Test 'at 0:30' is a valid 24-hour time."""
    assert parse_time("Backup at 0:30").scheduled_time == time(0, 30)


@pytest.mark.parametrize("text", ["at 13 pm", "at 9:75", "Review 13:00 pm", "at 24:00"])
def test_out_of_range_times_never_match(text: str) -> None:
    """Test out-of-range hours and minutes are rejected."""
    assert match_time_expression(text) is None

    result = parse_time(text)
    assert result.scheduled_time is None
    assert result.cleaned_title == text


def test_title_that_is_only_a_time_is_kept() -> None:
    """Test a title made of just a time phrase does not become empty."""
    result = parse_time("3pm")
    assert result.scheduled_time == time(15, 0)
    assert result.cleaned_title == "3pm"


def test_leftover_separators_are_trimmed() -> None:
    """Test a dangling dash is trimmed after removing the time."""
    assert parse_time("Report - 5pm").cleaned_title == "Report"


def test_no_time_returns_trimmed_input() -> None:
    """Test text without a time comes back trimmed and untimed."""
    result = parse_time("  Buy milk  ")
    assert result.scheduled_time is None
    assert result.cleaned_title == "Buy milk"


def test_blank_input_is_returned_unchanged() -> None:
    """Test whitespace-only input short-circuits."""
    result = parse_time("   ")
    assert result.cleaned_title == "   "
    assert result.scheduled_time is None


def test_match_reports_span_and_rule() -> None:
    """Test the match carries the phrase span and the rule that found it."""
    text = "Call mom at 2:30 pm"
    found = match_time_expression(text)
    assert found is not None
    assert text[found.start:found.end] == "at 2:30 pm"
    assert found.rule == "at_hour_minute"


def test_parse_time_leaves_recurrence_words_alone() -> None:
    """Test the time-only entry point does not touch days or end dates."""
    result = parse_time("teach MW 3pm till May 1")
    assert result.scheduled_time == time(15, 0)
    assert result.cleaned_title == "teach MW till May 1"


@pytest.mark.parametrize(
    "hour,meridiem,expected",
    [(1, "pm", 13), (11, "pm", 23), (12, "pm", 12), (12, "am", 0), (7, "am", 7), (5, "P", 17)],
)
def test_to_24_hour(hour: int, meridiem: str, expected: int) -> None:
    """Test 12-hour to 24-hour conversion."""
    assert to_24_hour(hour, meridiem) == expected
