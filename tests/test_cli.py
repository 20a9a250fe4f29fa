"""Tests for the command line interface."""

from typer.testing import CliRunner

from src.task_planner.cli import app

runner = CliRunner()


def test_parse_command_prints_schedule() -> None:
    """Test parse prints the extracted fields."""
    result = runner.invoke(app, ["parse", "staff meeting TTh 10am", "--today", "2026-10-17"])

    assert result.exit_code == 0
    assert "staff meeting" in result.output
    assert "10:00" in result.output
    assert "Tue, Thu" in result.output
    assert "weekly" in result.output


def test_parse_command_rejects_bad_today() -> None:
    """Test a malformed --today exits with an error."""
    result = runner.invoke(app, ["parse", "Buy milk", "--today", "tomorrow"])

    assert result.exit_code == 1
    assert "Invalid --today" in result.output


def test_time_command() -> None:
    """Test time prints the title and time."""
    result = runner.invoke(app, ["time", "Submit report 3pm"])

    assert result.exit_code == 0
    assert "Submit report" in result.output
    assert "15:00" in result.output


def test_time_command_without_time() -> None:
    """Test time reports when nothing was found."""
    result = runner.invoke(app, ["time", "Buy milk"])

    assert result.exit_code == 0
    assert "No time found" in result.output


def test_draft_command() -> None:
    """Test draft prints the task record."""
    result = runner.invoke(
        app,
        ["draft", "teach 333 MW 3:00 pm till May 1", "--date", "2026-10-19", "--today", "2026-10-17"],
    )

    assert result.exit_code == 0
    assert "teach 333" in result.output
    assert "15:00 (30 min)" in result.output
    assert "Mon, Wed" in result.output
    assert "2027-05-01" in result.output


def test_draft_command_all_day() -> None:
    """Test draft shows all-day tasks."""
    result = runner.invoke(app, ["draft", "Buy milk", "--date", "2026-10-19"])

    assert result.exit_code == 0
    assert "all day" in result.output
