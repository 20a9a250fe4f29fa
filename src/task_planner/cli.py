"""CLI for trying the task text parser."""

import logging
from datetime import date

import typer
from rich.console import Console
from rich.table import Table

from .models.schedule import ScheduleParseResult
from .services.schedule_parser import parse_schedule, parse_time
from .services.task_drafts import build_task_draft

app = typer.Typer(help="Task planner schedule parsing CLI")
console = Console()


def _parse_date_option(value: str | None, option: str) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        console.print(f"[red]Invalid {option}: {value} (expected YYYY-MM-DD)[/red]")
        raise typer.Exit(1)


def _schedule_table(text: str, parsed: ScheduleParseResult) -> Table:
    table = Table(title=f"Parsed: {text}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    days = ", ".join(day.value for day in parsed.recurrence_days or [])
    table.add_row("Title", f"[bold]{parsed.cleaned_title}[/bold]")
    table.add_row("Time", parsed.scheduled_time.strftime("%H:%M") if parsed.scheduled_time else "-")
    table.add_row("Recurrence", f"[green]{parsed.recurrence_type.value}[/green]")
    table.add_row("Days", days or "-")
    table.add_row("Until", str(parsed.recurrence_end_date) if parsed.recurrence_end_date else "-")
    return table


@app.command()
def parse(
    text: str,
    today: str = typer.Option(None, "--today", "-t", help="Reference date (YYYY-MM-DD)"),
):
    """Parse title, time and recurrence out of task text."""
    reference = _parse_date_option(today, "--today")
    console.print(_schedule_table(text, parse_schedule(text, reference)))


@app.command()
def time(text: str):
    """Parse only the time of day out of task text."""
    parsed = parse_time(text)

    if parsed.scheduled_time is None:
        console.print(f"[yellow]No time found[/yellow] in: {parsed.cleaned_title}")
        return

    console.print(f"  Title: [bold]{parsed.cleaned_title}[/bold]")
    console.print(f"  Time: [cyan]{parsed.scheduled_time.strftime('%H:%M')}[/cyan]")


@app.command()
def draft(
    text: str,
    task_date: str = typer.Option(..., "--date", "-d", help="Task date (YYYY-MM-DD)"),
    today: str = typer.Option(None, "--today", "-t", help="Reference date (YYYY-MM-DD)"),
):
    """Show the task record that would be stored for task text."""
    day = _parse_date_option(task_date, "--date")
    reference = _parse_date_option(today, "--today")

    if not text.strip():
        console.print("[red]Task text must not be blank[/red]")
        raise typer.Exit(1)

    task = build_task_draft(text, day, reference)

    console.print(f"\n[bold]{task.title}[/bold]")
    console.print(f"  Date: {task.task_date}")
    if task.is_all_day:
        console.print("  Time: all day")
    else:
        console.print(f"  Time: {task.scheduled_time.strftime('%H:%M')} ({task.duration_minutes} min)")
    if task.recurrence:
        days = ", ".join(code.value for code in task.recurrence.days or [])
        console.print(f"  Recurrence: [green]{task.recurrence.recurrence_type.value}[/green]")
        if days:
            console.print(f"  Days: {days}")
        if task.recurrence.end_date:
            console.print(f"  Until: {task.recurrence.end_date}")


def main():
    """Entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app()


if __name__ == "__main__":
    main()
