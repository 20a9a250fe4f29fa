"""Schedule parsing services."""

from .schedule_parser import parse_schedule, parse_time
from .task_drafts import build_task_draft

__all__ = [
    "parse_schedule",
    "parse_time",
    "build_task_draft",
]
