"""Helpers for cutting matched phrases out of task text."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")

# Left behind at the edges once a phrase is cut out, e.g. "Call mom - at 3pm"
EDGE_CHARACTERS = " -,;"


def cut_span(text: str, start: int, end: int) -> str:
    """Remove text[start:end], keeping a space where the phrase was."""
    return f"{text[:start]} {text[end:]}"


def tidy_title(text: str) -> str:
    """Collapse whitespace and trim stray separators from both ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip(EDGE_CHARACTERS)


def tidy_or_fallback(text: str, original: str) -> str:
    """
    Tidy text, falling back to the original input if nothing is left.

    A title that was nothing but a schedule phrase ("3pm") keeps its text
    rather than becoming empty.
    """
    cleaned = tidy_title(text)
    if not cleaned.strip():
        return original.strip()
    return cleaned
