"""Input parsing and the re-prompting read loops built on top of it.

The parse_* helpers are pure and return None on bad input; the read_*
helpers print a prompt, read from stdin and keep asking until the parser
accepts the answer.
"""
from datetime import date, datetime
from typing import List, Optional, Tuple

from models import LINE_WIDTH, PRIORITIES

# Any valid calendar day works; only the hour/minute are checked against it.
_TIME_REFERENCE_DATE = date(2020, 1, 1)


def _number(part: str) -> int:
    """Plain ASCII digits only: no sign, spaces or underscores."""
    if not (part.isascii() and part.isdigit()):
        raise ValueError(f'not a number: {part!r}')
    return int(part)


def parse_priority(raw: str) -> Optional[str]:
    code = raw.strip().upper()
    return code if code in PRIORITIES else None


def parse_date(raw: str) -> Optional[Tuple[int, int, int]]:
    parts = raw.strip().split('-')
    if len(parts) != 3:
        return None
    try:
        year, month, day = (_number(p) for p in parts)
        date(year, month, day)
    except ValueError:
        return None
    return year, month, day


def parse_time(raw: str) -> Optional[Tuple[int, int]]:
    parts = raw.strip().split(':')
    if len(parts) != 2:
        return None
    try:
        hour, minute = (_number(p) for p in parts)
        datetime(_TIME_REFERENCE_DATE.year, _TIME_REFERENCE_DATE.month,
                 _TIME_REFERENCE_DATE.day, hour, minute)
    except ValueError:
        return None
    return hour, minute


def wrap_body_line(text: str) -> List[str]:
    """Split one body line into LINE_WIDTH chunks, each padded to full width."""
    text = text.strip()
    return [text[i:i + LINE_WIDTH].ljust(LINE_WIDTH) for i in range(0, len(text), LINE_WIDTH)]


# -------------------- interactive readers --------------------
def read_priority() -> str:
    while True:
        print("Input the task priority (C, H, N, L):")
        code = parse_priority(input())
        if code is not None:
            return code


def read_date() -> Tuple[int, int, int]:
    while True:
        print("Input the date (yyyy-mm-dd):")
        value = parse_date(input())
        if value is not None:
            return value
        print("The input date is invalid")


def read_time() -> Tuple[int, int]:
    while True:
        print("Input the time (hh:mm):")
        value = parse_time(input())
        if value is not None:
            return value
        print("The input time is invalid")


def read_task_body() -> List[str]:
    """Read body lines until a blank one; an empty result means a blank task."""
    print("Input a new task (enter a blank line to end):")
    lines: List[str] = []
    while True:
        chunks = wrap_body_line(input())
        if not chunks:
            if not lines:
                print("The task is blank")
            return lines
        lines.extend(chunks)
