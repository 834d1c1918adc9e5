"""Data models for the terminal task list.

Exposes the Task dataclass and the priority codes. A task's position is a
display-only row number: it is rewritten from list order on every save and
is never used for lookups.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date as calendar_date, time as clock_time
from typing import Any, Dict, List, Mapping, Tuple

LINE_WIDTH = 44

PRIORITIES: Dict[str, str] = {
    'C': 'Critical',
    'H': 'High',
    'N': 'Normal',
    'L': 'Low',
}

@dataclass
class Task:
    """A single task.

    Fields:
        position: 1-based row number at the time of the last save/add.
        priority: One of the codes "C", "H", "N", "L".
        date: (year, month, day), validated when entered.
        time: (hour, minute), 24-hour clock.
        lines: Body chunks, each exactly LINE_WIDTH characters wide.
    """
    position: int
    priority: str
    date: Tuple[int, int, int]
    time: Tuple[int, int]
    lines: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.position,
            'priority': self.priority,
            'date': list(self.date),
            'time': list(self.time),
            'tasks': list(self.lines),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a Task from its persisted form.

        Raises KeyError/TypeError/ValueError on a record of the wrong shape;
        the storage layer turns those into a TaskFileError.
        """
        priority = raw['priority']
        if priority not in PRIORITIES:
            raise ValueError(f'unknown priority {priority!r}')
        date = _int_parts(raw['date'], 3, 'date')
        time = _int_parts(raw['time'], 2, 'time')
        calendar_date(*date)
        clock_time(*time)
        lines = raw['tasks']
        if not isinstance(lines, list) or not lines:
            raise ValueError('tasks must be a non-empty list')
        if not all(isinstance(s, str) and len(s) == LINE_WIDTH for s in lines):
            raise ValueError(f'every task line must be a {LINE_WIDTH}-character string')
        position = raw.get('id', 0)
        return cls(
            position=position if isinstance(position, int) else 0,
            priority=priority,
            date=date,  # type: ignore[arg-type]
            time=time,  # type: ignore[arg-type]
            lines=list(lines),
        )

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(position={self.position}, priority={self.priority}, date={self.date})"


def _int_parts(value: Any, count: int, name: str) -> Tuple[int, ...]:
    # bool is an int subclass; JSON true/false is not a number here
    if not isinstance(value, list) or len(value) != count or not all(type(x) is int for x in value):
        raise ValueError(f'{name} must be a list of {count} integers')
    return tuple(value)
