"""Task list logic: ordered tasks, row-number management, and table rendering.

Row numbers are positions in the list, not stable ids: deleting a task
shifts every later task up by one.
"""
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Iterator, List, Optional

from models import LINE_WIDTH, Task
from theme import colors_enabled, due_tag, priority_tag

logger = logging.getLogger(__name__)

# "Today" for due tags is taken in a fixed UTC+2 zone, not the local one.
DUE_TZ = timezone(timedelta(hours=2))

BORDER = "+----+------------+-------+---+---+" + "-" * LINE_WIDTH + "+"
HEADER = (
    BORDER,
    "| N  |    Date    | Time  | P | D |                   Task                     |",
    BORDER,
)
CONTINUATION = "|    |            |       |   |   |"
EMPTY_MESSAGE = "No tasks have been input"


def today_in_due_tz(now: Optional[datetime] = None) -> date:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(DUE_TZ).date()


def due_status(task_date: date, today: date) -> str:
    """Classify a date against today: "overdue", "today" or "upcoming"."""
    days = (task_date - today).days
    if days < 0:
        return 'overdue'
    if days > 0:
        return 'upcoming'
    return 'today'


def render_rows(tasks: Iterable[Task], today: date, use_color: bool = True) -> List[str]:
    """Format tasks as table lines (header included); [] for no tasks."""
    tasks = list(tasks)
    if not tasks:
        return []
    rows: List[str] = list(HEADER)
    for idx, task in enumerate(tasks):
        year, month, day = task.date
        hour, minute = task.time
        p_tag = priority_tag(task.priority, use_color)
        d_tag = due_tag(due_status(date(year, month, day), today), use_color)
        first, *rest = task.lines or [' ' * LINE_WIDTH]
        rows.append(
            f"| {idx + 1:<2} | {year:04d}-{month:02d}-{day:02d} | {hour:02d}:{minute:02d} "
            f"| {p_tag} | {d_tag} |{first}|"
        )
        for line in rest:
            rows.append(f"{CONTINUATION}{line}|")
        rows.append(BORDER)
    return rows


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []
        self.renumber_sequential()

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    # -------------------- row numbers --------------------
    def renumber_sequential(self) -> None:
        """Rewrite every task's position as its 1-based row number."""
        for position, task in enumerate(self.tasks, start=1):
            task.position = position

    # -------------------- task operations --------------------
    def add_task(self, task: Task) -> None:
        self.tasks.append(task)
        task.position = len(self.tasks)
        logger.info("Added task %d (priority %s)", task.position, task.priority)

    def remove_task(self, index: int) -> Task:
        """Remove by zero-based index; later tasks move up one row."""
        task = self.tasks.pop(index)
        self.renumber_sequential()
        logger.info("Deleted task %d", index + 1)
        return task

    # -------------------- serialization --------------------
    def get_tasks(self) -> List[dict]:
        self.renumber_sequential()
        return [task.to_dict() for task in self.tasks]

    # -------------------- display --------------------
    def display(self, today: Optional[date] = None, use_color: Optional[bool] = None) -> None:
        if not self.tasks:
            print(EMPTY_MESSAGE)
            return
        today = today or today_in_due_tz()
        if use_color is None:
            use_color = colors_enabled()
        for row in render_rows(self.tasks, today, use_color):
            print(row)

    def __str__(self) -> str:
        return f'{len(self.tasks)} tasks'
