"""Command-line interface loop for the task list.

One action per prompt: add, print, edit, delete, end. Every bad answer is
reported and asked again; nothing short of "end" (or end of input) leaves
the loop.
"""
import logging
from datetime import date
from typing import Callable, List, Optional

from models import Task
from storage import Storage
from tasklist import TaskList, today_in_due_tz
from validators import read_date, read_priority, read_task_body, read_time

logger = logging.getLogger(__name__)

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"
EXIT_MESSAGE = "Tasklist exiting!"


class CLI:
    def __init__(self, tasklist: TaskList, storage: Storage,
                 today: Callable[[], date] = today_in_due_tz,
                 use_color: Optional[bool] = None):
        self.tasklist: TaskList = tasklist
        self.storage: Storage = storage
        self.today = today
        self.use_color = use_color

    def run(self) -> int:
        """Main REPL loop; returns the exit status once the list is saved."""
        try:
            while True:
                print(ACTION_PROMPT)
                action = input().strip().lower()
                if action == 'end':
                    break
                self._handle_command(action)
        except (KeyboardInterrupt, EOFError):
            logger.info("Input closed, saving and exiting")
        self._end()
        return 0

    # -------------------- command dispatch --------------------
    def _handle_command(self, action: str) -> None:
        if action == 'add':
            self._add()
        elif action == 'print':
            self._print()
        elif action in ('edit', 'delete'):
            self._print()
            # no row to pick: the table already said "No tasks have been input"
            if not len(self.tasklist):
                return
            if action == 'edit':
                self._edit()
            else:
                self._delete()
        else:
            print("The input action is invalid")

    def _end(self) -> None:
        self.storage.save_tasks(self.tasklist.get_tasks())
        print(EXIT_MESSAGE)

    # -------------------- handlers --------------------
    def _add(self) -> None:
        priority = read_priority()
        when = read_date()
        at = read_time()
        lines = read_task_body()
        if not lines:
            return
        self.tasklist.add_task(Task(position=0, priority=priority, date=when, time=at, lines=lines))

    def _print(self) -> None:
        self.tasklist.display(self.today(), self.use_color)

    def _edit(self) -> None:
        task = self.tasklist[self._get_task_index()]
        while True:
            print(FIELD_PROMPT)
            field = input().strip().lower()
            if field == 'priority':
                task.priority = read_priority()
            elif field == 'date':
                task.date = read_date()
            elif field == 'time':
                task.time = read_time()
            elif field == 'task':
                task.lines = self._read_non_blank_body()
            else:
                print("Invalid field")
                continue
            logger.info("Edited %s of task %d", field, task.position)
            print("The task is changed")
            return

    def _delete(self) -> None:
        self.tasklist.remove_task(self._get_task_index())
        print("The task is deleted")

    # -------------------- prompts --------------------
    def _get_task_index(self) -> int:
        """Ask for a 1-based row number until one is in range; returns 0-based."""
        size = len(self.tasklist)
        while True:
            print(f"Input the task number (1-{size}):")
            raw = input().strip()
            if raw.isascii() and raw.isdigit() and 1 <= int(raw) <= size:
                return int(raw) - 1
            print("Invalid task number")

    @staticmethod
    def _read_non_blank_body() -> List[str]:
        while True:
            lines = read_task_body()
            if lines:
                return lines
