"""Persistence helpers (load/save) for the task list.

The backing file is a single JSON array of task records. It is read once
at startup and written once at exit; nothing is flushed in between.
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = Path('tasklist.json')


class TaskFileError(Exception):
    """The backing file exists but does not hold a valid task array."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f'{path}: {reason}')
        self.path = path
        self.reason = reason


class Storage:
    def __init__(self, path: Optional[Path] = None, codec: Any = json):
        self.path: Path = Path(path) if path is not None else DEFAULT_TASKS_FILE
        self.codec = codec

    def load_tasks(self) -> List[Task]:
        """Load tasks from disk. Missing file -> empty list.

        Raises TaskFileError when the file is not a JSON array of tasks.
        """
        if not self.path.exists():
            logger.info("No task file at %s, starting empty", self.path)
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = self.codec.loads(f.read())
        except UnicodeDecodeError as exc:
            raise TaskFileError(self.path, f'not UTF-8 text ({exc})') from exc
        except ValueError as exc:
            raise TaskFileError(self.path, f'invalid JSON ({exc})') from exc
        if not isinstance(data, list):
            raise TaskFileError(self.path, 'top-level value is not an array')
        tasks: List[Task] = []
        for number, raw in enumerate(data, start=1):
            if not isinstance(raw, dict):
                raise TaskFileError(self.path, f'entry {number} is not an object')
            try:
                tasks.append(Task.from_dict(raw))
            except KeyError as exc:
                raise TaskFileError(self.path, f'entry {number} is missing {exc}') from exc
            except (TypeError, ValueError) as exc:
                raise TaskFileError(self.path, f'entry {number} is malformed ({exc})') from exc
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, records: List[dict]) -> None:
        """Overwrite the backing file with the given records (pretty-printed)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(self.codec.dumps(records, indent=4))
        logger.info("Saved %d tasks to %s", len(records), self.path)
