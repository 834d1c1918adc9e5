"""Main entry point for the terminal task list."""
import logging
import sys

from cli import CLI
from config import get_settings
from logging_setup import setup_logging
from storage import Storage, TaskFileError
from tasklist import TaskList

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_file, settings.log_level)
    storage = Storage(settings.tasks_file)
    try:
        tasks = storage.load_tasks()
    except TaskFileError as exc:
        logger.error("Unreadable task file: %s", exc)
        print(f"Cannot read task file {exc.path}: {exc.reason}", file=sys.stderr)
        return 1
    cli = CLI(TaskList(tasks), storage)
    return cli.run()

if __name__ == "__main__":
    sys.exit(main())
