# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

from models import Task
from storage import Storage
from validators import wrap_body_line

TODAY = date(2023, 6, 15)


@pytest.fixture()
def feed_input(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[str]], List[str]]:
    """
    Replace builtins.input with a scripted feeder.

    Returns the list of remaining answers so a test can assert everything
    was consumed. Running out of answers raises EOFError, like a closed stdin.
    """

    def install(answers: Iterable[str]) -> List[str]:
        pending = list(answers)

        def fake_input(prompt: str = "") -> str:
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return pending

    return install


@pytest.fixture()
def storage(tmp_path: Path) -> Storage:
    return Storage(tmp_path / "tasklist.json")


def make_task(priority: str = "N", when=(2023, 6, 20), at=(9, 0), body: str = "Buy milk") -> Task:
    return Task(position=0, priority=priority, date=when, time=at, lines=wrap_body_line(body))
