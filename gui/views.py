"""
What each page shows, computed from its data without touching Tk.

The page classes lay these out; tests can check them with no display.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List

from core.exceptions import ValidationError
from core.models import Task

EMPTY_MESSAGE = "Please enter new task!"
ADDED_MESSAGE = "New task is added!"


@dataclass(frozen=True)
class ListRow:
    task_id: int
    text: str


@dataclass(frozen=True)
class ListView:
    title: str = "All Tasks"
    rows: List[ListRow] = field(default_factory=list)
    empty_text: str = "No tasks yet."


@dataclass(frozen=True)
class DetailView:
    task_id: int
    heading: str
    description: str


def render_list(tasks: Iterable[Task]) -> ListView:
    """Newest first; a task id shows up once even if the store repeats it."""
    seen = set()
    rows = []
    for t in sorted(tasks, key=lambda t: t.id, reverse=True):
        if t.id in seen:
            continue
        seen.add(t.id)
        rows.append(ListRow(task_id=t.id, text=t.description))
    return ListView(rows=rows)


def render_detail(task: Task) -> DetailView:
    # la descripción se muestra tal cual, sin recortar
    return DetailView(task_id=task.id, heading=f"Task #{task.id}", description=task.description)


def clean_description(raw: str) -> str:
    text = (raw or "").strip()
    if not text:
        raise ValidationError(EMPTY_MESSAGE)
    return text
