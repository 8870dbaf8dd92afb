from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from core.exceptions import MalformedRecordError


@dataclass(frozen=True)
class Task:
    id: int  # asignado por el store, nunca negativo
    description: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Task":
        """Build a Task from a store record; ids may arrive as int or decimal text."""
        if not isinstance(record, dict):
            raise MalformedRecordError(f"Task record must be an object, got {type(record).__name__}")
        raw_id = record.get("id")
        if isinstance(raw_id, bool):
            raise MalformedRecordError(f"Invalid task id: {raw_id!r}")
        try:
            task_id = int(str(raw_id).strip()) if raw_id is not None else None
        except ValueError:
            task_id = None
        if task_id is None or task_id < 0:
            raise MalformedRecordError(f"Invalid task id: {raw_id!r}")
        description = record.get("description")
        if not isinstance(description, str):
            raise MalformedRecordError(f"Task {task_id} has no description")
        return cls(id=task_id, description=description)


class PageKind(Enum):
    NONE = "none"
    LIST = "list"
    ADD = "add"
    DETAIL = "detail"


@dataclass(frozen=True)
class PageState:
    kind: PageKind = PageKind.NONE
    task_id: Optional[int] = None  # solo para DETAIL

    @classmethod
    def none(cls) -> "PageState":
        return cls(PageKind.NONE)

    @classmethod
    def list(cls) -> "PageState":
        return cls(PageKind.LIST)

    @classmethod
    def add(cls) -> "PageState":
        return cls(PageKind.ADD)

    @classmethod
    def detail(cls, task_id: int) -> "PageState":
        return cls(PageKind.DETAIL, task_id)
