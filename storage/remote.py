"""Async task store interface consumed by the page controller."""
from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Dict, List, Protocol

from core.exceptions import TaskNotFoundError, ValidationError
from core.models import Task
from storage.task_store import TaskStoreClient

logger = logging.getLogger(__name__)


class RemoteTaskService(Protocol):
    async def add_task(self, description: str) -> int: ...

    async def get_task(self, task_id: int) -> Task: ...

    async def list_tasks(self) -> List[Task]: ...


class HttpTaskService:
    """Runs the blocking requests client in a worker thread so the Tk loop keeps going."""

    def __init__(self, client: TaskStoreClient):
        self.client = client

    async def add_task(self, description: str) -> int:
        task_id = await asyncio.to_thread(self.client.add_task, description)
        logger.info("Task %s created", task_id)
        return task_id

    async def get_task(self, task_id: int) -> Task:
        record = await asyncio.to_thread(self.client.get_task, task_id)
        return Task.from_record(record)

    async def list_tasks(self) -> List[Task]:
        records = await asyncio.to_thread(self.client.list_tasks)
        return [Task.from_record(r) for r in records]


class InMemoryTaskService:
    """Process-local store; ids are issued 0, 1, 2, ... like the backend does."""

    def __init__(self) -> None:
        self._tasks: Dict[int, Task] = {}
        self._ids = itertools.count()

    async def add_task(self, description: str) -> int:
        if not description.strip():
            raise ValidationError("Task description must not be empty")
        task = Task(id=next(self._ids), description=description)
        self._tasks[task.id] = task
        return task.id

    async def get_task(self, task_id: int) -> Task:
        try:
            return self._tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(f"Task {task_id} not found", status=404) from None

    async def list_tasks(self) -> List[Task]:
        return list(self._tasks.values())
