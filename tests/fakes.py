# tests/fakes.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import requests

from core.exceptions import TaskNotFoundError
from core.models import Task


class FakeTaskService:
    """
    In-memory RemoteTaskService with hooks for tests.

    - every call is appended to `log` (shared with FakePage when given)
    - `hold(key)` makes the matching call wait until the returned event is set
    - `fail[key] = exc` makes the matching call raise
    Keys: "add", "list", "get:<id>".
    """

    def __init__(self, tasks: list[Task] | None = None, log: list | None = None) -> None:
        self.tasks: dict[int, Task] = {t.id: t for t in (tasks or [])}
        self.log: list = log if log is not None else []
        self.calls: list[str] = []
        self.fail: dict[str, Exception] = {}
        self._gates: dict[str, asyncio.Event] = {}
        self._next_id = max(self.tasks, default=-1) + 1

    def hold(self, key: str) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates[key] = gate
        return gate

    async def _enter(self, key: str) -> None:
        self.calls.append(key)
        self.log.append(("fetch_start", key))
        gate = self._gates.pop(key, None)
        if gate is not None:
            await gate.wait()
        self.log.append(("fetch_done", key))
        if key in self.fail:
            raise self.fail.pop(key)

    async def add_task(self, description: str) -> int:
        await self._enter("add")
        task = Task(id=self._next_id, description=description)
        self._next_id += 1
        self.tasks[task.id] = task
        return task.id

    async def get_task(self, task_id: int) -> Task:
        await self._enter(f"get:{task_id}")
        if task_id not in self.tasks:
            raise TaskNotFoundError(f"Task {task_id} not found", status=404)
        return self.tasks[task_id]

    async def list_tasks(self) -> list[Task]:
        await self._enter("list")
        return list(self.tasks.values())


class FakeContainer:
    """Stands in for the content frame: pages add/remove themselves from `children`."""

    def __init__(self) -> None:
        self.children: list[FakePage] = []


@dataclass(eq=False)
class FakePage:
    name: str
    log: list
    data: Any = None
    container: FakeContainer | None = None
    mounts: int = 0
    destroys: int = 0
    fail_on_mount: Exception | None = None

    def mount(self, container: FakeContainer) -> None:
        self.log.append(("mount", self.name))
        self.mounts += 1
        self.container = container
        container.children.append(self)
        if self.fail_on_mount is not None:
            raise self.fail_on_mount

    def destroy(self) -> None:
        if self.container is None:
            return
        self.log.append(("destroy", self.name))
        self.destroys += 1
        self.container.children.remove(self)
        self.container = None


@dataclass
class FakePages:
    """PageFactory replacement that builds FakePage objects and remembers them."""

    log: list
    built: list[FakePage] = field(default_factory=list)

    def _build(self, name: str, data: Any = None) -> FakePage:
        self.log.append(("build", name))
        page = FakePage(name=name, log=self.log, data=data)
        self.built.append(page)
        return page

    def list_page(self, controller, tasks):
        return self._build("list", tasks)

    def add_page(self, controller):
        return self._build("add")

    def detail_page(self, controller, task):
        return self._build(f"detail:{task.id}", task)


class StubController:
    """Records what a page asks for instead of running navigations."""

    def __init__(self) -> None:
        self.spawned: list[tuple] = []
        self.messages: list[str] = []

    def show_list(self):
        return ("show_list",)

    def show_add(self):
        return ("show_add",)

    def show_detail(self, task_id):
        return ("show_detail", task_id)

    def create(self, description):
        return ("create", description)

    def spawn(self, request):
        self.spawned.append(request)
        return request

    def notify(self, message: str) -> None:
        self.messages.append(message)


@dataclass
class FakeResponse:
    status_code: int = 200
    body: Any = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self.body is None:
            raise ValueError("no JSON body")
        return self.body


class FakeSession:
    """Minimal requests.Session: queued responses, recorded requests."""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self.headers: dict[str, str] = {}
        self.responses = list(responses)
        self.requests: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
