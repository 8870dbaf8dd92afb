from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional, Set

from core.models import PageState, Task
from gui.base import Page
from storage.remote import RemoteTaskService

logger = logging.getLogger(__name__)


def _default_list_page(controller: "PageController", tasks: List[Task]) -> Page:
    from gui.task_list import ListPage
    return ListPage(controller, tasks)


def _default_add_page(controller: "PageController") -> Page:
    from gui.task_add import AddPage
    return AddPage(controller)


def _default_detail_page(controller: "PageController", task: Task) -> Page:
    from gui.task_detail import DetailPage
    return DetailPage(controller, task)


@dataclass
class PageFactory:
    """Constructores de páginas; los tests los reemplazan por páginas falsas."""
    list_page: Callable[["PageController", List[Task]], Page] = _default_list_page
    add_page: Callable[["PageController"], Page] = _default_add_page
    detail_page: Callable[["PageController", Task], Page] = _default_detail_page


class PageController:
    """
    Owns the current page and the shared container.

    Every navigation fetches first, then destroys the outgoing page, then builds
    and mounts the incoming one. Navigations are tagged with a generation number;
    a fetch that resolves after a newer navigation was issued is dropped.
    """

    def __init__(
        self,
        service: RemoteTaskService,
        container: Any,
        pages: Optional[PageFactory] = None,
        on_error: Optional[Callable[[BaseException], None]] = None,
        on_status: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self.container = container
        self.pages = pages or PageFactory()
        self.on_error = on_error
        self.on_status = on_status
        self.current: PageState = PageState.none()
        self._page: Optional[Page] = None
        self._generation = 0
        self._pending: Set[asyncio.Task] = set()

    @property
    def page(self) -> Optional[Page]:
        return self._page

    # ---- navigation ----
    async def show_list(self) -> bool:
        gen = self._next_generation("list")
        try:
            tasks = await self.service.list_tasks()
        except Exception:
            if self._is_stale(gen, "list"):
                return False
            raise
        if self._is_stale(gen, "list"):
            return False
        self._swap(lambda: self.pages.list_page(self, tasks), PageState.list())
        return True

    async def show_add(self) -> bool:
        self._next_generation("add")
        self._swap(lambda: self.pages.add_page(self), PageState.add())
        return True

    async def show_detail(self, task_id: int) -> bool:
        task_id = int(task_id)
        gen = self._next_generation(f"detail {task_id}")
        try:
            task = await self.service.get_task(task_id)
        except Exception:
            if self._is_stale(gen, f"detail {task_id}"):
                return False
            raise
        if self._is_stale(gen, f"detail {task_id}"):
            return False
        self._swap(lambda: self.pages.detail_page(self, task), PageState.detail(task_id))
        return True

    async def create(self, description: str) -> int:
        """Adds the task and shows the list again, whether add_task worked or not."""
        try:
            task_id = await self.service.add_task(description)
        except Exception:
            logger.warning("add_task failed; showing the list anyway", exc_info=True)
            await self.show_list()
            raise
        await self.show_list()
        return task_id

    # ---- handlers → controller ----
    def spawn(self, coro: Awaitable[Any]) -> asyncio.Task:
        """Schedule a navigation from a synchronous widget callback."""
        task = asyncio.ensure_future(coro)
        self._pending.add(task)
        task.add_done_callback(self._on_spawned_done)
        return task

    def notify(self, message: str) -> None:
        logger.info(message)
        if self.on_status:
            self.on_status(message)

    def close(self) -> None:
        for task in list(self._pending):
            task.cancel()
        self._generation += 1
        self._destroy_current()
        self.current = PageState.none()

    # ---- internals ----
    def _next_generation(self, target: str) -> int:
        self._generation += 1
        logger.debug("navigation #%d -> %s", self._generation, target)
        return self._generation

    def _is_stale(self, gen: int, target: str) -> bool:
        if gen != self._generation:
            logger.debug("navigation #%d -> %s superseded by #%d; result or error dropped",
                         gen, target, self._generation)
            return True
        return False

    def _destroy_current(self) -> None:
        page, self._page = self._page, None
        if page is not None:
            page.destroy()

    def _swap(self, build: Callable[[], Page], state: PageState) -> None:
        self._destroy_current()
        self.current = PageState.none()
        page = build()
        try:
            page.mount(self.container)
        except Exception:
            page.destroy()
            raise
        self._page = page
        self.current = state

    def _on_spawned_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is None:
            return
        logger.error("navigation failed: %s", exc, exc_info=exc)
        if self.on_error:
            self.on_error(exc)
