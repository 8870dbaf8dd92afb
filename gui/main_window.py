import asyncio
import logging
import tkinter as tk
from tkinter import ttk, messagebox as mb
import datetime as dt
from typing import Optional
from core.config import TOPMOST, WINDOW_GEOMETRY
from core.exceptions import TaskNotFoundError
from controller.page_controller import PageController

logger = logging.getLogger(__name__)


class MainWindow(tk.Tk):
    """Top bar (status + Refresh) and the content frame lent to the current page."""

    def __init__(self, geometry: str = WINDOW_GEOMETRY, topmost: bool = TOPMOST):
        super().__init__()
        self.controller: Optional[PageController] = None
        self.title("IC Butler · Tasks")
        self.geometry(geometry)
        self.configure(padx=8, pady=8)
        if topmost:
            self.attributes("-topmost", True)
        self._closed = False

        # Top bar
        top = ttk.Frame(self)
        top.pack(fill="x", pady=(0, 6))
        ttk.Button(top, text="Refresh", command=self._on_refresh).pack(side="right")
        self.status_var = tk.StringVar(value="Ready")
        ttk.Label(top, textvariable=self.status_var).pack(side="left")

        # la página actual vive acá adentro
        self.content = ttk.Frame(self)
        self.content.pack(fill="both", expand=True)

        self.bind("<F5>", lambda e: self._on_refresh())
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def attach(self, controller: PageController):
        self.controller = controller

    # ---------- controller callbacks ----------
    def set_status(self, text: str):
        self.status_var.set(f"{text} · {dt.datetime.now().strftime('%H:%M:%S')}")

    def show_error(self, exc: BaseException):
        self.set_status(f"Error: {exc}")
        if isinstance(exc, TaskNotFoundError):
            mb.showerror("Task", f"The task no longer exists:\n{exc}", parent=self)

    # ---------- loop ----------
    async def run(self, interval: float = 0.02):
        """Pump Tk from inside the asyncio loop until the window is closed."""
        while not self._closed:
            self.update()
            await asyncio.sleep(interval)

    # ---------- actions ----------
    def _on_refresh(self):
        if self.controller is None:
            return
        self.controller.spawn(self.controller.show_list())

    def _on_close(self):
        self._closed = True
        if self.controller is not None:
            self.controller.close()
        logger.info("Window closed")
        self.destroy()
