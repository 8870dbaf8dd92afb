from __future__ import annotations
from typing import TYPE_CHECKING, Optional
from tkinter import ttk

from core.models import Task
from gui.base import check_not_mounted
from gui.views import render_detail

if TYPE_CHECKING:
    from controller.page_controller import PageController


class DetailPage:
    def __init__(self, controller: "PageController", task: Task):
        self.controller = controller
        self.view = render_detail(task)
        self.frame: Optional[ttk.Frame] = None
        self._destroyed = False

    def mount(self, container) -> None:
        check_not_mounted(self, self.frame)
        self.frame = ttk.Frame(container)
        self.frame.pack(fill="both", expand=True)

        ttk.Label(self.frame, text=self.view.heading, foreground="#888888").pack(anchor="w")
        self.description_lbl = ttk.Label(self.frame, text=self.view.description, wraplength=520,
                                         justify="left", font=("TkDefaultFont", 13, "bold"))
        self.description_lbl.pack(anchor="w", fill="x", pady=(4, 10))
        self.back_btn = ttk.Button(self.frame, text="Back", command=self._on_back)
        self.back_btn.pack(anchor="w")

    def destroy(self) -> None:
        if self.frame is None:
            return
        self.frame.destroy()
        self.frame = None
        self._destroyed = True

    def _on_back(self):
        self.controller.spawn(self.controller.show_list())
