"""
Task list page
--------------
"All Tasks" header with an "Add Task" button and a scrollable list of rows,
one per task. Clicking a row opens the task detail page.

The row list is the Canvas + interior Frame pattern; every binding lives on
widgets inside the page frame, so destroying the frame releases them all.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple
import tkinter as tk
from tkinter import ttk

from core.models import Task
from gui.base import check_not_mounted
from gui.views import ListRow, render_list

if TYPE_CHECKING:
    from controller.page_controller import PageController


class TaskRow(ttk.Frame):
    """A single clickable row: task text plus its id."""
    def __init__(
        self,
        master,
        task_id: int,
        text: str,
        on_open: Optional[Callable[[int], None]] = None,
        wrap: int = 480,
    ):
        super().__init__(master, style="Task.Row.TFrame")
        self.task_id = task_id
        self._on_open = on_open

        self.columnconfigure(0, weight=1)

        self.lbl = ttk.Label(self, text=text, wraplength=wrap, anchor="w", justify="left",
                             style="Task.Title.TLabel", cursor="hand2")
        self.lbl.grid(row=0, column=0, sticky="we", padx=(8, 6), pady=4)

        self.id_lbl = ttk.Label(self, text=f"#{task_id}", style="Task.Id.TLabel")
        self.id_lbl.grid(row=0, column=1, padx=(6, 8))

        for w in (self, self.lbl, self.id_lbl):
            w.bind("<Button-1>", self._open)

    def _open(self, _event=None):
        if self._on_open:
            self._on_open(self.task_id)


class ScrollableTaskList(ttk.Frame):
    """Canvas + interior Frame with mousewheel support."""
    def __init__(
        self,
        master,
        on_open: Optional[Callable[[int], None]] = None,
        row_wrap: int = 480,
        row_padding: Tuple[int, int] = (2, 2),
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._on_open = on_open
        self._row_wrap = row_wrap
        self._row_padding = row_padding
        self._rows: Dict[int, TaskRow] = {}

        style = ttk.Style(self)
        style.configure("Task.Title.TLabel")
        style.configure("Task.Id.TLabel", foreground="#888888")

        self.canvas = tk.Canvas(self, highlightthickness=0)
        self.vbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self.vbar.set)

        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.interior = ttk.Frame(self.canvas)
        self._win_id = self.canvas.create_window(0, 0, window=self.interior, anchor="nw")

        self.interior.bind("<Configure>", self._on_interior_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)

        self._bind_mousewheel(self.canvas)
        self._bind_mousewheel(self.interior)

    # --- Public API ---
    def set_tasks(self, rows: List[ListRow]):
        for row in list(self._rows.values()):
            row.destroy()
        self._rows.clear()

        for i, r in enumerate(rows):
            row = TaskRow(self.interior, task_id=r.task_id, text=r.text,
                          on_open=self._on_open, wrap=self._row_wrap)
            self._rows[r.task_id] = row
            row.grid(row=i, column=0, sticky="we", padx=(8, 8), pady=self._row_padding)
            self._bind_mousewheel(row)
            self._bind_mousewheel(row.lbl)
        self.interior.columnconfigure(0, weight=1)
        self._update_scrollregion()

    def task_ids(self) -> List[int]:
        return list(self._rows)

    def row_text(self, task_id: int) -> str:
        return str(self._rows[task_id].lbl.cget("text"))

    # --- Internals ---
    def _update_scrollregion(self):
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_interior_configure(self, _):
        self._update_scrollregion()

    def _on_canvas_configure(self, event):
        # interior acompaña el ancho del canvas para el wrapping
        self.canvas.itemconfigure(self._win_id, width=event.width)
        for row in self._rows.values():
            row.lbl.configure(wraplength=max(event.width - 80, 80))

    def _bind_mousewheel(self, widget):
        widget.bind("<MouseWheel>", self._on_mousewheel_windows_mac, add="+")
        widget.bind("<Button-4>", self._on_mousewheel_linux, add="+")
        widget.bind("<Button-5>", self._on_mousewheel_linux, add="+")

    def _on_mousewheel_windows_mac(self, event):
        delta = int(-1 * (event.delta / 120))
        self.canvas.yview_scroll(delta, "units")

    def _on_mousewheel_linux(self, event):
        if event.num == 4:
            self.canvas.yview_scroll(-1, "units")
        elif event.num == 5:
            self.canvas.yview_scroll(1, "units")


class ListPage:
    def __init__(self, controller: "PageController", tasks: List[Task]):
        self.controller = controller
        self.view = render_list(tasks)
        self.frame: Optional[ttk.Frame] = None
        self.task_list: Optional[ScrollableTaskList] = None
        self._destroyed = False

    def mount(self, container) -> None:
        check_not_mounted(self, self.frame)
        self.frame = ttk.Frame(container)
        self.frame.pack(fill="both", expand=True)

        header = ttk.Frame(self.frame)
        header.pack(fill="x", pady=(0, 6))
        ttk.Label(header, text=self.view.title, font=("TkDefaultFont", 14, "bold")).pack(side="left")
        self.add_btn = ttk.Button(header, text="Add Task", command=self._on_add)
        self.add_btn.pack(side="right")

        if not self.view.rows:
            ttk.Label(self.frame, text=self.view.empty_text, foreground="#888888").pack(anchor="w", padx=8)

        self.task_list = ScrollableTaskList(self.frame, on_open=self._on_open)
        self.task_list.pack(fill="both", expand=True)
        self.task_list.set_tasks(self.view.rows)

    def destroy(self) -> None:
        if self.frame is None:
            return
        self.frame.destroy()
        self.frame = None
        self.task_list = None
        self._destroyed = True

    # ---------- handlers ----------
    def _on_open(self, task_id: int):
        self.controller.spawn(self.controller.show_detail(task_id))

    def _on_add(self):
        self.controller.spawn(self.controller.show_add())
