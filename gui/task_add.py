from __future__ import annotations
from typing import TYPE_CHECKING, Optional
import tkinter as tk
from tkinter import ttk

from core.exceptions import ValidationError
from gui.base import check_not_mounted
from gui.views import ADDED_MESSAGE, clean_description

if TYPE_CHECKING:
    from controller.page_controller import PageController

# atajos a nivel ventana: quedan fuera del frame de la página
SUBMIT_SEQUENCE = "<Control-Return>"
CANCEL_SEQUENCE = "<Escape>"


class AddPage:
    """Text box with Submit / Cancel. Validation happens here, creation in the controller."""

    def __init__(self, controller: "PageController"):
        self.controller = controller
        self.frame: Optional[ttk.Frame] = None
        self.text: Optional[tk.Text] = None
        self.message_var: Optional[tk.StringVar] = None
        self._toplevel = None
        self._bind_ids = {}
        self._destroyed = False

    def mount(self, container) -> None:
        check_not_mounted(self, self.frame)
        self.frame = ttk.Frame(container)
        self.frame.pack(fill="both", expand=True)

        ttk.Label(self.frame, text="Add task:").pack(anchor="w")
        self.text = tk.Text(self.frame, height=7, wrap="word")
        self.text.pack(fill="both", expand=True, pady=(4, 4))

        self.message_var = tk.StringVar(master=self.frame, value="")
        ttk.Label(self.frame, textvariable=self.message_var, foreground="#B00020").pack(anchor="w")

        buttons = ttk.Frame(self.frame)
        buttons.pack(fill="x", pady=(6, 0))
        self.submit_btn = ttk.Button(buttons, text="Submit", command=self.submit)
        self.submit_btn.pack(side="left")
        self.cancel_btn = ttk.Button(buttons, text="Cancel", command=self.cancel)
        self.cancel_btn.pack(side="left", padx=(6, 0))

        self._toplevel = self.frame.winfo_toplevel()
        self._bind_ids = {
            SUBMIT_SEQUENCE: self._toplevel.bind(SUBMIT_SEQUENCE, self._on_submit_key, add="+"),
            CANCEL_SEQUENCE: self._toplevel.bind(CANCEL_SEQUENCE, self._on_cancel_key, add="+"),
        }
        self.text.focus_set()

    def destroy(self) -> None:
        if self.frame is None:
            return
        for sequence, func_id in self._bind_ids.items():
            self._toplevel.unbind(sequence, func_id)
        self._bind_ids = {}
        self._toplevel = None
        self.frame.destroy()
        self.frame = None
        self.text = None
        self._destroyed = True

    # ---------- actions ----------
    def submit(self) -> bool:
        """True when a create was scheduled; False when the input was rejected."""
        error = self.accept(self.text.get("1.0", "end"))
        self.message_var.set(error or "")
        if error is not None:
            return False
        self.text.delete("1.0", "end")
        return True

    def accept(self, raw: str) -> Optional[str]:
        """Schedule the create for valid input; otherwise return the message to show."""
        try:
            description = clean_description(raw)
        except ValidationError as e:
            return str(e)
        self.controller.notify(ADDED_MESSAGE)
        self.controller.spawn(self.controller.create(description))
        return None

    def cancel(self) -> None:
        self.controller.spawn(self.controller.show_list())

    def _on_submit_key(self, _event=None):
        self.submit()

    def _on_cancel_key(self, _event=None):
        self.cancel()
