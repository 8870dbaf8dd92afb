"""
Page lifecycle shared by every view in the content area.

A page builds all of its widgets inside one private frame, so destroying that
frame drops every handler bound in the subtree. Anything bound outside it
(window-level key bindings) must be unbound explicitly in destroy().
"""
from __future__ import annotations
from typing import Any, Protocol


class Page(Protocol):
    def mount(self, container: Any) -> None: ...

    def destroy(self) -> None: ...


def check_not_mounted(page: Any, frame: Any) -> None:
    if frame is not None or getattr(page, "_destroyed", False):
        raise RuntimeError(f"{type(page).__name__} can only be mounted once")
