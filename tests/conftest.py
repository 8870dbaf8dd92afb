# tests/conftest.py

from __future__ import annotations

import pytest

from controller.page_controller import PageController, PageFactory

from .fakes import FakeContainer, FakePages, FakeTaskService


@pytest.fixture()
def log() -> list:
    """Shared event log: fetches, page builds, mounts and destroys in order."""
    return []


@pytest.fixture()
def service(log: list) -> FakeTaskService:
    return FakeTaskService(log=log)


@pytest.fixture()
def container() -> FakeContainer:
    return FakeContainer()


@pytest.fixture()
def pages(log: list) -> FakePages:
    return FakePages(log=log)


@pytest.fixture()
def errors() -> list:
    return []


@pytest.fixture()
def controller(service, container, pages, errors) -> PageController:
    factory = PageFactory(list_page=pages.list_page, add_page=pages.add_page, detail_page=pages.detail_page)
    return PageController(service, container, pages=factory, on_error=errors.append)


@pytest.fixture()
def tk_root():
    """A hidden Tk root; skips when there is no display to talk to."""
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("Tk display not available")
    root.withdraw()
    yield root
    root.destroy()
