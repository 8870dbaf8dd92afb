# tests/test_render.py

from __future__ import annotations

import pytest

from core.exceptions import ValidationError
from core.models import Task
from gui.views import EMPTY_MESSAGE, ListRow, clean_description, render_detail, render_list


def test_render_list_empty() -> None:
    view = render_list([])

    assert view.title == "All Tasks"
    assert view.rows == []


def test_render_list_has_every_task_once_newest_first() -> None:
    tasks = [Task(0, "first"), Task(2, "third"), Task(1, "second"), Task(2, "third")]

    view = render_list(tasks)

    assert view.rows == [ListRow(2, "third"), ListRow(1, "second"), ListRow(0, "first")]


def test_render_detail_keeps_description_verbatim() -> None:
    view = render_detail(Task(9, "  spaced <b>text</b>  "))

    assert view.description == "  spaced <b>text</b>  "
    assert view.heading == "Task #9"


@pytest.mark.parametrize("raw", ["", "   ", "\n\t \n", None])
def test_clean_description_rejects_blank(raw) -> None:
    with pytest.raises(ValidationError, match=EMPTY_MESSAGE):
        clean_description(raw)


def test_clean_description_trims() -> None:
    assert clean_description("  write report\n") == "write report"
