from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from taskdeck.domain.enums import SortDirection, SortKey
from taskdeck.services.task_service import TaskService
from taskdeck.ui import main_window

from factories import FakeRepo


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(qapp, household_tasks):
    win = main_window.MainWindow(TaskService(FakeRepo(household_tasks)))
    yield win
    win.close()
    win.deleteLater()


def _row(win, task_id: str):
    for index in range(win.task_list.count()):
        widget = win.task_list.itemWidget(win.task_list.item(index))
        if widget.task.id == task_id:
            return widget
    raise LookupError(task_id)


def _answer(monkeypatch, button) -> list[str]:
    asked: list[str] = []

    def fake_question(_parent, _title, text, *args, **kwargs):
        asked.append(text)
        return button

    monkeypatch.setattr(main_window.QMessageBox, "question", fake_question)
    return asked


def test_row_delete_removes_task_after_confirmation(monkeypatch, qapp, window) -> None:
    asked = _answer(monkeypatch, QtWidgets.QMessageBox.Yes)
    window.service.toggle_selection("meals")

    _row(window, "meals").delete_button.click()
    qapp.processEvents()

    assert asked == ["Delete task 'Plan weekly meals'?"]
    assert window.service.get_task("meals") is None
    assert "meals" not in window.service.selected_ids
    assert window.task_list.count() == 3


def test_row_delete_is_cancelled_by_no(monkeypatch, qapp, window) -> None:
    _answer(monkeypatch, QtWidgets.QMessageBox.No)

    _row(window, "bills").delete_button.click()
    qapp.processEvents()

    assert window.service.get_task("bills") is not None
    assert window.task_list.count() == 4


def test_picking_a_sort_key_uses_its_default_direction(window) -> None:
    combo = window.sort_combo

    combo.setCurrentIndex(combo.findData(SortKey.DUE_DATE.value))
    assert window.service.filters.sort_key == SortKey.DUE_DATE
    assert window.service.filters.direction == SortDirection.ASC

    combo.setCurrentIndex(combo.findData(SortKey.PRIORITY.value))
    assert window.service.filters.direction == SortDirection.DESC


def test_repicking_the_current_sort_key_keeps_direction(window) -> None:
    combo = window.sort_combo
    combo.setCurrentIndex(combo.findData(SortKey.TEXT.value))

    combo.setCurrentIndex(combo.findData(SortKey.TEXT.value))
    window.on_sort_change(combo.currentIndex())

    assert window.service.filters.direction == SortDirection.ASC


def test_direction_button_flips_and_refresh_does_not(window) -> None:
    window.direction_button.click()
    assert window.service.filters.direction == SortDirection.ASC
    assert window.direction_button.text() == "Asc"

    window.refresh_tasks()

    assert window.service.filters.sort_key == SortKey.CREATED_AT
    assert window.service.filters.direction == SortDirection.ASC
