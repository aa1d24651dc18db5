from __future__ import annotations

import logging

from PySide6.QtCore import QDate, Qt, QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDateEdit,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from taskdeck.domain.enums import SortDirection, SortKey, StatusFilter
from taskdeck.domain.errors import InvalidInputError
from taskdeck.infra.repository import TaskRepository
from taskdeck.services.task_service import TaskService

from .widgets import PRIORITY_OPTIONS, TaskItemWidget, TaskListWidget

logger = logging.getLogger(__name__)

FILTERS = [
    ("All", StatusFilter.ALL),
    ("Active", StatusFilter.ACTIVE),
    ("Completed", StatusFilter.COMPLETED),
]

SORT_OPTIONS = [
    ("Created", SortKey.CREATED_AT),
    ("Due date", SortKey.DUE_DATE),
    ("Priority", SortKey.PRIORITY),
    ("Text", SortKey.TEXT),
]


class MainWindow(QWidget):
    def __init__(self, service: TaskService | None = None):
        super().__init__()
        self.setWindowTitle("Task Deck")
        self.resize(1100, 720)

        self.service = service or TaskService(TaskRepository())

        main_layout = QHBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)

        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter)
        splitter.addWidget(self._build_sidebar())
        splitter.addWidget(self._build_center())
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 2)
        splitter.setSizes([220, 860])

        self.refresh_tasks()

        QShortcut(QKeySequence("Ctrl+N"), self, self.new_task_input.setFocus)

    def _build_sidebar(self) -> QWidget:
        frame = QFrame()
        frame.setObjectName("Sidebar")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        title = QLabel("Filters")
        title.setProperty("class", "sidebar-title")
        layout.addWidget(title)

        self.filter_list = QListWidget()
        self.filter_list.setObjectName("FilterList")
        for label, key in FILTERS:
            item = QListWidgetItem(label)
            item.setData(Qt.UserRole, key.value)
            self.filter_list.addItem(item)
        self.filter_list.setCurrentRow(0)
        self.filter_list.currentItemChanged.connect(self.on_filter_change)
        layout.addWidget(self.filter_list)

        self.stats_label = QLabel("")
        self.stats_label.setProperty("class", "stats-badge")
        self.stats_label.setWordWrap(True)
        layout.addWidget(self.stats_label)

        layout.addStretch()
        return frame

    def _build_center(self) -> QWidget:
        frame = QFrame()
        frame.setObjectName("CenterPanel")
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        add_row = QHBoxLayout()
        self.new_task_input = QLineEdit()
        self.new_task_input.setPlaceholderText("What needs doing?")
        self.new_task_input.returnPressed.connect(self.add_task)

        self.priority_combo = QComboBox()
        for label, value in PRIORITY_OPTIONS:
            self.priority_combo.addItem(label, int(value))
        self.priority_combo.setCurrentIndex(1)

        self.due_check = QCheckBox("Due")
        self.due_input = QDateEdit()
        self.due_input.setCalendarPopup(True)
        self.due_input.setDate(QDate.currentDate())
        self.due_input.setEnabled(False)
        self.due_check.toggled.connect(self.due_input.setEnabled)

        self.tags_input = QLineEdit()
        self.tags_input.setPlaceholderText("Tags, comma separated")

        add_button = QPushButton("Add")
        add_button.clicked.connect(self.add_task)

        add_row.addWidget(self.new_task_input, 2)
        add_row.addWidget(self.priority_combo)
        add_row.addWidget(self.due_check)
        add_row.addWidget(self.due_input)
        add_row.addWidget(self.tags_input, 1)
        add_row.addWidget(add_button)

        query_row = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search text, notes or tags")
        self.search_input.textChanged.connect(self.on_search_change)

        self.sort_combo = QComboBox()
        for label, key in SORT_OPTIONS:
            self.sort_combo.addItem(label, key.value)
        self.sort_combo.currentIndexChanged.connect(self.on_sort_change)

        self.direction_button = QPushButton()
        self.direction_button.setProperty("variant", "secondary")
        self.direction_button.clicked.connect(self.on_direction_toggle)

        query_row.addWidget(self.search_input, 1)
        query_row.addWidget(QLabel("Sort"))
        query_row.addWidget(self.sort_combo)
        query_row.addWidget(self.direction_button)

        bulk_row = QHBoxLayout()
        self.select_all_check = QCheckBox("Select all")
        self.select_all_check.clicked.connect(self.on_select_all)
        self.selection_label = QLabel("")
        self.complete_button = QPushButton("Mark complete")
        self.complete_button.setProperty("variant", "secondary")
        self.complete_button.clicked.connect(self.complete_selected)
        self.delete_button = QPushButton("Delete")
        self.delete_button.setProperty("variant", "danger")
        self.delete_button.clicked.connect(self.delete_selected)

        bulk_row.addWidget(self.select_all_check)
        bulk_row.addWidget(self.selection_label)
        bulk_row.addStretch()
        bulk_row.addWidget(self.complete_button)
        bulk_row.addWidget(self.delete_button)

        self.task_list = TaskListWidget()
        self.task_list.setObjectName("TaskList")
        self.task_list.setSpacing(6)

        self.empty_label = QLabel("")
        self.empty_label.setAlignment(Qt.AlignCenter)

        layout.addLayout(add_row)
        layout.addLayout(query_row)
        layout.addLayout(bulk_row)
        layout.addWidget(self.task_list, 1)
        layout.addWidget(self.empty_label)
        return frame

    def refresh_tasks(self) -> None:
        tasks = self.service.view()
        selected = self.service.selected_ids
        self.task_list.clear()

        for task in tasks:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, task.id)
            widget = TaskItemWidget(
                task,
                task.id in selected,
                on_select=self.on_task_select,
                on_complete=self.on_task_complete,
                on_delete=self.on_task_delete,
            )
            self.task_list.addItem(item)
            self.task_list.setItemWidget(item, widget)
            item.setSizeHint(widget.sizeHint())
        self.task_list.sync_item_sizes()

        if tasks:
            self.empty_label.setText("")
        elif self.service.filters.search or self.service.filters.status != StatusFilter.ALL:
            self.empty_label.setText("No tasks match your filters.")
        else:
            self.empty_label.setText("No tasks yet.")

        self._sync_selection_controls()
        self._sync_sort_controls()

        stats = self.service.get_stats()
        self.stats_label.setText(
            f"Total: {stats.total}\nActive: {stats.active}\nCompleted: {stats.completed}"
        )

    def _sync_selection_controls(self) -> None:
        count = len(self.service.selected_ids)
        self.select_all_check.blockSignals(True)
        self.select_all_check.setChecked(self.service.is_all_selected())
        self.select_all_check.blockSignals(False)
        self.selection_label.setText(f"{count} selected" if count else "")
        self.complete_button.setEnabled(count > 0)
        self.delete_button.setEnabled(count > 0)

    def _sync_sort_controls(self) -> None:
        filters = self.service.filters
        index = self.sort_combo.findData(filters.sort_key.value)
        if index >= 0:
            self.sort_combo.blockSignals(True)
            self.sort_combo.setCurrentIndex(index)
            self.sort_combo.blockSignals(False)
        arrow = "Asc" if filters.direction == SortDirection.ASC else "Desc"
        self.direction_button.setText(arrow)

    def on_filter_change(self, current: QListWidgetItem) -> None:
        if not current:
            return
        self._apply(self.service.set_status_filter, current.data(Qt.UserRole))

    def on_search_change(self, text: str) -> None:
        self.service.set_search(text)
        self.refresh_tasks()

    def on_sort_change(self, index: int) -> None:
        key = self.sort_combo.itemData(index)
        # Direction only flips through the direction button.
        if index < 0 or key == self.service.filters.sort_key:
            return
        self._apply(self.service.sort_by, key)

    def on_direction_toggle(self) -> None:
        filters = self.service.filters
        self._apply(self.service.set_sort, filters.sort_key, filters.direction.reversed())

    def on_select_all(self, checked: bool) -> None:
        if checked:
            self.service.select_all_visible()
        else:
            self.service.clear_selection()
        self.refresh_tasks()

    def on_task_select(self, task_id: str) -> None:
        self.service.toggle_selection(task_id)
        self._sync_selection_controls()

    def on_task_complete(self, task_id: str) -> None:
        self.service.toggle_complete(task_id)
        # Rebuilding the list deletes the row that emitted the signal.
        QTimer.singleShot(0, self.refresh_tasks)

    def on_task_delete(self, task_id: str) -> None:
        task = self.service.get_task(task_id)
        if task is None:
            return
        confirm = QMessageBox.question(
            self,
            "Confirm",
            f"Delete task '{task.text}'?",
        )
        if confirm != QMessageBox.Yes:
            return
        self.service.delete_task(task_id)
        QTimer.singleShot(0, self.refresh_tasks)

    def add_task(self) -> None:
        text = self.new_task_input.text().strip()
        if not text:
            return
        due_date = (
            self.due_input.date().toPython().isoformat() if self.due_check.isChecked() else None
        )
        self._apply(
            self.service.create_task,
            text,
            priority=self.priority_combo.currentData(),
            due_date=due_date,
            tags=self.tags_input.text(),
        )
        self.new_task_input.clear()
        self.tags_input.clear()
        self.due_check.setChecked(False)

    def complete_selected(self) -> None:
        self.service.mark_selected_complete()
        self.refresh_tasks()

    def delete_selected(self) -> None:
        count = len(self.service.selected_ids)
        if not count:
            return
        confirm = QMessageBox.question(
            self,
            "Confirm",
            f"Delete {count} selected task(s)?",
        )
        if confirm != QMessageBox.Yes:
            return
        self.service.delete_selected()
        self.refresh_tasks()

    def _apply(self, action, *args, **kwargs) -> None:
        try:
            action(*args, **kwargs)
        except InvalidInputError as exc:
            logger.warning("Rejected input: %s", exc)
            QMessageBox.warning(self, "Invalid input", str(exc))
        self.refresh_tasks()
