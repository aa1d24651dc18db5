from __future__ import annotations

from PySide6.QtCore import QSize, Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from taskdeck.domain.entities import TaskEntity, format_tags
from taskdeck.domain.enums import PriorityLevel

PRIORITY_OPTIONS = [
    ("Low", PriorityLevel.LOW),
    ("Medium", PriorityLevel.MEDIUM),
    ("High", PriorityLevel.HIGH),
]

PRIORITY_COLORS = {
    PriorityLevel.LOW: "#22C55E",
    PriorityLevel.MEDIUM: "#EAB308",
    PriorityLevel.HIGH: "#EF4444",
}


class TaskItemWidget(QWidget):
    def __init__(
        self,
        task: TaskEntity,
        selected: bool,
        on_select,
        on_complete,
        on_delete,
        parent=None,
    ):
        super().__init__(parent)
        self.task = task
        self._on_select = on_select
        self._on_complete = on_complete
        self._on_delete = on_delete

        self.setObjectName("TaskCard")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setMinimumHeight(56)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.setSpacing(8)

        self.select_check = QCheckBox()
        self.select_check.setToolTip("Select")
        self.select_check.setChecked(selected)
        self.select_check.toggled.connect(self._handle_select)

        self.done_check = QCheckBox()
        self.done_check.setToolTip("Completed")
        self.done_check.setChecked(task.completed)
        self.done_check.toggled.connect(self._handle_complete)

        body = QVBoxLayout()
        body.setSpacing(2)

        title = QLabel(task.text)
        title.setProperty("class", "task-title")
        title.setWordWrap(True)
        if task.completed:
            font = title.font()
            font.setStrikeOut(True)
            title.setFont(font)

        meta_parts = []
        due = task.parsed_due_date
        if due:
            meta_parts.append(f"Due: {due.strftime('%d.%m.%Y')}")
        elif task.due_date:
            meta_parts.append(f"Due: {task.due_date} (invalid)")
        if task.tags:
            meta_parts.append(f"Tags: {format_tags(task.tags)}")
        if task.notes:
            meta_parts.append(task.notes)
        meta = QLabel(" | ".join(meta_parts) if meta_parts else "No details")
        meta.setProperty("class", "task-meta")
        meta.setWordWrap(True)

        body.addWidget(title)
        body.addWidget(meta)

        priority_label = next(
            (label for label, value in PRIORITY_OPTIONS if value == task.priority),
            "Unknown",
        )
        priority = QLabel(priority_label)
        priority.setProperty("class", "task-priority")
        priority.setStyleSheet(
            f"background-color: {PRIORITY_COLORS.get(task.priority, '#9CA3AF')};"
        )
        priority.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setProperty("variant", "ghost")
        self.delete_button.setToolTip("Delete this task")
        self.delete_button.clicked.connect(self._handle_delete)

        layout.addWidget(self.select_check, 0, Qt.AlignTop)
        layout.addWidget(self.done_check, 0, Qt.AlignTop)
        layout.addLayout(body, 1)
        layout.addWidget(priority, 0, Qt.AlignTop)
        layout.addWidget(self.delete_button, 0, Qt.AlignTop)

    def _handle_select(self, _checked: bool) -> None:
        self._on_select(self.task.id)

    def _handle_complete(self, _checked: bool) -> None:
        self._on_complete(self.task.id)

    def _handle_delete(self) -> None:
        self._on_delete(self.task.id)


class TaskListWidget(QListWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QAbstractItemView.NoSelection)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.sync_item_sizes()

    def sync_item_sizes(self) -> None:
        viewport_width = self.viewport().width()
        for index in range(self.count()):
            item = self.item(index)
            widget = self.itemWidget(item)
            if widget:
                widget.setFixedWidth(viewport_width)
                widget.adjustSize()
                item.setSizeHint(QSize(viewport_width, widget.sizeHint().height()))
