from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timedelta

from taskdeck.domain import bulk, selection, view as task_view
from taskdeck.domain.entities import TaskEntity, parse_tags
from taskdeck.domain.enums import PriorityLevel, SortDirection, SortKey, StatusFilter, coerce_enum
from taskdeck.domain.errors import EmptyTextError
from taskdeck.domain.filters import TaskFilters
from taskdeck.domain.stats import TaskStats, summarize
from taskdeck.infra.repository import TaskRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = {"text", "completed", "priority", "due_date", "notes", "tags"}


class TaskService:
    """Holds the canonical collection, the selection and the current filters.

    Every mutation saves the whole collection and then prunes the selection,
    so ``is_all_selected`` never sees ids that were just removed.
    """

    def __init__(self, repo: TaskRepository, filters: TaskFilters | None = None) -> None:
        self._repo = repo
        self._tasks: list[TaskEntity] = []
        self._selection: selection.SelectionSet = selection.EMPTY_SELECTION
        self.filters = filters or TaskFilters()
        self.refresh()

    @property
    def tasks(self) -> list[TaskEntity]:
        return list(self._tasks)

    @property
    def selected_ids(self) -> selection.SelectionSet:
        return self._selection

    def refresh(self) -> None:
        self._tasks = self._repo.list_tasks()
        self._prune()

    def get_task(self, task_id: str) -> TaskEntity | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    # ---- view ----

    def view(self) -> list[TaskEntity]:
        return task_view.apply_filters(self._tasks, self.filters)

    def visible_ids(self) -> list[str]:
        return task_view.visible_ids(self.view())

    def set_search(self, search: str | None) -> None:
        self.filters = replace(self.filters, search=search or "")

    def set_status_filter(self, status: StatusFilter | str) -> None:
        self.filters = replace(
            self.filters, status=coerce_enum(StatusFilter, status, "status_filter")
        )

    def set_sort(self, sort_key: SortKey | str, direction: SortDirection | str) -> None:
        self.filters = replace(
            self.filters,
            sort_key=coerce_enum(SortKey, sort_key, "sort_key"),
            direction=coerce_enum(SortDirection, direction, "sort_direction"),
        )

    def sort_by(self, sort_key: SortKey | str) -> None:
        self.filters = self.filters.with_sort(sort_key)

    # ---- selection ----

    def toggle_selection(self, task_id: str) -> None:
        self._selection = selection.toggle_selection(self._selection, task_id)

    def select_all_visible(self) -> None:
        self._selection = selection.select_all_visible(self.visible_ids())

    def clear_selection(self) -> None:
        self._selection = selection.clear_selection()

    def is_all_selected(self) -> bool:
        return selection.is_all_selected(self._selection, self.visible_ids())

    # ---- mutations ----

    def create_task(
        self,
        text: str,
        priority: PriorityLevel | str | int = PriorityLevel.MEDIUM,
        due_date: str | None = None,
        notes: str | None = None,
        tags: str | list[str] | tuple[str, ...] | None = None,
    ) -> TaskEntity:
        cleaned = (text or "").strip()
        if not cleaned:
            raise EmptyTextError(text)
        task = TaskEntity(
            id=uuid.uuid4().hex,
            text=cleaned,
            completed=False,
            created_at=self._next_created_at(),
            priority=PriorityLevel.parse(priority),
            due_date=(due_date or "").strip() or None,
            notes=notes or None,
            tags=parse_tags(tags),
        )
        self._commit([task, *self._tasks])
        logger.info("Created task %s", task.id)
        return task

    def update_task(self, task_id: str, **changes) -> TaskEntity | None:
        task = self.get_task(task_id)
        if task is None:
            return None
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise TypeError(f"Cannot edit fields: {', '.join(sorted(unknown))}")
        normalized = dict(changes)
        if "text" in normalized:
            cleaned = (normalized["text"] or "").strip()
            if not cleaned:
                raise EmptyTextError(normalized["text"])
            normalized["text"] = cleaned
        if "priority" in normalized:
            normalized["priority"] = PriorityLevel.parse(normalized["priority"])
        if "tags" in normalized:
            normalized["tags"] = parse_tags(normalized["tags"])
        if "due_date" in normalized:
            normalized["due_date"] = (normalized["due_date"] or "").strip() or None
        if "notes" in normalized:
            normalized["notes"] = normalized["notes"] or None
        updated = replace(task, **normalized)
        self._commit([updated if t.id == task_id else t for t in self._tasks])
        return updated

    def toggle_complete(self, task_id: str) -> None:
        self._commit(bulk.toggle_complete(self._tasks, task_id))

    def delete_task(self, task_id: str) -> None:
        self._commit([task for task in self._tasks if task.id != task_id])

    def mark_selected_complete(self) -> int:
        count = len(self._selection)
        if not count:
            return 0
        tasks, self._selection = bulk.mark_complete(self._tasks, self._selection)
        self._commit(list(tasks))
        logger.info("Marked %d tasks complete", count)
        return count

    def delete_selected(self) -> int:
        count = len(self._selection)
        if not count:
            return 0
        tasks, self._selection = bulk.delete_many(self._tasks, self._selection)
        self._commit(list(tasks))
        logger.info("Deleted %d tasks", count)
        return count

    def get_stats(self) -> TaskStats:
        return summarize(self._tasks)

    def _commit(self, tasks: list[TaskEntity]) -> None:
        self._repo.save_all(tasks)
        self._tasks = tasks
        self._prune()

    def _prune(self) -> None:
        self._selection = selection.prune_selection(
            self._selection, (task.id for task in self._tasks)
        )

    def _next_created_at(self) -> datetime:
        now = datetime.utcnow()
        latest = max((task.created_at for task in self._tasks), default=None)
        if latest is not None and now <= latest:
            return latest + timedelta(microseconds=1)
        return now
