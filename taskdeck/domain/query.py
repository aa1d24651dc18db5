from __future__ import annotations

from typing import Iterable

from .entities import TaskEntity
from .enums import StatusFilter


def matches_search(task: TaskEntity, query: str | None) -> bool:
    needle = (query or "").strip().casefold()
    if not needle:
        return True
    if needle in task.text.casefold():
        return True
    if task.notes and needle in task.notes.casefold():
        return True
    return any(needle in tag.casefold() for tag in task.tags)


def matches_status(task: TaskEntity, status: StatusFilter) -> bool:
    if status == StatusFilter.ACTIVE:
        return not task.completed
    if status == StatusFilter.COMPLETED:
        return task.completed
    return True


def filter_tasks(
    collection: Iterable[TaskEntity],
    search: str | None,
    status: StatusFilter,
) -> list[TaskEntity]:
    return [
        task
        for task in collection
        if matches_search(task, search) and matches_status(task, status)
    ]
