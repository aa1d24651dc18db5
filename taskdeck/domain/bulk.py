from __future__ import annotations

from dataclasses import replace
from typing import AbstractSet, Sequence

from .entities import TaskEntity
from .selection import EMPTY_SELECTION, SelectionSet


def mark_complete(
    collection: Sequence[TaskEntity],
    selection: AbstractSet[str],
) -> tuple[Sequence[TaskEntity], SelectionSet]:
    if not selection:
        return collection, EMPTY_SELECTION
    updated = [
        replace(task, completed=True) if task.id in selection and not task.completed else task
        for task in collection
    ]
    return updated, EMPTY_SELECTION


def delete_many(
    collection: Sequence[TaskEntity],
    selection: AbstractSet[str],
) -> tuple[Sequence[TaskEntity], SelectionSet]:
    if not selection:
        return collection, EMPTY_SELECTION
    return [task for task in collection if task.id not in selection], EMPTY_SELECTION


def toggle_complete(collection: Sequence[TaskEntity], task_id: str) -> list[TaskEntity]:
    return [
        replace(task, completed=not task.completed) if task.id == task_id else task
        for task in collection
    ]
