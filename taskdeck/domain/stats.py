from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .entities import TaskEntity
from .enums import PriorityLevel


@dataclass(frozen=True)
class TaskStats:
    total: int
    active: int
    completed: int
    by_priority: dict[PriorityLevel, int]


def summarize(collection: Iterable[TaskEntity]) -> TaskStats:
    by_priority = {level: 0 for level in PriorityLevel}
    total = 0
    completed = 0
    for task in collection:
        total += 1
        if task.completed:
            completed += 1
        by_priority[task.priority] += 1
    return TaskStats(
        total=total,
        active=total - completed,
        completed=completed,
        by_priority=by_priority,
    )
