from __future__ import annotations

from datetime import datetime, timedelta

from taskdeck.domain.entities import TaskEntity
from taskdeck.domain.enums import PriorityLevel

BASE_TIME = datetime(2025, 1, 1, 9, 0, 0)


def make_task(
    task_id: str,
    text: str | None = None,
    *,
    minute: int = 0,
    completed: bool = False,
    priority: PriorityLevel = PriorityLevel.MEDIUM,
    due_date: str | None = None,
    notes: str | None = None,
    tags: tuple[str, ...] = (),
) -> TaskEntity:
    return TaskEntity(
        id=task_id,
        text=text or f"Task {task_id}",
        completed=completed,
        created_at=BASE_TIME + timedelta(minutes=minute),
        priority=priority,
        due_date=due_date,
        notes=notes,
        tags=tags,
    )


class FakeRepo:
    def __init__(self, tasks: list[TaskEntity] | None = None) -> None:
        self.tasks: list[TaskEntity] = list(tasks or [])
        self.saves = 0

    def list_tasks(self) -> list[TaskEntity]:
        return list(self.tasks)

    def save_all(self, collection) -> None:
        self.tasks = list(collection)
        self.saves += 1
