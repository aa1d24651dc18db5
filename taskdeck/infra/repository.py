from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import delete, select

from taskdeck.domain.entities import TaskEntity, format_tags, parse_tags
from taskdeck.domain.enums import PriorityLevel
from taskdeck.domain.errors import InvalidInputError

from .db import SessionLocal
from .models import TaskModel, utcnow

logger = logging.getLogger(__name__)


def _to_priority(raw: int | None) -> PriorityLevel:
    if raw is None:
        return PriorityLevel.MEDIUM
    try:
        return PriorityLevel.parse(raw)
    except InvalidInputError:
        logger.warning("Unknown stored priority %r, using MEDIUM", raw)
        return PriorityLevel.MEDIUM


def _to_entity(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        text=model.text,
        completed=bool(model.completed),
        created_at=model.created_at or utcnow(),
        priority=_to_priority(model.priority),
        due_date=model.due_date or None,
        notes=model.notes or None,
        tags=parse_tags(model.tags),
    )


def _apply_entity(model: TaskModel, task: TaskEntity) -> None:
    model.text = task.text
    model.completed = task.completed
    model.created_at = task.created_at
    model.priority = int(task.priority)
    model.due_date = task.due_date
    model.notes = task.notes
    model.tags = format_tags(task.tags)


class TaskRepository:
    def __init__(self, session_factory=SessionLocal) -> None:
        self._session_factory = session_factory

    def list_tasks(self) -> list[TaskEntity]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(TaskModel.created_at.desc())
            return [_to_entity(task) for task in session.scalars(stmt)]

    def save_all(self, collection: Iterable[TaskEntity]) -> None:
        tasks = list(collection)
        keep_ids = [task.id for task in tasks]
        with self._session_factory() as session:
            existing = {
                model.id: model
                for model in session.scalars(select(TaskModel).where(TaskModel.id.in_(keep_ids)))
            } if keep_ids else {}
            for task in tasks:
                model = existing.get(task.id)
                if model is None:
                    model = TaskModel(id=task.id)
                    session.add(model)
                _apply_entity(model, task)

            stmt = delete(TaskModel)
            if keep_ids:
                stmt = stmt.where(TaskModel.id.notin_(keep_ids))
            removed = session.execute(stmt).rowcount
            session.commit()
        logger.debug("Saved %d tasks, removed %d", len(tasks), removed or 0)
