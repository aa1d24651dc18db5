from __future__ import annotations

import pytest

from taskdeck.domain.entities import TaskEntity
from taskdeck.domain.enums import PriorityLevel

from factories import make_task


@pytest.fixture
def household_tasks() -> list[TaskEntity]:
    return [
        make_task(
            "groceries",
            "Buy groceries (milk, eggs, bread)",
            minute=40,
            priority=PriorityLevel.HIGH,
            due_date="2025-03-10",
            notes="Organic milk preferred",
            tags=("shopping", "urgent"),
        ),
        make_task("meals", "Plan weekly meals", minute=30, tags=("planning", "home")),
        make_task(
            "kitchen",
            "Clean the kitchen",
            minute=20,
            completed=True,
            priority=PriorityLevel.LOW,
            notes="Focus on stovetop",
            tags=("cleaning",),
        ),
        make_task(
            "bills",
            "Pay utility bills",
            minute=10,
            priority=PriorityLevel.HIGH,
            due_date="2025-03-15",
            tags=("bills", "finance", "urgent"),
        ),
    ]
