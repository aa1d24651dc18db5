from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional

from .enums import PriorityLevel


@dataclass(frozen=True)
class TaskEntity:
    id: str
    text: str
    completed: bool
    created_at: datetime
    priority: PriorityLevel = PriorityLevel.MEDIUM
    due_date: Optional[str] = None
    notes: Optional[str] = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def parsed_due_date(self) -> Optional[date]:
        return parse_due_date(self.due_date)


def parse_due_date(value: object) -> Optional[date]:
    """Parse a stored due date, returning None when absent or malformed.

    Accepts ``date``/``datetime`` objects and ISO strings. A date-time string
    such as ``2025-01-01T10:00`` is reduced to its calendar date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return None


def parse_tags(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    if raw is None:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else raw
    return tuple(tag.strip() for tag in parts if tag and tag.strip())


def format_tags(tags: Iterable[str]) -> str:
    return ", ".join(tags)
