from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from .db import Base


def utcnow() -> datetime:
    return datetime.utcnow()


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True)
    text = Column(String(500), nullable=False)
    completed = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    priority = Column(Integer, nullable=True, default=2)
    due_date = Column(String(32), nullable=True)
    notes = Column(Text, nullable=True)
    tags = Column(Text, nullable=True, default="")
