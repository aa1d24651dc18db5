from __future__ import annotations

from typing import Any


class TaskDeckError(Exception):
    pass


class InvalidInputError(TaskDeckError, ValueError):
    def __init__(self, field: str, value: Any, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class EmptyTextError(InvalidInputError):
    def __init__(self, value: Any = "") -> None:
        super().__init__("text", value, "Task text must not be empty")
