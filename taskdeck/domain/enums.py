from __future__ import annotations

from enum import IntEnum, StrEnum

from .errors import InvalidInputError


class StatusFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class SortKey(StrEnum):
    CREATED_AT = "created_at"
    DUE_DATE = "due_date"
    PRIORITY = "priority"
    TEXT = "text"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

    def reversed(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class PriorityLevel(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @classmethod
    def parse(cls, raw: object) -> PriorityLevel:
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, int) and not isinstance(raw, bool):
            try:
                return cls(raw)
            except ValueError:
                raise InvalidInputError("priority", raw) from None
        if isinstance(raw, str):
            name = raw.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if name.isdigit():
                return cls.parse(int(name))
        raise InvalidInputError("priority", raw)


def coerce_enum(enum_cls, value: object, field: str):
    """Return ``value`` as a member of ``enum_cls`` or raise InvalidInputError.

    Members pass through untouched; strings are matched against member values
    exactly, so ``"Active"`` is rejected rather than silently normalized.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    raise InvalidInputError(field, value)
