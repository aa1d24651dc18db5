from __future__ import annotations

import locale
from functools import cmp_to_key
from typing import Callable

from .entities import TaskEntity
from .enums import SortDirection, SortKey

Comparator = Callable[[TaskEntity, TaskEntity], int]

# Direction in which each key's raw comparison is already monotonic.
BASE_DIRECTIONS = {
    SortKey.CREATED_AT: SortDirection.DESC,
    SortKey.PRIORITY: SortDirection.DESC,
    SortKey.TEXT: SortDirection.ASC,
    SortKey.DUE_DATE: SortDirection.ASC,
}


def _sign(left, right) -> int:
    return (left > right) - (left < right)


def _compare_created_desc(a: TaskEntity, b: TaskEntity) -> int:
    return _sign(b.created_at, a.created_at)


def _compare_priority_desc(a: TaskEntity, b: TaskEntity) -> int:
    return _sign(int(b.priority), int(a.priority))


def _compare_text_asc(a: TaskEntity, b: TaskEntity) -> int:
    result = locale.strcoll(a.text.casefold(), b.text.casefold())
    if result == 0:
        result = locale.strcoll(a.text, b.text)
    return _sign(result, 0)


def _compare_due_asc(a: TaskEntity, b: TaskEntity) -> int:
    # Undated records sort after dated ones; negation moves them to the front.
    due_a = a.parsed_due_date
    due_b = b.parsed_due_date
    if due_a is None and due_b is None:
        return 0
    if due_a is None:
        return 1
    if due_b is None:
        return -1
    return _sign(due_a, due_b)


_BASE_COMPARATORS: dict[SortKey, Comparator] = {
    SortKey.CREATED_AT: _compare_created_desc,
    SortKey.PRIORITY: _compare_priority_desc,
    SortKey.TEXT: _compare_text_asc,
    SortKey.DUE_DATE: _compare_due_asc,
}


def build_comparator(sort_key: SortKey, direction: SortDirection) -> Comparator:
    """Build a total-order comparator for ``sort_key`` in ``direction``.

    The key's base comparison is negated as a whole when ``direction`` differs
    from its base direction. Equal records fall back to newest-first
    ``created_at`` whichever direction was requested.
    """
    base = _BASE_COMPARATORS[sort_key]
    negate = direction != BASE_DIRECTIONS[sort_key]

    def compare(a: TaskEntity, b: TaskEntity) -> int:
        result = base(a, b)
        if negate:
            result = -result
        if result == 0:
            return _compare_created_desc(a, b)
        return result

    return compare


def sort_key_for(sort_key: SortKey, direction: SortDirection):
    return cmp_to_key(build_comparator(sort_key, direction))
