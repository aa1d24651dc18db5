from __future__ import annotations

from typing import Iterable, Sequence

from .entities import TaskEntity
from .enums import SortDirection, SortKey, StatusFilter
from .filters import TaskFilters
from .ordering import sort_key_for
from .query import filter_tasks


def query_view(
    collection: Iterable[TaskEntity],
    search: str | None = "",
    status: StatusFilter | str = StatusFilter.ALL,
    sort_key: SortKey | str = SortKey.CREATED_AT,
    direction: SortDirection | str = SortDirection.DESC,
) -> list[TaskEntity]:
    """Filter then stably sort ``collection`` into the visible set.

    Raw strings are validated before any record is touched; an unknown value
    raises InvalidInputError instead of falling back to a default.
    """
    filters = TaskFilters.from_raw(search, status, sort_key, direction)
    return apply_filters(collection, filters)


def apply_filters(collection: Iterable[TaskEntity], filters: TaskFilters) -> list[TaskEntity]:
    filtered = filter_tasks(collection, filters.search, filters.status)
    return sorted(filtered, key=sort_key_for(filters.sort_key, filters.direction))


def visible_ids(view: Sequence[TaskEntity]) -> list[str]:
    return [task.id for task in view]
