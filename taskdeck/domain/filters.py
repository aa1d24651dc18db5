from __future__ import annotations

from dataclasses import dataclass, replace

from .enums import SortDirection, SortKey, StatusFilter, coerce_enum

DEFAULT_DIRECTIONS = {
    SortKey.CREATED_AT: SortDirection.DESC,
    SortKey.DUE_DATE: SortDirection.ASC,
    SortKey.PRIORITY: SortDirection.DESC,
    SortKey.TEXT: SortDirection.ASC,
}


@dataclass(frozen=True)
class TaskFilters:
    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    sort_key: SortKey = SortKey.CREATED_AT
    direction: SortDirection = SortDirection.DESC

    @classmethod
    def from_raw(
        cls,
        search: str | None = "",
        status: object = StatusFilter.ALL,
        sort_key: object = SortKey.CREATED_AT,
        direction: object = SortDirection.DESC,
    ) -> TaskFilters:
        return cls(
            search=search or "",
            status=coerce_enum(StatusFilter, status, "status_filter"),
            sort_key=coerce_enum(SortKey, sort_key, "sort_key"),
            direction=coerce_enum(SortDirection, direction, "sort_direction"),
        )

    def with_sort(self, sort_key: object) -> TaskFilters:
        """Clicking the active key flips direction; a new key starts at its default."""
        key = coerce_enum(SortKey, sort_key, "sort_key")
        if key == self.sort_key:
            return replace(self, direction=self.direction.reversed())
        return replace(self, sort_key=key, direction=DEFAULT_DIRECTIONS[key])
