from __future__ import annotations

from typing import AbstractSet, Iterable

SelectionSet = frozenset[str]

EMPTY_SELECTION: SelectionSet = frozenset()


def toggle_selection(selection: AbstractSet[str], task_id: str) -> SelectionSet:
    if task_id in selection:
        return frozenset(selection - {task_id})
    return frozenset(selection | {task_id})


def select_all_visible(visible_ids: Iterable[str]) -> SelectionSet:
    return frozenset(visible_ids)


def clear_selection() -> SelectionSet:
    return EMPTY_SELECTION


def prune_selection(selection: AbstractSet[str], existing_ids: Iterable[str]) -> SelectionSet:
    """Drop ids that no longer exist; run after every collection mutation."""
    return frozenset(selection & frozenset(existing_ids))


def is_all_selected(selection: AbstractSet[str], visible_ids: Iterable[str]) -> bool:
    visible = frozenset(visible_ids)
    if not visible:
        return False
    return selection == visible
