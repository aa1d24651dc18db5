from __future__ import annotations

from taskdeck.domain.bulk import delete_many
from taskdeck.domain.selection import (
    clear_selection,
    is_all_selected,
    prune_selection,
    select_all_visible,
    toggle_selection,
)

from factories import make_task


def test_toggle_flips_membership() -> None:
    selected = toggle_selection(frozenset(), "a")
    assert selected == {"a"}

    selected = toggle_selection(selected, "b")
    selected = toggle_selection(selected, "a")
    assert selected == {"b"}


def test_select_all_visible_replaces_selection() -> None:
    selected = select_all_visible(["x", "y"])

    assert selected == {"x", "y"}
    assert clear_selection() == frozenset()


def test_is_all_selected_is_false_for_empty_view() -> None:
    assert is_all_selected(frozenset(), []) is False
    assert is_all_selected(frozenset({"a"}), []) is False


def test_is_all_selected_requires_set_equality() -> None:
    visible = ["a", "b"]

    assert is_all_selected(frozenset({"b", "a"}), visible)
    assert not is_all_selected(frozenset({"a"}), visible)
    assert not is_all_selected(frozenset({"a", "b", "hidden"}), visible)


def test_prune_keeps_only_existing_ids() -> None:
    selected = frozenset({"a", "b", "gone"})

    pruned = prune_selection(selected, ["a", "b", "c"])

    assert pruned == {"a", "b"}
    assert pruned <= {"a", "b", "c"}
    assert prune_selection(selected, []) == frozenset()


def test_delete_then_prune_scenario() -> None:
    collection = [make_task("1", minute=1), make_task("2", minute=2)]
    selected = select_all_visible(["1", "2"])

    remaining, cleared = delete_many(collection, frozenset({"1"}))

    assert [task.id for task in remaining] == ["2"]
    assert cleared == frozenset()
    assert prune_selection(selected, [task.id for task in remaining]) == {"2"}
