from __future__ import annotations

from shop_admin.core.selection import SelectionSet


def test_toggle_row_flips_membership():
    sel = SelectionSet()
    sel.toggle_row("1")
    assert sel.is_selected("1")
    sel.toggle_row("1")
    assert not sel.is_selected("1")
    assert len(sel) == 0


def test_all_visible_selected_is_false_for_empty_page():
    sel = SelectionSet(["1"])
    assert sel.all_visible_selected([]) is False


def test_select_all_adds_visible_without_touching_others():
    sel = SelectionSet(["6", "7"])
    sel.toggle_select_all_visible(["1", "2", "3"])
    assert set(sel.selected_ids()) == {"1", "2", "3", "6", "7"}


def test_select_all_with_partial_page_selects_the_rest():
    sel = SelectionSet(["2"])
    assert not sel.all_visible_selected(["1", "2", "3"])
    sel.toggle_select_all_visible(["1", "2", "3"])
    assert sel.all_visible_selected(["1", "2", "3"])


def test_select_all_round_trip_restores_previous_selection():
    sel = SelectionSet(["9"])
    before = sel.selected_ids()

    sel.toggle_select_all_visible(["1", "2", "3", "4", "5"])
    sel.toggle_select_all_visible(["1", "2", "3", "4", "5"])

    assert sel.selected_ids() == before


def test_deselect_all_removes_only_visible_ids():
    sel = SelectionSet(["1", "2", "8"])
    sel.toggle_select_all_visible(["1", "2"])
    assert sel.selected_ids() == ["8"]


def test_snapshot_follows_selection_order_and_is_a_copy():
    sel = SelectionSet()
    for row_id in ["3", "1", "2"]:
        sel.toggle_row(row_id)

    snapshot = sel.selected_ids()
    assert snapshot == ["3", "1", "2"]

    sel.clear()
    assert snapshot == ["3", "1", "2"]
    assert sel.selected_ids() == []
