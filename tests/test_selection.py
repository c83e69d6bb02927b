"""Tests for the cursor-addressable selection lists."""

from __future__ import annotations

import pytest

from cvgen.selection import ChoiceList, InclusionList, SelectableItem, SelectionList

# ======================================================================
# Navigation
# ======================================================================


class TestNavigation:
    def test_new_list_has_no_cursor(self):
        items = SelectionList(["a", "b"])
        assert items.cursor is None
        assert items.current() is None

    def test_items_start_included(self):
        items = SelectionList(["a", "b"])
        assert all(item.included for item in items)
        assert items.values() == ["a", "b"]

    def test_next_from_unset_lands_on_first(self):
        items = SelectionList(["a", "b", "c"])
        items.next()
        assert items.cursor == 0

    def test_previous_from_unset_lands_on_first(self):
        items = SelectionList(["a", "b", "c"])
        items.previous()
        assert items.cursor == 0

    @pytest.mark.parametrize(("presses", "expected"), [(1, 0), (2, 1), (3, 2), (4, 0), (5, 1)])
    def test_next_wraps_around(self, presses, expected):
        items = SelectionList(["a", "b", "c"])
        for _ in range(presses):
            items.next()
        assert items.cursor == expected

    def test_previous_wraps_to_last(self):
        items = SelectionList(["a", "b", "c"])
        items.select_initial()
        items.previous()
        assert items.cursor == 2
        items.previous()
        assert items.cursor == 1

    def test_navigation_on_empty_list_is_noop(self):
        items: SelectionList[str] = SelectionList()
        items.next()
        items.previous()
        items.select_initial()
        assert items.is_empty()
        assert items.cursor is None
        assert items.current() is None

    def test_single_item_list_stays_on_it(self):
        items = SelectionList(["only"])
        items.next()
        items.next()
        items.previous()
        assert items.cursor == 0

    def test_select_initial_resets_to_first(self):
        items = SelectionList(["a", "b", "c"])
        items.next()
        items.next()
        items.select_initial()
        assert items.cursor == 0

    def test_current_returns_highlighted_item(self):
        items = SelectionList(["a", "b"])
        items.next()
        items.next()
        current = items.current()
        assert isinstance(current, SelectableItem)
        assert current.value == "b"

    def test_len_and_indexing(self):
        items = SelectionList(["a", "b"])
        assert len(items) == 2
        assert items[1].value == "b"


# ======================================================================
# Inclusion toggle
# ======================================================================


class TestInclusionList:
    def test_toggle_flips_only_current_item(self):
        items = InclusionList(["a", "b", "c"])
        items.next()
        items.next()
        items.toggle_current()
        assert [item.included for item in items] == [True, False, True]

    def test_toggle_twice_restores(self):
        items = InclusionList(["a"])
        items.select_initial()
        items.toggle_current()
        items.toggle_current()
        assert items[0].included is True

    def test_toggle_without_cursor_is_noop(self):
        items = InclusionList(["a", "b"])
        items.toggle_current()
        assert all(item.included for item in items)

    def test_toggle_on_empty_list_is_noop(self):
        items: InclusionList[str] = InclusionList()
        items.toggle_current()
        assert items.included_values() == []

    def test_included_values_keep_order(self):
        items = InclusionList(["A", "B", "C"])
        items.next()
        items.next()
        items.toggle_current()
        assert items.included_values() == ["A", "C"]

    def test_toggle_does_not_move_cursor(self):
        items = InclusionList(["a", "b"])
        items.next()
        items.toggle_current()
        assert items.cursor == 0


# ======================================================================
# Single choice
# ======================================================================


class TestChoiceList:
    def test_choose_without_cursor_returns_none(self):
        assert ChoiceList(["Engineer"]).choose_current() is None

    def test_choose_returns_highlighted_value(self):
        titles = ChoiceList(["Engineer", "Manager"])
        titles.select_initial()
        titles.next()
        assert titles.choose_current() == "Manager"

    def test_choose_leaves_flags_untouched(self):
        titles = ChoiceList(["Engineer", "Manager"])
        titles.select_initial()
        titles.choose_current()
        assert all(item.included for item in titles)
