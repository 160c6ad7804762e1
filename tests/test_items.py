"""Tests for ListItem and ItemStore."""

from __future__ import annotations

import pytest

from listview.errors import ListViewError, OutOfRangeError
from listview.items import ItemStore, ListItem, clamp_index


def _store(*texts: str) -> ItemStore:
    store = ItemStore()
    for text in texts:
        store.insert(-1, ListItem(main_text=text))
    return store


def _texts(store: ItemStore) -> list[str]:
    return [item.main_text for item in store]


class TestListItem:
    """Tests for row flags."""

    def test_plain_row_is_selectable(self) -> None:
        assert ListItem("Open").selectable is True

    def test_disabled_row_not_selectable(self) -> None:
        assert ListItem("Open", enabled=False).selectable is False

    def test_empty_row_is_divider(self) -> None:
        item = ListItem("")
        assert item.is_divider is True
        assert item.selectable is False

    def test_shortcut_only_row_is_not_divider(self) -> None:
        assert ListItem("", shortcut="x").is_divider is False

    def test_secondary_only_row_is_not_divider(self) -> None:
        assert ListItem("", secondary_text="note").is_divider is False


class TestClampIndex:
    """Tests for the clamping index policy."""

    @pytest.mark.parametrize(
        ("index", "expected"),
        [(0, 0), (4, 4), (5, 4), (99, 4), (-1, 4), (-5, 0), (-7, 0)],
    )
    def test_clamp(self, index: int, expected: int) -> None:
        assert clamp_index(index, 5) == expected

    def test_empty_sequence(self) -> None:
        assert clamp_index(3, 0) == 0


class TestInsert:
    """Tests for ItemStore.insert."""

    def test_append_with_minus_one(self) -> None:
        store = _store("A", "B")
        assert store.insert(-1, ListItem("C")) == 2
        assert _texts(store) == ["A", "B", "C"]

    def test_minus_two_inserts_before_last(self) -> None:
        store = _store("A", "B")
        assert store.insert(-2, ListItem("X")) == 1
        assert _texts(store) == ["A", "X", "B"]

    def test_front(self) -> None:
        store = _store("A", "B")
        store.insert(0, ListItem("X"))
        assert _texts(store) == ["X", "A", "B"]

    def test_past_end_appends(self) -> None:
        store = _store("A")
        assert store.insert(10, ListItem("X")) == 1

    def test_far_negative_inserts_at_front(self) -> None:
        store = _store("A", "B")
        assert store.insert(-10, ListItem("X")) == 0
        assert _texts(store) == ["X", "A", "B"]


class TestRemove:
    """Tests for ItemStore.remove."""

    def test_remove_middle(self) -> None:
        store = _store("A", "B", "C")
        assert store.remove(1) == 1
        assert _texts(store) == ["A", "C"]

    def test_negative_removes_from_end(self) -> None:
        store = _store("A", "B", "C")
        assert store.remove(-1) == 2
        assert _texts(store) == ["A", "B"]

    def test_out_of_range_clamps(self) -> None:
        store = _store("A", "B", "C")
        assert store.remove(42) == 2
        assert _texts(store) == ["A", "B"]

    def test_empty_store_returns_none(self) -> None:
        assert ItemStore().remove(0) is None

    def test_clear(self) -> None:
        store = _store("A", "B")
        store.clear()
        assert len(store) == 0


class TestStrictAccess:
    """Tests for the strict index policy."""

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_range(self, index: int) -> None:
        with pytest.raises(OutOfRangeError):
            _store("A", "B", "C").get(index)

    def test_error_hierarchy(self) -> None:
        with pytest.raises(IndexError):
            _store("A").get(5)
        with pytest.raises(ListViewError):
            _store("A").get(5)

    def test_error_message_names_index_and_size(self) -> None:
        with pytest.raises(OutOfRangeError, match="5.*1 items"):
            _store("A").get(5)

    def test_set_text(self) -> None:
        store = _store("A")
        store.set_text(0, "B", "second")
        assert store.get(0).main_text == "B"
        assert store.get(0).secondary_text == "second"

    def test_set_text_out_of_range_leaves_store_untouched(self) -> None:
        store = _store("A")
        with pytest.raises(OutOfRangeError):
            store.set_text(1, "B", "")
        assert _texts(store) == ["A"]

    def test_set_enabled(self) -> None:
        store = _store("A")
        store.set_enabled(0, False)
        assert store.get(0).enabled is False
        with pytest.raises(OutOfRangeError):
            store.set_enabled(-1, True)


class TestQueries:
    """Tests for shortcut and selectability queries."""

    def test_first_shortcut_match_skips_disabled(self) -> None:
        store = ItemStore()
        store.insert(-1, ListItem("One", shortcut="x", enabled=False))
        store.insert(-1, ListItem("Two", shortcut="x"))
        store.insert(-1, ListItem("Three", shortcut="x"))
        assert store.first_shortcut_match("x") == 1

    def test_first_shortcut_match_is_case_sensitive(self) -> None:
        store = ItemStore()
        store.insert(-1, ListItem("One", shortcut="x"))
        assert store.first_shortcut_match("X") is None

    def test_has_shortcuts(self) -> None:
        store = _store("A")
        assert store.has_shortcuts() is False
        store.insert(-1, ListItem("B", shortcut="b"))
        assert store.has_shortcuts() is True

    def test_selectable_mask(self) -> None:
        store = ItemStore()
        store.insert(-1, ListItem("A"))
        store.insert(-1, ListItem(""))
        store.insert(-1, ListItem("C", enabled=False))
        assert store.selectable_mask() == [True, False, False]

    def test_first_selectable(self) -> None:
        store = ItemStore()
        store.insert(-1, ListItem(""))
        store.insert(-1, ListItem("B"))
        assert store.first_selectable() == 1
        assert ItemStore().first_selectable() is None


class TestFind:
    """Tests for ItemStore.find."""

    @pytest.fixture
    def store(self) -> ItemStore:
        store = ItemStore()
        store.insert(-1, ListItem("Open", "Open a file"))
        store.insert(-1, ListItem("Save", "Write the file"))
        store.insert(-1, ListItem(""))
        store.insert(-1, ListItem("Save as", "Pick a new name"))
        return store

    def test_main_only(self, store: ItemStore) -> None:
        assert store.find("Save", "") == [1, 3]

    def test_secondary_only(self, store: ItemStore) -> None:
        assert store.find("", "file") == [0, 1]

    def test_empty_search_alone_matches_nothing(self, store: ItemStore) -> None:
        """Without must_contain_both only the non-empty search decides."""
        assert store.find("", "nowhere") == []
        assert store.find("nowhere", "") == []

    def test_empty_search_matches_field_when_both_required(self, store: ItemStore) -> None:
        """With must_contain_both an empty search accepts any text in its field."""
        assert store.find("", "file", must_contain_both=True) == [0, 1]

    def test_either(self, store: ItemStore) -> None:
        assert store.find("as", "Open") == [0, 3]

    def test_must_contain_both(self, store: ItemStore) -> None:
        assert store.find("Save", "file", must_contain_both=True) == [1]

    def test_ignore_case(self, store: ItemStore) -> None:
        assert store.find("save", "") == []
        assert store.find("save", "", ignore_case=True) == [1, 3]

    def test_both_empty(self, store: ItemStore) -> None:
        assert store.find("", "") == []

    def test_divider_never_matches(self, store: ItemStore) -> None:
        assert 2 not in store.find("", "x", must_contain_both=True)
