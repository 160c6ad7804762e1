"""
List rows and the ordered store that holds them.

The store itself is not synchronised; :class:`~listview.widget.ListView`
guards every call with its own lock.  Two index policies coexist:

* **clamping** (:meth:`ItemStore.insert`, :meth:`ItemStore.remove`,
  :func:`clamp_index`): negative indices count from the end and anything
  out of range is pulled to the nearest valid position.
* **strict** (:meth:`ItemStore.get`, :meth:`ItemStore.set_text`,
  :meth:`ItemStore.set_enabled`): the index must lie in ``[0, len)`` or
  :class:`~listview.errors.OutOfRangeError` is raised.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from listview.errors import OutOfRangeError


@dataclass
class ListItem:
    """
    A single row of a list.

    Attributes
    ----------
    main_text:
        Text shown on the row and highlighted when selected.
    secondary_text:
        Optional text shown on the line below the main text.
    shortcut:
        A single character that selects the row directly, ``""`` for none.
    on_select:
        Called with no arguments when the row is selected.
    enabled:
        Disabled rows are drawn greyed out and skipped by navigation.
    """

    main_text: str
    secondary_text: str = ""
    shortcut: str = ""
    on_select: Callable[[], None] | None = None
    enabled: bool = True

    @property
    def is_divider(self) -> bool:
        """A row with no text and no shortcut is drawn as a separator line."""
        return not self.main_text and not self.secondary_text and not self.shortcut

    @property
    def selectable(self) -> bool:
        return self.enabled and not self.is_divider


def clamp_index(index: int, size: int) -> int:
    """
    Resolve a possibly negative index against a sequence of *size* rows.

    ``-1`` is the last row, ``-2`` the one before it; anything past either
    end clamps to that end.  Returns 0 for an empty sequence.
    """
    if index < 0:
        index += size
    if index >= size:
        index = size - 1
    return max(0, index)


class ItemStore:
    """Ordered, index-addressable collection of :class:`ListItem`."""

    def __init__(self) -> None:
        self._items: list[ListItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ListItem]:
        return iter(self._items)

    def _check(self, index: int) -> ListItem:
        if not 0 <= index < len(self._items):
            raise OutOfRangeError(index, len(self._items))
        return self._items[index]

    # ------------------------------------------------------------------
    # Clamping mutators
    # ------------------------------------------------------------------

    def insert(self, index: int, item: ListItem) -> int:
        """
        Insert *item* and return the position it landed at.

        ``0`` inserts at the front, ``len`` or more appends.  Negative
        indices count from the end with ``-1`` meaning "append" and
        ``-len - 1`` or lower meaning "front".
        """
        size = len(self._items)
        if index < 0:
            index += size + 1
        index = max(0, min(index, size))
        self._items.insert(index, item)
        return index

    def remove(self, index: int) -> int | None:
        """
        Remove a row and return the position removed, or ``None`` when the
        store is empty.  Unless empty, a row is always removed.
        """
        if not self._items:
            return None
        index = clamp_index(index, len(self._items))
        del self._items[index]
        return index

    def clear(self) -> None:
        self._items.clear()

    # ------------------------------------------------------------------
    # Strict accessors
    # ------------------------------------------------------------------

    def get(self, index: int) -> ListItem:
        return self._check(index)

    def set_text(self, index: int, main_text: str, secondary_text: str) -> None:
        item = self._check(index)
        item.main_text = main_text
        item.secondary_text = secondary_text

    def set_enabled(self, index: int, enabled: bool) -> None:
        self._check(index).enabled = enabled

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def selectable_mask(self) -> list[bool]:
        return [item.selectable for item in self._items]

    def has_shortcuts(self) -> bool:
        return any(item.shortcut for item in self._items)

    def first_shortcut_match(self, char: str) -> int | None:
        """Index of the first selectable row whose shortcut is *char*."""
        for index, item in enumerate(self._items):
            if item.selectable and item.shortcut == char:
                return index
        return None

    def first_selectable(self) -> int | None:
        for index, item in enumerate(self._items):
            if item.selectable:
                return index
        return None

    def find(
        self,
        main_search: str,
        secondary_search: str,
        must_contain_both: bool = False,
        ignore_case: bool = False,
    ) -> list[int]:
        """
        Return ascending indices of rows whose texts contain the searches.

        An empty search string matches any text.  With *must_contain_both*
        the main search must be in the main text and the secondary search
        in the secondary text; otherwise it is enough that one non-empty
        search is contained in its field.  Dividers never match.
        """
        if not main_search and not secondary_search:
            return []

        if ignore_case:
            main_search = main_search.casefold()
            secondary_search = secondary_search.casefold()

        indices: list[int] = []
        for index, item in enumerate(self._items):
            if item.is_divider:
                continue
            main_text, secondary_text = item.main_text, item.secondary_text
            if ignore_case:
                main_text = main_text.casefold()
                secondary_text = secondary_text.casefold()

            main_contained = main_search in main_text
            secondary_contained = secondary_search in secondary_text
            if must_contain_both:
                matched = main_contained and secondary_contained
            else:
                matched = (bool(main_search) and main_contained) or (
                    bool(secondary_search) and secondary_contained
                )
            if matched:
                indices.append(index)
        return indices
