"""Exceptions raised by listview."""

from __future__ import annotations


class ListViewError(Exception):
    """Base class for all listview errors."""


class OutOfRangeError(ListViewError, IndexError):
    """
    A by-index lookup or mutation addressed a row that does not exist.

    Raised by the strict accessors (``get_item``, ``set_item_text``,
    ``set_item_enabled``) which, unlike navigation and insert/remove,
    never clamp their index.
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Item index {index} out of range for list of {size} items")


class ConfigError(ListViewError, ValueError):
    """A configuration value could not be interpreted."""
