"""Archive items and the archive that owns them."""

from __future__ import annotations

import copy
from collections.abc import Iterator

from .enums import BobType


class ArchivItem:
    """Base class of all archive items: a type and an optional name."""

    def __init__(self, bob_type: BobType = BobType.NONE, name: str = ""):
        self.bob_type = bob_type
        self.name = name

    def clone(self) -> ArchivItem:
        """Return an independent copy of this item."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bob_type={self.bob_type!r}, name={self.name!r})"


def _check_item(item) -> None:
    if item is not None and not isinstance(item, ArchivItem):
        raise TypeError(f"expected ArchivItem or None, got {type(item).__name__}")


class Archiv:
    """An ordered collection of archive items; empty slots hold None."""

    def __init__(self):
        self._items: list[ArchivItem | None] = []

    def alloc(self, count: int) -> None:
        """Drop all entries and create `count` empty slots."""
        self._items = [None] * count

    def alloc_inc(self, increment: int) -> None:
        """Append `increment` empty slots."""
        self._items.extend([None] * increment)

    def clear(self) -> None:
        """Drop all entries."""
        self._items.clear()

    def set(self, index: int, item: ArchivItem | None) -> None:
        """Store the item at the given slot."""
        _check_item(item)
        if not 0 <= index < len(self._items):
            raise IndexError(f"archive index {index} out of range")
        self._items[index] = item

    def set_copy(self, index: int, item: ArchivItem) -> None:
        """Store a copy of the item at the given slot."""
        self.set(index, item.clone())

    def push(self, item: ArchivItem | None) -> None:
        """Append the item."""
        _check_item(item)
        self._items.append(item)

    def push_copy(self, item: ArchivItem) -> None:
        """Append a copy of the item."""
        self.push(item.clone())

    def get(self, index: int) -> ArchivItem | None:
        """Return the item at the index, or None if the index is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def find(self, name: str) -> ArchivItem | None:
        """Return the first item with the given name, or None."""
        return next((item for item in self._items if item is not None and item.name == name), None)

    def release(self, index: int) -> ArchivItem | None:
        """Take the item out of its slot, leaving the slot empty."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"archive index {index} out of range")
        item, self._items[index] = self._items[index], None
        return item

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> ArchivItem | None:
        return self._items[index]

    def __iter__(self) -> Iterator[ArchivItem | None]:
        return iter(self._items)