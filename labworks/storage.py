"""Fixed-size storage with copy and move-out semantics."""

from __future__ import annotations

from typing import Any, Iterator


class Storage:
    """A fixed-length array of values that can be copied or moved out."""

    def __init__(self, length: int, initial_value: Any = 0) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._items: list[Any] | None = [initial_value] * length

    @property
    def data(self) -> tuple[Any, ...] | None:
        """The stored values, or None once the contents have been taken."""
        if self._items is None:
            return None
        return tuple(self._items)

    @property
    def size(self) -> int:
        """Number of slots; 0 once the contents have been taken."""
        return 0 if self._items is None else len(self._items)

    def update(self, index: int, data: Any) -> None:
        """Store data at index; raise IndexError when index is out of range."""
        if self._items is None or not 0 <= index < len(self._items):
            raise IndexError("storage index out of range")
        self._items[index] = data

    def copy(self) -> Storage:
        """Return an independent storage holding the same values."""
        duplicate = Storage(0)
        duplicate._items = [] if self._items is None else list(self._items)
        return duplicate

    def take(self) -> Storage:
        """Move the contents into a new storage, leaving this one empty."""
        moved = Storage(0)
        moved._items = self._items
        self._items = None
        return moved

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> Any:
        if self._items is None:
            raise IndexError("storage index out of range")
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items or ())