"""Fixed-capacity vectors, including a bit-packed vector of booleans."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class FixedVectorFullError(ValueError):
    """Raised when an item is added to a vector that is already full."""


def _check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError("capacity must be an integer")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


class FixedVector(Generic[T]):
    """A vector that holds at most a fixed number of items."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The largest number of items the vector can hold."""
        return self._capacity

    def add(self, item: T) -> None:
        """Append item; raise FixedVectorFullError when the vector is full."""
        if len(self._items) >= self._capacity:
            raise FixedVectorFullError(
                f"vector already holds {self._capacity} items"
            )
        self._items.append(item)

    def remove(self, item: T) -> None:
        """Remove the first item equal to item; raise ValueError if absent."""
        try:
            self._items.remove(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in the vector") from None

    def get(self, index: int) -> T:
        """Return the item at index; raise IndexError when out of range."""
        self._check_index(index)
        return self._items[index]

    def index_of(self, item: T) -> int:
        """Position of the first item equal to item; raise ValueError if absent."""
        try:
            return self._items.index(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in the vector") from None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("vector index out of range")

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"FixedVector({self._capacity}, {self._items!r})"


class FixedBoolVector:
    """A fixed-capacity vector of booleans packed into the bits of an integer."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._bits = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """The largest number of values the vector can hold."""
        return self._capacity

    def add(self, item: Any) -> None:
        """Append the truth value of item; raise FixedVectorFullError when full."""
        if self._count >= self._capacity:
            raise FixedVectorFullError(
                f"vector already holds {self._capacity} values"
            )
        if item:
            self._bits |= 1 << self._count
        self._count += 1

    def remove(self, item: Any) -> None:
        """Remove the first value equal to bool(item); raise ValueError if absent."""
        index = self.index_of(item)
        low = self._bits & ((1 << index) - 1)
        high = self._bits >> (index + 1)
        self._bits = low | (high << index)
        self._count -= 1

    def get(self, index: int) -> bool:
        """Return the value at index; raise IndexError when out of range."""
        if not 0 <= index < self._count:
            raise IndexError("vector index out of range")
        return bool(self._bits >> index & 1)

    def index_of(self, item: Any) -> int:
        """Position of the first value equal to bool(item); raise ValueError if absent."""
        wanted = bool(item)
        for index, value in enumerate(self):
            if value is wanted:
                return index
        raise ValueError(f"{wanted!r} is not in the vector")

    def bits(self, count: int) -> tuple[bool, ...]:
        """The first count stored bits, including unused slots, which are False."""
        if count < 0:
            raise ValueError("count must not be negative")
        return tuple(bool(self._bits >> index & 1) for index in range(count))

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[bool]:
        for index in range(self._count):
            yield bool(self._bits >> index & 1)

    def __contains__(self, item: object) -> bool:
        return bool(item) in list(self)

    def __repr__(self) -> str:
        return f"FixedBoolVector({self._capacity}, {list(self)!r})"