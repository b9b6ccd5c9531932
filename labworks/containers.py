"""Helpers for building, combining and formatting lists and key-ordered maps."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")


def _ordered(mapping: Mapping[K, V]) -> dict[K, V]:
    """Return a dict with the entries of mapping in ascending key order."""
    return {key: mapping[key] for key in sorted(mapping)}


def convert_vectors_to_map(keys: Iterable[K], values: Iterable[V]) -> dict[K, V]:
    """Pair keys with values, in ascending key order.

    A repeated key is skipped without using up a value. Pairing stops as soon
    as either sequence runs out.
    """
    result: dict[K, V] = {}
    value_iter = iter(values)
    for key in keys:
        if key in result:
            continue
        try:
            value = next(value_iter)
        except StopIteration:
            break
        result[key] = value
    return _ordered(result)


def get_keys(mapping: Mapping[K, V]) -> list[K]:
    """Keys of mapping in ascending order."""
    return sorted(mapping)


def get_values(mapping: Mapping[K, V]) -> list[V]:
    """Values of mapping, ordered by their keys."""
    return [mapping[key] for key in sorted(mapping)]


def reverse(values: Sequence[T]) -> list[T]:
    """Return the values in reverse order."""
    return list(reversed(values))


def combine_lists(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Values of first then second, each kept only at its first appearance."""
    combined: list[T] = []
    for item in (*first, *second):
        if item not in combined:
            combined.append(item)
    return combined


def combine_maps(first: Mapping[K, V], second: Mapping[K, V]) -> dict[K, V]:
    """Union of two maps in key order; on a shared key the first map wins."""
    combined = dict(first)
    for key, value in second.items():
        combined.setdefault(key, value)
    return _ordered(combined)


def format_list(values: Iterable[Any]) -> str:
    """Render values separated by a comma and a space."""
    return ", ".join(str(value) for value in values)


def format_map(mapping: Mapping[Any, Any]) -> str:
    """Render each entry as "{ key, value }" on its own line, in key order."""
    return "".join(f"{{ {key}, {mapping[key]} }}\n" for key in sorted(mapping))