"""Small stateless helpers for dicts, records and sequences.

These share nothing with the selector builder; they live alongside it as
general-purpose utilities.
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict, dataclass, is_dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

TICKET_PRICE = 25


def shallow_copy(obj: Mapping[str, Any]) -> dict[str, Any]:
    return dict(obj)


def merge_objects(objects: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge dicts into one, summing the values of keys that overlap.

    >>> merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}])
    {'a': 1, 'b': 5, 'c': 5}
    """
    merged: dict[str, Any] = {}
    for item in objects:
        for key, value in item.items():
            merged[key] = merged[key] + value if key in merged else value
    return merged


def remove_properties(obj: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a copy of *obj* without *keys*; missing keys are ignored."""
    drop = set(keys)
    return {k: v for k, v in obj.items() if k not in drop}


def compare_objects(a: Mapping[str, Any], b: Mapping[str, Any]) -> bool:
    """Flat equality: same number of keys and equal values for every key of *a*."""
    if len(a) != len(b):
        return False
    return all(key in b and a[key] == b[key] for key in a)


def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0


def make_immutable(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of *obj*; item assignment raises ``TypeError``."""
    return MappingProxyType(dict(obj))


def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """Assemble a word from letters and the positions they occupy.

    >>> make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]})
    'aabbcc'
    """
    placed = {pos: letter for letter, positions in letters.items() for pos in positions}
    if not placed:
        return ""
    length = max(placed) + 1
    return "".join(placed.get(i, " ") for i in range(length))


def sell_tickets(queue: Iterable[int]) -> bool:
    """Return True if every customer in *queue* can be sold a ticket.

    Tickets cost 25 and customers pay with 25, 50 or 100 bills. The seller
    starts with no money and gives change from the bills collected so far,
    preferring a 50 over two 25s.
    """
    till: Counter[int] = Counter()
    for bill in queue:
        change = bill - TICKET_PRICE
        for note in (50, 25):
            while change >= note and till[note]:
                till[note] -= 1
                change -= note
        if change:
            return False
        till[bill] += 1
    return True


@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _encode(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Compact JSON encoding, e.g. ``{"width":10,"height":20}`` for a ``Rectangle``.

    Dataclass instances and plain objects are encoded from their fields.
    """
    return json.dumps(obj, separators=(",", ":"), default=_encode)


def from_json(cls: type[T], text: str) -> T:
    """Create an instance of *cls* from a JSON object without calling ``__init__``."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("JSON text must describe an object")
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    return instance


def sort_cities(items: Iterable[Mapping[str, str]]) -> list[Mapping[str, str]]:
    """Sort records by ``country`` and then ``city``, returning a new list."""
    return sorted(items, key=lambda item: (item["country"], item["city"]))


def group(
    items: Iterable[T], key: Callable[[T], K], value: Callable[[T], V]
) -> dict[K, list[V]]:
    """Group *items* into a multimap, keeping first-seen key order."""
    result: dict[K, list[V]] = {}
    for item in items:
        result.setdefault(key(item), []).append(value(item))
    return result
