"""Named properties, each holding a plain value and a list of indexed values."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass
class Property:
    """A single named property: an unindexed value plus indexed values."""

    value: Any = None
    indexed: list[Any] = field(default_factory=list)

    def copy(self) -> Property:
        """Return an independent copy, duplicating the stored values too."""
        return Property(copy.deepcopy(self.value), copy.deepcopy(self.indexed))


class PropertyStore:
    """A mapping from labels to properties, as kept by a sprite."""

    def __init__(self) -> None:
        self._items: dict[str, Property] = {}

    def __contains__(self, label: object) -> bool:
        return label in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def set(self, label: str, value: Any) -> None:
        """Set the unindexed value of ``label``, replacing the whole property."""
        self._items[label] = Property(value)

    def get(self, label: str) -> Any:
        """Return the unindexed value of ``label``, or None if it is not set."""
        prop = self._items.get(label)
        return prop.value if prop is not None else None

    def set_indexed(self, label: str, index: int, value: Any) -> None:
        """Store ``value`` at ``index``, growing the list with None as needed."""
        if index < 0:
            raise ValueError(f"property index must not be negative: {index}")
        indexed = self._items.setdefault(label, Property()).indexed
        if index >= len(indexed):
            indexed.extend([None] * (index + 1 - len(indexed)))
        indexed[index] = value

    def add(self, label: str, value: Any) -> int:
        """Append ``value`` at the next free index of ``label``; return that index."""
        indexed = self._items.setdefault(label, Property()).indexed
        indexed.append(value)
        return len(indexed) - 1

    def get_indexed(self, label: str, index: int) -> Any:
        """Return the value at ``index`` of ``label``, or None if there is none."""
        prop = self._items.get(label)
        if prop is None or not 0 <= index < len(prop.indexed):
            return None
        return prop.indexed[index]

    def index_count(self, label: str) -> int:
        """Number of indexed values stored under ``label``."""
        prop = self._items.get(label)
        return len(prop.indexed) if prop is not None else 0

    def copy(self) -> PropertyStore:
        """Return an independent copy of the store and all its values."""
        other = PropertyStore()
        other._items = {label: prop.copy() for label, prop in self._items.items()}
        return other