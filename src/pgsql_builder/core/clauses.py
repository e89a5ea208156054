"""Clause state tagged with how it merges into another statement.

A statement builder keeps one object per clause.  The class of that object
decides what ``apply`` does with it:

* :class:`Singular` - last write wins, and only a clause that was set overrides
  the receiver.
* :class:`Accumulating` - items are appended in call order.
* :class:`Replaceable` - accumulating, but the whole list can be replaced once;
  applying a replaced clause discards what the receiver had collected.
"""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from .sql import SQLWriter

__all__ = ["Accumulating", "Replaceable", "Singular"]

T = TypeVar("T")


class Singular(Generic[T]):
    __slots__ = ("value", "is_set")

    def __init__(self, value: Optional[T] = None) -> None:
        self.value = value
        self.is_set = False

    def set(self, value: T) -> None:
        self.value = value
        self.is_set = True

    def merge_into(self, receiver: "Singular[T]") -> None:
        if self.is_set:
            receiver.set(self.value)  # type: ignore[arg-type]


class Accumulating:
    __slots__ = ("items",)

    def __init__(self) -> None:
        self.items: List[SQLWriter] = []

    def __len__(self) -> int:
        return len(self.items)

    def append(self, item: SQLWriter) -> None:
        self.items.append(item)

    def merge_into(self, receiver: "Accumulating") -> None:
        receiver.items.extend(self.items)


class Replaceable(Accumulating):
    __slots__ = ("replaced",)

    def __init__(self) -> None:
        super().__init__()
        self.replaced = False

    def replace(self, item: SQLWriter) -> None:
        self.items = [item]
        self.replaced = True

    def merge_into(self, receiver: "Accumulating") -> None:
        items = list(self.items)
        if self.replaced:
            receiver.items = []
            if isinstance(receiver, Replaceable):
                receiver.replaced = True
        receiver.items.extend(items)
