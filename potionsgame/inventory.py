"""An ordered collection of distinct potions."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from potionsgame.potion import Potion


class PotionInventory:
    """Potions kept in insertion order; a potion equal to one held is never added twice."""

    def __init__(self, potions: Iterable[Potion] | None = None) -> None:
        self._potions: list[Potion] = []
        for potion in potions or ():
            self.insert(potion)

    def __len__(self) -> int:
        return len(self._potions)

    def __iter__(self) -> Iterator[Potion]:
        return iter(self._potions)

    def __getitem__(self, index: int) -> Potion:
        """The potion at ``index``; negative indexes are out of range."""
        if not 0 <= index < len(self._potions):
            raise IndexError("Index out of range")
        return self._potions[index]

    def __contains__(self, potion: object) -> bool:
        return potion in self._potions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PotionInventory):
            return NotImplemented
        return self._potions == other._potions

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._potions!r})"

    def index_of(self, potion: Potion) -> int:
        """Index of the first potion equal to ``potion``; ValueError if absent."""
        try:
            return self._potions.index(potion)
        except ValueError:
            raise ValueError(f"potion not found: {potion.name!r}") from None

    def index_of_name(self, name: str) -> int:
        """Index of the first potion called ``name``; ValueError if absent."""
        for index, potion in enumerate(self._potions):
            if potion.name == name:
                return index
        raise ValueError(f"no potion named {name!r}")

    def insert(self, potion: Potion) -> bool:
        """Append ``potion`` unless an equal one is held; report whether it was added."""
        if potion in self._potions:
            return False
        self._potions.append(potion)
        return True

    def add(self, name: str, desc: str, potency: str, cost: int) -> bool:
        """Build a potion from its fields and insert it."""
        return self.insert(Potion(name, desc, potency, cost))

    def remove(self, potion: Potion) -> None:
        """Remove the potion equal to ``potion``; ValueError if absent."""
        del self._potions[self.index_of(potion)]

    def remove_at(self, index: int) -> Potion:
        """Remove and return the potion at ``index``; IndexError if out of range."""
        if not 0 <= index < len(self._potions):
            raise IndexError("Potion not found")
        return self._potions.pop(index)

    def describe(self, index: int) -> str:
        """Description of the potion at ``index``, or an empty string if there is none."""
        if not 0 <= index < len(self._potions):
            return ""
        return self._potions[index].describe()

    def describe_all(self) -> str:
        """Descriptions of every potion, each followed by a blank line."""
        return "".join(potion.describe() + "\n" for potion in self._potions)

    def display(self, index: int, out: TextIO | None = None) -> None:
        """Write the description of the potion at ``index``."""
        (out or sys.stdout).write(self.describe(index))

    def display_all(self, out: TextIO | None = None) -> None:
        """Write the descriptions of every potion."""
        (out or sys.stdout).write(self.describe_all())