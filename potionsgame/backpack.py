"""A backpack that keeps a potion inventory in a binary file."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import TextIO, Union

from potionsgame.inventory import PotionInventory
from potionsgame.potion import Coin, Potion

StrPath = Union[str, "PathLike[str]"]

DEFAULT_BACKPACK_PATH = "Backpack.bin"

_LENGTH = struct.Struct("<Q")
_COST = struct.Struct("<i")


class _Truncated(Exception):
    """Raised internally when a record runs past the end of the data."""


def _encode_text(text: str) -> bytes:
    data = text.encode("utf-8")
    return _LENGTH.pack(len(data)) + data


def encode_potions(potions: Iterable[Potion]) -> bytes:
    """Serialise potions as length-prefixed name, description and potency, then cost."""
    chunks: list[bytes] = []
    for potion in potions:
        chunks.append(_encode_text(potion.name))
        chunks.append(_encode_text(potion.desc))
        chunks.append(_encode_text(potion.potency))
        try:
            chunks.append(_COST.pack(potion.cost))
        except struct.error as exc:
            raise ValueError(f"cost out of range: {potion.cost}") from exc
    return b"".join(chunks)


def _iter_records(data: bytes) -> Iterator[Potion]:
    view = memoryview(data)
    offset = 0

    def take(size: int) -> bytes:
        nonlocal offset
        if offset + size > len(view):
            raise _Truncated
        chunk = bytes(view[offset : offset + size])
        offset += size
        return chunk

    def take_text() -> str:
        (length,) = _LENGTH.unpack(take(_LENGTH.size))
        return take(length).decode("utf-8")

    while True:
        try:
            name = take_text()
            desc = take_text()
            potency = take_text()
            (cost,) = _COST.unpack(take(_COST.size))
        except _Truncated:
            return
        yield Potion(name, desc, potency, cost)


def decode_potions(data: bytes) -> list[Potion]:
    """Read potions back from bytes; an incomplete trailing record is dropped."""
    return list(_iter_records(data))


def write_potions(potions: Iterable[Potion], path: StrPath) -> None:
    """Write potions to ``path``, replacing whatever was there."""
    Path(path).write_bytes(encode_potions(potions))


def read_potions(path: StrPath) -> list[Potion]:
    """Read potions from ``path``; OSError if the file cannot be opened."""
    return decode_potions(Path(path).read_bytes())


def default_potions() -> list[Potion]:
    """The potions every new backpack starts with."""
    return [
        Potion("Healing Potion", "Heals you to full hp", "Extremely Potent",
               Coin.PLATINUM * 2 + 89),
        Potion("Hurting Potion", "Can hurt a lot or a little", "Mildly Potent", 69),
        Potion("Smoke potion", "Create a wall of smoke to escape", "Very Potent", 95),
        Potion("Invisibility Potion",
               "Nobody will be able to see you after you drink this", "Unknown",
               Coin.SILVER * 2 + 202),
        Potion("Truth Potion",
               "Whoever drink this will tell the truth and nothing but the truth",
               "Highly Potent", 165),
        Potion("Loud Potion", "Makes your voice loud as hell", "Hella loud",
               Coin.BRONZE * 2 + 9),
        Potion("Shrink Potion", "Makes you shrink a lot", "Small af",
               Coin.SILVER * 2 + 96),
    ]


class Backpack:
    """Loads and saves a potion inventory at a file path."""

    def __init__(self, path: StrPath = DEFAULT_BACKPACK_PATH) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    def load_into(self, inventory: PotionInventory) -> int:
        """Add the stored potions to ``inventory``; return how many were new.

        Raises OSError if the backpack file cannot be read.
        """
        return sum(inventory.insert(potion) for potion in read_potions(self.path))

    def _load_existing(self, inventory: PotionInventory) -> None:
        try:
            self.load_into(inventory)
        except FileNotFoundError:
            pass

    def save(self, inventory: PotionInventory) -> None:
        """Write every potion in ``inventory`` to the backpack file."""
        write_potions(inventory, self.path)

    def display_whole(self, inventory: PotionInventory, out: TextIO | None = None) -> None:
        """Merge in the stored potions, then write a description of all of them."""
        self._load_existing(inventory)
        inventory.display_all(out or sys.stdout)

    def add_potion(self, potion: Potion, inventory: PotionInventory) -> bool:
        """Add ``potion`` unless already held, then save; report whether it was added."""
        added = inventory.insert(potion)
        self.save(inventory)
        return added

    def remove_potion(self, inventory: PotionInventory, potion: Potion) -> None:
        """Remove ``potion`` from ``inventory``; ValueError if it is not there."""
        inventory.remove(potion)

    def search_potion(self, inventory: PotionInventory, potion: Potion) -> int:
        """Index of ``potion`` in ``inventory``; ValueError if it is not there."""
        return inventory.index_of(potion)

    def insert_default_potions(self, inventory: PotionInventory) -> None:
        """Merge in the stored potions, add the default ones, and save."""
        self._load_existing(inventory)
        for potion in default_potions():
            inventory.insert(potion)
        self.save(inventory)