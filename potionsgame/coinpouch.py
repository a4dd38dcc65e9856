"""A coin pouch stored alongside the backpack."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

from potionsgame.inventory import PotionInventory

StrPath = Union[str, "PathLike[str]"]

DEFAULT_COINPOUCH_PATH = "CoinPouch.bin"


class CoinPouch:
    """A pouch whose contents live in a binary file."""

    def __init__(self, path: StrPath = DEFAULT_COINPOUCH_PATH) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    def write_coins(self, inventory: PotionInventory) -> None:
        """Start a fresh pouch file; potions carry no coin records, so it stays empty.

        Raises OSError if the file cannot be opened for writing.
        """
        with self.path.open("wb"):
            for _potion in inventory:
                pass