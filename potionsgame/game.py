"""The game's characters and its command-line entry point."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

from potionsgame.backpack import DEFAULT_BACKPACK_PATH, Backpack
from potionsgame.coinpouch import DEFAULT_COINPOUCH_PATH, CoinPouch
from potionsgame.inventory import PotionInventory


@dataclass
class Character:
    """A character carrying a backpack, a coin pouch and a potion inventory."""

    backpack: Backpack = field(default_factory=Backpack)
    purse: CoinPouch = field(default_factory=CoinPouch)
    inventory: PotionInventory = field(default_factory=PotionInventory)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="potionsgame", description="Show the potions stored in the backpack."
    )
    parser.add_argument("--backpack", default=DEFAULT_BACKPACK_PATH,
                        help="backpack file (default: %(default)s)")
    parser.add_argument("--coins", default=DEFAULT_COINPOUCH_PATH,
                        help="coin pouch file (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load the backpack, refresh the coin pouch and show every potion."""
    args = _parse_args(argv)
    character = Character(Backpack(args.backpack), CoinPouch(args.coins))

    try:
        character.backpack.load_into(character.inventory)
    except OSError:
        print("Error opening file for reading.", file=sys.stderr)

    try:
        character.purse.write_coins(character.inventory)
    except OSError:
        print("Error opening file for writing.", file=sys.stderr)

    character.backpack.display_whole(character.inventory, sys.stdout)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())