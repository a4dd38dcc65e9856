"""Potions and the coin denominations their prices are counted in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Coin(IntEnum):
    """Coin denominations, valued in bronze pieces, largest first."""

    PLATINUM = 100
    GOLD = 50
    SILVER = 10
    BRONZE = 1

    @property
    def label(self) -> str:
        """The coin's name as shown to the player."""
        return self.name.capitalize()


def format_cost(total: int) -> str:
    """Break a cost in bronze pieces into coins, e.g. ``"1 Platinum, 1 Gold"``.

    Denominations that come to zero are left out; a cost of zero or less
    yields an empty string.
    """
    if total <= 0:
        return ""
    parts = []
    remaining = total
    for coin in Coin:
        count, remaining = divmod(remaining, coin.value)
        if count > 0:
            parts.append(f"{count} {coin.label}")
    return ", ".join(parts)


@dataclass
class Potion:
    """A potion with a name, description, potency and cost in bronze pieces."""

    name: str = ""
    desc: str = ""
    potency: str = ""
    cost: int = 0

    def formatted_cost(self) -> str:
        """The potion's cost broken into coins."""
        return format_cost(self.cost)

    def describe(self) -> str:
        """A multi-line description of the potion, ending with a newline."""
        return (
            f"Potion Name: {self.name}\n"
            f"Description: {self.desc}\n"
            f"Potency: {self.potency}\n"
            f"Cost: {self.cost}\n"
            f"Formatted cost: {self.formatted_cost()}\n"
        )