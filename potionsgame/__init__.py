"""Potions with coin-formatted costs, an inventory, a backpack file, a coin pouch and a command to show them."""

__version__ = "0.1.0"

__all__ = ["potion", "inventory", "backpack", "coinpouch", "game"]