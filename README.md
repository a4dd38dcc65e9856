# potionsgame

This is a small role-playing inventory of potions. Each potion has a name, a
description, a potency and a cost counted in bronze pieces.

A cost is shown as coins. The `Coin` enum gives the value of each coin:

| Coin     | Value in bronze pieces |
|----------|------------------------|
| Platinum | 100                    |
| Gold     | 50                     |
| Silver   | 10                     |
| Bronze   | 1                      |

```python
from potionsgame.potion import Potion, format_cost

format_cost(289)   # "2 Platinum, 1 Gold, 3 Silver, 9 Bronze"
format_cost(0)     # ""

healing = Potion("Healing Potion", "Heals you to full hp", "Extremely Potent", 289)
healing.formatted_cost()   # "2 Platinum, 1 Gold, 3 Silver, 9 Bronze"
print(healing.describe())  # name, description, potency, cost and formatted cost
```

`format_cost` leaves out any coin whose count is zero. It returns an empty
string for a cost of zero or less.

## Inventory

`potionsgame.inventory.PotionInventory` holds distinct potions in the order they
were inserted. If a potion equal to one already held is inserted, it is
ignored.

```python
from potionsgame.inventory import PotionInventory

inventory = PotionInventory()
inventory.add("Loud Potion", "Makes your voice loud as hell", "Hella loud", 11)  # True
inventory.insert(inventory[0])                  # False, already held
inventory.index_of_name("Loud Potion")          # 0
print(inventory.describe_all())
```

- `insert` and `add` return whether the potion was added.
- `index_of` and `index_of_name` raise `ValueError` when no potion matches.
- `remove` raises `ValueError` when no potion matches.
- `inventory[i]` and `remove_at` raise `IndexError` when the index is out of range, including for negative indexes.
- `describe(index)` returns an empty string for an index that has no potion.
- `display` and `display_all` write the descriptions to a text stream. The default stream is standard output.

## Backpack file

`potionsgame.backpack.Backpack` loads an inventory from a binary file and saves
it back. The default file is `Backpack.bin` in the current directory.

The file stores each potion as three strings followed by the cost:

- The strings are name, description and potency. Each is UTF-8, preceded by an 8-byte little-endian length.
- The cost is a 4-byte little-endian signed integer.

When the file is read, an incomplete record at the end is dropped.

```python
from potionsgame.backpack import Backpack
from potionsgame.inventory import PotionInventory

inventory = PotionInventory()
pack = Backpack("Backpack.bin")
pack.insert_default_potions(inventory)   # merges the file if present, adds the defaults, saves
pack.display_whole(inventory)            # merges the file if present, prints every potion
```

The `Backpack` methods:

- `load_into` adds the stored potions to an inventory and returns how many were new. It raises `OSError` if the file cannot be read.
- `save` writes the inventory to the file.
- `add_potion` inserts a potion and then saves.
- `remove_potion` removes a potion and raises `ValueError` if it is absent.
- `search_potion` returns a potion's index and raises `ValueError` if it is absent.

The module-level functions give direct access to the format and to the
starting potions:

- `encode_potions` and `decode_potions` convert between potions and bytes.
- `write_potions` and `read_potions` write potions to a path and read them back.
- `default_potions` returns the seven potions a new backpack starts with.

## Characters

`potionsgame.game.Character` is a dataclass with three fields:

- a `backpack`
- a `purse`, which is a `potionsgame.coinpouch.CoinPouch`
- an `inventory`

## Command line

```
potionsgame [--backpack FILE] [--coins FILE]
```

The command does the following:

1. Loads the backpack file. The default is `Backpack.bin`.
2. Writes the coin pouch file. The default is `CoinPouch.bin`.
3. Prints every potion in the backpack.

If the backpack file cannot be read or the coin pouch file cannot be written,
it reports this on standard error and carries on.

## What it does not do

The coin pouch does not record any coins yet. `CoinPouch.write_coins` creates
(or empties) its file and writes nothing into it. Coins appear only as a way to
display potion costs.

There is no interactive play. The command only shows what the backpack holds.

## Tests

```
pip install -e ".[test]"
pytest
```