import pytest

from potionsgame.coinpouch import CoinPouch
from potionsgame.inventory import PotionInventory
from potionsgame.potion import Potion


def test_write_coins_creates_empty_file(tmp_path):
    pouch = CoinPouch(tmp_path / "coins.bin")
    pouch.write_coins(PotionInventory([Potion("a", "b", "c", 1)]))
    assert pouch.path.read_bytes() == b""


def test_write_coins_truncates_existing(tmp_path):
    path = tmp_path / "coins.bin"
    path.write_bytes(b"old contents")
    CoinPouch(path).write_coins(PotionInventory())
    assert path.read_bytes() == b""


def test_write_coins_unwritable_path_raises(tmp_path):
    pouch = CoinPouch(tmp_path / "no_such_dir" / "coins.bin")
    with pytest.raises(OSError):
        pouch.write_coins(PotionInventory())