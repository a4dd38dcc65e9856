from potionsgame.backpack import Backpack, read_potions, write_potions
from potionsgame.coinpouch import CoinPouch
from potionsgame.game import Character, main
from potionsgame.inventory import PotionInventory
from potionsgame.potion import Potion

SHRINK = Potion("Shrink Potion", "Makes you shrink a lot", "Small af", 116)


def test_main_shows_stored_potions(tmp_path, capsys):
    backpack = tmp_path / "pack.bin"
    coins = tmp_path / "coins.bin"
    write_potions([SHRINK], backpack)
    status = main(["--backpack", str(backpack), "--coins", str(coins)])
    captured = capsys.readouterr()
    assert status == 0
    assert SHRINK.describe() in captured.out
    assert captured.out.count("Potion Name:") == 1
    assert coins.read_bytes() == b""


def test_main_reports_missing_backpack(tmp_path, capsys):
    coins = tmp_path / "coins.bin"
    status = main(["--backpack", str(tmp_path / "missing.bin"), "--coins", str(coins)])
    captured = capsys.readouterr()
    assert status == 0
    assert "Error opening file for reading." in captured.err
    assert "Potion Name:" not in captured.out


def test_main_reports_unwritable_pouch(tmp_path, capsys):
    backpack = tmp_path / "pack.bin"
    write_potions([SHRINK], backpack)
    main(["--backpack", str(backpack), "--coins", str(tmp_path / "nodir" / "c.bin")])
    captured = capsys.readouterr()
    assert "Error opening file for writing." in captured.err
    assert SHRINK.describe() in captured.out


def test_character_uses_its_backpack(tmp_path):
    character = Character(Backpack(tmp_path / "pack.bin"), CoinPouch(tmp_path / "c.bin"))
    assert character.backpack.add_potion(SHRINK, character.inventory) is True
    assert read_potions(tmp_path / "pack.bin") == [SHRINK]
    assert list(character.inventory) == [SHRINK]


def test_character_defaults_are_independent():
    first = Character()
    second = Character()
    first.inventory.insert(SHRINK)
    assert len(second.inventory) == 0
    assert second.inventory == PotionInventory()