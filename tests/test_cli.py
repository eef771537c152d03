import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

import main
from agents.outfit_stylist_agent import NO_OUTFITS_MESSAGE
from models.wardrobe_item import ClothingItem
from tools.wardrobe_store import SQLiteWardrobeStore


@pytest.fixture()
def database(tmp_path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("APP_CONFIG_PATH", raising=False)
    path = tmp_path / "wardrobe.db"
    store = SQLiteWardrobeStore(path)
    for item_id, clothing_type, color in [("tee", "T-Shirt", "blue"), ("jeans", "Jeans", "black"), ("sneakers", "Shoes", "white")]:
        store.create_item(ClothingItem(item_id=item_id, clothing_type=clothing_type, colors=[color], user_id="user_1"))
    return path


@pytest.mark.parametrize("value", ["0", "-1", "two"])
def test_count_must_be_a_positive_whole_number(value, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main._parser().parse_args(["--user", "user_1", "--count", value])
    assert excinfo.value.code == 2
    assert "--count" in capsys.readouterr().err


def test_count_accepts_positive_values():
    assert main._parser().parse_args(["--count", "3"]).count == 3


def test_pick_wraps_and_records_wear_and_favourite(database, capsys):
    exit_code = main.main(
        ["--database", str(database), "--user", "user_1", "--category", "warm", "--pick", "3", "--wear", "--save"]
    )
    assert exit_code == 0

    result = json.loads(capsys.readouterr().out)
    assert result["position"] == 0
    assert result["of"] == 1
    assert result["outfit"]["top"]["item_id"] == "tee"

    store = SQLiteWardrobeStore(database)
    assert store.get_wear("user_1", result["wear_id"]).shoes_id == "sneakers"
    assert [outfit.outfit_id for outfit in store.list_saved_outfits("user_1")] == [result["saved_outfit_id"]]


def test_pick_without_outfits_prints_hint(database, capsys):
    exit_code = main.main(["--database", str(database), "--user", "user_1", "--category", "cold", "--pick", "0"])
    assert exit_code == 1
    assert capsys.readouterr().out.strip() == NO_OUTFITS_MESSAGE
