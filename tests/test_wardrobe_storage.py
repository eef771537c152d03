import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.outfit import OutfitWear, SavedOutfit
from models.preferences import ColorCombination
from models.wardrobe_item import ClothingItem
from tools.wardrobe_store import SQLiteWardrobeStore


@pytest.fixture()
def store(tmp_path: Path) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(tmp_path / "nested" / "wardrobe.db")


def _item(item_id: str, clothing_type: str, color: str, user_id: str = "user_1", **kwargs) -> ClothingItem:
    return ClothingItem(item_id=item_id, clothing_type=clothing_type, colors=[color], user_id=user_id, **kwargs)


def test_items_round_trip_and_dirty_filtering(store):
    store.create_item(_item("tee", "T-Shirt", "blue"))
    store.create_item(_item("jeans", "Jeans", "black", is_dirty=True))
    store.create_item(_item("other", "Polo", "red", user_id="user_2"))

    clean = store.list_items_for_user("user_1")
    assert [item.item_id for item in clean] == ["tee"]
    assert clean[0].colors == ["blue"]
    assert {item.item_id for item in store.list_items_for_user("user_1", include_dirty=True)} == {"tee", "jeans"}

    assert store.set_dirty("user_1", "jeans", False)
    assert {item.item_id for item in store.list_items_for_user("user_1")} == {"tee", "jeans"}
    assert not store.set_dirty("user_1", "missing", True)


def test_create_item_requires_owner(store):
    with pytest.raises(ValueError):
        store.create_item(ClothingItem(item_id="tee", clothing_type="T-Shirt"))


def test_update_and_delete_item(store):
    store.create_item(_item("tee", "T-Shirt", "blue"))
    updated = store.update_item("user_1", "tee", {"colors": ["green"], "user_id": "intruder"})
    assert updated.colors == ["green"]
    assert updated.user_id == "user_1"
    assert store.update_item("user_1", "missing", {"colors": ["red"]}) is None

    assert store.delete_item("user_1", "tee")
    assert store.get_item("user_1", "tee") is None
    assert not store.delete_item("user_1", "tee")


def test_color_combinations_are_per_user(store):
    saved = store.add_color_combination("user_1", ColorCombination("Blue", "Black"))
    store.add_color_combination("user_2", ColorCombination("red", "white"))

    combos = store.list_color_combinations("user_1")
    assert len(combos) == 1
    assert combos[0].key == ("blue", "black")
    assert saved.combination_id
    assert store.delete_color_combination("user_1", saved.combination_id)
    assert store.list_color_combinations("user_1") == []


def test_recent_wears_respect_window(store):
    store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 20), top_id="old", bottom_id="b", shoes_id="s"))
    store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 23), top_id="edge", bottom_id="b", shoes_id="s"))
    store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 29), top_id="new", bottom_id="b", shoes_id="s"))
    store.record_wear("user_2", OutfitWear(worn_date=date(2025, 11, 29), top_id="theirs", bottom_id="b", shoes_id="s"))

    recent = store.list_recent_wears("user_1", since=date(2025, 11, 23))
    assert [wear.top_id for wear in recent] == ["new", "edge"]
    assert all(wear.user_id == "user_1" and wear.wear_id for wear in recent)


def test_rated_wears_most_recent_first_with_limit(store):
    for day in range(1, 6):
        stored = store.record_wear(
            "user_1", OutfitWear(worn_date=date(2025, 11, day), top_id=f"t{day}", bottom_id="b", shoes_id="s")
        )
        if day != 3:
            store.rate_wear("user_1", stored.wear_id, rating=day + 4, comfort_rating=day)

    rated = store.list_rated_wears("user_1", limit=3)
    assert [wear.top_id for wear in rated] == ["t5", "t4", "t2"]
    assert rated[0].rating == 9 and rated[0].comfort_rating == 5


def test_rate_wear_validates_range_and_missing(store):
    stored = store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 1), top_id="t", bottom_id="b", shoes_id="s"))
    with pytest.raises(ValueError):
        store.rate_wear("user_1", stored.wear_id, rating=11)
    with pytest.raises(ValueError):
        store.rate_wear("user_1", stored.wear_id, rating=5, comfort_rating=0)
    assert store.rate_wear("user_1", "missing", rating=5) is None
    assert store.rate_wear("user_2", stored.wear_id, rating=5) is None

    rated = store.rate_wear("user_1", stored.wear_id, rating=7)
    assert rated.rating == 7 and rated.comfort_rating is None


def test_unrated_wears_before_a_date_newest_first(store):
    store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 27), top_id="tee", wear_id="old"))
    store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 29), top_id="tee", wear_id="yesterday"))
    store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 29), top_id="polo", wear_id="rated", rating=7))
    store.record_wear("user_1", OutfitWear(worn_date=date(2025, 11, 30), top_id="tee", wear_id="today"))
    store.record_wear("user_2", OutfitWear(worn_date=date(2025, 11, 29), top_id="tee", wear_id="foreign"))

    unrated = store.list_unrated_wears("user_1", before=date(2025, 11, 30))
    assert [wear.wear_id for wear in unrated] == ["yesterday", "old"]

    only_yesterday = store.list_unrated_wears("user_1", before=date(2025, 11, 30), since=date(2025, 11, 29), limit=1)
    assert [wear.wear_id for wear in only_yesterday] == ["yesterday"]

    store.rate_wear("user_1", "yesterday", 8)
    assert store.list_unrated_wears("user_1", before=date(2025, 11, 30), since=date(2025, 11, 29)) == []


def test_saved_outfits_are_listed_newest_first_and_deleted_per_user(store):
    first = store.save_outfit(
        "user_1", SavedOutfit(top_id="tee", bottom_id="jeans", shoes_id="sneakers", created_at="2025-11-28T08:00:00+00:00")
    )
    second = store.save_outfit(
        "user_1",
        SavedOutfit(
            top_id="oxford",
            outerwear_id="jacket",
            bottom_id="pants",
            shoes_id="boots",
            created_at="2025-11-29T08:00:00+00:00",
        ),
    )
    store.save_outfit("user_2", SavedOutfit(top_id="polo", bottom_id="shorts", shoes_id="sandals"))

    assert first.outfit_id and first.user_id == "user_1"
    saved = store.list_saved_outfits("user_1")
    assert [outfit.outfit_id for outfit in saved] == [second.outfit_id, first.outfit_id]
    assert saved[0].outerwear_id == "jacket"
    assert saved[1].outerwear_id is None

    assert not store.delete_saved_outfit("user_2", first.outfit_id)
    assert store.delete_saved_outfit("user_1", first.outfit_id)
    assert [outfit.outfit_id for outfit in store.list_saved_outfits("user_1")] == [second.outfit_id]


def test_saved_outfit_requires_core_pieces(store):
    with pytest.raises(ValueError):
        store.save_outfit("user_1", SavedOutfit(top_id="tee", bottom_id="", shoes_id="sneakers"))
    assert store.list_saved_outfits("user_1") == []
