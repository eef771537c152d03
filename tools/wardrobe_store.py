"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import json
import sqlite3
import uuid
from dataclasses import replace
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from models.outfit import OutfitWear, SavedOutfit
from models.preferences import ColorCombination
from models.wardrobe_item import ClothingItem


class WardrobeStore:
    """Per-user persistence interface for items, color preferences and wear history."""

    def create_item(self, item: ClothingItem) -> ClothingItem:
        raise NotImplementedError

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        raise NotImplementedError

    def list_items_for_user(self, user_id: str, include_dirty: bool = False) -> List[ClothingItem]:
        raise NotImplementedError

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[ClothingItem]:
        raise NotImplementedError

    def delete_item(self, user_id: str, item_id: str) -> bool:
        raise NotImplementedError

    def set_dirty(self, user_id: str, item_id: str, is_dirty: bool) -> bool:
        raise NotImplementedError

    def add_color_combination(self, user_id: str, combination: ColorCombination) -> ColorCombination:
        raise NotImplementedError

    def list_color_combinations(self, user_id: str) -> List[ColorCombination]:
        raise NotImplementedError

    def delete_color_combination(self, user_id: str, combination_id: str) -> bool:
        raise NotImplementedError

    def record_wear(self, user_id: str, wear: OutfitWear) -> OutfitWear:
        raise NotImplementedError

    def get_wear(self, user_id: str, wear_id: str) -> Optional[OutfitWear]:
        raise NotImplementedError

    def list_recent_wears(self, user_id: str, since: date) -> List[OutfitWear]:
        raise NotImplementedError

    def list_rated_wears(self, user_id: str, limit: int) -> List[OutfitWear]:
        raise NotImplementedError

    def list_unrated_wears(
        self, user_id: str, before: date, since: Optional[date] = None, limit: Optional[int] = None
    ) -> List[OutfitWear]:
        raise NotImplementedError

    def rate_wear(
        self, user_id: str, wear_id: str, rating: Optional[int], comfort_rating: Optional[int] = None
    ) -> Optional[OutfitWear]:
        raise NotImplementedError

    def save_outfit(self, user_id: str, outfit: SavedOutfit) -> SavedOutfit:
        raise NotImplementedError

    def list_saved_outfits(self, user_id: str) -> List[SavedOutfit]:
        raise NotImplementedError

    def delete_saved_outfit(self, user_id: str, outfit_id: str) -> bool:
        raise NotImplementedError


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store."""

    def __init__(self, database_path: str | Path = "data/wardrobe.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS clothing_items (
                    user_id TEXT NOT NULL,
                    item_id TEXT NOT NULL,
                    clothing_type TEXT NOT NULL,
                    colors TEXT,
                    is_dirty INTEGER NOT NULL DEFAULT 0,
                    image_url TEXT,
                    created_at TEXT,
                    PRIMARY KEY (user_id, item_id)
                );
                CREATE TABLE IF NOT EXISTS color_combinations (
                    combination_id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    top_color TEXT NOT NULL,
                    bottom_color TEXT NOT NULL
                );
                CREATE TABLE IF NOT EXISTS outfit_wears (
                    wear_id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    outfit_id TEXT,
                    top_id TEXT,
                    bottom_id TEXT,
                    shoes_id TEXT,
                    outerwear_id TEXT,
                    worn_date TEXT NOT NULL,
                    notes TEXT,
                    rating INTEGER CHECK (rating >= 1 AND rating <= 10),
                    comfort_rating INTEGER CHECK (comfort_rating >= 1 AND comfort_rating <= 10)
                );
                CREATE INDEX IF NOT EXISTS idx_outfit_wears_user_date ON outfit_wears(user_id, worn_date);
                CREATE TABLE IF NOT EXISTS saved_outfits (
                    outfit_id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    top_id TEXT NOT NULL,
                    outerwear_id TEXT,
                    bottom_id TEXT NOT NULL,
                    shoes_id TEXT NOT NULL,
                    created_at TEXT NOT NULL
                );
                """
            )

    def create_item(self, item: ClothingItem) -> ClothingItem:
        if not item.user_id:
            raise ValueError("ClothingItem.user_id is required for storage")
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO clothing_items (
                    user_id, item_id, clothing_type, colors, is_dirty, image_url, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.user_id,
                    item.item_id,
                    item.clothing_type,
                    json.dumps(item.colors),
                    int(item.is_dirty),
                    item.image_url,
                    item.created_at,
                ),
            )
        return item

    def _row_to_item(self, row: sqlite3.Row) -> ClothingItem:
        return ClothingItem(
            item_id=row["item_id"],
            clothing_type=row["clothing_type"],
            colors=json.loads(row["colors"]) if row["colors"] else [],
            is_dirty=bool(row["is_dirty"]),
            user_id=row["user_id"],
            image_url=row["image_url"],
            created_at=row["created_at"],
        )

    def get_item(self, user_id: str, item_id: str) -> Optional[ClothingItem]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            ).fetchone()
            return self._row_to_item(row) if row else None

    def list_items_for_user(self, user_id: str, include_dirty: bool = False) -> List[ClothingItem]:
        query = "SELECT * FROM clothing_items WHERE user_id = ?"
        if not include_dirty:
            query += " AND is_dirty = 0"
        with self._connect() as conn:
            rows = conn.execute(query + " ORDER BY item_id", (user_id,)).fetchall()
            return [self._row_to_item(row) for row in rows]

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[ClothingItem]:
        current = self.get_item(user_id, item_id)
        if not current:
            return None
        allowed = {key: value for key, value in updated_fields.items() if key in {"clothing_type", "colors", "is_dirty", "image_url"}}
        return self.create_item(replace(current, **allowed))

    def delete_item(self, user_id: str, item_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM clothing_items WHERE user_id = ? AND item_id = ?",
                (user_id, item_id),
            )
            return cursor.rowcount > 0

    def set_dirty(self, user_id: str, item_id: str, is_dirty: bool) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "UPDATE clothing_items SET is_dirty = ? WHERE user_id = ? AND item_id = ?",
                (int(is_dirty), user_id, item_id),
            )
            return cursor.rowcount > 0

    def add_color_combination(self, user_id: str, combination: ColorCombination) -> ColorCombination:
        stored = replace(combination, combination_id=combination.combination_id or uuid.uuid4().hex)
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO color_combinations (combination_id, user_id, top_color, bottom_color) VALUES (?, ?, ?, ?)",
                (stored.combination_id, user_id, stored.top_color, stored.bottom_color),
            )
        return stored

    def list_color_combinations(self, user_id: str) -> List[ColorCombination]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM color_combinations WHERE user_id = ? ORDER BY combination_id",
                (user_id,),
            ).fetchall()
        return [
            ColorCombination(
                top_color=row["top_color"],
                bottom_color=row["bottom_color"],
                combination_id=row["combination_id"],
            )
            for row in rows
        ]

    def delete_color_combination(self, user_id: str, combination_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM color_combinations WHERE user_id = ? AND combination_id = ?",
                (user_id, combination_id),
            )
            return cursor.rowcount > 0

    def record_wear(self, user_id: str, wear: OutfitWear) -> OutfitWear:
        stored = replace(wear, wear_id=wear.wear_id or uuid.uuid4().hex, user_id=user_id)
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO outfit_wears (
                    wear_id, user_id, outfit_id, top_id, bottom_id, shoes_id, outerwear_id,
                    worn_date, notes, rating, comfort_rating
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    stored.wear_id,
                    user_id,
                    stored.outfit_id,
                    stored.top_id,
                    stored.bottom_id,
                    stored.shoes_id,
                    stored.outerwear_id,
                    stored.worn_date.isoformat(),
                    stored.notes,
                    stored.rating,
                    stored.comfort_rating,
                ),
            )
        return stored

    def _row_to_wear(self, row: sqlite3.Row) -> OutfitWear:
        return OutfitWear(
            worn_date=date.fromisoformat(row["worn_date"]),
            top_id=row["top_id"],
            bottom_id=row["bottom_id"],
            shoes_id=row["shoes_id"],
            outerwear_id=row["outerwear_id"],
            rating=row["rating"],
            comfort_rating=row["comfort_rating"],
            wear_id=row["wear_id"],
            user_id=row["user_id"],
            outfit_id=row["outfit_id"],
            notes=row["notes"],
        )

    def get_wear(self, user_id: str, wear_id: str) -> Optional[OutfitWear]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM outfit_wears WHERE user_id = ? AND wear_id = ?",
                (user_id, wear_id),
            ).fetchone()
            return self._row_to_wear(row) if row else None

    def list_recent_wears(self, user_id: str, since: date) -> List[OutfitWear]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM outfit_wears WHERE user_id = ? AND worn_date >= ? ORDER BY worn_date DESC, wear_id",
                (user_id, since.isoformat()),
            ).fetchall()
            return [self._row_to_wear(row) for row in rows]

    def list_rated_wears(self, user_id: str, limit: int) -> List[OutfitWear]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT * FROM outfit_wears
                WHERE user_id = ? AND rating IS NOT NULL
                ORDER BY worn_date DESC, wear_id
                LIMIT ?
                """,
                (user_id, limit),
            ).fetchall()
            return [self._row_to_wear(row) for row in rows]

    def list_unrated_wears(
        self, user_id: str, before: date, since: Optional[date] = None, limit: Optional[int] = None
    ) -> List[OutfitWear]:
        """Wears dated before ``before`` (and on or after ``since``) that still lack a rating, newest first."""

        query = "SELECT * FROM outfit_wears WHERE user_id = ? AND rating IS NULL AND worn_date < ?"
        params: List[object] = [user_id, before.isoformat()]
        if since is not None:
            query += " AND worn_date >= ?"
            params.append(since.isoformat())
        query += " ORDER BY worn_date DESC, wear_id"
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)
        with self._connect() as conn:
            rows = conn.execute(query, params).fetchall()
            return [self._row_to_wear(row) for row in rows]

    def rate_wear(
        self, user_id: str, wear_id: str, rating: Optional[int], comfort_rating: Optional[int] = None
    ) -> Optional[OutfitWear]:
        for value in (rating, comfort_rating):
            if value is not None and not 1 <= value <= 10:
                raise ValueError(f"ratings must be between 1 and 10, got {value}")
        with self._connect() as conn:
            cursor = conn.execute(
                "UPDATE outfit_wears SET rating = ?, comfort_rating = ? WHERE user_id = ? AND wear_id = ?",
                (rating, comfort_rating, user_id, wear_id),
            )
            if cursor.rowcount == 0:
                return None
        return self.get_wear(user_id, wear_id)

    def save_outfit(self, user_id: str, outfit: SavedOutfit) -> SavedOutfit:
        missing = [name for name in ("top_id", "bottom_id", "shoes_id") if not getattr(outfit, name)]
        if missing:
            raise ValueError(f"Saved outfits need a top, bottom and shoes; missing {missing}")
        stored = replace(
            outfit,
            outfit_id=outfit.outfit_id or uuid.uuid4().hex,
            user_id=user_id,
            created_at=outfit.created_at or datetime.now(timezone.utc).isoformat(),
        )
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO saved_outfits (
                    outfit_id, user_id, top_id, outerwear_id, bottom_id, shoes_id, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    stored.outfit_id,
                    user_id,
                    stored.top_id,
                    stored.outerwear_id,
                    stored.bottom_id,
                    stored.shoes_id,
                    stored.created_at,
                ),
            )
        return stored

    def list_saved_outfits(self, user_id: str) -> List[SavedOutfit]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM saved_outfits WHERE user_id = ? ORDER BY created_at DESC, rowid DESC",
                (user_id,),
            ).fetchall()
        return [
            SavedOutfit(
                top_id=row["top_id"],
                outerwear_id=row["outerwear_id"],
                bottom_id=row["bottom_id"],
                shoes_id=row["shoes_id"],
                outfit_id=row["outfit_id"],
                user_id=row["user_id"],
                created_at=row["created_at"],
            )
            for row in rows
        ]

    def delete_saved_outfit(self, user_id: str, outfit_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM saved_outfits WHERE user_id = ? AND outfit_id = ?",
                (user_id, outfit_id),
            )
            return cursor.rowcount > 0


__all__ = ["WardrobeStore", "SQLiteWardrobeStore"]
