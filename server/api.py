"""FastAPI server exposing wardrobe, preference and outfit suggestion endpoints."""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from logic.validation import (
    ColorCombinationRequest,
    DirtyFlagRequest,
    ItemRequest,
    OutfitWearPayload,
    RatingRequest,
    SavedOutfitRequest,
    SuggestionRequest,
    validation_failure,
)
from models.outfit import OutfitWear
from stylist_app.app import StylistApp
from stylist_app.logging_config import get_logger, log_event

LOGGER = get_logger(__name__)

app = FastAPI(title="Wardrobe Stylist", version="0.1.0")
_stylist_app: Optional[StylistApp] = None

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def get_stylist_app() -> StylistApp:
    """Return the lazily created application singleton."""

    global _stylist_app
    if _stylist_app is None:
        _stylist_app = StylistApp()
    return _stylist_app


def set_stylist_app(stylist_app: Optional[StylistApp]) -> None:
    """Swap the application instance, used by tests and embedding hosts."""

    global _stylist_app
    _stylist_app = stylist_app


class WearRequest(BaseModel):
    """Request payload for logging a worn outfit."""

    user_id: str = Field(..., min_length=1)
    wear: OutfitWearPayload


def _validate(
    model: Type[RequestModel], payload: Dict[str, Any], message: str, method: str
) -> Union[RequestModel, JSONResponse]:
    """Parse a raw body, or answer 422 with a ``needs_review`` payload."""

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        log_event(
            LOGGER,
            level=logging.WARNING,
            event="api_request_invalid",
            method=method,
            details=str(exc),
        )
        return JSONResponse(status_code=422, content=validation_failure(message, exc))


def _wear_dict(wear: OutfitWear) -> dict:
    return {
        "wear_id": wear.wear_id,
        "worn_date": wear.worn_date.isoformat(),
        "outfit_items": {
            "top_id": wear.top_id,
            "outerwear_id": wear.outerwear_id,
            "bottom_id": wear.bottom_id,
            "shoes_id": wear.shoes_id,
        },
        "rating": wear.rating,
        "comfort_rating": wear.comfort_rating,
    }


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness check."""

    return {
        "status": "ok",
        "service": "wardrobe-stylist",
        "environment": get_stylist_app().config.environment or "local",
    }


@app.post("/items")
def add_item(payload: Dict[str, Any] = Body(...)):
    """Add or replace a wardrobe entry."""

    request = _validate(ItemRequest, payload, "Invalid clothing item payload", "add_item")
    if isinstance(request, JSONResponse):
        return request
    item = get_stylist_app().store.create_item(request.item.to_item(request.user_id))
    return {
        "item_id": item.item_id,
        "clothing_type": item.clothing_type,
        "colors": item.colors,
        "is_dirty": item.is_dirty,
    }


@app.patch("/items/{item_id}/dirty")
def set_item_dirty(item_id: str, payload: Dict[str, Any] = Body(...)):
    """Mark an item dirty (excluded from suggestions) or clean again."""

    request = _validate(DirtyFlagRequest, payload, "Invalid dirty flag payload", "set_item_dirty")
    if isinstance(request, JSONResponse):
        return request
    if not get_stylist_app().store.set_dirty(request.user_id, item_id, request.is_dirty):
        raise HTTPException(status_code=404, detail=f"Unknown item {item_id}")
    return {"item_id": item_id, "is_dirty": request.is_dirty}


@app.post("/color-combinations")
def like_color_combination(payload: Dict[str, Any] = Body(...)):
    """Store a liked (top color, bottom color) pairing."""

    request = _validate(
        ColorCombinationRequest, payload, "Invalid color combination payload", "like_color_combination"
    )
    if isinstance(request, JSONResponse):
        return request
    stored = get_stylist_app().store.add_color_combination(request.user_id, request.combination.to_combination())
    return {
        "combination_id": stored.combination_id,
        "top_color": stored.top_color,
        "bottom_color": stored.bottom_color,
    }


@app.delete("/color-combinations/{combination_id}")
def unlike_color_combination(combination_id: str, user_id: str) -> dict:
    if not get_stylist_app().store.delete_color_combination(user_id, combination_id):
        raise HTTPException(status_code=404, detail=f"Unknown color combination {combination_id}")
    return {"combination_id": combination_id, "deleted": True}


@app.post("/suggestions")
def suggest_outfits(request: SuggestionRequest) -> dict:
    """Return ranked outfit suggestions. An empty list comes with a hint, not an error."""

    try:
        return get_stylist_app().stylist.recommend_outfits(
            user_id=request.user_id,
            occasion=request.occasion,
            temperature_category=request.temperature_category,
            temperature_f=request.temperature_f,
            zip_code=request.zip_code,
            count=request.count,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/wears")
def log_wear(request: WearRequest) -> dict:
    """Persist an outfit as worn."""

    stored = get_stylist_app().store.record_wear(request.user_id, request.wear.to_wear(request.user_id))
    return {"wear_id": stored.wear_id, "worn_date": stored.worn_date.isoformat()}


@app.get("/wears/pending")
def pending_rating(user_id: str) -> dict:
    """Yesterday's outfit when it still needs a rating."""

    wear = get_stylist_app().stylist.pending_rating(user_id)
    return {"pending": _wear_dict(wear) if wear else None}


@app.post("/wears/{wear_id}/rating")
def rate_wear(wear_id: str, request: RatingRequest) -> dict:
    rated = get_stylist_app().stylist.rate_wear(
        request.user_id, wear_id, rating=request.rating, comfort_rating=request.comfort_rating
    )
    if rated is None:
        raise HTTPException(status_code=404, detail=f"Unknown wear {wear_id}")
    return _wear_dict(rated)


@app.post("/saved-outfits")
def save_outfit(payload: Dict[str, Any] = Body(...)):
    """Keep an outfit as a favourite."""

    request = _validate(SavedOutfitRequest, payload, "Invalid saved outfit payload", "save_outfit")
    if isinstance(request, JSONResponse):
        return request
    return get_stylist_app().store.save_outfit(request.user_id, request.outfit.to_saved()).to_dict()


@app.get("/saved-outfits")
def list_saved_outfits(user_id: str) -> dict:
    saved = get_stylist_app().store.list_saved_outfits(user_id)
    return {"saved_outfits": [outfit.to_dict() for outfit in saved]}


@app.delete("/saved-outfits/{outfit_id}")
def delete_saved_outfit(outfit_id: str, user_id: str) -> dict:
    if not get_stylist_app().store.delete_saved_outfit(user_id, outfit_id):
        raise HTTPException(status_code=404, detail=f"Unknown saved outfit {outfit_id}")
    return {"outfit_id": outfit_id, "deleted": True}


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int("8080"), reload=False)
