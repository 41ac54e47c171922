"""FastAPI server exposing the wardrobe and outfit endpoints."""

from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query

from fitpick_app.app import FitPickApp
from logic.validation import (
    AddItemRequest,
    ItemPayload,
    LockValidationError,
    OutfitRequest,
    OutfitResponse,
    WearRequest,
    WearResponse,
    outfit_payload,
    wear_payload,
)
from tools.wardrobe_store import WardrobeStoreError


def create_app(fitpick: FitPickApp | None = None) -> FastAPI:
    """Build the ASGI app around a FitPick composition root."""

    fitpick = fitpick or FitPickApp()
    api = FastAPI(title="FitPick", version="0.1.0")
    api.state.fitpick = fitpick

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "fitpick",
            "environment": fitpick.config.environment or "local",
        }

    @api.get("/items", response_model=List[ItemPayload])
    def list_items() -> list:
        """Return the catalogue, newest first."""

        try:
            return fitpick.wardrobe_tools.list_items()
        except WardrobeStoreError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc

    @api.post("/items", response_model=ItemPayload, status_code=201)
    def add_item(request: AddItemRequest) -> dict:
        """Add a garment to the catalogue."""

        try:
            return fitpick.wardrobe_tools.add_item(
                image_path=request.image_path,
                category=request.category,
                color_code=request.color_code,
                sub_type=request.sub_type,
            )
        except WardrobeStoreError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @api.get("/weather")
    def weather(
        latitude: Optional[float] = Query(default=None, ge=-90, le=90),
        longitude: Optional[float] = Query(default=None, ge=-180, le=180),
    ) -> dict:
        """Current weather category used for outfit decisions."""

        return fitpick.planner.current_weather(latitude, longitude)

    @api.post("/outfits/generate", response_model=OutfitResponse)
    def generate_outfit(request: OutfitRequest) -> OutfitResponse:
        """Recommend an outfit, honoring any locked slots."""

        try:
            selection = fitpick.generate_outfit(
                latitude=request.latitude,
                longitude=request.longitude,
                event_type=request.event_type,
                locked_items=request.locked_items,
            )
        except LockValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except WardrobeStoreError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return outfit_payload(selection)

    @api.post("/outfits/wear", response_model=WearResponse)
    def wear_outfit(request: WearRequest) -> WearResponse:
        """Commit to an outfit; each item is updated on its own."""

        return wear_payload(fitpick.mark_outfit_as_worn(request.item_ids))

    return api


def get_app() -> FastAPI:
    """Expose a FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
