"""
Health and maintenance endpoints.

Liveness probe plus a reset that restores the seed data.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cardsmith.api.deps import get_store
from cardsmith.store.store import Store

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class ResetResponse(BaseModel):
    """Table sizes after a reset."""

    games: int
    cards: int
    decks: int


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    """
    return HealthResponse(status="healthy")


@router.post("/api/reset", response_model=ResetResponse)
async def reset_store(store: Annotated[Store, Depends(get_store)]) -> ResetResponse:
    """Discard every change and restore the seed dataset."""
    store.reset()
    return ResetResponse(games=len(store.games), cards=len(store.cards), decks=len(store.decks))
