"""
Noteboard Backend: Cards Route Handlers
=======================================

What:  GET /api/cards (active list), POST /api/cards (create),
       PUT /api/cards (partial patch, also used to archive).
Who:   Called by the canvas CardStore.

Routes stay thin: they pass the parsed body to CardService and wrap the
result in the `{"success": true, ...}` envelope.
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from noteboard.database import get_db_session
from noteboard.schemas.card import (
    CardCreate,
    CardCreatedResponse,
    CardListResponse,
    CardUpdate,
)
from noteboard.schemas.common import ErrorResponse, SuccessResponse
from noteboard.services.card_service import card_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Cards"])


@router.get(
    "/cards",
    response_model=CardListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List active cards in paint order",
    description=(
        "Returns the non-archived cards of a board ordered by z_index, then id. "
        "Later entries paint on top."
    ),
)
async def list_cards(
    board_id: int = Query(default=1, description="Board id (default 1)"),
    db: AsyncSession = Depends(get_db_session),
) -> CardListResponse:
    cards = await card_service.list_cards(db=db, board_id=board_id)
    return CardListResponse(cards=cards)


@router.post(
    "/cards",
    status_code=201,
    response_model=CardCreatedResponse,
    responses={
        400: {"description": "Malformed body", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note or section",
)
async def create_card(
    payload: CardCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CardCreatedResponse:
    card_id = await card_service.create_card(db=db, payload=payload)
    return CardCreatedResponse(id=card_id)


@router.put(
    "/cards",
    response_model=SuccessResponse,
    responses={
        400: {"description": "Missing id or no fields to update", "model": ErrorResponse},
        404: {"description": "Card not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Patch a card",
    description=(
        "Writes only the supplied fields. Send is_archived=true to archive; "
        "archived cards disappear from the list but stay stored."
    ),
)
async def update_card(
    payload: CardUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await card_service.update_card(db=db, payload=payload)
    return SuccessResponse()
