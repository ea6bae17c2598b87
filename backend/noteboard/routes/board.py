"""
Noteboard Backend: Board Route Handlers
=======================================

What:  GET /api/board (load camera) and PUT /api/board (save camera).
Who:   Called by the canvas CameraController on load and after each
       debounced pan/zoom burst.
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from noteboard.database import get_db_session
from noteboard.schemas.board import BoardResponse, BoardViewUpdate
from noteboard.schemas.common import ErrorResponse, SuccessResponse
from noteboard.services.board_service import board_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Board"])


@router.get(
    "/board",
    response_model=BoardResponse,
    responses={
        404: {"description": "Board not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a board and its saved camera",
)
async def get_board(
    board_id: int = Query(default=1, alias="id", description="Board id (default 1)"),
    db: AsyncSession = Depends(get_db_session),
) -> BoardResponse:
    board = await board_service.get_board(db=db, board_id=board_id)
    return BoardResponse(board=board)


@router.put(
    "/board",
    response_model=SuccessResponse,
    responses={
        400: {"description": "Missing id", "model": ErrorResponse},
        404: {"description": "Board not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Save the board camera",
    description=(
        "Overwrites view_x, view_y and zoom. Missing view fields default to 0, "
        "a missing zoom to 1; zoom is clamped to [0.25, 2.5]."
    ),
)
async def save_board_view(
    payload: BoardViewUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await board_service.save_view(db=db, payload=payload)
    return SuccessResponse()
