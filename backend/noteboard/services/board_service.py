"""
Noteboard Backend: Board Service
================================

What:  Reads and overwrites the persisted camera of a board.
Who:   Called by the board route handlers.

Rules:
    - A view save is a full overwrite: missing view_x / view_y become 0,
      a missing zoom becomes 1 (defaults live on BoardViewUpdate).
    - Zoom is clamped to [0.25, 2.5] before it is written.
    - Boards are never created or deleted here.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteboard import rules
from noteboard.exceptions import DatabaseError, NotFoundError, ValidationError
from noteboard.models.board import Board
from noteboard.schemas.board import BoardOut, BoardViewUpdate

logger = logging.getLogger(__name__)


class BoardService:
    """Business logic for the board resource. Stateless."""

    async def get_board(self, db: AsyncSession, board_id: int) -> BoardOut:
        """
        Fetch a board's name and camera.

        Raises:
            NotFoundError: No board with this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Board).where(Board.id == board_id))
            board = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching board %s: %s", board_id, str(e))
            raise DatabaseError(
                message="Could not load the board",
                context={"board_id": board_id, "error_type": type(e).__name__},
            )

        if board is None:
            raise NotFoundError(resource="board", resource_id=board_id)
        return BoardOut.model_validate(board)

    async def save_view(self, db: AsyncSession, payload: BoardViewUpdate) -> None:
        """
        Overwrite the camera of `payload.id`.

        Raises:
            ValidationError: Missing or non-positive id (→ 400)
            NotFoundError: No board with this id (→ 404)
            DatabaseError: Update failed (→ 500)
        """
        if payload.id is None or payload.id <= 0:
            raise ValidationError(message="Missing id", field="id")

        zoom = rules.clamp_zoom(payload.zoom)
        if zoom != payload.zoom:
            logger.debug("Board %s zoom %.4f clamped to %.4f", payload.id, payload.zoom, zoom)

        try:
            result = await db.execute(
                update(Board)
                .where(Board.id == payload.id)
                .values(view_x=payload.view_x, view_y=payload.view_y, zoom=zoom)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error saving view of board %s: %s", payload.id, str(e))
            raise DatabaseError(
                message="Could not save the board view",
                context={"board_id": payload.id, "error_type": type(e).__name__},
            )

        if result.rowcount == 0:
            raise NotFoundError(resource="board", resource_id=payload.id)
        logger.info(
            "Board %s view saved: (%d, %d) zoom=%.4f",
            payload.id, payload.view_x, payload.view_y, zoom,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
board_service = BoardService()
