"""
Noteboard Backend: Board Service Unit Tests
===========================================

What we test:
    ✅ get_board returns the seeded board and its camera
    ✅ save_view overwrites the camera, clamping zoom
    ✅ Missing id → ValidationError, unknown id → NotFoundError
    ✅ A failed commit surfaces as DatabaseError
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from noteboard.exceptions import DatabaseError, NotFoundError, ValidationError
from noteboard.models import Board
from noteboard.schemas.board import BoardViewUpdate
from noteboard.services.board_service import BoardService


async def _camera(session_factory, board_id=1):
    async with session_factory() as session:
        result = await session.execute(select(Board).where(Board.id == board_id))
        board = result.scalar_one()
        return board.view_x, board.view_y, board.zoom


class TestBoardService:

    def setup_method(self):
        self.service = BoardService()

    @pytest.mark.asyncio
    async def test_get_seeded_board(self, db_session):
        board = await self.service.get_board(db_session, 1)
        assert board.id == 1
        assert board.name == "Main board"
        assert (board.view_x, board.view_y, board.zoom) == (0, 0, 1.0)

    @pytest.mark.asyncio
    async def test_get_unknown_board(self, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_board(db_session, 99)
        assert "99" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_save_view_overwrites_camera(self, db_session, session_factory):
        await self.service.save_view(
            db_session, BoardViewUpdate(id=1, view_x=-120, view_y=45, zoom=1.75)
        )
        await db_session.commit()

        assert await _camera(session_factory) == (-120, 45, 1.75)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("zoom,stored", [(10, 2.5), (0.01, 0.25), (-1, 0.25)])
    async def test_save_view_clamps_zoom(self, db_session, session_factory, zoom, stored):
        await self.service.save_view(db_session, BoardViewUpdate(id=1, zoom=zoom))
        await db_session.commit()

        assert (await _camera(session_factory))[2] == stored

    @pytest.mark.asyncio
    async def test_missing_fields_reset_to_defaults(self, db_session, session_factory):
        await self.service.save_view(
            db_session, BoardViewUpdate(id=1, view_x=10, view_y=20, zoom=2.0)
        )
        await self.service.save_view(db_session, BoardViewUpdate(id=1))
        await db_session.commit()

        assert await _camera(session_factory) == (0, 0, 1.0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("board_id", [None, 0, -4])
    async def test_missing_id_rejected(self, db_session, board_id):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.save_view(db_session, BoardViewUpdate(id=board_id))
        assert exc_info.value.message == "Missing id"

    @pytest.mark.asyncio
    async def test_save_view_unknown_board(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.save_view(db_session, BoardViewUpdate(id=77))

    @pytest.mark.asyncio
    async def test_query_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(DatabaseError):
            await self.service.get_board(mock_db_session, 1)

    @pytest.mark.asyncio
    async def test_commit_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)
        mock_db_session.commit.side_effect = OperationalError("COMMIT", {}, Exception("gone"))

        with pytest.raises(DatabaseError):
            await self.service.save_view(mock_db_session, BoardViewUpdate(id=1, view_x=77))
