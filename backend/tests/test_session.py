"""
Noteboard Canvas: Session End-to-End Tests
==========================================

What:  Drives a CanvasSession against the real app (ASGI + SQLite) and
       checks what a reload of the board would show.
"""

import asyncio

import pytest

from noteboard.canvas.pointer import PointerTarget
from noteboard.canvas.session import CanvasSession

DELAY = 0.01
IDLE = 60


def make_session(api, delay=IDLE):
    """Long delays by default: pending saves go out on close, one request at a time."""
    return CanvasSession(
        api,
        board_id=1,
        view_save_delay=delay,
        edit_save_delay=delay,
        spawn_anchor=(220, 160),
    )


class TestCanvasSession:

    @pytest.mark.asyncio
    async def test_state_survives_reload(self, board_api):
        async with make_session(board_api) as canvas:
            note = await canvas.add_note()
            section = await canvas.add_section()
            canvas.store.edit(note.id, title="Groceries", importance=8)
            await canvas.debouncer.flush()

            await canvas.pointer.pointer_down(10, 10, PointerTarget.canvas())
            await canvas.pointer.pointer_move(110, 60)
            await canvas.pointer.pointer_up(110, 60)
            canvas.wheel(-120, 0, 0)

        async with make_session(board_api) as reloaded:
            camera = reloaded.camera.camera
            assert (camera.x, camera.y, camera.zoom) == (110, 55, 1.1)

            cards = reloaded.store.cards
            assert [card.id for card in cards] == [note.id, section.id]
            saved = reloaded.store.get(note.id)
            assert saved.title == "Groceries"
            assert saved.importance == 5
            assert (saved.pos_x, saved.pos_y) == (220, 160)
            assert reloaded.store.get(section.id).type == "section"

    @pytest.mark.asyncio
    async def test_spawn_follows_camera(self, board_api):
        async with make_session(board_api) as canvas:
            canvas.camera.pan(-380, 40)
            canvas.camera.zoom_at_cursor(2.0, -380, 40)
            card = await canvas.add_note()

        assert (card.pos_x, card.pos_y) == (300, 60)

    @pytest.mark.asyncio
    async def test_drag_and_archive(self, board_api):
        async with make_session(board_api) as canvas:
            note = await canvas.add_note()
            other = await canvas.add_note()

            await canvas.pointer.pointer_down(225, 165, PointerTarget.card(note.id))
            await canvas.pointer.pointer_move(325, 265)
            await canvas.pointer.pointer_up(325, 265)
            await canvas.store.archive(other.id)

        async with make_session(board_api) as reloaded:
            cards = reloaded.store.cards
            assert [card.id for card in cards] == [note.id]
            assert (cards[0].pos_x, cards[0].pos_y) == (320, 260)
            assert reloaded.store.counter.peek > cards[0].z_index

    @pytest.mark.asyncio
    async def test_wheel_direction(self, board_api):
        canvas = make_session(board_api)

        assert canvas.wheel(-1, 0, 0) == pytest.approx(1.1)
        assert canvas.wheel(1, 0, 0) == pytest.approx(1.0)
        assert canvas.wheel(0, 0, 0) == pytest.approx(1.0)
        await canvas.aclose()

    @pytest.mark.asyncio
    async def test_debounced_save_lands_without_close(self, board_api):
        canvas = await make_session(board_api, delay=DELAY).open()
        canvas.camera.pan(7, 8)
        await asyncio.sleep(DELAY * 10)
        assert canvas.debouncer.pending_keys == set()
        await canvas.debouncer.flush()

        board = await board_api.get_board(1)
        assert (board["view_x"], board["view_y"]) == (7, 8)
        await canvas.aclose()
