"""
Noteboard Canvas: Pointer State Machine Tests
=============================================

What we test:
    ✅ Canvas press pans the camera by pointer deltas
    ✅ Card press raises the card; drag keeps the grab offset under zoom
    ✅ Release sends exactly one position PUT
    ✅ Presses on controls and unknown cards do nothing
"""

import pytest

from noteboard.canvas.camera import VIEW_SAVE_KEY, CameraController
from noteboard.canvas.debounce import Debouncer
from noteboard.canvas.pointer import PointerController, PointerState, PointerTarget
from noteboard.canvas.store import CardStore
from noteboard.canvas.transform import Camera


async def make_pointer(api, cards=(), camera=None):
    api.cards = list(cards)
    debouncer = Debouncer()
    controller = CameraController(api.client, debouncer, board_id=1, save_delay=60, camera=camera)
    store = CardStore(api.client, debouncer, board_id=1, edit_delay=60)
    await store.load()
    return PointerController(controller, store)


def card_row(card_id, pos_x, pos_y, z_index=1):
    return {
        "id": card_id, "board_id": 1, "type": "note", "title": "", "description": "",
        "importance": 3, "pos_x": pos_x, "pos_y": pos_y, "z_index": z_index,
        "color": "default", "is_pinned": False,
    }


class TestPanning:

    @pytest.mark.asyncio
    async def test_canvas_drag_pans(self, fake_api):
        pointer = await make_pointer(fake_api)

        assert await pointer.pointer_down(100, 100, PointerTarget.canvas()) is PointerState.PANNING
        await pointer.pointer_move(130, 90)
        await pointer.pointer_move(150, 120)
        assert await pointer.pointer_up(150, 120) is PointerState.IDLE

        camera = pointer.camera.camera
        assert (camera.x, camera.y) == (50, 20)
        assert pointer.camera.debouncer.is_pending(VIEW_SAVE_KEY)
        pointer.camera.debouncer.cancel(VIEW_SAVE_KEY)

    @pytest.mark.asyncio
    async def test_move_while_idle_is_ignored(self, fake_api):
        pointer = await make_pointer(fake_api)

        assert await pointer.pointer_move(40, 40) is PointerState.IDLE
        assert (pointer.camera.camera.x, pointer.camera.camera.y) == (0, 0)


class TestDragging:

    @pytest.mark.asyncio
    async def test_drag_keeps_grab_offset_under_zoom(self, fake_api):
        pointer = await make_pointer(
            fake_api, cards=[card_row(7, 100, 50)], camera=Camera(20, 10, 2.0)
        )
        # Card top-left is at screen (220, 110); grab it 15px right, 5px down
        state = await pointer.pointer_down(235, 115, PointerTarget.card(7))

        assert state is PointerState.DRAGGING
        assert pointer.dragging_card == 7
        assert fake_api.writes() == [{"id": 7, "z_index": 2}]

        await pointer.pointer_move(255, 155)
        card = pointer.store.get(7)
        assert (card.pos_x, card.pos_y) == (110, 70)

        await pointer.pointer_move(256, 156)
        assert (card.pos_x, card.pos_y) == (110.5, 70.5)
        assert len(fake_api.writes()) == 1

        assert await pointer.pointer_up(256, 156) is PointerState.IDLE
        assert fake_api.writes()[-1] == {"id": 7, "pos_x": 110, "pos_y": 70}
        assert len(fake_api.writes()) == 2
        assert pointer.dragging_card is None

    @pytest.mark.asyncio
    async def test_drag_with_explicit_bounds(self, fake_api):
        pointer = await make_pointer(fake_api, cards=[card_row(3, 0, 0)])

        await pointer.pointer_down(50, 50, PointerTarget.card(3, bounds=(40, 40)))
        await pointer.pointer_move(150, 250)

        card = pointer.store.get(3)
        assert (card.pos_x, card.pos_y) == (140, 240)

    @pytest.mark.asyncio
    async def test_click_without_move_still_commits_once(self, fake_api):
        pointer = await make_pointer(fake_api, cards=[card_row(1, 10, 10)])

        await pointer.pointer_down(15, 15, PointerTarget.card(1))
        await pointer.pointer_up(15, 15)

        assert fake_api.writes() == [
            {"id": 1, "z_index": 2},
            {"id": 1, "pos_x": 10, "pos_y": 10},
        ]

    @pytest.mark.asyncio
    async def test_second_press_while_dragging_ignored(self, fake_api):
        pointer = await make_pointer(fake_api, cards=[card_row(1, 0, 0), card_row(2, 0, 0, 2)])

        await pointer.pointer_down(5, 5, PointerTarget.card(1))
        await pointer.pointer_down(5, 5, PointerTarget.card(2))

        assert pointer.dragging_card == 1


class TestIgnoredPresses:

    @pytest.mark.asyncio
    async def test_control_press_does_not_raise_card(self, fake_api):
        pointer = await make_pointer(fake_api, cards=[card_row(1, 0, 0)])

        state = await pointer.pointer_down(5, 5, PointerTarget.control(1))

        assert state is PointerState.IDLE
        assert fake_api.writes() == []

    @pytest.mark.asyncio
    async def test_unknown_card_ignored(self, fake_api):
        pointer = await make_pointer(fake_api)

        assert await pointer.pointer_down(5, 5, PointerTarget.card(404)) is PointerState.IDLE
