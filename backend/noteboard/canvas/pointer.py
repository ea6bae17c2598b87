"""
Noteboard Canvas: Pointer Controller
====================================

What:  Finite-state machine turning pointer down/move/up events into camera
       pans and card drags.

State Machine:
    IDLE ──down(canvas)──▶ PANNING ──move──▶ PANNING (camera.pan by delta)
      ▲                       │
      └─────────up────────────┘

    IDLE ──down(card)────▶ DRAGGING ──move──▶ DRAGGING (local position only)
      ▲                       │
      └──up (one PUT with the rounded world position)

    down(control): stays IDLE; text fields, selects and buttons keep focus
    and the card is not raised.

Transitions are looked up in a table keyed by (state, event). A pair that
is not in the table (a move while IDLE, a second down while DRAGGING) does
nothing.

Drag math:
    On down, the offset between the pointer and the card's rendered top-left
    is captured in screen space. On move:
        world = (pointer - offset - camera) / zoom
"""

import enum
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Optional, Tuple

from noteboard.canvas.camera import CameraController
from noteboard.canvas.store import CardStore

logger = logging.getLogger(__name__)


class PointerState(enum.Enum):
    IDLE = "idle"
    PANNING = "panning"
    DRAGGING = "dragging"


class TargetKind(enum.Enum):
    CANVAS = "canvas"    # empty board space
    CARD = "card"        # card body
    CONTROL = "control"  # text field, select or button


@dataclass(frozen=True)
class PointerTarget:
    """
    What sits under the pointer on `down`.

    bounds: the card's rendered top-left in screen pixels when the caller
            knows it (e.g. from a layout engine); otherwise it is derived
            from the stored world position and the camera.
    """
    kind: TargetKind
    card_id: Optional[int] = None
    bounds: Optional[Tuple[float, float]] = None

    @classmethod
    def canvas(cls) -> "PointerTarget":
        return cls(TargetKind.CANVAS)

    @classmethod
    def card(cls, card_id: int, bounds: Optional[Tuple[float, float]] = None) -> "PointerTarget":
        return cls(TargetKind.CARD, card_id=card_id, bounds=bounds)

    @classmethod
    def control(cls, card_id: Optional[int] = None) -> "PointerTarget":
        return cls(TargetKind.CONTROL, card_id=card_id)


Handler = Callable[[float, float, Optional[PointerTarget]], Awaitable[None]]


class PointerController:
    """Single pointer; at most one pan or one card drag at a time."""

    def __init__(self, camera: CameraController, store: CardStore):
        self.camera = camera
        self.store = store
        self.state = PointerState.IDLE

        self._last: Tuple[float, float] = (0.0, 0.0)
        self._drag_card: Optional[int] = None
        self._offset: Tuple[float, float] = (0.0, 0.0)

        self._transitions: Dict[Tuple[PointerState, str], Handler] = {
            (PointerState.IDLE, "down"): self._press,
            (PointerState.PANNING, "move"): self._pan,
            (PointerState.PANNING, "up"): self._end_pan,
            (PointerState.DRAGGING, "move"): self._drag,
            (PointerState.DRAGGING, "up"): self._drop,
        }

    @property
    def dragging_card(self) -> Optional[int]:
        return self._drag_card

    # ── Events ────────────────────────────────────────────────────────────

    async def pointer_down(self, sx: float, sy: float, target: PointerTarget) -> PointerState:
        return await self._dispatch("down", sx, sy, target)

    async def pointer_move(self, sx: float, sy: float) -> PointerState:
        return await self._dispatch("move", sx, sy)

    async def pointer_up(self, sx: float, sy: float) -> PointerState:
        return await self._dispatch("up", sx, sy)

    async def _dispatch(
        self, event: str, sx: float, sy: float, target: Optional[PointerTarget] = None
    ) -> PointerState:
        handler = self._transitions.get((self.state, event))
        if handler is not None:
            await handler(sx, sy, target)
        return self.state

    def _enter(self, state: PointerState) -> None:
        if state is not self.state:
            logger.debug("Pointer %s -> %s", self.state.value, state.value)
        self.state = state

    # ── Transitions ───────────────────────────────────────────────────────

    async def _press(self, sx: float, sy: float, target: Optional[PointerTarget]) -> None:
        if target is None or target.kind is TargetKind.CONTROL:
            return

        if target.kind is TargetKind.CANVAS:
            self._last = (sx, sy)
            self._enter(PointerState.PANNING)
            return

        if target.card_id not in self.store:
            logger.debug("Pointer down on unknown card %s ignored", target.card_id)
            return

        card = self.store.get(target.card_id)
        left, top = target.bounds or self.camera.world_to_screen(card.pos_x, card.pos_y)
        self._offset = (sx - left, sy - top)
        self._drag_card = card.id
        # Enter DRAGGING before the z-index round trip so moves are not lost
        self._enter(PointerState.DRAGGING)
        await self.store.bring_to_front(card.id)

    async def _pan(self, sx: float, sy: float, target: Optional[PointerTarget]) -> None:
        last_x, last_y = self._last
        self._last = (sx, sy)
        self.camera.pan(sx - last_x, sy - last_y)

    async def _end_pan(self, sx: float, sy: float, target: Optional[PointerTarget]) -> None:
        self._enter(PointerState.IDLE)

    async def _drag(self, sx: float, sy: float, target: Optional[PointerTarget]) -> None:
        camera = self.camera.camera
        offset_x, offset_y = self._offset
        world_x = (sx - offset_x - camera.x) / camera.zoom
        world_y = (sy - offset_y - camera.y) / camera.zoom
        self.store.move_local(self._drag_card, world_x, world_y)

    async def _drop(self, sx: float, sy: float, target: Optional[PointerTarget]) -> None:
        card_id = self._drag_card
        self._drag_card = None
        self._enter(PointerState.IDLE)
        if card_id is not None and card_id in self.store:
            await self.store.commit_position(card_id)
