"""
Noteboard Canvas: Session
=========================

What:  Wires the camera, card store, pointer controller and debouncer of one
       board together and exposes the toolbar actions (+ Note, + Section)
       and the mouse wheel.

Startup:
    1. Load the saved camera (falls back to 0, 0, 1)
    2. Load the active cards (a failure is logged; the canvas opens empty)

Shutdown:
    Pending debounced saves are flushed, so a view change or an edit made
    just before closing still reaches the server.

Example:
    async with CanvasSession.connect("http://localhost:8000/api") as canvas:
        note = await canvas.add_note()
        canvas.store.edit(note.id, title="Groceries")
        canvas.wheel(-120, 400, 300)
"""

import logging
from typing import Optional, Tuple

from noteboard.canvas.api import NoteboardClient
from noteboard.canvas.camera import CameraController
from noteboard.canvas.debounce import Debouncer
from noteboard.canvas.pointer import PointerController
from noteboard.canvas.store import CardStore, CardView
from noteboard.config import settings
from noteboard.exceptions import SyncError

logger = logging.getLogger(__name__)


class CanvasSession:
    def __init__(
        self,
        api: NoteboardClient,
        board_id: Optional[int] = None,
        view_save_delay: Optional[float] = None,
        edit_save_delay: Optional[float] = None,
        spawn_anchor: Optional[Tuple[float, float]] = None,
        wheel_step: Optional[float] = None,
        owns_api: bool = False,
    ):
        self.api = api
        self.board_id = board_id or settings.board_id
        self.spawn_anchor = spawn_anchor or (settings.spawn_anchor_x, settings.spawn_anchor_y)
        self.wheel_step = wheel_step or settings.wheel_zoom_step
        self._owns_api = owns_api

        self.debouncer = Debouncer()
        self.camera = CameraController(
            api, self.debouncer, board_id=self.board_id, save_delay=view_save_delay
        )
        self.store = CardStore(
            api, self.debouncer, board_id=self.board_id, edit_delay=edit_save_delay
        )
        self.pointer = PointerController(self.camera, self.store)

    @classmethod
    def connect(cls, base_url: Optional[str] = None, **kwargs) -> "CanvasSession":
        """Session with its own HTTP client, closed by aclose()."""
        return cls(NoteboardClient(base_url=base_url), owns_api=True, **kwargs)

    async def open(self) -> "CanvasSession":
        await self.camera.load()
        try:
            await self.store.load()
        except SyncError as e:
            logger.error("Could not load cards of board %s: %s", self.board_id, e.message)
        return self

    async def aclose(self) -> None:
        await self.debouncer.aclose()
        if self._owns_api:
            await self.api.aclose()

    async def __aenter__(self) -> "CanvasSession":
        return await self.open()

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── Toolbar ───────────────────────────────────────────────────────────

    async def add_note(self) -> Optional[CardView]:
        return await self.store.spawn("note", self.camera.camera, self.spawn_anchor)

    async def add_section(self) -> Optional[CardView]:
        return await self.store.spawn("section", self.camera.camera, self.spawn_anchor)

    # ── Wheel ─────────────────────────────────────────────────────────────

    def wheel(self, delta_y: float, cursor_x: float, cursor_y: float) -> float:
        """Scroll up zooms in one step at the cursor, scroll down zooms out."""
        if delta_y == 0:
            return self.camera.camera.zoom
        factor = self.wheel_step if delta_y < 0 else 1 / self.wheel_step
        return self.camera.zoom_by(factor, cursor_x, cursor_y)
