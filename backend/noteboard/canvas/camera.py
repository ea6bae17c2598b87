"""
Noteboard Canvas: Camera Controller
===================================

What:  Owns the camera (x, y, zoom) of one board, applies pan and zoom
       gestures, and persists the view through a debounced save.

Zoom-at-cursor:
    1. Clamp the target zoom to [0.25, 2.5]
    2. Find the world point under the cursor with the pre-zoom camera
    3. Apply the new zoom
    4. Move the camera so that world point sits under the cursor again:
           x = cursor_x - world_x * zoom
           y = cursor_y - world_y * zoom
    Content under the pointer does not shift visually.

Persistence:
    Every pan or zoom restarts a single "board-view" timer. When the quiet
    period (300 ms by default) elapses, one PUT /board carries
    {view_x: round(x), view_y: round(y), zoom: round(zoom, 4)}.
"""

import logging
from typing import Dict, Optional, Union

from noteboard import rules
from noteboard.canvas.api import NoteboardClient
from noteboard.canvas.debounce import Debouncer
from noteboard.canvas.transform import Camera, Point, screen_to_world, world_to_screen
from noteboard.config import settings
from noteboard.exceptions import SyncError

logger = logging.getLogger(__name__)

VIEW_SAVE_KEY = "board-view"


class CameraController:
    """
    Camera state plus the gestures that mutate it.

    The Camera instance is kept for the controller's lifetime (load() updates
    it in place), so other components may hold a reference to it.
    """

    def __init__(
        self,
        api: NoteboardClient,
        debouncer: Debouncer,
        board_id: Optional[int] = None,
        save_delay: Optional[float] = None,
        camera: Optional[Camera] = None,
    ):
        self.api = api
        self.debouncer = debouncer
        self.board_id = board_id or settings.board_id
        self.save_delay = (
            save_delay if save_delay is not None else settings.view_save_delay_ms / 1000
        )
        self.camera = camera or Camera()

    # ── Loading ───────────────────────────────────────────────────────────

    async def load(self) -> Camera:
        """
        Adopt the board's saved view. Any failure falls back to (0, 0, 1):
        a board that cannot be read must not keep the canvas from opening.
        """
        try:
            board = await self.api.get_board(self.board_id)
            x, y = float(board["view_x"]), float(board["view_y"])
            zoom = rules.clamp_zoom(board["zoom"])
        except (SyncError, KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Could not load camera of board %s, using defaults: %s", self.board_id, e
            )
            x, y, zoom = 0.0, 0.0, 1.0

        self.camera.x, self.camera.y, self.camera.zoom = x, y, zoom
        return self.camera

    # ── Gestures ──────────────────────────────────────────────────────────

    def pan(self, dx: float, dy: float) -> None:
        if not dx and not dy:
            return
        self.camera.x += dx
        self.camera.y += dy
        self._schedule_save()

    def zoom_at_cursor(
        self, target_zoom: float, cursor_x: float, cursor_y: float
    ) -> float:
        """Zoom to `target_zoom` (clamped) keeping the cursor's world point fixed."""
        new_zoom = rules.clamp_zoom(target_zoom)
        world_x, world_y = screen_to_world(self.camera, cursor_x, cursor_y)

        self.camera.zoom = new_zoom
        self.camera.x = cursor_x - world_x * new_zoom
        self.camera.y = cursor_y - world_y * new_zoom

        self._schedule_save()
        return new_zoom

    def zoom_by(self, factor: float, cursor_x: float, cursor_y: float) -> float:
        return self.zoom_at_cursor(self.camera.zoom * factor, cursor_x, cursor_y)

    # ── Conversions ───────────────────────────────────────────────────────

    def screen_to_world(self, sx: float, sy: float) -> Point:
        return screen_to_world(self.camera, sx, sy)

    def world_to_screen(self, wx: float, wy: float) -> Point:
        return world_to_screen(self.camera, wx, wy)

    # ── Persistence ───────────────────────────────────────────────────────

    def view_state(self) -> Dict[str, Union[int, float]]:
        return {
            "view_x": round(self.camera.x),
            "view_y": round(self.camera.y),
            "zoom": round(self.camera.zoom, 4),
        }

    async def save(self) -> None:
        """Write the current view now. Raises SyncError on failure."""
        view = self.view_state()
        await self.api.save_board_view(self.board_id, **view)
        logger.debug("Board %s view saved: %s", self.board_id, view)

    def _schedule_save(self) -> None:
        self.debouncer.schedule(VIEW_SAVE_KEY, self.save, self.save_delay)
