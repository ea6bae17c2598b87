"""
Noteboard Canvas: Headless Client Model
=======================================

What:  Everything the browser canvas does besides drawing, as plain
       Python driven by pointer, keyboard and wheel events:

    - transform.py: screen ⇄ world conversions for a Camera
    - camera.py:    pan, zoom-at-cursor, debounced view save
    - pointer.py:   IDLE / PANNING / DRAGGING state machine
    - store.py:     rendered cards, z-index counter, card sync rules
    - debounce.py:  keyed trailing debounce on the asyncio loop
    - api.py:       httpx client for the board and cards resources
    - session.py:   one board's canvas, wired together
"""

from noteboard.canvas.api import NoteboardClient
from noteboard.canvas.camera import CameraController
from noteboard.canvas.debounce import Debouncer
from noteboard.canvas.pointer import PointerController, PointerState, PointerTarget
from noteboard.canvas.session import CanvasSession
from noteboard.canvas.store import CardStore, CardView, StackingCounter
from noteboard.canvas.transform import Camera, screen_to_world, world_to_screen

__all__ = [
    "Camera",
    "CameraController",
    "CanvasSession",
    "CardStore",
    "CardView",
    "Debouncer",
    "NoteboardClient",
    "PointerController",
    "PointerState",
    "PointerTarget",
    "StackingCounter",
    "screen_to_world",
    "world_to_screen",
]
