"""
Noteboard Canvas: Coordinate Transform
======================================

What:  Pure conversions between screen space (viewport pixels) and world
       space (where card positions are stored), given a camera.

    world = (screen - camera_offset) / zoom
    screen = world * zoom + camera_offset

Used for drag offsets, spawning cards at a fixed screen anchor, and
zoom-at-cursor anchoring.
"""

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]


@dataclass
class Camera:
    """
    Maps world space to screen space.

    x, y:  screen-space position of the world origin (pixels)
    zoom:  world-to-screen scale factor
    """
    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0


def screen_to_world(camera: Camera, sx: float, sy: float) -> Point:
    return ((sx - camera.x) / camera.zoom, (sy - camera.y) / camera.zoom)


def world_to_screen(camera: Camera, wx: float, wy: float) -> Point:
    return (wx * camera.zoom + camera.x, wy * camera.zoom + camera.y)
