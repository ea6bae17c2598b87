"""
Noteboard: Shared Domain Rules
==============================

What:  Bounds and clamp helpers shared by the API services and the canvas
       client, so both sides agree on what a valid zoom, importance and card
       type are.
"""

from typing import Any

MIN_ZOOM = 0.25
MAX_ZOOM = 2.5

MIN_IMPORTANCE = 1
MAX_IMPORTANCE = 5
DEFAULT_IMPORTANCE = 3

CARD_TYPES = ("note", "section")
DEFAULT_CARD_TYPE = "note"
DEFAULT_COLOR = "default"

# Where a card lands when the create payload carries no position.
DEFAULT_POS_X = 150
DEFAULT_POS_Y = 150


def clamp_zoom(value: float) -> float:
    """Clamp a zoom factor to [MIN_ZOOM, MAX_ZOOM]."""
    return max(MIN_ZOOM, min(MAX_ZOOM, float(value)))


def clamp_importance(value: int) -> int:
    """Clamp an importance rating to [MIN_IMPORTANCE, MAX_IMPORTANCE]."""
    return max(MIN_IMPORTANCE, min(MAX_IMPORTANCE, int(value)))


def is_card_type(value: Any) -> bool:
    return isinstance(value, str) and value in CARD_TYPES
