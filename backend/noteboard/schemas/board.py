"""
Noteboard Backend: Board Request/Response Schemas
=================================================

What:  Contract of the board resource (camera state).

    GET /api/board?id=1   → BoardResponse
    PUT /api/board        ← BoardViewUpdate, → SuccessResponse
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from noteboard.schemas.common import truncate_number


class BoardOut(BaseModel):
    id: int
    name: str
    view_x: int
    view_y: int
    zoom: float

    model_config = {"from_attributes": True}


class BoardResponse(BaseModel):
    success: bool = Field(default=True)
    board: BoardOut


class BoardViewUpdate(BaseModel):
    """
    Full overwrite of a board's camera.

    A missing or null view_x / view_y falls back to 0 and a missing or null
    zoom to 1. Fractional view offsets are truncated toward zero. The zoom
    is clamped to [0.25, 2.5] by BoardService, so any float is accepted here.
    `id` stays optional so a missing id reaches the service and is
    reported as "Missing id" (400) rather than a schema error.
    """
    id: Optional[int] = Field(default=None, description="Board to update")
    view_x: int = Field(default=0, description="Camera x translation (px)")
    view_y: int = Field(default=0, description="Camera y translation (px)")
    zoom: float = Field(default=1.0, description="Zoom factor, clamped to [0.25, 2.5]")

    @field_validator("view_x", "view_y", "zoom", mode="before")
    @classmethod
    def null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default()
        return value

    @field_validator("id", "view_x", "view_y", mode="before")
    @classmethod
    def truncate_fractions(cls, value: Any) -> Any:
        return truncate_number(value)

