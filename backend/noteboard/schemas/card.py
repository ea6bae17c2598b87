"""
Noteboard Backend: Card Request/Response Schemas
================================================

What:  Contract of the cards resource.

    GET  /api/cards?board_id=1  → CardListResponse
    POST /api/cards             ← CardCreate, → CardCreatedResponse (201)
    PUT  /api/cards             ← CardUpdate, → SuccessResponse

Validation split:
    Schemas only check JSON types, plus two lenient input rules: on create
    an explicit null means "use the default", and a fractional number for
    an integer field is truncated toward zero. Business rules (importance
    clamping, type fallback, "no fields to update") live in CardService so they apply
    however the service is called.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from noteboard import rules
from noteboard.schemas.common import truncate_number

# Integer columns; JSON floats are truncated toward zero
INTEGER_FIELDS = ("board_id", "importance", "pos_x", "pos_y", "z_index")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CardOut(BaseModel):
    """Full representation of an active card, as rendered by the canvas."""
    id: int
    board_id: int
    type: str
    title: str
    description: Optional[str] = None
    importance: int
    pos_x: int
    pos_y: int
    z_index: int
    color: str
    is_pinned: bool
    is_archived: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CardListResponse(BaseModel):
    success: bool = Field(default=True)
    cards: List[CardOut] = Field(description="Active cards in paint order (z_index, id)")


class CardCreatedResponse(BaseModel):
    success: bool = Field(default=True)
    id: int = Field(description="Server-assigned card id")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CardCreate(BaseModel):
    """
    Payload for POST /api/cards. Every field is optional.

    `type` is typed loosely: an unknown value is replaced by "note" in
    CardService instead of failing validation.
    """
    board_id: int = Field(default=1)
    type: Any = Field(default=rules.DEFAULT_CARD_TYPE)
    title: str = Field(default="")
    description: Optional[str] = Field(default=None)
    importance: int = Field(default=rules.DEFAULT_IMPORTANCE)
    pos_x: int = Field(default=rules.DEFAULT_POS_X)
    pos_y: int = Field(default=rules.DEFAULT_POS_Y)
    z_index: int = Field(default=0)
    color: str = Field(default=rules.DEFAULT_COLOR)
    is_pinned: bool = Field(default=False)

    @field_validator("*", mode="before")
    @classmethod
    def null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        """An explicit null is treated like an absent key."""
        if value is None:
            return cls.model_fields[info.field_name].get_default()
        return value

    @field_validator(*INTEGER_FIELDS, mode="before")
    @classmethod
    def truncate_fractions(cls, value: Any) -> Any:
        return truncate_number(value)


class CardUpdate(BaseModel):
    """
    Payload for PUT /api/cards: `id` plus any subset of the patchable fields.

    Only fields present in the JSON body are applied (tracked through
    `model_fields_set`). Unknown keys, e.g. `zoom`, are ignored.
    """
    id: Optional[int] = Field(default=None)
    title: Optional[str] = None
    description: Optional[str] = None
    importance: Optional[int] = None
    pos_x: Optional[int] = None
    pos_y: Optional[int] = None
    z_index: Optional[int] = None
    color: Optional[str] = None
    is_pinned: Optional[bool] = None
    is_archived: Optional[bool] = None
    type: Any = None

    @field_validator("importance", "pos_x", "pos_y", "z_index", mode="before")
    @classmethod
    def truncate_fractions(cls, value: Any) -> Any:
        return truncate_number(value)

    def changes(self) -> Dict[str, Any]:
        """Fields the client actually sent, excluding the id."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }
