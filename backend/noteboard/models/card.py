"""
Noteboard Backend: Card SQLAlchemy Model
=========================================

What:  ORM model representing the `cards` table (notes and sections).
Who:   Used by CardService for CRUD operations and by Alembic.

Table Design:
    - type: 'note' or 'section'; sections carry no description
    - importance: 1..5, clamped by CardService (stored for sections too)
    - pos_x / pos_y: world-space position of the card's top-left corner
    - z_index: stacking order; higher paints on top
    - is_archived: soft delete; archived rows stay in the table

    Composite index (board_id, is_archived, z_index, id):
        Serves the only list query: active cards of one board in paint order.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from noteboard.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Card(Base):
    """
    A sticky card on a board.

    Lifecycle:
        1. Created by "+ Note" / "+ Section" (is_archived = false)
        2. Patched field by field while dragged, raised or edited
        3. Archived (is_archived = true); never hard-deleted by the API
    """

    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    board_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
    )

    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="note", server_default=text("'note'"),
    )

    # ── Content ───────────────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default=text("''"),
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    importance: Mapped[int] = mapped_column(
        Integer, nullable=False, default=3, server_default=text("3"),
    )

    # ── Placement ─────────────────────────────────────────────────────────
    pos_x: Mapped[int] = mapped_column(
        Integer, nullable=False, default=150, server_default=text("150"),
    )
    pos_y: Mapped[int] = mapped_column(
        Integer, nullable=False, default=150, server_default=text("150"),
    )
    z_index: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
    )

    # ── Presentation & State ──────────────────────────────────────────────
    color: Mapped[str] = mapped_column(
        String(32), nullable=False, default="default", server_default=text("'default'"),
    )
    is_pinned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false"),
    )
    is_archived: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false"),
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # Python-side defaults so values are populated right after flush
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_cards_board_active_order", "board_id", "is_archived", "z_index", "id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Card(id={self.id}, type='{self.type}', "
            f"pos=({self.pos_x}, {self.pos_y}), z={self.z_index})>"
        )
