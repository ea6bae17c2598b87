"""
Noteboard Backend: Board SQLAlchemy Model
==========================================

What:  ORM model for the `boards` table: one row per canvas, holding the
       persisted camera (view_x, view_y, zoom).
Who:   Used by BoardService and by Alembic for schema management.

Lifecycle:
    Seeded by the initial migration (id=1, "Main board"). The API never
    creates or deletes boards; it only overwrites the view state.
"""

from sqlalchemy import Float, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from noteboard.database import Base


class Board(Base):
    """A canvas and its last saved camera position."""

    __tablename__ = "boards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(120),
        nullable=False,
        default="Main board",
    )

    # ── Camera ────────────────────────────────────────────────────────────
    # Screen-space translation of the world origin, in pixels
    view_x: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
    )
    view_y: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
    )

    # Always within [0.25, 2.5]; clamped by BoardService before writing
    zoom: Mapped[float] = mapped_column(
        Float, nullable=False, default=1.0, server_default=text("1"),
    )

    def __repr__(self) -> str:
        return (
            f"<Board(id={self.id}, view=({self.view_x}, {self.view_y}), "
            f"zoom={self.zoom})>"
        )
