"""Create boards and cards tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `boards` (camera state) and `cards` (notes and sections),
       and seeds the single active board (id=1).

Rollback: downgrade() drops both tables (all cards are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    boards = op.create_table(
        "boards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("view_x", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("view_y", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("zoom", sa.Float(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "cards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("board_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False, server_default=sa.text("'note'")),
        sa.Column("title", sa.String(255), nullable=False, server_default=sa.text("''")),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("importance", sa.Integer(), nullable=False, server_default=sa.text("3")),
        sa.Column("pos_x", sa.Integer(), nullable=False, server_default=sa.text("150")),
        sa.Column("pos_y", sa.Integer(), nullable=False, server_default=sa.text("150")),
        sa.Column("z_index", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("color", sa.String(32), nullable=False, server_default=sa.text("'default'")),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.ForeignKeyConstraint(["board_id"], ["boards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    # Serves the list query: active cards of a board in paint order
    op.create_index(
        "idx_cards_board_active_order",
        "cards",
        ["board_id", "is_archived", "z_index", "id"],
    )

    op.bulk_insert(
        boards,
        [{"id": 1, "name": "Main board", "view_x": 0, "view_y": 0, "zoom": 1.0}],
    )


def downgrade() -> None:
    op.drop_index("idx_cards_board_active_order", table_name="cards")
    op.drop_table("cards")
    op.drop_table("boards")
