"""
Noteboard Backend: Card Service
===============================

What:  List, create and patch cards; archive is a patch of `is_archived`.
Who:   Called by the cards route handlers.

Field Rules:
    ┌──────────────┬──────────────────────────────────────────────────┐
    │ importance   │ clamped to [1, 5] on create and on update        │
    │ type         │ create: unknown → "note"; update: unknown skipped │
    │ description  │ nullable (sections carry none)                   │
    │ other fields │ explicit null rejected with 400                  │
    └──────────────┴──────────────────────────────────────────────────┘

Partial Update Semantics:
    PUT only writes the columns present in the request body. Two patches
    touching disjoint fields (position on drag release, title after the
    edit debounce) can land in any order without clobbering each other.
    There is no version token: overlapping patches are last-write-wins.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteboard import rules
from noteboard.exceptions import DatabaseError, NotFoundError, ValidationError
from noteboard.models.card import Card
from noteboard.schemas.card import CardCreate, CardOut, CardUpdate

logger = logging.getLogger(__name__)

# Columns a PUT may touch; anything else in the body is ignored
PATCHABLE_FIELDS = (
    "title",
    "description",
    "importance",
    "pos_x",
    "pos_y",
    "z_index",
    "color",
    "is_pinned",
    "is_archived",
    "type",
)

NULLABLE_FIELDS = {"description"}


class CardService:
    """
    Business logic layer for card operations.

    Error Handling Strategy:
        SQLAlchemy errors are wrapped in DatabaseError (generic 500 body);
        the original error type is kept in the context for the server log.
        Writes commit inside the same try block, so a failed commit is
        reported to the client instead of surfacing after the response.
    """

    async def list_cards(self, db: AsyncSession, board_id: int) -> List[CardOut]:
        """
        Active cards of a board in paint order.

        Query plan:
            SELECT ... FROM cards WHERE board_id = :id AND is_archived = false
            ORDER BY z_index ASC, id ASC
            → idx_cards_board_active_order
        """
        query = (
            select(Card)
            .where(Card.board_id == board_id, Card.is_archived.is_(False))
            .order_by(Card.z_index.asc(), Card.id.asc())
        )
        try:
            result = await db.execute(query)
            cards = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing cards of board %s: %s", board_id, str(e))
            raise DatabaseError(
                message="Could not list cards",
                context={"board_id": board_id, "error_type": type(e).__name__},
            )
        return [CardOut.model_validate(card) for card in cards]

    async def create_card(self, db: AsyncSession, payload: CardCreate) -> int:
        """
        Insert a new active card and return its server-assigned id.

        Defaults come from CardCreate; this method applies the guardrails:
        unknown type → "note", importance clamped.
        """
        card_type = payload.type if rules.is_card_type(payload.type) else rules.DEFAULT_CARD_TYPE
        card = Card(
            board_id=payload.board_id,
            type=card_type,
            title=payload.title,
            description=payload.description,
            importance=rules.clamp_importance(payload.importance),
            pos_x=payload.pos_x,
            pos_y=payload.pos_y,
            z_index=payload.z_index,
            color=payload.color,
            is_pinned=payload.is_pinned,
            is_archived=False,
        )
        try:
            db.add(card)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating card: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the card",
                context={"board_id": payload.board_id, "error_type": type(e).__name__},
            )

        logger.info("Card %s created on board %s (type=%s)", card.id, card.board_id, card.type)
        return card.id

    async def update_card(self, db: AsyncSession, payload: CardUpdate) -> None:
        """
        Apply a partial patch to one card.

        Raises:
            ValidationError: Missing/invalid id, null for a non-nullable
                field, or nothing left to update (→ 400)
            NotFoundError: No card with this id (→ 404)
            DatabaseError: Update failed (→ 500)
        """
        if payload.id is None or payload.id <= 0:
            raise ValidationError(message="Missing id", field="id")

        values = self.normalize_changes(payload.changes())
        if not values:
            raise ValidationError(message="No fields to update")

        try:
            result = await db.execute(
                update(Card).where(Card.id == payload.id).values(**values)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating card %s: %s", payload.id, str(e))
            raise DatabaseError(
                message="Could not update the card",
                context={"card_id": payload.id, "error_type": type(e).__name__},
            )

        if result.rowcount == 0:
            raise NotFoundError(resource="card", resource_id=payload.id)
        logger.debug("Card %s patched: %s", payload.id, sorted(values))

    @staticmethod
    def normalize_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Filter and validate a patch down to the columns that will be written.

        Unknown keys and invalid `type` values are dropped silently;
        importance is clamped.
        """
        values: Dict[str, Any] = {}
        for field in PATCHABLE_FIELDS:
            if field not in changes:
                continue
            value = changes[field]

            if field == "type":
                if not rules.is_card_type(value):
                    logger.debug("Ignoring invalid card type %r", value)
                    continue
            elif value is None and field not in NULLABLE_FIELDS:
                raise ValidationError(
                    message=f"Field '{field}' cannot be null", field=field
                )
            elif field == "importance":
                value = rules.clamp_importance(value)

            values[field] = value
        return values


# ── Singleton Instance ────────────────────────────────────────────────────
card_service = CardService()
