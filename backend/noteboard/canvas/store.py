"""
Noteboard Canvas: Card Store
============================

What:  Client-side cache of the rendered cards of one board and the sync
       rules that push local mutations to the API.

Sync rules per mutation:
    ┌──────────────────────────┬────────────────────────────────────────┐
    │ create / spawn           │ POST, then render payload + new id     │
    │ edit (title, desc, imp.) │ local now, PUT after 350 ms quiet/card │
    │ move_local (drag)        │ local only                             │
    │ commit_position          │ one PUT with rounded pos_x / pos_y     │
    │ bring_to_front           │ new z_index, PUT immediately           │
    │ set_color / set_pinned   │ PUT immediately                        │
    │ archive                  │ drop pending edit, PUT is_archived     │
    └──────────────────────────┴────────────────────────────────────────┘

Failed syncs are logged and leave the local state as is; there is no
rollback and no retry.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple

from noteboard import rules
from noteboard.canvas.api import NoteboardClient
from noteboard.canvas.debounce import Debouncer
from noteboard.canvas.transform import Camera, screen_to_world
from noteboard.config import settings
from noteboard.exceptions import SyncError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "importance")


@dataclass
class CardView:
    """View-model of one rendered card. Positions are world space."""
    id: int
    board_id: int
    type: str = rules.DEFAULT_CARD_TYPE
    title: str = ""
    description: Optional[str] = None
    importance: int = rules.DEFAULT_IMPORTANCE
    pos_x: float = rules.DEFAULT_POS_X
    pos_y: float = rules.DEFAULT_POS_Y
    z_index: int = 0
    color: str = rules.DEFAULT_COLOR
    is_pinned: bool = False

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "CardView":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in row.items() if key in known})

    @property
    def paint_key(self) -> Tuple[int, int]:
        return (self.z_index, self.id)


class StackingCounter:
    """
    Session-wide z-index source. Values only ever increase, and stay above
    every z-index seen so far.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def observe(self, z_index: int) -> None:
        self._next = max(self._next, z_index + 1)

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    @property
    def peek(self) -> int:
        return self._next


class CardStore:
    """Authoritative list of rendered cards for one board."""

    def __init__(
        self,
        api: NoteboardClient,
        debouncer: Debouncer,
        board_id: Optional[int] = None,
        counter: Optional[StackingCounter] = None,
        edit_delay: Optional[float] = None,
    ):
        self.api = api
        self.debouncer = debouncer
        self.board_id = board_id or settings.board_id
        self.counter = counter or StackingCounter()
        self.edit_delay = (
            edit_delay if edit_delay is not None else settings.edit_save_delay_ms / 1000
        )
        self._cards: Dict[int, CardView] = {}
        self._pending_edits: Dict[int, Dict[str, Any]] = {}

    # ── Reading ───────────────────────────────────────────────────────────

    @property
    def cards(self) -> List[CardView]:
        """Cards in paint order: later entries are drawn on top."""
        return sorted(self._cards.values(), key=lambda card: card.paint_key)

    def get(self, card_id: int) -> CardView:
        return self._cards[card_id]

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    async def load(self) -> List[CardView]:
        """Replace the cache with the board's active cards. Raises SyncError."""
        rows = await self.api.list_cards(self.board_id)
        self._cards = {}
        for row in rows:
            card = CardView.from_row(row)
            self._cards[card.id] = card
            self.counter.observe(card.z_index)
        logger.info("Loaded %d cards of board %s", len(self._cards), self.board_id)
        return self.cards

    # ── Creation ──────────────────────────────────────────────────────────

    async def create(
        self,
        card_type: str = rules.DEFAULT_CARD_TYPE,
        pos_x: int = rules.DEFAULT_POS_X,
        pos_y: int = rules.DEFAULT_POS_Y,
        title: str = "",
    ) -> Optional[CardView]:
        """
        Create a card on the server, then render it from the local payload
        plus the returned id. Returns None when the server call fails.
        """
        payload: Dict[str, Any] = {
            "board_id": self.board_id,
            "type": card_type,
            "title": title,
            "description": None if card_type == "section" else "",
            "importance": rules.DEFAULT_IMPORTANCE,
            "pos_x": int(pos_x),
            "pos_y": int(pos_y),
            "z_index": self.counter.next(),
        }
        try:
            card_id = await self.api.create_card(payload)
        except SyncError as e:
            logger.error("Could not create %s on board %s: %s", card_type, self.board_id, e.message)
            return None

        card = CardView(id=card_id, **payload)
        self._cards[card_id] = card
        return card

    async def spawn(
        self,
        card_type: str,
        camera: Camera,
        anchor: Optional[Tuple[float, float]] = None,
    ) -> Optional[CardView]:
        """Create a card at a fixed screen anchor, whatever the current pan/zoom."""
        ax, ay = anchor or (settings.spawn_anchor_x, settings.spawn_anchor_y)
        world_x, world_y = screen_to_world(camera, ax, ay)
        return await self.create(card_type, round(world_x), round(world_y))

    # ── Edits (debounced) ─────────────────────────────────────────────────

    def edit(self, card_id: int, **changes: Any) -> None:
        """
        Apply a keystroke-level edit locally and (re)start the card's edit
        timer. Edits accumulate until the timer fires.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Not editable: {sorted(unknown)}")

        card = self._cards[card_id]
        if "importance" in changes:
            changes["importance"] = rules.clamp_importance(changes["importance"])
        for name, value in changes.items():
            setattr(card, name, value)

        self._pending_edits.setdefault(card_id, {}).update(changes)
        self.debouncer.schedule(
            self.edit_key(card_id),
            lambda: self._save_edits(card_id),
            self.edit_delay,
        )

    @staticmethod
    def edit_key(card_id: int) -> str:
        return f"card:{card_id}:edit"

    async def _save_edits(self, card_id: int) -> None:
        changes = self._pending_edits.pop(card_id, None)
        if changes:
            await self.api.update_card(card_id, **changes)

    # ── Immediate patches ─────────────────────────────────────────────────

    def move_local(self, card_id: int, pos_x: float, pos_y: float) -> None:
        card = self._cards[card_id]
        card.pos_x, card.pos_y = pos_x, pos_y

    async def commit_position(self, card_id: int) -> bool:
        card = self._cards[card_id]
        card.pos_x, card.pos_y = round(card.pos_x), round(card.pos_y)
        return await self._persist(card_id, pos_x=card.pos_x, pos_y=card.pos_y)

    async def bring_to_front(self, card_id: int) -> int:
        card = self._cards[card_id]
        card.z_index = self.counter.next()
        await self._persist(card_id, z_index=card.z_index)
        return card.z_index

    async def set_color(self, card_id: int, color: str) -> bool:
        self._cards[card_id].color = color
        return await self._persist(card_id, color=color)

    async def set_pinned(self, card_id: int, pinned: bool) -> bool:
        self._cards[card_id].is_pinned = pinned
        return await self._persist(card_id, is_pinned=pinned)

    async def archive(self, card_id: int) -> bool:
        """Remove the card from the canvas and mark it archived. No undo."""
        self._cards.pop(card_id)
        self.debouncer.cancel(self.edit_key(card_id))
        self._pending_edits.pop(card_id, None)
        return await self._persist(card_id, is_archived=True)

    async def _persist(self, card_id: int, **changes: Any) -> bool:
        try:
            await self.api.update_card(card_id, **changes)
        except SyncError as e:
            logger.error(
                "Could not sync card %s (%s): %s", card_id, ", ".join(sorted(changes)), e.message
            )
            return False
        return True
