# Models package init
"""
Noteboard Backend: ORM Models
=============================

    - board.py: Board (camera state per canvas)
    - card.py:  Card (notes and sections)

Importing this package registers both tables on `Base.metadata`.
"""

from noteboard.models.board import Board
from noteboard.models.card import Card

__all__ = ["Board", "Card"]
