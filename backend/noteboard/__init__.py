"""
Noteboard Backend: Application Package
======================================

What: Single-board sticky-card canvas. A FastAPI service stores the board's
      camera and its cards; the `canvas` subpackage is the headless client
      model (camera math, pointer state machine, card cache, debounced sync).

Architecture Note:
    ┌─────────────────────────────────────┐
    │      canvas (client model)          │  ← camera, pointer FSM, card cache
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← clamping, defaults, partial updates
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The client talks to the routes over HTTP only; both sides share the
    clamp rules in `noteboard.rules`.
"""

__version__ = "1.0.0"
