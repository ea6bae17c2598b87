# Routes package init
"""
Noteboard Backend: API Routes Package
=====================================

Route Inventory:
    - board.py:   GET  /api/board     (camera state)
                  PUT  /api/board     (save camera)
    - cards.py:   GET  /api/cards     (active cards, paint order)
                  POST /api/cards     (create note or section)
                  PUT  /api/cards     (partial patch, archive)
    - health.py:  GET  /health        (database connectivity)

Routes are thin: extract the request, call the service, wrap the result in
the `success` envelope. Business rules live in services.
"""
