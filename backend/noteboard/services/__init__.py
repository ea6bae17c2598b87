# Services package init
"""
Noteboard Backend: Services Layer
=================================

What:  Business logic between routes (HTTP) and the database.

Service Inventory:
    - BoardService: camera load/save, zoom clamping
    - CardService: active listing, create with defaults, partial patches

Services receive the session per call and keep no per-request state, so
each one is a module-level singleton.
"""
