# Schemas package init
"""
Noteboard Backend: API Schemas
==============================

Pydantic models defining the JSON contract of the board and cards
resources. Every response body carries a `success` flag.
"""
