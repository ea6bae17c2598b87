# Middleware package init
"""
Noteboard Backend: Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so the access log line carries the correlation id
    - Logging measures the full handler duration and the final status
"""
