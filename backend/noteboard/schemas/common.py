"""
Noteboard Backend: Shared Response Schemas
==========================================

What:  Envelope models used by every resource: plain success, error bodies,
       and the health check.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Acknowledges a write that returns no payload (PUT /board, PUT /cards)."""
    success: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Fields:
        success: Always false
        error: Human-readable description ("Missing id", "Database error")
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {"success": false, "error": "No fields to update", "request_id": "9f1c2a7e"}
    """
    success: bool = Field(default=False)
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# ── Lenient Input Helpers ────────────────────────────────────────────────

def truncate_number(value: Any) -> Any:
    """Drop the fractional part of a JSON float (4.9 → 4, -2.5 → -2)."""
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return value
