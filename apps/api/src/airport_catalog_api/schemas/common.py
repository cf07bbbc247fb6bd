"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error payload."""

    detail: str
    code: str | None = None


class HealthResponse(BaseModel):
    """Liveness payload with the loaded catalog size."""

    status: str = "ok"
    airports: int
