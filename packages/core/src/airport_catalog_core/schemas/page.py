"""Paginated response schema."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .airport import AirportRecord


class Page(BaseModel):
    """Windowed view over a record sequence."""

    total: int = Field(ge=0, description="Matching records before pagination")
    has_more: bool
    remaining: int = Field(ge=0, description="Records after the returned window")
    data: list[AirportRecord]
