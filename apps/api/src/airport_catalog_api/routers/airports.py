"""Airport listing and search router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from airport_catalog_core import Page

from ..dependencies import get_airport_service
from ..schemas.common import ErrorResponse
from ..services.airport_service import AirportService

router = APIRouter(prefix="/airports", tags=["airports"])

ServiceDep = Annotated[AirportService, Depends(get_airport_service)]

# Raw strings: validation belongs to the catalog's parameter contract.
OffsetParam = Annotated[str | None, Query(description="Start index, default 0")]
LimitParam = Annotated[str | None, Query(description="Page size, clamped to max")]
QueryParam = Annotated[
    str | None,
    Query(
        description=(
            "Case-insensitive substring. Rejected with 400 when longer than "
            "AIRPORTS_MAX_QUERY_LENGTH, if that is set."
        )
    ),
]

_ERROR_RESPONSES = {400: {"model": ErrorResponse}}


@router.get("", response_model=Page, responses=_ERROR_RESPONSES)
async def list_airports(
    service: ServiceDep,
    offset: OffsetParam = None,
    limit: LimitParam = None,
) -> Page:
    """List airports in catalog order."""
    return await service.list_airports(offset, limit)


@router.get("/search", response_model=Page, responses=_ERROR_RESPONSES)
async def search_airports(
    service: ServiceDep,
    q: QueryParam = None,
    offset: OffsetParam = None,
    limit: LimitParam = None,
) -> Page:
    """Search airports by code or name."""
    return await service.search_airports(q, offset, limit)
