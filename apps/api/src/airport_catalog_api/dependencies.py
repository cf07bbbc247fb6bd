"""FastAPI dependency injection providers."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from airport_catalog_api.services.airport_service import AirportService


def get_airport_service(request: Request) -> AirportService:
    """Return the service created by the application lifespan."""
    service: AirportService | None = getattr(
        request.app.state, "airport_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Airport catalog is not loaded",
        )
    return service
