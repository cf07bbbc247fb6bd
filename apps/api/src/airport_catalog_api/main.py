"""FastAPI application factory."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from airport_catalog_core import Catalog, InvalidParameter, LoadError

from .config import ApiSettings
from .config import settings as default_settings
from .loader import load_catalog
from .routers import airports
from .schemas.common import ErrorResponse, HealthResponse
from .services.airport_service import AirportService

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Load the catalog and start the search worker pool."""
    settings: ApiSettings = app.state.settings
    catalog: Catalog | None = app.state.catalog
    if catalog is None:
        try:
            catalog = load_catalog(settings.catalog_path)
        except LoadError:
            logger.exception("Refusing to start: airport catalog failed to load")
            raise
        app.state.catalog = catalog

    executor = ThreadPoolExecutor(
        max_workers=settings.search_workers,
        thread_name_prefix="airport-search",
    )
    app.state.airport_service = AirportService(
        catalog,
        executor=executor,
        workers=settings.search_workers,
        max_page_size=settings.max_page_size,
        max_query_length=settings.max_query_length,
        parallel_threshold=settings.parallel_threshold,
    )
    logger.info("Serving %d airports", len(catalog))
    try:
        yield
    finally:
        app.state.airport_service = None
        # Let in-flight searches finish before the pool goes away.
        await asyncio.to_thread(executor.shutdown, wait=True)


async def _invalid_parameter_handler(
    request: Request, exc: InvalidParameter
) -> JSONResponse:
    payload = ErrorResponse(detail=str(exc), code="invalid_parameter")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=payload.model_dump(),
    )


def create_app(
    settings: ApiSettings | None = None,
    catalog: Catalog | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    Pass *catalog* to skip loading from ``settings.catalog_path``.
    """
    settings = settings or default_settings
    app = FastAPI(
        title="Airport Catalog API",
        version="0.1.0",
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.airport_service = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvalidParameter, _invalid_parameter_handler)

    app.include_router(airports.router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        loaded: Catalog | None = app.state.catalog
        return HealthResponse(airports=len(loaded) if loaded is not None else 0)

    return app


app = create_app()
