"""Airport listing and search service."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from airport_catalog_core import DEFAULT_MAX_PAGE_SIZE, DEFAULT_PARALLEL_THRESHOLD
from airport_catalog_core import paginate, search
from airport_catalog_core.params import (
    parse_limit,
    parse_offset,
    parse_query,
)

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from airport_catalog_core import Catalog, Page


class AirportService:
    """Validates raw request parameters and queries the shared catalog."""

    def __init__(
        self,
        catalog: Catalog,
        *,
        executor: Executor | None = None,
        workers: int | None = None,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
        max_query_length: int | None = None,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
    ) -> None:
        self._catalog = catalog
        self._executor = executor
        self._workers = workers
        self._max_page_size = max_page_size
        self._max_query_length = max_query_length
        self._parallel_threshold = parallel_threshold

    async def list_airports(
        self,
        offset: int | str | None = None,
        limit: int | str | None = None,
    ) -> Page:
        """Return one page of the unfiltered catalog."""
        return paginate(
            self._catalog.view(),
            parse_offset(offset),
            parse_limit(limit, max_limit=self._max_page_size),
            max_limit=self._max_page_size,
        )

    async def search_airports(
        self,
        query: str | None = None,
        offset: int | str | None = None,
        limit: int | str | None = None,
    ) -> Page:
        """Return one page of airports whose code or name contains *query*."""
        q = parse_query(query, max_length=self._max_query_length)
        start = parse_offset(offset)
        size = parse_limit(limit, max_limit=self._max_page_size)

        # The scan blocks; keep it off the event loop.
        return await asyncio.to_thread(
            search,
            self._catalog.view(),
            q,
            start,
            size,
            max_limit=self._max_page_size,
            executor=self._executor,
            workers=self._workers,
            parallel_threshold=self._parallel_threshold,
        )
