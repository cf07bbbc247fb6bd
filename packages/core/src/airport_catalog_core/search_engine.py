"""Case-insensitive substring search with an order-preserving parallel filter."""

from __future__ import annotations

import itertools
import logging
import os
import time
from typing import TYPE_CHECKING

from .pagination import DEFAULT_MAX_PAGE_SIZE, check_window, paginate

if TYPE_CHECKING:
    from collections.abc import Sequence
    from concurrent.futures import Executor

    from .schemas import AirportRecord, Page

logger = logging.getLogger(__name__)

# Below this many records a single inline scan beats the fan-out overhead.
DEFAULT_PARALLEL_THRESHOLD = 4096


def matches(record: AirportRecord, needle: str) -> bool:
    """Return True if lowercase *needle* occurs in the record's code or name."""
    return needle in record.code_lower or needle in record.name_lower


def _filter_chunk(
    chunk: Sequence[AirportRecord], needle: str
) -> list[AirportRecord]:
    return [record for record in chunk if matches(record, needle)]


def _partition(
    records: Sequence[AirportRecord], parts: int
) -> list[Sequence[AirportRecord]]:
    """Split *records* into at most *parts* contiguous, ordered chunks."""
    size = -(-len(records) // parts)
    return [records[start : start + size] for start in range(0, len(records), size)]


def filter_records(
    records: Sequence[AirportRecord],
    query: str,
    *,
    executor: Executor | None = None,
    workers: int | None = None,
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
) -> list[AirportRecord]:
    """Return the records matching *query*, in their original order.

    With an *executor* and at least *parallel_threshold* records, the
    sequence is split into contiguous chunks that are filtered concurrently
    and concatenated in chunk order.
    """
    needle = query.lower()
    if not needle:
        return list(records)

    workers = workers or os.cpu_count() or 1
    if (
        executor is None
        or workers <= 1
        or not records
        or len(records) < parallel_threshold
    ):
        return _filter_chunk(records, needle)

    chunks = _partition(records, workers)
    try:
        # Executor.map yields results in submission order, not completion order.
        results = executor.map(_filter_chunk, chunks, itertools.repeat(needle))
    except RuntimeError:
        # Executor already shut down (application stopping).
        logger.debug("Search executor unavailable, scanning inline")
        return _filter_chunk(records, needle)
    return list(itertools.chain.from_iterable(results))


def search(
    records: Sequence[AirportRecord],
    query: str,
    offset: int,
    limit: int,
    *,
    max_limit: int = DEFAULT_MAX_PAGE_SIZE,
    executor: Executor | None = None,
    workers: int | None = None,
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
) -> Page:
    """Filter *records* by *query*, then paginate the matches.

    ``total`` on the returned page is the number of matches.
    """
    check_window(offset, limit)
    started = time.perf_counter()
    filtered = filter_records(
        records,
        query,
        executor=executor,
        workers=workers,
        parallel_threshold=parallel_threshold,
    )
    logger.debug(
        "Search %r matched %d/%d airports in %.1fms",
        query,
        len(filtered),
        len(records),
        (time.perf_counter() - started) * 1000,
    )
    return paginate(filtered, offset, limit, max_limit=max_limit)
