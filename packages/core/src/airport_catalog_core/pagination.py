"""Offset/limit pagination over an ordered record sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import InvalidParameter
from .schemas import Page

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .schemas import AirportRecord

DEFAULT_MAX_PAGE_SIZE = 50


def check_window(offset: int, limit: int) -> None:
    """Reject a negative offset or a non-positive limit."""
    if offset < 0:
        raise InvalidParameter("offset", offset, "must be >= 0")
    if limit <= 0:
        raise InvalidParameter("limit", limit, "must be > 0")


def paginate(
    records: Sequence[AirportRecord],
    offset: int,
    limit: int,
    *,
    max_limit: int = DEFAULT_MAX_PAGE_SIZE,
) -> Page:
    """Return the ``[offset, offset + limit)`` window of *records*.

    *limit* is clamped to *max_limit*. The window references the original
    record objects; nothing is copied.
    """
    if max_limit <= 0:
        msg = f"max_limit must be positive, got {max_limit}"
        raise ValueError(msg)
    check_window(offset, limit)

    total = len(records)
    if offset >= total:
        return Page(total=total, has_more=False, remaining=0, data=[])

    end = min(offset + min(limit, max_limit), total)
    window = records[offset:end]
    remaining = max(total - end, 0)
    return Page(
        total=total,
        has_more=remaining > 0,
        remaining=remaining,
        data=list(window),
    )
