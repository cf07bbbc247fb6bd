"""Validation of raw request parameters.

Raw values arrive as ``None`` (absent), ``int`` or ``str`` (query string).
Every rejection is an :class:`InvalidParameter`.
"""

from __future__ import annotations

import re

from .errors import InvalidParameter
from .pagination import DEFAULT_MAX_PAGE_SIZE

# Optional sign and ASCII digits only: no "+5", "1_000" or non-ASCII digits.
_INTEGER = re.compile(r"-?[0-9]+")


def _to_int(name: str, raw: int | str) -> int:
    if isinstance(raw, bool):
        raise InvalidParameter(name, raw, "must be an integer")
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw.strip()):
        raise InvalidParameter(name, raw, "must be an integer")
    return int(raw.strip())


def parse_offset(raw: int | str | None) -> int:
    """Offset defaults to 0; negative or non-numeric values are rejected."""
    if raw is None:
        return 0
    offset = _to_int("offset", raw)
    if offset < 0:
        raise InvalidParameter("offset", raw, "must be >= 0")
    return offset


def parse_limit(
    raw: int | str | None, *, max_limit: int = DEFAULT_MAX_PAGE_SIZE
) -> int:
    """Limit defaults to *max_limit* and is clamped to it; ``<= 0`` is rejected."""
    if raw is None:
        return max_limit
    limit = _to_int("limit", raw)
    if limit <= 0:
        raise InvalidParameter("limit", raw, "must be > 0")
    return min(limit, max_limit)


def parse_query(raw: str | None, *, max_length: int | None = None) -> str:
    """Query defaults to the empty string, which matches every record.

    Any string is accepted unless a *max_length* is configured.
    """
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise InvalidParameter("q", raw, "must be a string")
    if max_length is not None and len(raw) > max_length:
        raise InvalidParameter(
            "q", raw[:20], f"must be at most {max_length} characters"
        )
    return raw
