"""Immutable, process-lifetime airport catalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .errors import LoadError
from .schemas import AirportRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class Catalog:
    """Ordered, read-only collection of airport records.

    Records are kept in a tuple, so any number of readers may share a
    catalog without locking. There is no mutation API.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[AirportRecord] = ()) -> None:
        self._records: tuple[AirportRecord, ...] = tuple(records)

    @classmethod
    def build(cls, rows: Iterable[tuple[str, str]]) -> Catalog:
        """Build a catalog from raw ``(code, name)`` pairs in source order.

        Raises :class:`LoadError` if the source cannot be read or a row is
        malformed. Nothing is returned on failure.
        """
        records: list[AirportRecord] = []
        try:
            for index, row in enumerate(rows):
                records.append(_record_from_row(index, row))
        except (OSError, UnicodeError) as exc:
            msg = f"Failed to read airport rows: {exc}"
            raise LoadError(msg) from exc

        logger.info("Loaded %d airports", len(records))
        return cls(records)

    def view(self) -> tuple[AirportRecord, ...]:
        """Return the full record sequence without copying it."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AirportRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} airports)"


def _record_from_row(index: int, row: object) -> AirportRecord:
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        msg = f"Row {index}: expected a (code, name) pair, got {type(row).__name__}"
        raise LoadError(msg)
    try:
        code, name = row  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        msg = f"Row {index}: expected a (code, name) pair"
        raise LoadError(msg) from exc

    if not isinstance(code, str) or not isinstance(name, str):
        msg = f"Row {index}: code and name must be strings"
        raise LoadError(msg)
    if not code.strip():
        msg = f"Row {index}: code is blank"
        raise LoadError(msg)
    return AirportRecord.from_row(code, name)
