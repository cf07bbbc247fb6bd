"""Shared fixtures for catalog and query engine tests."""

from __future__ import annotations

import pytest

from airport_catalog_core import AirportRecord, Catalog

SCENARIO_ROWS = [
    ("KJFK", "John F. Kennedy International Airport"),
    ("KLAX", "Los Angeles International Airport"),
    ("EGLL", "London Heathrow Airport"),
]


@pytest.fixture
def scenario_rows() -> list[tuple[str, str]]:
    return list(SCENARIO_ROWS)


@pytest.fixture
def scenario_catalog(scenario_rows: list[tuple[str, str]]) -> Catalog:
    """Three well-known airports in a fixed order."""
    return Catalog.build(scenario_rows)


@pytest.fixture
def make_records():
    """Factory fixture for synthetic record sequences.

    Every third record is named "... Regional Field", the rest "... Airport".
    """

    def _make(count: int) -> tuple[AirportRecord, ...]:
        return tuple(
            AirportRecord.from_row(
                f"X{i:05d}",
                f"Test {i} Regional Field" if i % 3 == 0 else f"Test {i} Airport",
            )
            for i in range(count)
        )

    return _make
