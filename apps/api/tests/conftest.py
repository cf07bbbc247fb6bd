"""Shared fixtures for API, loader and CLI tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from airport_catalog_api.config import ApiSettings
from airport_catalog_api.main import create_app

if TYPE_CHECKING:
    from pathlib import Path

    from fastapi import FastAPI

AIRPORTS_CSV = """\
"id","ident","type","name","iso_country"
3622,"KJFK","large_airport","John F. Kennedy International Airport","US"
3484,"KLAX","large_airport","Los Angeles International Airport","US"
2434,"EGLL","large_airport","London Heathrow Airport","GB"
"""


@pytest.fixture
def write_csv(tmp_path: Path):
    """Factory fixture writing CSV text to a temporary file."""

    def _write(text: str, name: str = "airports.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def airports_csv(write_csv) -> Path:
    return write_csv(AIRPORTS_CSV)


@pytest.fixture
def make_settings(airports_csv: Path):
    """Factory fixture for settings pointing at the sample CSV."""

    def _make(**overrides: object) -> ApiSettings:
        values: dict[str, object] = {
            "catalog_path": airports_csv,
            "search_workers": 2,
            "parallel_threshold": 0,
        }
        values.update(overrides)
        return ApiSettings(**values)

    return _make


@pytest.fixture
def app(make_settings) -> FastAPI:
    return create_app(make_settings())


@pytest.fixture
async def client(app: FastAPI):
    """HTTP client bound to the app, with its lifespan running."""
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
