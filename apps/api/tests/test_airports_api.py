"""Tests for the airports HTTP endpoints."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from airport_catalog_api.main import create_app
from airport_catalog_api.services.airport_service import AirportService
from airport_catalog_core import Catalog, LoadError


async def test_list_airports_no_pagination(client):
    resp = await client.get("/airports")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert len(body["data"]) == 3
    assert body["has_more"] is False
    assert body["remaining"] == 0


async def test_list_airports_with_pagination(client):
    resp = await client.get("/airports", params={"limit": 2, "offset": 1})
    body = resp.json()
    assert body["total"] == 3
    assert [a["icao"] for a in body["data"]] == ["KLAX", "EGLL"]
    assert body["has_more"] is False
    assert body["remaining"] == 0


async def test_list_airports_exact_body(client):
    resp = await client.get("/airports", params={"offset": 0, "limit": 2})
    assert resp.json() == {
        "total": 3,
        "has_more": True,
        "remaining": 1,
        "data": [
            {"icao": "KJFK", "name": "John F. Kennedy International Airport"},
            {"icao": "KLAX", "name": "Los Angeles International Airport"},
        ],
    }
    assert resp.text.startswith('{"total":3,"has_more":true,"remaining":1,"data":[')


async def test_list_offset_past_end(client):
    resp = await client.get("/airports", params={"offset": 10, "limit": 5})
    assert resp.json() == {"total": 3, "has_more": False, "remaining": 0, "data": []}


async def test_search_by_code(client):
    resp = await client.get("/airports/search", params={"q": "kjfk"})
    body = resp.json()
    assert body["total"] == 1
    assert body["data"] == [
        {"icao": "KJFK", "name": "John F. Kennedy International Airport"}
    ]
    assert body["has_more"] is False


async def test_search_by_name_keeps_catalog_order(client):
    resp = await client.get(
        "/airports/search", params={"q": "INTERNATIONAL", "offset": 0, "limit": 5}
    )
    body = resp.json()
    assert body["total"] == 2
    assert [a["icao"] for a in body["data"]] == ["KJFK", "KLAX"]


async def test_search_no_match(client):
    resp = await client.get("/airports/search", params={"q": "XYZ"})
    assert resp.json() == {"total": 0, "has_more": False, "remaining": 0, "data": []}


async def test_search_without_query_lists_everything(client):
    resp = await client.get("/airports/search")
    assert resp.json()["total"] == 3


@pytest.mark.parametrize(
    ("path", "params", "parameter"),
    [
        ("/airports", {"offset": "-1"}, "offset"),
        ("/airports", {"offset": "abc"}, "offset"),
        ("/airports", {"limit": "0"}, "limit"),
        ("/airports", {"limit": "-4"}, "limit"),
        ("/airports/search", {"q": "k", "limit": "many"}, "limit"),
        ("/airports", {"offset": "+5"}, "offset"),
        ("/airports", {"limit": "1_000"}, "limit"),
    ],
)
async def test_invalid_parameters_are_client_errors(client, path, params, parameter):
    resp = await client.get(path, params=params)
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "invalid_parameter"
    assert parameter in body["detail"]


async def test_limit_clamped_to_configured_maximum(make_settings):
    app = create_app(make_settings(max_page_size=2))
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/airports", params={"limit": 100})
            default = await ac.get("/airports")
    assert len(resp.json()["data"]) == 2
    assert resp.json()["remaining"] == 1
    assert len(default.json()["data"]) == 2


async def test_health_reports_catalog_size(client):
    resp = await client.get("/health")
    assert resp.json() == {"status": "ok", "airports": 3}


async def test_injected_catalog_skips_loading(make_settings, tmp_path):
    catalog = Catalog.build([("LFPG", "Paris Charles de Gaulle Airport")])
    app = create_app(make_settings(catalog_path=tmp_path / "absent.csv"), catalog)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/airports/search", params={"q": "gaulle"})
    assert [a["icao"] for a in resp.json()["data"]] == ["LFPG"]


async def test_startup_fails_when_catalog_cannot_load(make_settings, tmp_path):
    app = create_app(make_settings(catalog_path=tmp_path / "absent.csv"))
    with pytest.raises(LoadError):
        async with app.router.lifespan_context(app):
            pass
    assert app.state.airport_service is None


async def test_requests_before_startup_are_unavailable(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/airports")
    assert resp.status_code == 503


async def test_long_query_accepted_by_default(client):
    resp = await client.get("/airports/search", params={"q": "x" * 500})
    assert resp.status_code == 200
    assert resp.json()["total"] == 0


async def test_long_query_rejected_when_limit_configured(make_settings):
    app = create_app(make_settings(max_query_length=10))
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/airports/search", params={"q": "x" * 11})
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_parameter"


async def test_search_survives_executor_shutdown():
    catalog = Catalog.build(
        [("KJFK", "John F. Kennedy International Airport"), ("EGLL", "Heathrow")]
    )
    pool = ThreadPoolExecutor(max_workers=2)
    service = AirportService(catalog, executor=pool, workers=2, parallel_threshold=0)
    pool.shutdown()
    page = await service.search_airports("kennedy")
    assert [r.code for r in page.data] == ["KJFK"]
