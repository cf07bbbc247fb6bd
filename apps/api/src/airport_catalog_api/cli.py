"""Command-line entry point: serve the API or query a catalog file."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from airport_catalog_core import CatalogError

from .config import settings
from .loader import load_catalog
from .services.airport_service import AirportService

if TYPE_CHECKING:
    from airport_catalog_core import Page

_catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="CSV file with ident/name columns (default: AIRPORTS_CATALOG_PATH).",
)


def _service(catalog_path: Path | None) -> AirportService:
    catalog = load_catalog(catalog_path or settings.catalog_path)
    return AirportService(
        catalog,
        workers=settings.search_workers,
        max_page_size=settings.max_page_size,
        max_query_length=settings.max_query_length,
        parallel_threshold=settings.parallel_threshold,
    )


def _echo_page(page: Page) -> None:
    click.echo(json.dumps(page.model_dump(by_alias=True), indent=2, ensure_ascii=False))


@click.group()
@click.option(
    "--log-level", default=None, help="Logging level (default: AIRPORTS_LOG_LEVEL)."
)
def cli(log_level: str | None) -> None:
    """Airport Catalog CLI."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", type=int, default=None, help="Bind port.")
@_catalog_option
def serve(host: str | None, port: int | None, catalog_path: Path | None) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from .main import create_app

    app_settings = settings
    if catalog_path is not None:
        app_settings = settings.model_copy(update={"catalog_path": catalog_path})

    uvicorn.run(
        create_app(app_settings),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


@cli.command("list")
@_catalog_option
@click.option("--offset", default=None, help="Start index (default 0).")
@click.option("--limit", default=None, help="Page size (clamped to the maximum).")
def list_cmd(catalog_path: Path | None, offset: str | None, limit: str | None) -> None:
    """Print one page of the catalog as JSON."""
    try:
        service = _service(catalog_path)
        page = asyncio.run(service.list_airports(offset, limit))
    except CatalogError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_page(page)


@cli.command("search")
@click.argument("query")
@_catalog_option
@click.option("--offset", default=None, help="Start index (default 0).")
@click.option("--limit", default=None, help="Page size (clamped to the maximum).")
def search_cmd(
    query: str, catalog_path: Path | None, offset: str | None, limit: str | None
) -> None:
    """Print one page of airports matching QUERY as JSON."""
    try:
        service = _service(catalog_path)
        page = asyncio.run(service.search_airports(query, offset, limit))
    except CatalogError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_page(page)


if __name__ == "__main__":
    cli()
