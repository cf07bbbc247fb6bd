"""In-memory airport catalog and its query engine."""

from .catalog import Catalog
from .errors import CatalogError, InvalidParameter, LoadError
from .pagination import DEFAULT_MAX_PAGE_SIZE, paginate
from .search_engine import DEFAULT_PARALLEL_THRESHOLD, filter_records, search
from .schemas import AirportRecord, Page

__all__ = [
    "DEFAULT_MAX_PAGE_SIZE",
    "DEFAULT_PARALLEL_THRESHOLD",
    "AirportRecord",
    "Catalog",
    "CatalogError",
    "InvalidParameter",
    "LoadError",
    "Page",
    "filter_records",
    "paginate",
    "search",
]
