"""Error taxonomy for catalog loading and queries."""

from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog errors."""


class LoadError(CatalogError):
    """The record source is unreadable or structurally invalid.

    Fatal at startup: a catalog is never published from a failed load.
    """


class InvalidParameter(CatalogError):
    """A request parameter failed validation."""

    def __init__(self, parameter: str, value: Any, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {parameter} {value!r}: {reason}")
