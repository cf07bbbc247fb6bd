"""Core schemas for the airport catalog."""

from .airport import AirportRecord
from .page import Page

__all__ = [
    "AirportRecord",
    "Page",
]
