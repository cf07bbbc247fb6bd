"""CSV record source for the catalog.

The file needs at least an ``ident`` and a ``name`` column (the OurAirports
``airports.csv`` layout). Extra columns are ignored.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from airport_catalog_core import Catalog, LoadError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("ident", "name")


def load_rows(path: str | Path) -> list[tuple[str, str]]:
    """Read ``(ident, name)`` pairs from a CSV file, skipping blank idents."""
    path = Path(path)
    rows: list[tuple[str, str]] = []
    skipped = 0
    try:
        with path.open(encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            fieldnames = reader.fieldnames or []
            missing = [name for name in REQUIRED_FIELDS if name not in fieldnames]
            if missing:
                msg = f"{path}: missing required column(s): {', '.join(missing)}"
                raise LoadError(msg)

            for row in reader:
                ident = row["ident"]
                name = row["name"]
                if ident is None or name is None:
                    msg = f"{path}:{reader.line_num}: row is missing fields"
                    raise LoadError(msg)
                if not ident.strip():
                    skipped += 1
                    continue
                rows.append((ident, name))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        msg = f"Cannot read airport data from {path}: {exc}"
        raise LoadError(msg) from exc

    if skipped:
        logger.warning("Skipped %d row(s) with a blank ident in %s", skipped, path)
    return rows


def load_catalog(path: str | Path) -> Catalog:
    """Load and build the catalog from a CSV file."""
    return Catalog.build(load_rows(path))
